import io

from homefin.terminal import TerminalIO


def test_print_line_writes_line_with_newline():
    out = io.StringIO()
    term = TerminalIO(stdout=out)
    term.print_line("hello")
    term.print_line("")
    assert out.getvalue() == "hello\n\n"


def test_print_error_goes_to_error_stream():
    out = io.StringIO()
    err = io.StringIO()
    term = TerminalIO(stdout=out, stderr=err)
    term.print_error("boom")
    assert err.getvalue() == "boom\n"
    assert out.getvalue() == ""


def test_read_line_strips_newline_and_ends_with_none():
    term = TerminalIO(stdin=io.StringIO("first\n  second  \nlast"))
    assert term.read_line() == "first"
    assert term.read_line() == "  second  "
    assert term.read_line() == "last"
    assert term.read_line() is None


def test_read_line_returns_empty_string_for_blank_line():
    term = TerminalIO(stdin=io.StringIO("\n"))
    assert term.read_line() == ""
    assert term.read_line() is None


def test_defaults_use_standard_streams(capsys):
    term = TerminalIO()
    term.print_line("to stdout")
    term.print_error("to stderr")
    captured = capsys.readouterr()
    assert captured.out == "to stdout\n"
    assert captured.err == "to stderr\n"