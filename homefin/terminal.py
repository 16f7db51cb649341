"""Line-oriented terminal input and output."""

from __future__ import annotations

import sys
from typing import TextIO


class TerminalIO:
    """Reads lines from an input stream and writes lines to output streams.

    Streams default to the process's standard streams, looked up at call time.
    """

    def __init__(
        self,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
    ) -> None:
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    @property
    def _in(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    @property
    def _out(self) -> TextIO:
        return self._stdout if self._stdout is not None else sys.stdout

    @property
    def _err(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr

    def print_line(self, line: str) -> None:
        """Write a line to the output stream."""
        print(line, file=self._out, flush=True)

    def print_error(self, error: str) -> None:
        """Write an error message to the error stream."""
        print(error, file=self._err, flush=True)

    def read_line(self) -> str | None:
        """Return the next input line without its newline, or None at end of input."""
        line = self._in.readline()
        if not line:
            return None
        return line[:-1] if line.endswith("\n") else line