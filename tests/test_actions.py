from decimal import Decimal

import pytest

from homefin.actions import FamilyActions, format_paise
from homefin.banks import BankLedger
from homefin.errors import (
    InvalidInputError,
    NotFoundError,
    StorageError,
    error_message,
)
from homefin.storage import Member


class FakeIO:
    def __init__(self):
        self.lines = []
        self.errors = []

    def print_line(self, line):
        self.lines.append(line)

    def print_error(self, error):
        self.errors.append(error)

    def read_line(self):
        return None


@pytest.fixture
def ledger(tmp_path):
    led = BankLedger()
    led.initialize_database(tmp_path / "actions.db")
    yield led
    led.disconnect()


@pytest.fixture
def fake_io():
    return FakeIO()


@pytest.fixture
def actions(ledger, fake_io):
    return FamilyActions(ledger, fake_io)


def test_add_family_reports_new_id(actions, fake_io, ledger):
    new_id = actions.add_family("Doe")
    assert new_id == 1
    assert fake_io.lines == ["Family 'Doe' added successfully. ID: 1"]
    assert [f.name for f in ledger.list_families()] == ["Doe"]


def test_add_family_with_empty_name_shows_error(actions, fake_io):
    assert actions.add_family("") is None
    assert fake_io.errors == [error_message(InvalidInputError)]
    assert fake_io.lines == []


def test_delete_family(actions, fake_io, ledger):
    fid = actions.add_family("Doe")
    assert actions.delete_family(fid) is True
    assert fake_io.lines[-1] == f"Family {fid} deleted successfully."
    assert ledger.get_family(fid) is None


def test_delete_missing_family_reports_not_found(actions, fake_io):
    assert actions.delete_family(999) is False
    assert fake_io.errors == [error_message(NotFoundError)]


def test_add_member(actions, fake_io, ledger):
    fid = actions.add_family("Doe")
    mid = actions.add_member(fid, Member("John Doe", "JD"))
    assert mid == 1
    assert fake_io.lines[-1] == f"Member 'John Doe' added to family {fid}. ID: {mid}"
    stored = ledger.get_member(mid)
    assert (stored.name, stored.nickname) == ("John Doe", "JD")


def test_add_member_to_missing_family(actions, fake_io):
    assert actions.add_member(999, Member("John", "J")) is None
    assert fake_io.errors == [error_message(NotFoundError)]


def test_update_member(actions, fake_io, ledger):
    fid = actions.add_family("Doe")
    mid = actions.add_member(fid, Member("Original Name", "ON"))
    assert actions.update_member(mid, "", "UpdatedNick") is True
    assert fake_io.lines[-1] == f"Member {mid} updated successfully."
    stored = ledger.get_member(mid)
    assert (stored.name, stored.nickname) == ("Original Name", "UpdatedNick")


def test_update_member_without_fields(actions, fake_io):
    fid = actions.add_family("Doe")
    mid = actions.add_member(fid, Member("John", ""))
    assert actions.update_member(mid, "", "") is False
    assert fake_io.errors == [error_message(InvalidInputError)]


def test_delete_member(actions, fake_io, ledger):
    fid = actions.add_family("Doe")
    mid = actions.add_member(fid, Member("John", ""))
    assert actions.delete_member(mid) is True
    assert fake_io.lines[-1] == f"Member {mid} deleted successfully."
    assert ledger.get_member(mid) is None
    assert actions.delete_member(mid) is False
    assert fake_io.errors == [error_message(NotFoundError)]


def test_delete_members_continues_past_failures(actions, fake_io, ledger):
    fid = actions.add_family("Doe")
    first = actions.add_member(fid, Member("A", ""))
    second = actions.add_member(fid, Member("B", ""))
    result = actions.delete_members([first, 999, second])
    assert isinstance(result, NotFoundError)
    assert fake_io.lines[-2:] == [f"Member {first} deleted.", f"Member {second} deleted."]
    assert fake_io.errors == [error_message(NotFoundError)]
    assert ledger.list_members_of_family(fid) == []


def test_delete_members_all_succeed(actions, ledger):
    fid = actions.add_family("Doe")
    ids = [actions.add_member(fid, Member(name, "")) for name in ("A", "B")]
    assert actions.delete_members(ids) is None
    assert ledger.member_count(fid) == 0


def test_show_error_none_prints_nothing(actions, fake_io):
    actions.show_error(None)
    assert fake_io.errors == []
    assert fake_io.lines == []
    actions.show_error(NotFoundError())
    assert fake_io.errors == [error_message(NotFoundError)]


def test_show_error_prints_message(actions, fake_io):
    actions.show_error(StorageError("disk"))
    assert fake_io.errors == [error_message(StorageError)]


@pytest.mark.parametrize("paise", [0, 5, 99, 100, 12345, 67890, -50, -150, -123450, 74348309])
def test_format_paise_round_trips(paise):
    text = format_paise(paise)
    assert Decimal(text) * 100 == paise
    assert len(text.split(".")[1]) == 2


def test_format_paise_pinned_values():
    assert format_paise(12345) == "123.45"
    assert format_paise(67890) == "678.90"
    assert format_paise(-123450) == "-1234.50"


def test_format_paise_negative_has_single_sign():
    assert format_paise(-150).count("-") == 1
    assert format_paise(-50).startswith("-0.")