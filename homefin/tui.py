"""Menu-driven terminal interface for managing families, members and net worth."""

from __future__ import annotations

import argparse
import re
from enum import IntEnum
from typing import Callable, Iterable, Union

from homefin.actions import FamilyActions, LineIO, format_paise
from homefin.banks import BankLedger
from homefin.errors import HomeFinancialsError, InvalidInputError
from homefin.storage import Member
from homefin.terminal import TerminalIO

_INT_MAX = 2**31 - 1
_ID_MAX = 2**63 - 1
_LEADING_INT = re.compile(r"[+-]?\d+")

StatementImporter = Callable[[str, int, Union[int, str]], int]


class MenuOption(IntEnum):
    """Entries of the main menu, numbered as shown to the user."""

    ADD_FAMILY = 1
    DELETE_FAMILY = 2
    ADD_MEMBER = 3
    UPDATE_MEMBER = 4
    DELETE_MEMBER = 5
    DELETE_MULTIPLE_MEMBERS = 6
    LIST_FAMILIES = 7
    LIST_MEMBERS_OF_FAMILY = 8
    IMPORT_BANK_STATEMENT = 9
    COMPUTE_MEMBER_NET_WORTH = 10
    COMPUTE_FAMILY_NET_WORTH = 11
    EXIT = 12


_MENU = (
    "Select an option:",
    " 1) Add Family",
    " 2) Delete Family",
    " 3) Add Member to Family",
    " 4) Update Member",
    " 5) Delete Member",
    " 6) Delete Multiple Members",
    " 7) List Families",
    " 8) List Members of a Family",
    " 9) Import Bank Statement for a Member",
    "10) Compute Member Net Worth",
    "11) Compute Family Net Worth",
    "12) Exit",
    "Choice: ",
)

_WHOLE_NUMBER_FAMILY = "Family id must be a non-negative whole number (REQ-4, REQ-5)."
_WHOLE_NUMBER_MEMBER = "Member id must be a non-negative whole number (REQ-4, REQ-5)."


def is_non_negative_whole_number(text: str) -> bool:
    """Return whether ``text`` is a non-empty string of ASCII digits."""
    return bool(text) and text.isascii() and text.isdigit()


def _parse_id(text: str) -> int:
    value = int(text)
    if value > _ID_MAX:
        raise ValueError(f"id out of range: {text}")
    return value


def _parse_choice(line: str) -> int:
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"not a number: {line!r}")
    value = int(match.group())
    if abs(value) > _INT_MAX:
        raise ValueError(f"number out of range: {line!r}")
    return value


class TUIManager:
    """Runs the interactive menu loop over a line-based terminal."""

    def __init__(
        self,
        ledger: BankLedger | None = None,
        io: LineIO | None = None,
        readers: Iterable[str] = (),
        importer: StatementImporter | None = None,
    ) -> None:
        self.io: LineIO = io if io is not None else TerminalIO()
        self.actions = FamilyActions(ledger, self.io)
        self.ledger = self.actions.ledger
        self.readers = list(readers)
        self.importer = importer

    def _ask(self, prompt: str) -> str:
        self.io.print_line(prompt)
        line = self.io.read_line()
        return line if line is not None else ""

    def run(self) -> None:
        """Show the menu and serve choices until Exit or end of input."""
        self.io.print_line("Welcome to Home Financials TUI")
        self.io.print_line("============================")

        while True:
            self.io.print_line("")
            for line in _MENU:
                self.io.print_line(line)

            raw = self.io.read_line()
            if raw is None:
                break
            line = raw.strip()
            if not line:
                continue

            try:
                choice = _parse_choice(line)
            except ValueError:
                self.io.print_line("Invalid choice, please enter a number.")
                continue

            if not MenuOption.ADD_FAMILY <= choice <= MenuOption.EXIT:
                self.io.print_line("Invalid choice, please pick a valid menu item.")
                continue

            option = MenuOption(choice)
            if option is MenuOption.EXIT:
                break
            self._handlers[option](self)

        self.io.print_line("Goodbye.")

    def _add_family(self) -> None:
        name = self._ask("Enter family name: ")
        if not name:
            self.io.print_line("Family name cannot be empty.")
            return
        self.actions.add_family(name)

    def _delete_family(self) -> None:
        idstr = self._ask("Enter family id to delete: ")
        if not is_non_negative_whole_number(idstr):
            self.io.print_line(_WHOLE_NUMBER_FAMILY)
            self.io.print_line("Invalid family id.")
            return
        try:
            family_id = _parse_id(idstr)
        except ValueError:
            self.io.print_line("Invalid family id.")
            return
        self.actions.delete_family(family_id)

    def _add_member(self) -> None:
        fidstr = self._ask("Enter family id to add member to: ")
        name = self._ask("Enter member name: ")
        nickname = self._ask("Enter member nickname (optional): ")
        if not is_non_negative_whole_number(fidstr):
            self.io.print_line(_WHOLE_NUMBER_FAMILY)
            self.io.print_line("Invalid family id.")
            return
        try:
            family_id = _parse_id(fidstr)
        except ValueError:
            self.io.print_line("Invalid family id.")
            return
        if not name:
            self.io.print_line("Member name cannot be empty.")
            return
        self.actions.add_member(family_id, Member(name, nickname))

    def _update_member(self) -> None:
        midstr = self._ask("Enter member id to update: ")
        new_name = self._ask("Enter new member name: ")
        new_nickname = self._ask("Enter new member nickname: ")
        if not is_non_negative_whole_number(midstr):
            self.io.print_line(_WHOLE_NUMBER_MEMBER)
            self.io.print_line("Invalid member id.")
            return
        try:
            member_id = _parse_id(midstr)
        except ValueError:
            self.io.print_line("Invalid member id.")
            return
        self.actions.update_member(member_id, new_name, new_nickname)

    def _delete_member(self) -> None:
        midstr = self._ask("Enter member id to delete: ")
        if not is_non_negative_whole_number(midstr):
            self.io.print_line(_WHOLE_NUMBER_MEMBER)
            self.io.print_line("Invalid member id.")
            return
        try:
            member_id = _parse_id(midstr)
        except ValueError:
            self.io.print_line("Invalid member id.")
            return
        self.actions.delete_member(member_id)

    def _delete_multiple_members(self) -> None:
        tokens = self._ask("Enter member ids to delete separated by spaces: ").split()
        ids: list[int] = []
        try:
            for token in tokens:
                if not is_non_negative_whole_number(token):
                    raise ValueError(token)
                ids.append(_parse_id(token))
        except ValueError:
            ids = []
        if not ids:
            self.io.print_line("Member ids must be non-negative whole numbers (REQ-4, REQ-5).")
            self.io.print_line("Invalid input for member ids.")
            return
        self.actions.delete_members(ids)

    def _list_families(self) -> None:
        try:
            families = self.ledger.list_families()
        except HomeFinancialsError as exc:
            self.actions.show_error(exc)
            return
        if not families:
            self.io.print_line("No families found.")
            return
        self.io.print_line("Families:")
        for family in families:
            self.io.print_line(f"  ID: {family.id} - {family.name}")

    def _list_members_of_family(self) -> None:
        fidstr = self._ask("Enter family id to list members: ")
        if not is_non_negative_whole_number(fidstr):
            self.io.print_line(_WHOLE_NUMBER_FAMILY)
            self.io.print_line("Invalid family id.")
            return
        try:
            family_id = _parse_id(fidstr)
        except ValueError:
            self.io.print_line("Invalid family id.")
            return
        try:
            members = self.ledger.list_members_of_family(family_id)
        except HomeFinancialsError as exc:
            self.actions.show_error(exc)
            return
        if not members:
            self.io.print_line(f"No members found for family {family_id}.")
            return
        self.io.print_line(f"Members of family {family_id}:")
        for member in members:
            text = f"  ID: {member.id} - {member.name}"
            if member.nickname:
                text += f" ({member.nickname})"
            self.io.print_line(text)

    def _import_bank_statement(self) -> None:
        midstr = self._ask("Enter member id to attach the account to: ")
        if not is_non_negative_whole_number(midstr):
            self.io.print_line(_WHOLE_NUMBER_MEMBER)
            self.io.print_line("Invalid member id.")
            return
        try:
            member_id = _parse_id(midstr)
        except ValueError:
            self.io.print_line("Invalid member id.")
            return

        if self.readers:
            names = [name[:1].upper() + name[1:] for name in self.readers]
            self.io.print_line("Supported banks: " + ", ".join(names))

        bank_input = self._ask("Enter bank id or name (e.g. Canara): ")
        if not bank_input:
            self.io.print_line("Bank id/name cannot be empty.")
            return
        path = self._ask("Enter path to statement file (CSV): ")
        if not path:
            self.io.print_line("File path cannot be empty.")
            return

        bank: int | str
        if is_non_negative_whole_number(bank_input):
            try:
                bank = _parse_id(bank_input)
            except ValueError:
                self.io.print_line("Invalid bank id.")
                return
        else:
            bank = bank_input

        try:
            if self.importer is None:
                raise InvalidInputError("no statement reader is available")
            account_id = self.importer(path, member_id, bank)
        except HomeFinancialsError as exc:
            self.actions.show_error(exc)
            return
        self.io.print_line(f"Bank account imported successfully. ID: {account_id}")

    def _compute_member_net_worth(self) -> None:
        midstr = self._ask("Enter member id to compute net worth: ")
        if not is_non_negative_whole_number(midstr):
            self.io.print_line(_WHOLE_NUMBER_MEMBER + "\nInvalid member id.")
            return
        try:
            member_id = _parse_id(midstr)
        except ValueError:
            self.io.print_line("Invalid member id.")
            return
        try:
            paise = self.ledger.member_net_worth(member_id)
        except HomeFinancialsError as exc:
            self.actions.show_error(exc)
            return
        self.io.print_line(f"Member {member_id} net worth: {format_paise(paise)}")

    def _compute_family_net_worth(self) -> None:
        fidstr = self._ask("Enter family id to compute net worth: ")
        if not is_non_negative_whole_number(fidstr):
            self.io.print_line(_WHOLE_NUMBER_FAMILY + "\nInvalid family id.")
            return
        try:
            family_id = _parse_id(fidstr)
        except ValueError:
            self.io.print_line("Invalid family id.")
            return
        try:
            paise = self.ledger.family_net_worth(family_id)
        except HomeFinancialsError as exc:
            self.actions.show_error(exc)
            return
        self.io.print_line(f"Family {family_id} net worth: {format_paise(paise)}")

    _handlers: dict[MenuOption, Callable[[TUIManager], None]] = {
        MenuOption.ADD_FAMILY: _add_family,
        MenuOption.DELETE_FAMILY: _delete_family,
        MenuOption.ADD_MEMBER: _add_member,
        MenuOption.UPDATE_MEMBER: _update_member,
        MenuOption.DELETE_MEMBER: _delete_member,
        MenuOption.DELETE_MULTIPLE_MEMBERS: _delete_multiple_members,
        MenuOption.LIST_FAMILIES: _list_families,
        MenuOption.LIST_MEMBERS_OF_FAMILY: _list_members_of_family,
        MenuOption.IMPORT_BANK_STATEMENT: _import_bank_statement,
        MenuOption.COMPUTE_MEMBER_NET_WORTH: _compute_member_net_worth,
        MenuOption.COMPUTE_FAMILY_NET_WORTH: _compute_family_net_worth,
    }


def main(argv: list[str] | None = None) -> int:
    """Start the terminal interface; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="homefin", description="Manage family finances from the terminal."
    )
    parser.add_argument("--db", default=None, help="path of the SQLite database file")
    args = parser.parse_args(argv)

    with BankLedger() as ledger:
        ledger.initialize_database(args.db)
        TUIManager(ledger).run()
    return 0