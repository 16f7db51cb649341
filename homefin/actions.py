"""Family and member operations that report their outcome to the user."""

from __future__ import annotations

from typing import Iterable, Protocol

from homefin.banks import BankLedger
from homefin.errors import HomeFinancialsError, error_message
from homefin.storage import Family, Member
from homefin.terminal import TerminalIO


class LineIO(Protocol):
    """What the actions need from a terminal."""

    def print_line(self, line: str) -> None: ...

    def print_error(self, error: str) -> None: ...

    def read_line(self) -> str | None: ...


def format_paise(paise: int) -> str:
    """Format an amount in paise as rupees with two decimal places."""
    sign = "-" if paise < 0 else ""
    rupees, rest = divmod(abs(paise), 100)
    return f"{sign}{rupees}.{rest:02d}"


class FamilyActions:
    """Runs family and member operations and prints their outcome."""

    def __init__(self, ledger: BankLedger | None = None, io: LineIO | None = None) -> None:
        self.ledger = ledger if ledger is not None else BankLedger()
        self.io: LineIO = io if io is not None else TerminalIO()

    def show_error(self, error: BaseException | None) -> None:
        """Print the user-facing message for an error; nothing for None."""
        if error is None:
            return
        self.io.print_error(error_message(error))

    def add_family(self, name: str) -> int | None:
        """Add a family; return its id, or None after reporting the error."""
        try:
            new_id = self.ledger.save_family(Family(name))
        except HomeFinancialsError as exc:
            self.show_error(exc)
            return None
        self.io.print_line(f"Family '{name}' added successfully. ID: {new_id}")
        return new_id

    def delete_family(self, family_id: int) -> bool:
        """Delete a family; return whether it succeeded."""
        try:
            self.ledger.delete_family(family_id)
        except HomeFinancialsError as exc:
            self.show_error(exc)
            return False
        self.io.print_line(f"Family {family_id} deleted successfully.")
        return True

    def add_member(self, family_id: int, member: Member) -> int | None:
        """Add a member to a family; return its id, or None after reporting the error."""
        try:
            new_id = self.ledger.save_member(member, family_id)
        except HomeFinancialsError as exc:
            self.show_error(exc)
            return None
        self.io.print_line(
            f"Member '{member.name}' added to family {family_id}. ID: {new_id}"
        )
        return new_id

    def update_member(self, member_id: int, new_name: str, new_nickname: str) -> bool:
        """Update a member's name and/or nickname; return whether it succeeded."""
        try:
            self.ledger.update_member(member_id, new_name, new_nickname)
        except HomeFinancialsError as exc:
            self.show_error(exc)
            return False
        self.io.print_line(f"Member {member_id} updated successfully.")
        return True

    def delete_member(self, member_id: int) -> bool:
        """Delete a member; return whether it succeeded."""
        try:
            self.ledger.delete_member(member_id)
        except HomeFinancialsError as exc:
            self.show_error(exc)
            return False
        self.io.print_line(f"Member {member_id} deleted successfully.")
        return True

    def delete_members(self, member_ids: Iterable[int]) -> HomeFinancialsError | None:
        """Delete each member in turn, going on past failures.

        Return the first error met, or None if every deletion succeeded.
        """
        first_error: HomeFinancialsError | None = None
        for member_id in member_ids:
            try:
                self.ledger.delete_member(member_id)
            except HomeFinancialsError as exc:
                self.show_error(exc)
                if first_error is None:
                    first_error = exc
            else:
                self.io.print_line(f"Member {member_id} deleted.")
        return first_error