"""Bank list, bank accounts and net-worth totals kept in the database."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from homefin.errors import InvalidInputError, NotFoundError
from homefin.storage import StorageManager

_ACCOUNT_COLUMNS = (
    "BankAccount_ID, Bank_ID, Member_ID, Account_Number, Opening_Balance, Closing_Balance"
)


@dataclass
class BankAccount:
    """A member's account at a bank; balances are held in paise."""

    id: int = 0
    bank_id: int = 0
    member_id: int = 0
    account_number: str = ""
    opening_balance_paise: int = 0
    closing_balance_paise: int = 0


def _account_from_row(row: tuple[Any, ...]) -> BankAccount:
    account_id, bank_id, member_id, number, opening, closing = row
    return BankAccount(
        id=int(account_id),
        bank_id=int(bank_id),
        member_id=int(member_id),
        account_number=number or "",
        opening_balance_paise=int(opening),
        closing_balance_paise=int(closing),
    )


class BankLedger(StorageManager):
    """Storage of families and members extended with banks and accounts."""

    def bank_id_by_name(self, bank_name: str) -> int:
        """Return the id of a bank, matching its name case-insensitively."""
        row = self._execute(
            "SELECT Bank_ID FROM BankList WHERE lower(Bank_Name) = lower(?) LIMIT 1;",
            (bank_name,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"bank {bank_name!r} does not exist")
        return int(row[0])

    def bank_name_by_id(self, bank_id: int) -> str:
        """Return the name of the bank with this id."""
        row = self._execute(
            "SELECT Bank_Name FROM BankList WHERE Bank_ID = ? LIMIT 1;", (bank_id,)
        ).fetchone()
        if row is None:
            raise NotFoundError(f"bank {bank_id} does not exist")
        return row[0] or ""

    def save_account(
        self,
        bank_id: int,
        member_id: int,
        account_number: str,
        opening_paise: int,
        closing_paise: int,
    ) -> int:
        """Store an account for an existing bank and member; return its id."""
        if not account_number:
            raise InvalidInputError("account number must not be empty")
        if not self._exists("SELECT 1 FROM BankList WHERE Bank_ID = ?;", bank_id):
            raise NotFoundError(f"bank {bank_id} does not exist")
        if not self._exists("SELECT 1 FROM MemberInfo WHERE Member_ID = ?;", member_id):
            raise NotFoundError(f"member {member_id} does not exist")
        cursor = self._execute(
            "INSERT INTO BankAccounts (Bank_ID, Member_ID, Account_Number, "
            "Opening_Balance, Closing_Balance) VALUES (?, ?, ?, ?, ?);",
            (bank_id, member_id, account_number, int(opening_paise), int(closing_paise)),
        )
        return int(cursor.lastrowid)

    def get_account(self, account_id: int) -> BankAccount:
        """Return the account with this id."""
        row = self._execute(
            f"SELECT {_ACCOUNT_COLUMNS} FROM BankAccounts WHERE BankAccount_ID = ? LIMIT 1;",
            (account_id,),
        ).fetchone()
        if row is None:
            raise NotFoundError(f"bank account {account_id} does not exist")
        return _account_from_row(row)

    def accounts_of_member(self, member_id: int) -> list[BankAccount]:
        """Return a member's accounts ordered by id."""
        rows = self._execute(
            f"SELECT {_ACCOUNT_COLUMNS} FROM BankAccounts WHERE Member_ID = ? "
            "ORDER BY BankAccount_ID;",
            (member_id,),
        ).fetchall()
        return [_account_from_row(row) for row in rows]

    def member_net_worth(self, member_id: int) -> int:
        """Return the sum of a member's closing balances, in paise."""
        if self.get_member(member_id) is None:
            raise NotFoundError(f"member {member_id} does not exist")
        return sum(a.closing_balance_paise for a in self.accounts_of_member(member_id))

    def family_net_worth(self, family_id: int) -> int:
        """Return the sum of the net worth of every member of a family, in paise."""
        if not self._exists("SELECT 1 FROM FamilyInfo WHERE Family_ID = ?;", family_id):
            raise NotFoundError(f"family {family_id} does not exist")
        return sum(
            self.member_net_worth(member.id)
            for member in self.list_members_of_family(family_id)
        )