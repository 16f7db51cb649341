# homefin

A small terminal program for keeping track of a household's finances.
It stores families, their members and the members' bank accounts in a
local SQLite database and computes net worth for a member or a whole
family.

## Installing

    pip install .

To run the tests as well:

    pip install ".[test]"
    pytest

## Running

    homefin
    homefin --db household.db

`--db` names the SQLite file to use; it is created, with its tables, if it
does not exist. Without it the data is kept in `homefinancials.db` in the
parent of the directory that holds the running script (see
`homefin.database.default_db_path()`), or in the current directory if that
cannot be found. A new database comes with the banks Canara, SBI, Axis,
HDFC and PNB already listed.

The program shows a numbered menu:

     1) Add Family
     2) Delete Family
     3) Add Member to Family
     4) Update Member
     5) Delete Member
     6) Delete Multiple Members
     7) List Families
     8) List Members of a Family
     9) Import Bank Statement for a Member
    10) Compute Member Net Worth
    11) Compute Family Net Worth
    12) Exit

Type the number of an option and answer the prompts. Identifiers must be
non-negative whole numbers. A family holds at most 255 members. When
updating a member, an empty answer leaves that field unchanged. Deleting a
family also deletes its members and their accounts. Net worth is printed in
rupees with two decimal places. The program ends on `12` or at end of input.

## Using it from Python

    from homefin.banks import BankLedger
    from homefin.storage import Family, Member

    with BankLedger() as ledger:
        ledger.initialize_database("household.db")

        family_id = ledger.save_family(Family("Doe Family"))
        member_id = ledger.save_member(Member("John Doe", "JD"), family_id)

        bank_id = ledger.bank_id_by_name("canara")   # case-insensitive
        ledger.save_account(bank_id, member_id, "ACC1", 10000, 15000)

        print(ledger.member_net_worth(member_id))    # 15000 (paise)
        print(ledger.family_net_worth(family_id))    # 15000 (paise)

`homefin.storage.StorageManager` handles families and members alone;
`homefin.banks.BankLedger` extends it with banks, accounts
(`BankAccount`) and net worth. Amounts are whole paise, and net worth is
the sum of closing balances. `homefin.actions.format_paise` formats an
amount as rupees, e.g. `format_paise(-150)` gives `"-1.50"`.

Failures raise exceptions from `homefin.errors`: `InvalidInputError`,
`NotFoundError`, `MaxMembersExceededError` and `StorageError`, all derived
from `HomeFinancialsError`. `homefin.errors.error_message(error)` gives the
text the terminal interface shows for each.

## What it does not do

The package does not read bank statement files. Menu option 9 asks for a
member, a bank and a file path, but the `homefin` command has no statement
reader, so it reports an invalid-input error. A program embedding
`homefin.tui.TUIManager` can supply its own through the `importer`
argument (a callable taking the path, member id and bank id or name, and
returning the new account id) and list bank names through `readers`.
Accounts can otherwise be added with `BankLedger.save_account`.