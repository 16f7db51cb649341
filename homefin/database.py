"""Database location, schema creation and connection setup."""

from __future__ import annotations

import logging
import sqlite3
import sys
from pathlib import Path

from homefin.errors import StorageError

log = logging.getLogger(__name__)

DB_FILENAME = "homefinancials.db"
DEFAULT_BANKS = ("Canara", "SBI", "Axis", "HDFC", "PNB")

_TABLES = (
    (
        "FamilyInfo",
        """
        CREATE TABLE IF NOT EXISTS FamilyInfo (
        Family_ID INTEGER PRIMARY KEY AUTOINCREMENT,
        Family_Name TEXT NOT NULL
        );
        """,
    ),
    (
        "MemberInfo",
        """
        CREATE TABLE IF NOT EXISTS MemberInfo (
        Member_ID INTEGER PRIMARY KEY AUTOINCREMENT,
        Family_ID INTEGER NOT NULL,
        Member_Name TEXT NOT NULL,
        Member_Nick_Name TEXT,
        FOREIGN KEY(Family_ID) REFERENCES FamilyInfo(Family_ID) ON DELETE CASCADE
        );
        """,
    ),
    (
        "BankList",
        """
        CREATE TABLE IF NOT EXISTS BankList (
        Bank_ID INTEGER PRIMARY KEY AUTOINCREMENT,
        Bank_Name TEXT NOT NULL UNIQUE
        );
        """,
    ),
    (
        "BankAccounts",
        """
        CREATE TABLE IF NOT EXISTS BankAccounts (
        BankAccount_ID INTEGER PRIMARY KEY AUTOINCREMENT,
        Bank_ID INTEGER NOT NULL,
        Member_ID INTEGER NOT NULL,
        Account_Number TEXT NOT NULL,
        Opening_Balance INTEGER NOT NULL,
        Closing_Balance INTEGER NOT NULL,
        FOREIGN KEY(Bank_ID) REFERENCES BankList(Bank_ID),
        FOREIGN KEY(Member_ID) REFERENCES MemberInfo(Member_ID) ON DELETE CASCADE
        );
        """,
    ),
)


def default_db_path() -> Path:
    """Return the database path next to the program's project root.

    The root is the parent of the directory holding the running script;
    if that cannot be determined the current directory is used.
    """
    script = sys.argv[0] if sys.argv else ""
    root: Path
    try:
        if not script:
            raise FileNotFoundError(script)
        exe = Path(script).resolve(strict=True)
        root = exe.parent.parent
        if not root.exists():
            root = exe.parent
    except (OSError, RuntimeError):
        root = Path.cwd()
    return root / DB_FILENAME


def open_connection(path: str | Path) -> sqlite3.Connection:
    """Open (creating if needed) the database with foreign keys enforced.

    The connection works in autocommit mode.
    """
    try:
        conn = sqlite3.connect(str(path), isolation_level=None)
    except sqlite3.Error as exc:
        raise StorageError(f"cannot open database {path!s}: {exc}") from exc
    try:
        conn.execute("PRAGMA foreign_keys = ON;")
    except sqlite3.Error as exc:
        log.warning("failed to enable foreign keys: %s", exc)
    return conn


def initialize_schema(path: str | Path) -> None:
    """Create the database file, its tables and the default bank list."""
    db_path = Path(path)
    log.info("Initializing SQLite DB at: %s", db_path)

    parent = db_path.parent
    if str(parent) and not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            log.error("Failed to create DB parent directories: %s", exc)

    conn = open_connection(db_path)
    try:
        for name, ddl in _TABLES:
            try:
                conn.execute(ddl)
            except sqlite3.Error as exc:
                log.error("Error creating table '%s': %s", name, exc)
            else:
                log.info("Checked/created table: %s", name)

        try:
            (count,) = conn.execute("SELECT COUNT(1) FROM BankList;").fetchone()
        except sqlite3.Error as exc:
            log.error("Failed to count banks: %s", exc)
            return
        if count == 0:
            for bank in DEFAULT_BANKS:
                try:
                    conn.execute("INSERT INTO BankList (Bank_Name) VALUES (?);", (bank,))
                except sqlite3.Error as exc:
                    log.error("Failed to insert bank '%s': %s", bank, exc)
    finally:
        conn.close()