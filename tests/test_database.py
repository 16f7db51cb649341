import sqlite3
import sys

import pytest

from homefin.database import default_db_path, initialize_schema, open_connection
from homefin.errors import StorageError


def _query(path, sql, params=()):
    conn = sqlite3.connect(str(path))
    try:
        return conn.execute(sql, params).fetchall()
    finally:
        conn.close()


def test_initialize_creates_db_and_tables(tmp_path):
    db = tmp_path / "homefinancials_test.db"
    initialize_schema(db)
    assert db.exists()
    rows = _query(
        db,
        "SELECT name FROM sqlite_master WHERE type='table' "
        "AND name IN ('FamilyInfo','MemberInfo');",
    )
    assert len(rows) == 2


def test_all_tables_created(tmp_path):
    db = tmp_path / "x.db"
    initialize_schema(db)
    names = {row[0] for row in _query(db, "SELECT name FROM sqlite_master WHERE type='table'")}
    assert {"FamilyInfo", "MemberInfo", "BankList", "BankAccounts"} <= names


def test_bank_list_prepopulated_once(tmp_path):
    db = tmp_path / "x.db"
    initialize_schema(db)
    initialize_schema(db)
    names = [row[0] for row in _query(db, "SELECT Bank_Name FROM BankList ORDER BY Bank_ID")]
    assert names == ["Canara", "SBI", "Axis", "HDFC", "PNB"]


def test_parent_directories_created(tmp_path):
    db = tmp_path / "nested" / "deeper" / "data.db"
    initialize_schema(db)
    assert db.exists()


def test_open_connection_enforces_cascade(tmp_path):
    db = tmp_path / "x.db"
    initialize_schema(db)
    conn = open_connection(db)
    try:
        conn.execute("INSERT INTO FamilyInfo (Family_Name) VALUES ('Doe Family')")
        conn.execute(
            "INSERT INTO MemberInfo (Family_ID, Member_Name, Member_Nick_Name) VALUES (1, 'John Doe', 'JD')"
        )
        conn.execute("DELETE FROM FamilyInfo WHERE Family_ID = 1")
        (count,) = conn.execute("SELECT COUNT(*) FROM MemberInfo").fetchone()
    finally:
        conn.close()
    assert count == 0


def test_open_connection_rejects_orphan_member(tmp_path):
    db = tmp_path / "x.db"
    initialize_schema(db)
    conn = open_connection(db)
    try:
        with pytest.raises(sqlite3.IntegrityError):
            conn.execute(
                "INSERT INTO MemberInfo (Family_ID, Member_Name) VALUES (999, 'Ghost')"
            )
    finally:
        conn.close()


def test_open_connection_autocommits(tmp_path):
    db = tmp_path / "x.db"
    initialize_schema(db)
    conn = open_connection(db)
    try:
        conn.execute("INSERT INTO FamilyInfo (Family_Name) VALUES ('PersistentFamily')")
    finally:
        conn.close()
    assert _query(db, "SELECT Family_Name FROM FamilyInfo") == [("PersistentFamily",)]


def test_open_connection_bad_path_raises(tmp_path):
    with pytest.raises(StorageError):
        open_connection(tmp_path / "missing_dir" / "x.db")


def test_default_db_path_from_script(tmp_path, monkeypatch):
    script = tmp_path / "bin" / "app"
    script.parent.mkdir()
    script.write_text("")
    monkeypatch.setattr(sys, "argv", [str(script)])
    assert default_db_path() == tmp_path.resolve() / "homefinancials.db"


def test_default_db_path_falls_back_to_cwd(tmp_path, monkeypatch):
    monkeypatch.setattr(sys, "argv", [""])
    monkeypatch.chdir(tmp_path)
    assert default_db_path() == tmp_path / "homefinancials.db"