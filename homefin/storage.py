"""Families and members kept in the SQLite database."""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable

from homefin.database import default_db_path, initialize_schema, open_connection
from homefin.errors import (
    InvalidInputError,
    MaxMembersExceededError,
    NotFoundError,
    StorageError,
)

log = logging.getLogger(__name__)

MAX_MEMBERS = 255
PLACEHOLDER_PATH = "path/to/database"


@dataclass
class Member:
    """A member of a family; ``id`` is 0 until the member is stored."""

    name: str
    nickname: str = ""
    id: int = 0


@dataclass
class Family:
    """A family with its members; ``id`` is 0 until the family is stored."""

    name: str
    members: list[Member] = field(default_factory=list)
    id: int = 0

    def add_member(self, member: Member) -> None:
        """Append a member to this family."""
        self.members.append(member)


def _member_from_row(row: tuple[Any, ...]) -> Member:
    member_id, name, nickname = row
    return Member(name=name or "", nickname=nickname or "", id=int(member_id))


class StorageManager:
    """Stores families and members; connects lazily to the default database."""

    def __init__(self) -> None:
        self._conn: sqlite3.Connection | None = None

    def __enter__(self) -> StorageManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.disconnect()

    @property
    def connected(self) -> bool:
        """Whether a database connection is open."""
        return self._conn is not None

    def initialize_database(self, path: str | Path | None = None) -> None:
        """Create the schema at ``path`` (or the default location) and connect."""
        if path is None or str(path) in ("", PLACEHOLDER_PATH):
            chosen: str | Path = default_db_path()
        else:
            chosen = path
        try:
            initialize_schema(chosen)
        except StorageError as exc:
            log.error("%s", exc)
        self.connect(chosen)

    def connect(self, path: str | Path) -> None:
        """Open the database at ``path`` unless already connected."""
        if self._conn is not None:
            return
        self._conn = open_connection(path)

    def disconnect(self) -> None:
        """Close the connection if one is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    @property
    def _db(self) -> sqlite3.Connection:
        if self._conn is None:
            self.initialize_database(None)
        assert self._conn is not None
        return self._conn

    def _execute(self, sql: str, params: Iterable[Any] = ()) -> sqlite3.Cursor:
        try:
            return self._db.execute(sql, tuple(params))
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc

    def _exists(self, sql: str, key: int) -> bool:
        return self._execute(sql, (key,)).fetchone() is not None

    def save_family(self, family: Family) -> int:
        """Insert a family and its members; return the new family id."""
        if not family.name:
            raise InvalidInputError("family name must not be empty")
        cursor = self._execute("INSERT INTO FamilyInfo (Family_Name) VALUES (?);", (family.name,))
        family_id = int(cursor.lastrowid)
        for member in family.members:
            try:
                self._execute(
                    "INSERT INTO MemberInfo (Family_ID, Member_Name, Member_Nick_Name) "
                    "VALUES (?, ?, ?);",
                    (family_id, member.name, member.nickname),
                )
            except StorageError as exc:
                log.error("Failed to insert member '%s': %s", member.name, exc)
        return family_id

    def save_member(self, member: Member, family_id: int) -> int:
        """Insert a member into an existing family; return the new member id."""
        if not member.name:
            raise InvalidInputError("member name must not be empty")
        if family_id == 0:
            raise InvalidInputError("family id must not be 0")
        if not self._exists("SELECT 1 FROM FamilyInfo WHERE Family_ID = ?;", family_id):
            raise NotFoundError(f"family {family_id} does not exist")
        if self.member_count(family_id) >= MAX_MEMBERS:
            raise MaxMembersExceededError(f"family {family_id} already has {MAX_MEMBERS} members")
        cursor = self._execute(
            "INSERT INTO MemberInfo (Family_ID, Member_Name, Member_Nick_Name) VALUES (?, ?, ?);",
            (family_id, member.name, member.nickname),
        )
        return int(cursor.lastrowid)

    def get_member(self, member_id: int) -> Member | None:
        """Return the member with this id, or None."""
        row = self._execute(
            "SELECT Member_ID, Member_Name, Member_Nick_Name FROM MemberInfo WHERE Member_ID = ?;",
            (member_id,),
        ).fetchone()
        return _member_from_row(row) if row else None

    def get_family(self, family_id: int) -> Family | None:
        """Return the family with this id and its members, or None."""
        row = self._execute(
            "SELECT Family_ID, Family_Name FROM FamilyInfo WHERE Family_ID = ?;",
            (family_id,),
        ).fetchone()
        if row is None:
            return None
        family = Family(name=row[1] or "", id=int(row[0]))
        family.members.extend(self.list_members_of_family(family_id))
        return family

    def _delete(self, sql: str, key: int, what: str) -> None:
        cursor = self._execute(sql, (key,))
        if cursor.rowcount <= 0:
            raise NotFoundError(f"{what} {key} does not exist")

    def delete_member(self, member_id: int) -> None:
        """Delete a member; raise NotFoundError if there is none."""
        self._delete("DELETE FROM MemberInfo WHERE Member_ID = ?;", member_id, "member")

    def delete_family(self, family_id: int) -> None:
        """Delete a family and, by cascade, its members."""
        self._delete("DELETE FROM FamilyInfo WHERE Family_ID = ?;", family_id, "family")

    def update_family(self, family_id: int, new_name: str) -> None:
        """Rename a family."""
        if not new_name:
            raise InvalidInputError("family name must not be empty")
        cursor = self._execute(
            "UPDATE FamilyInfo SET Family_Name = ? WHERE Family_ID = ?;", (new_name, family_id)
        )
        if cursor.rowcount <= 0:
            raise NotFoundError(f"family {family_id} does not exist")

    def update_member(self, member_id: int, new_name: str, new_nickname: str) -> None:
        """Update a member's name and/or nickname; empty values are left unchanged."""
        assignments: list[str] = []
        params: list[Any] = []
        if new_name:
            assignments.append("Member_Name = ?")
            params.append(new_name)
        if new_nickname:
            assignments.append("Member_Nick_Name = ?")
            params.append(new_nickname)
        if not assignments:
            raise InvalidInputError("nothing to update")
        params.append(member_id)
        sql = f"UPDATE MemberInfo SET {', '.join(assignments)} WHERE Member_ID = ?;"
        cursor = self._execute(sql, params)
        if cursor.rowcount <= 0:
            raise NotFoundError(f"member {member_id} does not exist")

    def list_families(self) -> list[Family]:
        """Return every family (without members) ordered by id."""
        rows = self._execute(
            "SELECT Family_ID, Family_Name FROM FamilyInfo ORDER BY Family_ID;"
        ).fetchall()
        return [Family(name=name or "", id=int(fid)) for fid, name in rows]

    def list_members_of_family(self, family_id: int) -> list[Member]:
        """Return the members of a family ordered by id."""
        rows = self._execute(
            "SELECT Member_ID, Member_Name, Member_Nick_Name FROM MemberInfo "
            "WHERE Family_ID = ? ORDER BY Member_ID;",
            (family_id,),
        ).fetchall()
        return [_member_from_row(row) for row in rows]

    def member_count(self, family_id: int) -> int:
        """Return how many members a family has."""
        (count,) = self._execute(
            "SELECT COUNT(1) FROM MemberInfo WHERE Family_ID = ?;", (family_id,)
        ).fetchone()
        return int(count)