"""
Data access for users.

``UserRepository`` is the narrow persistence interface the service
layer depends on.  ``SQLiteUserRepository`` implements it on top of
the ``app_user`` table created by ``core.db.init_db``.  Every method
opens its own connection and commits before returning, so each call
is atomic on its own but no guarantee spans several calls.
"""

import logging
import sqlite3
from typing import List, Optional, Protocol

from ..core.db import get_connection, get_cursor, get_database_path
from ..schemas.user import User

logger = logging.getLogger(__name__)

# Range of a signed 64-bit SQLite INTEGER.  Ids outside it cannot be
# bound as parameters, so no stored row can carry one.
SQLITE_MIN_INTEGER = -(2**63)
SQLITE_MAX_INTEGER = 2**63 - 1


def _storable_id(user_id: int) -> bool:
    return SQLITE_MIN_INTEGER <= user_id <= SQLITE_MAX_INTEGER


class UserRepository(Protocol):
    """Persistence operations over user records."""

    def list(self) -> List[User]:
        """Return all users.  Order is unspecified."""
        ...

    def get(self, user_id: int) -> Optional[User]:
        """Return the user with ``user_id`` or ``None``."""
        ...

    def get_by_name(self, name: str) -> Optional[User]:
        """Return the first user whose name equals ``name`` or ``None``."""
        ...

    def exists(self, user_id: int) -> bool:
        """Return ``True`` if a user with ``user_id`` is stored."""
        ...

    def save(self, user: User) -> User:
        """Insert ``user`` when it has no id, otherwise overwrite the stored row.

        Returns the persisted user with its id populated.
        """
        ...

    def delete_by_id(self, user_id: int) -> None:
        """Delete the user with ``user_id`` if present."""
        ...

    def delete(self, user: User) -> None:
        """Delete the row identified by ``user.id``."""
        ...


class SQLiteUserRepository:
    """``UserRepository`` backed by an SQLite database file.

    ``get_by_name`` follows a first-match policy: when several rows
    share a name the one with the lowest id is returned.  Ids outside
    the SQLite INTEGER range are treated as absent.
    """

    def __init__(self, database_path: Optional[str] = None) -> None:
        self.database_path = get_database_path(database_path)

    def _connect(self) -> sqlite3.Connection:
        return get_connection(self.database_path)

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=row["id"], name=row["name"], email=row["email"])

    def list(self) -> List[User]:
        conn = self._connect()
        try:
            rows = conn.execute("SELECT id, name, email FROM app_user").fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    def get(self, user_id: int) -> Optional[User]:
        if not _storable_id(user_id):
            return None
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, name, email FROM app_user WHERE id = ?",
                (user_id,),
            ).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    def get_by_name(self, name: str) -> Optional[User]:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT id, name, email FROM app_user WHERE name = ? ORDER BY id ASC LIMIT 1",
                (name,),
            ).fetchone()
            return self._row_to_user(row) if row else None
        finally:
            conn.close()

    def exists(self, user_id: int) -> bool:
        if not _storable_id(user_id):
            return False
        conn = self._connect()
        try:
            row = conn.execute("SELECT 1 FROM app_user WHERE id = ?", (user_id,)).fetchone()
            return row is not None
        finally:
            conn.close()

    def save(self, user: User) -> User:
        if user.id is not None and not _storable_id(user.id):
            raise ValueError(f"User ID {user.id} is outside the SQLite INTEGER range")
        with get_cursor(self.database_path) as cursor:
            if user.id is None:
                cursor.execute(
                    "INSERT INTO app_user (name, email) VALUES (?, ?)",
                    (user.name, user.email),
                )
                saved = user.model_copy(update={"id": cursor.lastrowid})
            else:
                cursor.execute(
                    "INSERT INTO app_user (id, name, email) VALUES (?, ?, ?) "
                    "ON CONFLICT(id) DO UPDATE SET name = excluded.name, email = excluded.email",
                    (user.id, user.name, user.email),
                )
                saved = user.model_copy()
        logger.debug("Saved user %s", saved.id)
        return saved

    def delete_by_id(self, user_id: int) -> None:
        if not _storable_id(user_id):
            return
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM app_user WHERE id = ?", (user_id,))

    def delete(self, user: User) -> None:
        self.delete_by_id(user.id)
