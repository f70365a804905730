"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations (``init_db``).  It uses
SQLite as a lightweight embedded database; to switch to another DBMS
you would replace the connection logic and adapt the SQL accordingly.

Applied migration versions are stored in the ``migrations`` table and
new migrations are executed in order.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

logger = logging.getLogger(__name__)

# Ordered list of (version, script).  Append new migrations with an
# incremented version number; never edit an applied one.
MIGRATIONS: list[tuple[int, str]] = [
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS app_user (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT,
            email TEXT
        );
        CREATE INDEX IF NOT EXISTS idx_app_user_name ON app_user(name);
        """,
    ),
]


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    ``database_url`` defaults to ``settings.database_url``.  Absolute
    paths are used as is; relative paths are resolved against the
    project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / db_url).resolve())


def get_connection(database_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  The caller is responsible for closing the connection.
    """
    conn = sqlite3.connect(get_database_path(database_path))
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(database_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block completes without an
    exception and rolled back otherwise.
    """
    conn = get_connection(database_path)
    try:
        yield conn.cursor()
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def init_db(database_path: Optional[str] = None) -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, reads the
    current schema version and applies every migration in
    ``MIGRATIONS`` with a higher version.
    """
    conn = get_connection(database_path)
    try:
        cursor = conn.cursor()
        cursor.execute(
            """
            CREATE TABLE IF NOT EXISTS migrations (
                version INTEGER PRIMARY KEY,
                applied_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
            """
        )
        row = cursor.execute("SELECT MAX(version) AS version FROM migrations").fetchone()
        current_version = row["version"] or 0
        for version, script in MIGRATIONS:
            if version <= current_version:
                continue
            logger.info("Applying migration %s", version)
            cursor.executescript(script)
            cursor.execute("INSERT INTO migrations (version) VALUES (?)", (version,))
        conn.commit()
    finally:
        conn.close()
