"""
SQLite database integration and simple migration system.

This module provides functions for obtaining a database connection
(``get_connection``) and applying migrations on application start
(``init_db``).  It uses SQLite as a lightweight embedded database.

The migration mechanism stores applied migration versions in the
``migrations`` table and executes new migrations in order.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from .config import settings
from .exceptions import StoreError


MIGRATIONS: list[tuple[int, str]] = [
    # Migration 1: registrations table.  The UNIQUE constraint on the
    # natural key is what makes concurrent duplicate submissions fail
    # atomically instead of relying on a read before the insert.
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS registrations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            class TEXT NOT NULL,
            division TEXT NOT NULL,
            committee TEXT NOT NULL,
            email TEXT,
            suggestions TEXT,
            status TEXT NOT NULL DEFAULT 'pending',
            created_at TEXT NOT NULL,
            CONSTRAINT uq_registrations_natural_key UNIQUE (name, class, division)
        );
        """,
    ),
    # Migration 2: indices for the admin filters
    (
        2,
        """
        CREATE INDEX IF NOT EXISTS idx_registrations_status ON registrations(status);
        CREATE INDEX IF NOT EXISTS idx_registrations_committee ON registrations(committee);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the package root.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # mun_registration_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.  The busy timeout comes from ``settings.db_timeout`` so that
    concurrent writers queue up instead of failing immediately.  A
    database that cannot be opened raises ``StoreError``.
    """
    try:
        conn = sqlite3.connect(get_database_path(), timeout=settings.db_timeout)
    except sqlite3.Error as e:
        raise StoreError("connect", str(e)) from e
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit."""
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version, and applies any newer entries from
    ``MIGRATIONS``.  New migrations must be appended with an
    incremented version number.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                current_version = version
