"""
SQLite database integration.

This module provides functions for obtaining a database connection
(``get_connection``), a cursor context manager (``get_cursor``) and
schema creation on application start (``init_db``).  It uses SQLite
as a lightweight embedded database; to switch to another DBMS you
would replace the connection logic and provide another
``MatchStore`` implementation.
"""

import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from .config import settings

# SQLite stores integers as signed 64‑bit values.
SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

MATCHES_SCHEMA = """
CREATE TABLE IF NOT EXISTS matches (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    team_one TEXT,
    team_two TEXT,
    score_one INTEGER,
    score_two INTEGER
);
"""


def get_database_path(database_url: Optional[str] = None) -> str:
    """Compute the path to the SQLite database file.

    If ``database_url`` (default ``settings.database_url``) is an
    absolute path, use it directly.  Otherwise resolve it relative to
    the project root.
    """
    db_url = database_url or settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # soccer_results_api/
    return str((base_dir / db_url).resolve())


def get_connection(db_path: Optional[str] = None) -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    The connection uses a row factory to access columns by name.
    """
    conn = sqlite3.connect(db_path or get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor(db_path: Optional[str] = None) -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed when the block exits normally.
    """
    conn = get_connection(db_path)
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def init_db(db_path: Optional[str] = None) -> None:
    """Create the ``matches`` table if it does not exist yet.

    The statement is idempotent, so calling this on every start is safe.
    """
    with get_cursor(db_path) as cursor:
        cursor.executescript(MATCHES_SCHEMA)
