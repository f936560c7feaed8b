"""
SQLite implementation of the match store.

A new connection is opened for every operation and closed right after,
so the store holds no connection state between requests.  Identifiers
come from the ``AUTOINCREMENT`` primary key, which never hands out an
id twice, even after the record holding it was deleted.
"""

from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from typing import Iterator, List, Optional

from soccer_results_api.app.core.db import (
    SQLITE_INTEGER_MAX,
    SQLITE_INTEGER_MIN,
    get_cursor,
    get_database_path,
    init_db,
)
from soccer_results_api.app.core.errors import StorageError
from soccer_results_api.app.models.match import MatchRecord
from soccer_results_api.app.stores.base import MatchStore

logger = logging.getLogger(__name__)


class SqliteMatchStore(MatchStore):
    """Match store backed by the ``matches`` table of a SQLite file."""

    def __init__(self, db_path: Optional[str] = None) -> None:
        self.db_path = db_path or get_database_path()

    def init_schema(self) -> None:
        """Create the ``matches`` table if it is missing."""
        try:
            init_db(self.db_path)
        except sqlite3.Error as exc:
            raise StorageError(f"Could not initialise database {self.db_path}: {exc}") from exc
        logger.info("Match store ready at %s", self.db_path)

    @contextmanager
    def _cursor(self) -> Iterator[sqlite3.Cursor]:
        try:
            with get_cursor(self.db_path) as cursor:
                yield cursor
        except (sqlite3.Error, OverflowError) as exc:
            raise StorageError(str(exc)) from exc

    @staticmethod
    def _storable(match_id: int) -> bool:
        return SQLITE_INTEGER_MIN <= match_id <= SQLITE_INTEGER_MAX

    def put(self, record: MatchRecord) -> MatchRecord:
        values = (record.team_one, record.team_two, record.score_one, record.score_two)
        with self._cursor() as cursor:
            if record.id is None:
                cursor.execute(
                    """
                    INSERT INTO matches (team_one, team_two, score_one, score_two)
                    VALUES (?, ?, ?, ?)
                    """,
                    values,
                )
                match_id = cursor.lastrowid
            else:
                cursor.execute(
                    """
                    INSERT OR REPLACE INTO matches (id, team_one, team_two, score_one, score_two)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (record.id, *values),
                )
                match_id = record.id
            row = cursor.execute("SELECT * FROM matches WHERE id = ?", (match_id,)).fetchone()
        return self._row_to_record(row)

    def get(self, match_id: int) -> Optional[MatchRecord]:
        # An id SQLite cannot represent can never have been stored.
        if not self._storable(match_id):
            return None
        with self._cursor() as cursor:
            row = cursor.execute("SELECT * FROM matches WHERE id = ?", (match_id,)).fetchone()
        if not row:
            return None
        return self._row_to_record(row)

    def get_all(self) -> List[MatchRecord]:
        with self._cursor() as cursor:
            rows = cursor.execute("SELECT * FROM matches ORDER BY id ASC").fetchall()
        return [self._row_to_record(row) for row in rows]

    def delete(self, match_id: int) -> bool:
        if not self._storable(match_id):
            return False
        with self._cursor() as cursor:
            cursor.execute("DELETE FROM matches WHERE id = ?", (match_id,))
            affected = cursor.rowcount
        return affected > 0

    @staticmethod
    def _row_to_record(row: sqlite3.Row) -> MatchRecord:
        """Convert a database row to a ``MatchRecord``."""
        return MatchRecord(
            id=row["id"],
            team_one=row["team_one"],
            team_two=row["team_two"],
            score_one=row["score_one"],
            score_two=row["score_two"],
        )
