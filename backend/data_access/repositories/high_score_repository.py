"""
High score repository - SQLite-backed ledger store.
"""

import logging
import sqlite3
from typing import List

import database
from domain.high_score import HighScoreEntry
from .base import BaseRepository

logger = logging.getLogger(__name__)


class HighScoreRepository(BaseRepository):
    """
    Repository for the high_scores table.

    Stores the ledger as an ordered list; position 0 is the best entry.
    load() never raises: a missing, unreadable or malformed table yields [].
    """

    def __init__(self, ensure_schema: bool = True):
        self._schema_ready = False
        if ensure_schema:
            try:
                self._ensure_schema()
            except sqlite3.Error as e:
                # load() and save() retry the schema on every call
                logger.warning(f"High score database unavailable: {e}")

    def _ensure_schema(self) -> None:
        if self._schema_ready:
            return
        database.init_database()
        self._schema_ready = True

    def load(self) -> List[HighScoreEntry]:
        try:
            self._ensure_schema()
            with self.connection(commit=False) as (conn, cursor):
                cursor.execute("""
                    SELECT name, score FROM high_scores
                    ORDER BY position ASC
                """)
                rows = cursor.fetchall()
        except sqlite3.Error as e:
            logger.warning(f"Could not read high scores, starting fresh: {e}")
            return []

        try:
            entries = [HighScoreEntry.from_dict(dict(row)) for row in rows]
        except ValueError as e:
            logger.warning(f"High score table is corrupt, starting fresh: {e}")
            return []

        if any(a.score < b.score for a, b in zip(entries, entries[1:])):
            logger.warning("High score table is out of order, starting fresh")
            return []
        return entries

    def save(self, entries: List[HighScoreEntry]) -> None:
        """
        Replace the stored ledger with entries, in order.

        Raises sqlite3.Error on failure; the transaction is rolled back.
        """
        self._ensure_schema()
        with self.connection() as (conn, cursor):
            cursor.execute("DELETE FROM high_scores")
            cursor.executemany(
                "INSERT INTO high_scores (position, name, score) VALUES (?, ?, ?)",
                [(position, entry.name, entry.score) for position, entry in enumerate(entries)]
            )
        logger.debug(f"Saved {len(entries)} high scores")

    def clear(self) -> None:
        self.save([])
