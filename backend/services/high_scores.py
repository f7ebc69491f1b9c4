"""
High score ledger.

Keeps the top LEDGER_CAPACITY (name, score) entries, best first. Ties keep
insertion order. Every mutation is written through to the store; a store
that fails to load or save never takes the game down with it.
"""

import logging
from typing import List, Optional, Protocol

from domain.constants import LEDGER_CAPACITY
from domain.high_score import HighScoreEntry

logger = logging.getLogger(__name__)

DEFAULT_NAME = "Anonymous"
MAX_NAME_LENGTH = 16


class LedgerStore(Protocol):
    def load(self) -> List[HighScoreEntry]: ...

    def save(self, entries: List[HighScoreEntry]) -> None: ...


class HighScoreLedger:
    """Bounded, sorted top-N list of high scores."""

    def __init__(self, store: Optional[LedgerStore] = None, capacity: int = LEDGER_CAPACITY):
        self.store = store
        self.capacity = capacity
        self._entries: List[HighScoreEntry] = self._load()

    def _load(self) -> List[HighScoreEntry]:
        if self.store is None:
            return []
        try:
            entries = list(self.store.load())
        except Exception as e:  # noqa: BLE001 - a broken store means a fresh ledger
            logger.warning(f"Failed to load high scores, starting with an empty ledger: {e}")
            return []
        return self._ranked(entries)

    def _ranked(self, entries: List[HighScoreEntry]) -> List[HighScoreEntry]:
        # sorted() is stable, so equal scores keep insertion order
        return sorted(entries, key=lambda entry: -entry.score)[:self.capacity]

    @property
    def entries(self) -> List[HighScoreEntry]:
        return list(self._entries)

    def is_high_score(self, score: int) -> bool:
        if len(self._entries) < self.capacity:
            return True
        return score > self._entries[-1].score

    def add_score(self, name: str, score: int) -> Optional[int]:
        """
        Insert a score, re-rank and persist.

        Returns the 1-based rank of the new entry, or None if it did not make
        the list.
        """
        if not isinstance(score, int) or isinstance(score, bool) or score < 0:
            raise ValueError(f"Score must be a non-negative integer, got {score!r}")
        name = (name or "").strip()[:MAX_NAME_LENGTH] or DEFAULT_NAME

        entry = HighScoreEntry(name=name, score=score)
        candidates = self._entries + [entry]
        self._entries = self._ranked(candidates)
        self._persist()

        for rank, kept in enumerate(self._entries, start=1):
            if kept is entry:
                logger.info(f"New high score #{rank}: {name} with {score}")
                return rank
        return None

    def reset(self) -> None:
        self._entries = []
        self._persist()

    def _persist(self) -> None:
        if self.store is None:
            return
        try:
            self.store.save(list(self._entries))
        except Exception as e:  # noqa: BLE001 - persistence must not stop the game
            logger.error(f"Failed to save high scores: {e}")

    def to_list(self) -> List[dict]:
        return [entry.to_dict() for entry in self._entries]
