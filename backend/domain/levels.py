"""
Level table and score progression.

The table maps a cumulative score to a tick interval and a colour theme.
Thresholds are strictly increasing; the first entry starts at zero.
"""

import logging
from bisect import bisect_right
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Theme:
    snake_color: str
    food_color: str


@dataclass(frozen=True)
class LevelEntry:
    score_threshold: int
    tick_interval_ms: int
    snake_color: str
    food_color: str

    @property
    def theme(self) -> Theme:
        return Theme(self.snake_color, self.food_color)


LEVEL_TABLE: Tuple[LevelEntry, ...] = (
    LevelEntry(0, 100, "#00ff88", "#ff0055"),
    LevelEntry(50, 90, "#00e5ff", "#ffcc00"),
    LevelEntry(100, 80, "#b388ff", "#ff6d00"),
    LevelEntry(200, 70, "#ffea00", "#ff1744"),
    LevelEntry(300, 60, "#ff4081", "#00e676"),
    LevelEntry(500, 50, "#ffffff", "#2979ff"),
)


class ScoreProgression:
    """
    Resolves score -> level entry and detects level-ups.

    Levels are 1-based: level N is table[N - 1].
    """

    def __init__(self, table: Sequence[LevelEntry] = LEVEL_TABLE):
        if not table:
            raise ValueError("Level table must not be empty.")
        if table[0].score_threshold != 0:
            raise ValueError("First level must start at score 0.")
        thresholds = [entry.score_threshold for entry in table]
        if any(a >= b for a, b in zip(thresholds, thresholds[1:])):
            raise ValueError("Level thresholds must be strictly increasing.")
        self.table = tuple(table)
        self._thresholds = thresholds

    def level_index(self, score: int) -> int:
        """0-based index of the entry with the greatest threshold <= score."""
        return max(0, bisect_right(self._thresholds, score) - 1)

    def lookup_level(self, score: int) -> LevelEntry:
        return self.table[self.level_index(score)]

    def level_for(self, score: int) -> int:
        return self.level_index(score) + 1

    def entry_for_level(self, level: int) -> LevelEntry:
        return self.table[level - 1]

    def on_score_changed(self, old_level: int, new_index: int) -> Optional[LevelEntry]:
        """
        Report a level-up.

        Returns the new entry when the resolved level is higher than
        old_level, otherwise None. The caller applies the new tick interval;
        it takes effect on the next scheduled tick.
        """
        new_level = new_index + 1
        if new_level <= old_level:
            return None
        entry = self.table[new_index]
        logger.info(
            f"Level up: {old_level} -> {new_level} "
            f"(tick interval {entry.tick_interval_ms}ms)"
        )
        return entry
