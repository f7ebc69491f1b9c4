"""
Tests for the domain package: snake, geometry, levels, food.
"""

import pytest
import sys
import os
import random
import logging
from collections import deque

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain import (
    UP, DOWN, LEFT, RIGHT, VALID_HEADINGS,
    Snake, parse_heading,
    compute_grid,
    LevelEntry, LEVEL_TABLE, ScoreProgression,
    FoodSpawner,
    HighScoreEntry,
)


class TestSnake:
    """Tests for the Snake class."""

    def test_snake_initialization(self):
        """Snake keeps its cells head first in a deque."""
        snake = Snake([(5, 5), (4, 5), (3, 5)])
        assert list(snake.positions) == [(5, 5), (4, 5), (3, 5)]
        assert isinstance(snake.positions, deque)
        assert snake.head == (5, 5)
        assert snake.tail == (3, 5)
        assert len(snake) == 3

    def test_snake_needs_a_cell(self):
        """An empty snake is rejected."""
        with pytest.raises(ValueError):
            Snake([])

    def test_advance_adds_delta(self):
        """advance() returns head + delta without moving."""
        snake = Snake([(5, 5)])
        assert snake.advance(UP) == (5, 4)
        assert snake.advance(LEFT) == (4, 5)
        assert snake.head == (5, 5)

    def test_reverse_of_applied_rejected(self):
        """Reversing the applied heading is a no-op."""
        snake = Snake([(5, 5), (4, 5)], heading=RIGHT)
        assert snake.set_pending_heading(LEFT) is False
        assert snake.pending_heading == RIGHT

    def test_perpendicular_accepted(self):
        """Turning is queued as the pending heading."""
        snake = Snake([(5, 5)], heading=RIGHT)
        assert snake.set_pending_heading(UP) is True
        assert snake.pending_heading == UP
        assert snake.heading == RIGHT

    def test_apply_pending_heading(self):
        """Applying copies pending into applied."""
        snake = Snake([(5, 5)], heading=RIGHT)
        snake.set_pending_heading(DOWN)
        assert snake.apply_pending_heading() == DOWN
        assert snake.heading == DOWN


class TestParseHeading:
    """Tests for heading normalisation."""

    def test_parse_deltas(self):
        """Every valid delta passes through."""
        for heading in VALID_HEADINGS:
            assert parse_heading(heading) == heading

    def test_parse_names(self):
        """Names are case-insensitive."""
        assert parse_heading("Up") == UP
        assert parse_heading(" right ") == RIGHT

    @pytest.mark.parametrize("value", [(0, 0), (1, 1), (2, 0), "north", None, 5, (1,), (1.0, 0), (True, 0), (False, 1)])
    def test_parse_rejects_malformed(self, value):
        """Anything else yields None."""
        assert parse_heading(value) is None


class TestGeometry:
    """Tests for compute_grid."""

    def test_exact_fit(self):
        """400x400 px with 20 px tiles is 20x20."""
        assert compute_grid(400, 400, 20) == (20, 20)

    def test_partial_tiles_are_dropped(self):
        """Floor division on each axis."""
        assert compute_grid(419, 250, 20) == (20, 12)

    def test_degenerate_viewport_clamped(self):
        """Tiny or zero viewports clamp to 10x10."""
        assert compute_grid(0, 0, 20) == (10, 10)
        assert compute_grid(50, 1000, 20) == (10, 50)

    def test_invalid_tile_size(self):
        """A non-positive tile size is an error."""
        with pytest.raises(ValueError):
            compute_grid(400, 400, 0)


class TestScoreProgression:
    """Tests for the level table."""

    def test_default_table_strictly_increasing(self):
        """Thresholds increase and start at zero."""
        thresholds = [entry.score_threshold for entry in LEVEL_TABLE]
        assert thresholds[0] == 0
        assert thresholds == sorted(set(thresholds))

    def test_lookup_exact_and_between(self):
        """Greatest threshold <= score wins."""
        progression = ScoreProgression()
        assert progression.lookup_level(0) is LEVEL_TABLE[0]
        assert progression.lookup_level(49) is LEVEL_TABLE[0]
        assert progression.lookup_level(50) is LEVEL_TABLE[1]
        assert progression.lookup_level(10_000) is LEVEL_TABLE[-1]

    def test_level_is_monotonic(self):
        """level_for never decreases as score rises."""
        progression = ScoreProgression()
        levels = [progression.level_for(score) for score in range(0, 800, 5)]
        assert levels == sorted(levels)
        assert levels[0] == 1

    def test_on_score_changed_reports_level_up(self):
        """A higher index returns the new entry."""
        progression = ScoreProgression()
        entry = progression.on_score_changed(old_level=1, new_index=1)
        assert entry is LEVEL_TABLE[1]
        assert entry.tick_interval_ms < LEVEL_TABLE[0].tick_interval_ms

    def test_on_score_changed_same_level(self):
        """No level-up returns None."""
        progression = ScoreProgression()
        assert progression.on_score_changed(old_level=2, new_index=1) is None

    def test_entry_theme(self):
        """LevelEntry exposes its colours as a Theme."""
        theme = LEVEL_TABLE[0].theme
        assert theme.snake_color == "#00ff88"
        assert theme.food_color == "#ff0055"

    @pytest.mark.parametrize("table", [
        [],
        [LevelEntry(5, 100, "#fff", "#000")],
        [LevelEntry(0, 100, "#fff", "#000"), LevelEntry(0, 90, "#fff", "#000")],
    ])
    def test_invalid_tables_rejected(self, table):
        """Empty, non-zero-based or non-increasing tables are errors."""
        with pytest.raises(ValueError):
            ScoreProgression(table)


class TestFoodSpawner:
    """Tests for FoodSpawner."""

    def test_spawn_avoids_occupied(self):
        """Food never lands on an occupied cell when one is free."""
        spawner = FoodSpawner(rng=random.Random(1))
        for _ in range(50):
            cell = spawner.spawn(10, 10, [(0, 0), (1, 0)])
            assert cell not in [(0, 0), (1, 0)]
            assert 0 <= cell[0] < 10 and 0 <= cell[1] < 10

    def test_full_grid_falls_back(self, caplog):
        """With no free cell the fallback (0,0) is used and a warning logged."""
        spawner = FoodSpawner(rng=random.Random(1))
        occupied = [(x, y) for x in range(10) for y in range(10)]
        with caplog.at_level(logging.WARNING, logger="domain.food"):
            assert spawner.spawn(10, 10, occupied) == (0, 0)
        assert "No free cell" in caplog.text

    def test_attempts_are_bounded(self):
        """The spawner samples at most max_attempts times."""
        rng = random.Random(0)
        calls = []
        original = rng.randint

        def counting_randint(a, b):
            calls.append((a, b))
            return original(a, b)

        rng.randint = counting_randint
        spawner = FoodSpawner(rng=rng, max_attempts=7)
        spawner.spawn(10, 10, [(x, y) for x in range(10) for y in range(10)])
        assert len(calls) == 14


class TestHighScoreEntry:
    """Tests for HighScoreEntry records."""

    def test_round_trip_dict(self):
        """to_dict and from_dict agree."""
        entry = HighScoreEntry("A", 30)
        assert HighScoreEntry.from_dict(entry.to_dict()) == entry

    @pytest.mark.parametrize("record", [
        {"name": "A", "score": -1},
        {"name": "A", "score": "10"},
        {"name": 5, "score": 10},
        {"score": 10},
        {"name": "A", "score": True},
    ])
    def test_from_dict_rejects_malformed(self, record):
        """Malformed records raise ValueError."""
        with pytest.raises(ValueError):
            HighScoreEntry.from_dict(record)
