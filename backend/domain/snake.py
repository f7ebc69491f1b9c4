"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Any, List, Optional

from .constants import Cell, Heading, HEADING_NAMES, RIGHT, VALID_HEADINGS


def parse_heading(value: Any) -> Optional[Heading]:
    """
    Normalize a heading request to a unit delta.

    Accepts a delta pair like (1, 0) or a name like "RIGHT".
    Returns None for anything else.
    """
    if isinstance(value, str):
        return HEADING_NAMES.get(value.strip().upper())
    try:
        dx, dy = value
    except (TypeError, ValueError):
        return None
    heading = (dx, dy)
    if heading in VALID_HEADINGS and all(isinstance(v, int) and not isinstance(v, bool) for v in heading):
        return heading
    return None


def is_reverse(a: Heading, b: Heading) -> bool:
    return a[0] == -b[0] and a[1] == -b[1] and a != (0, 0)


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        heading: the heading applied on the last tick
        pending_heading: the heading the next tick will apply
    """

    def __init__(self, positions: List[Cell], heading: Heading = RIGHT):
        if not positions:
            raise ValueError("A snake needs at least one cell.")
        self.positions = deque(positions)
        self.heading: Heading = heading
        self.pending_heading: Heading = heading

    @property
    def head(self) -> Cell:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Cell:
        return self.positions[-1]

    def __len__(self) -> int:
        return len(self.positions)

    def set_pending_heading(self, value: Any) -> bool:
        """
        Queue a heading for the next tick.

        Reversing the applied heading is ignored, as are malformed values.
        Returns True when the pending heading was overwritten.
        """
        heading = parse_heading(value)
        if heading is None or is_reverse(heading, self.heading):
            return False
        self.pending_heading = heading
        return True

    def apply_pending_heading(self) -> Heading:
        self.heading = self.pending_heading
        return self.heading

    def advance(self, delta: Heading) -> Cell:
        """Return the cell the head would move into with the given delta."""
        hx, hy = self.head
        return (hx + delta[0], hy + delta[1])

    def push_head(self, cell: Cell) -> None:
        self.positions.appendleft(cell)

    def drop_tail(self) -> Cell:
        return self.positions.pop()
