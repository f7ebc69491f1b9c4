"""
Swipe input - drag gestures translated to headings.
"""

from typing import Optional, Tuple

from domain.constants import UP, DOWN, LEFT, RIGHT, Heading
from .base import InputSource


def heading_from_vector(dx: float, dy: float, min_distance: float = 0.0) -> Optional[Heading]:
    """
    Pick a heading from a swipe vector in screen coordinates.

    The dominant axis wins; a vertical swipe wins ties. Swipes shorter than
    min_distance on their dominant axis are ignored.
    """
    if abs(dx) > abs(dy):
        if abs(dx) <= min_distance or dx == 0:
            return None
        return RIGHT if dx > 0 else LEFT
    if abs(dy) <= min_distance or dy == 0:
        return None
    return DOWN if dy > 0 else UP


class SwipeInput(InputSource):
    """Tracks one gesture at a time: begin() on press, end() on release."""

    def __init__(self, engine, min_distance: float = 20.0):
        super().__init__(engine)
        self.min_distance = min_distance
        self._start: Optional[Tuple[float, float]] = None

    def begin(self, x: float, y: float) -> None:
        self._start = (x, y)

    def end(self, x: float, y: float) -> bool:
        if self._start is None:
            return False
        start_x, start_y = self._start
        self._start = None
        return self.dispatch(heading_from_vector(x - start_x, y - start_y, self.min_distance))
