"""
Food placement.
"""

import logging
import random
from typing import Collection, Optional

from .constants import Cell, SPAWN_ATTEMPTS, SPAWN_FALLBACK

logger = logging.getLogger(__name__)


class FoodSpawner:
    """
    Picks a random free cell for the next piece of food.

    Sampling is bounded: after max_attempts occupied candidates the spawner
    gives up and returns the fallback cell, even if the snake covers it.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        max_attempts: int = SPAWN_ATTEMPTS,
        fallback: Cell = SPAWN_FALLBACK
    ):
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.fallback = fallback

    def spawn(self, tile_count_x: int, tile_count_y: int, occupied: Collection[Cell]) -> Cell:
        occupied = set(occupied)
        for _ in range(self.max_attempts):
            x = self.rng.randint(0, tile_count_x - 1)
            y = self.rng.randint(0, tile_count_y - 1)
            if (x, y) not in occupied:
                return (x, y)

        logger.warning(
            f"No free cell found after {self.max_attempts} attempts on a "
            f"{tile_count_x}x{tile_count_y} grid; placing food at {self.fallback}"
        )
        return self.fallback
