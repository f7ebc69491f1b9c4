"""
Game constants for NeonSnake.
"""

from typing import Dict, Tuple

Cell = Tuple[int, int]
Heading = Tuple[int, int]

# Headings as unit deltas, screen coordinates (y grows downward)
UP: Heading = (0, -1)
DOWN: Heading = (0, 1)
LEFT: Heading = (-1, 0)
RIGHT: Heading = (1, 0)
VALID_HEADINGS = {UP, DOWN, LEFT, RIGHT}

HEADING_NAMES: Dict[str, Heading] = {
    "UP": UP,
    "DOWN": DOWN,
    "LEFT": LEFT,
    "RIGHT": RIGHT,
}

# Game settings
TILE_SIZE = 20
MIN_TILE_COUNT = 10
DEFAULT_TILE_COUNT = 20
INITIAL_LENGTH = 3
FOOD_REWARD = 10
SPAWN_ATTEMPTS = 100
SPAWN_FALLBACK: Cell = (0, 0)
LEDGER_CAPACITY = 3

# Engine states
IDLE = "IDLE"
RUNNING = "RUNNING"
GAME_OVER = "GAME_OVER"
