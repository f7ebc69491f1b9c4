"""
Domain entities for the NeonSnake game engine.

This module contains the core game entities that are independent of
infrastructure concerns (rendering, audio, storage).
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_HEADINGS,
    IDLE, RUNNING, GAME_OVER,
    FOOD_REWARD, LEDGER_CAPACITY,
)
from .snake import Snake, parse_heading
from .geometry import compute_grid
from .levels import LevelEntry, Theme, LEVEL_TABLE, ScoreProgression
from .food import FoodSpawner
from .game_state import GameState, RunState
from .high_score import HighScoreEntry

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_HEADINGS',
    'IDLE', 'RUNNING', 'GAME_OVER',
    'FOOD_REWARD', 'LEDGER_CAPACITY',
    'Snake', 'parse_heading',
    'compute_grid',
    'LevelEntry', 'Theme', 'LEVEL_TABLE', 'ScoreProgression',
    'FoodSpawner',
    'GameState', 'RunState',
    'HighScoreEntry',
]
