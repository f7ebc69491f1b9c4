"""
RunState and GameState - values describing a run at a point in time.
"""

from dataclasses import dataclass
from typing import List, Tuple

from .levels import Theme


@dataclass(frozen=True)
class RunState:
    """
    Counters for the current run.

    Instances are immutable; the engine swaps in a new one on every change,
    so the snapshot taken at game over stays frozen.
    """
    score: int = 0
    level: int = 1
    tick_interval_ms: int = 100
    alive: bool = True


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick_number: how many successful ticks the run has taken
        snake: list of (x, y), head first
        food: (x, y) of the food
        run: RunState at snapshot time
        width, height: board dimensions in tiles
        theme: colours for the current level
        engine_state: IDLE, RUNNING or GAME_OVER
    """

    def __init__(
        self,
        tick_number: int,
        snake: List[Tuple[int, int]],
        food: Tuple[int, int],
        run: RunState,
        width: int,
        height: int,
        theme: Theme,
        engine_state: str
    ):
        self.tick_number = tick_number
        self.snake = snake
        self.food = food
        self.run = run
        self.width = width
        self.height = height
        self.theme = theme
        self.engine_state = engine_state

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        S = snake body
        H = snake head
        Row 0 is printed first, matching screen coordinates.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        fx, fy = self.food
        if 0 <= fx < self.width and 0 <= fy < self.height:
            board[fy][fx] = 'F'

        for idx, (x, y) in enumerate(self.snake):
            if 0 <= x < self.width and 0 <= y < self.height:
                board[y][x] = 'H' if idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(board[y])}" for y in range(self.height)]
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))
        return "\n".join(result)

    def to_dict(self) -> dict:
        return {
            "tick_number": self.tick_number,
            "snake": [list(cell) for cell in self.snake],
            "food": list(self.food),
            "score": self.run.score,
            "level": self.run.level,
            "tick_interval_ms": self.run.tick_interval_ms,
            "alive": self.run.alive,
            "width": self.width,
            "height": self.height,
            "theme": {
                "snake_color": self.theme.snake_color,
                "food_color": self.theme.food_color,
            },
            "state": self.engine_state,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick_number}, state={self.engine_state}, "
            f"food={self.food}, length={len(self.snake)}, score={self.run.score}>"
        )
