import argparse
import logging
import os
import random
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple, Any

from dotenv import load_dotenv

from domain.constants import (
    Cell, Heading, RIGHT,
    IDLE, RUNNING, GAME_OVER,
    DEFAULT_TILE_COUNT, INITIAL_LENGTH, FOOD_REWARD, TILE_SIZE,
)
from domain.food import FoodSpawner
from domain.game_state import GameState, RunState
from domain.levels import ScoreProgression, Theme
from domain.snake import Snake

logger = logging.getLogger(__name__)

CONTINUED = "continued"
COLLIDED = "collided"


@dataclass(frozen=True)
class TickOutcome:
    """
    Result of one tick.

    kind is CONTINUED or COLLIDED; reason is 'wall' or 'self' for collisions.
    tick_interval_ms is the delay before the next tick should be scheduled.
    """
    kind: str
    score: int
    level: int
    tick_interval_ms: int
    reason: Optional[str] = None
    ate_food: bool = False
    leveled_up: bool = False

    @property
    def continued(self) -> bool:
        return self.kind == CONTINUED

    @property
    def collided(self) -> bool:
        return self.kind == COLLIDED


class SimulationEngine:
    """
    Manages:
      - Board (tile counts, pending resize)
      - Snake and food
      - RunState (score, level, tick interval, alive)
      - The IDLE -> RUNNING -> GAME_OVER state machine
    """

    def __init__(
        self,
        tile_count_x: int = DEFAULT_TILE_COUNT,
        tile_count_y: int = DEFAULT_TILE_COUNT,
        progression: Optional[ScoreProgression] = None,
        spawner: Optional[FoodSpawner] = None,
        rng: Optional[random.Random] = None
    ):
        self.width = tile_count_x
        self.height = tile_count_y
        self._pending_grid: Optional[Tuple[int, int]] = None
        self.progression = progression or ScoreProgression()
        self.spawner = spawner or FoodSpawner(rng=rng)

        self.state = IDLE
        self.snake: Optional[Snake] = None
        self.food: Cell = (0, 0)
        self.run_state = self._fresh_run_state()
        self.tick_number = 0

    def _fresh_run_state(self) -> RunState:
        first = self.progression.entry_for_level(1)
        return RunState(score=0, level=1, tick_interval_ms=first.tick_interval_ms, alive=True)

    @property
    def theme(self) -> Theme:
        return self.progression.entry_for_level(self.run_state.level).theme

    @property
    def grid_size(self) -> Tuple[int, int]:
        return (self.width, self.height)

    def default_snake(self) -> List[Cell]:
        """Horizontal snake centred on the board, heading right."""
        cx, cy = self.width // 2, self.height // 2
        return [(cx - i, cy) for i in range(INITIAL_LENGTH)]

    def start_run(
        self,
        initial_snake: Optional[List[Cell]] = None,
        heading: Heading = RIGHT,
        food: Optional[Cell] = None
    ) -> RunState:
        """
        Reset everything and enter RUNNING.

        Valid from any state; a previous run's snake, food and counters are
        discarded.
        """
        self._apply_pending_grid()
        positions = list(initial_snake) if initial_snake is not None else self.default_snake()
        if not positions:
            raise ValueError("Initial snake must have at least one cell.")
        for cell in positions:
            if not self._in_bounds(cell):
                raise ValueError(f"Snake cell {cell} is outside the {self.width}x{self.height} grid.")
        if len(set(positions)) != len(positions):
            raise ValueError("Initial snake overlaps itself.")

        self.snake = Snake(positions, heading=heading)
        self.run_state = self._fresh_run_state()
        self.tick_number = 0

        if food is None:
            self.food = self.spawner.spawn(self.width, self.height, self.snake.positions)
        else:
            if not self._in_bounds(food):
                raise ValueError(f"Food {food} is outside the {self.width}x{self.height} grid.")
            self.food = food

        self.state = RUNNING
        logger.info(f"Run started on {self.width}x{self.height} grid, food at {self.food}")
        return self.run_state

    def request_heading(self, heading: Any) -> bool:
        """
        The only input entry point. Queues a heading for the next tick.

        Ignored unless a run is in progress; reverse or malformed headings
        are silently dropped.
        """
        if self.state != RUNNING or self.snake is None:
            return False
        return self.snake.set_pending_heading(heading)

    def resize(self, tile_count_x: int, tile_count_y: int) -> None:
        """Queue a grid change; it takes effect at the start of the next tick."""
        if (tile_count_x, tile_count_y) == self.grid_size:
            self._pending_grid = None
            return
        self._pending_grid = (tile_count_x, tile_count_y)
        if self.state != RUNNING:
            self._apply_pending_grid()

    def _apply_pending_grid(self) -> None:
        if self._pending_grid is None:
            return
        self.width, self.height = self._pending_grid
        self._pending_grid = None
        logger.info(f"Grid resized to {self.width}x{self.height}")
        if self.state == RUNNING and self.snake is not None and not self._in_bounds(self.food):
            self.food = self.spawner.spawn(self.width, self.height, self.snake.positions)

    def _in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def tick(self) -> Optional[TickOutcome]:
        """
        Execute one tick:
          1) Apply the pending heading
          2) Compute the candidate head
          3) Wall check
          4) Self check against the pre-move body
          5) Push the new head
          6) Eat (grow, score, level, respawn) or drop the tail

        Returns None without touching anything when no run is in progress.
        """
        if self.state != RUNNING or self.snake is None:
            return None

        self._apply_pending_grid()
        snake = self.snake
        delta = snake.apply_pending_heading()
        candidate = snake.advance(delta)

        if not self._in_bounds(candidate):
            return self._game_over("wall")

        will_eat = candidate == self.food
        # The tail moves out of the way this tick unless the snake grows
        body = list(snake.positions)
        blocking = body if will_eat else body[:-1]
        if candidate in blocking:
            return self._game_over("self")

        snake.push_head(candidate)
        leveled_up = False
        if will_eat:
            leveled_up = self._eat()
        else:
            snake.drop_tail()

        self.tick_number += 1
        run = self.run_state
        return TickOutcome(
            kind=CONTINUED,
            score=run.score,
            level=run.level,
            tick_interval_ms=run.tick_interval_ms,
            ate_food=will_eat,
            leveled_up=leveled_up
        )

    def _eat(self) -> bool:
        old = self.run_state
        score = old.score + FOOD_REWARD
        new_index = self.progression.level_index(score)
        entry = self.progression.on_score_changed(old.level, new_index)
        if entry is not None:
            self.run_state = replace(
                old, score=score, level=new_index + 1, tick_interval_ms=entry.tick_interval_ms
            )
        else:
            self.run_state = replace(old, score=score)
        self.food = self.spawner.spawn(self.width, self.height, self.snake.positions)
        return entry is not None

    def _game_over(self, reason: str) -> TickOutcome:
        self.state = GAME_OVER
        self.run_state = replace(self.run_state, alive=False)
        run = self.run_state
        logger.info(f"Game over ({reason}) after {self.tick_number} ticks, score {run.score}, level {run.level}")
        return TickOutcome(
            kind=COLLIDED,
            score=run.score,
            level=run.level,
            tick_interval_ms=run.tick_interval_ms,
            reason=reason
        )

    def get_current_state(self) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick_number=self.tick_number,
            snake=list(self.snake.positions) if self.snake else [],
            food=self.food,
            run=self.run_state,
            width=self.width,
            height=self.height,
            theme=self.theme,
            engine_state=self.state
        )

    def print_board(self):
        """
        Prints a visual representation of the current board state.
        """
        print("\n" + self.get_current_state().print_board() + "\n")


# -------------------------------
# Main Entry Point
# -------------------------------
def main():
    load_dotenv()
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    parser = argparse.ArgumentParser(description="Play NeonSnake in a desktop window.")
    parser.add_argument("--width", type=int, default=400,
                        help="Initial window width in pixels")
    parser.add_argument("--height", type=int, default=400,
                        help="Initial window height in pixels")
    parser.add_argument("--tile-size", type=int,
                        default=int(os.getenv("SNAKE_TILE_SIZE", TILE_SIZE)),
                        help="Tile edge length in pixels")
    parser.add_argument("--no-audio", action="store_true",
                        help="Disable tone output")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for food placement")
    args = parser.parse_args()

    from cli.play import run_game
    run_game(args)


if __name__ == "__main__":
    main()
