"""
Tick scheduling for the simulation engine.

GameLoop owns the cadence: it asks the engine for one tick whenever the
current deadline passes, then schedules the next deadline from the tick
interval the engine reports. Rendering and audio cues are dispatched from
here so the engine stays free of side effects.

Two drivers are provided:
- pump(now_ms): non-blocking, for host event loops (pygame, tests)
- run(): blocking, sleeps between ticks until game over
"""

import logging
import time
from typing import Callable, Optional

from domain.constants import RUNNING
from domain.game_state import RunState
from main import SimulationEngine, TickOutcome
from services.audio import NullAudioCue

logger = logging.getLogger(__name__)


def monotonic_ms() -> float:
    return time.monotonic() * 1000.0


class GameLoop:
    """
    Drives a SimulationEngine at its current tick interval.

    Args:
        engine: the engine to tick
        renderer: object with render(snake, food, theme, grid_size), or None
        audio: object with on_start/on_eat/on_level_up/on_game_over
        on_game_over: called with the frozen RunState when a run ends
        clock: returns the current time in milliseconds
        sleep: blocks for the given number of seconds
    """

    def __init__(
        self,
        engine: SimulationEngine,
        renderer=None,
        audio=None,
        on_game_over: Optional[Callable[[RunState], None]] = None,
        clock: Callable[[], float] = monotonic_ms,
        sleep: Callable[[float], None] = time.sleep
    ):
        self.engine = engine
        self.renderer = renderer
        self.audio = audio or NullAudioCue()
        self.on_game_over = on_game_over
        self.clock = clock
        self.sleep = sleep
        self.next_tick_at: Optional[float] = None
        self.last_outcome: Optional[TickOutcome] = None

    @property
    def active(self) -> bool:
        return self.next_tick_at is not None and self.engine.state == RUNNING

    def start(self, **run_kwargs) -> RunState:
        """Start a fresh run and schedule its first tick."""
        run = self.engine.start_run(**run_kwargs)
        self._cue("on_start")
        self.redraw()
        self.next_tick_at = self.clock() + run.tick_interval_ms
        self.last_outcome = None
        return run

    def stop(self) -> None:
        """Cancel any scheduled tick."""
        self.next_tick_at = None

    def pump(self, now: Optional[float] = None) -> Optional[TickOutcome]:
        """
        Run the tick that is due, if any.

        Returns the tick's outcome, or None when nothing was due or the run
        is no longer in progress.
        """
        if self.next_tick_at is None:
            return None
        if self.engine.state != RUNNING:
            self.next_tick_at = None
            return None

        now = self.clock() if now is None else now
        if now < self.next_tick_at:
            return None

        outcome = self.engine.tick()
        if outcome is None:
            self.next_tick_at = None
            return None

        self.last_outcome = outcome
        self._dispatch(outcome)
        if outcome.continued:
            # Interval is re-read every tick so a level-up applies right away
            self.next_tick_at = now + outcome.tick_interval_ms
        else:
            self.next_tick_at = None
        return outcome

    def run(self, max_ticks: Optional[int] = None) -> Optional[TickOutcome]:
        """
        Tick until game over (or max_ticks), sleeping between ticks.

        Returns the last outcome.
        """
        ticks = 0
        while self.active:
            if max_ticks is not None and ticks >= max_ticks:
                break
            delay_ms = self.next_tick_at - self.clock()
            if delay_ms > 0:
                self.sleep(delay_ms / 1000.0)
            if self.pump(max(self.clock(), self.next_tick_at)) is not None:
                ticks += 1
        return self.last_outcome

    def redraw(self) -> None:
        if self.renderer is None or self.engine.snake is None:
            return
        state = self.engine.get_current_state()
        self.renderer.render(state.snake, state.food, state.theme, (state.width, state.height))

    def _dispatch(self, outcome: TickOutcome) -> None:
        if outcome.continued:
            if outcome.ate_food:
                self._cue("on_eat")
            if outcome.leveled_up:
                self._cue("on_level_up")
            self.redraw()
            return

        self._cue("on_game_over")
        if self.on_game_over is not None:
            self.on_game_over(self.engine.run_state)

    def _cue(self, name: str) -> None:
        try:
            getattr(self.audio, name)()
        except Exception as e:  # noqa: BLE001 - audio must never break a tick
            logger.warning(f"Audio cue {name} failed: {e}")
