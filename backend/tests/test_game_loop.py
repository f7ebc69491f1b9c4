"""
Tests for the tick scheduler.
"""

import sys
import os
from unittest.mock import Mock

# Add backend to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from main import SimulationEngine
from domain.constants import LEFT, RIGHT, RUNNING, GAME_OVER
from domain.levels import LevelEntry, ScoreProgression
from services.game_loop import GameLoop


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds * 1000.0


class QueueSpawner:
    def __init__(self, cells):
        self.cells = list(cells)

    def spawn(self, tile_count_x, tile_count_y, occupied):
        return self.cells.pop(0) if self.cells else (0, 19)


def make_loop(engine=None, **kwargs):
    clock = FakeClock()
    engine = engine or SimulationEngine(20, 20, spawner=QueueSpawner([]))
    loop = GameLoop(engine, clock=clock, sleep=clock.sleep, **kwargs)
    return loop, clock


class TestPump:
    """Tests for the non-blocking driver."""

    def test_nothing_due_before_interval(self):
        """No tick runs before the first deadline."""
        loop, clock = make_loop()
        loop.start(initial_snake=[(10, 10)], food=(0, 0))
        clock.now = 99
        assert loop.pump() is None
        assert loop.engine.tick_number == 0

    def test_tick_runs_when_due(self):
        """A tick runs once the deadline passes, then reschedules."""
        loop, clock = make_loop()
        loop.start(initial_snake=[(10, 10)], food=(0, 0))
        clock.now = 100
        outcome = loop.pump()
        assert outcome.continued
        assert loop.next_tick_at == 200

    def test_pump_without_start_is_noop(self):
        """An idle loop never ticks."""
        loop, clock = make_loop()
        clock.now = 10_000
        assert loop.pump() is None

    def test_level_up_shortens_next_delay(self):
        """The next deadline uses the interval after the level-up."""
        table = [LevelEntry(0, 100, "#0f0", "#f00"), LevelEntry(10, 60, "#0ff", "#ff0")]
        engine = SimulationEngine(
            20, 20, progression=ScoreProgression(table), spawner=QueueSpawner([(0, 0)])
        )
        loop, clock = make_loop(engine=engine)
        loop.start(initial_snake=[(10, 10)], food=(11, 10))
        clock.now = 100
        outcome = loop.pump()
        assert outcome.leveled_up
        assert loop.next_tick_at == 160

    def test_game_over_cancels_schedule(self):
        """After a collision no further ticks are scheduled."""
        on_game_over = Mock()
        loop, clock = make_loop(on_game_over=on_game_over)
        loop.start(initial_snake=[(0, 5)], heading=LEFT, food=(10, 10))
        clock.now = 100
        outcome = loop.pump()
        assert outcome.collided
        assert loop.next_tick_at is None
        assert loop.active is False
        on_game_over.assert_called_once()
        run = on_game_over.call_args[0][0]
        assert run.alive is False

    def test_stale_deadline_after_external_game_over(self):
        """A deferred tick is a no-op if the engine is not running."""
        loop, clock = make_loop()
        loop.start(initial_snake=[(10, 10)], food=(0, 0))
        loop.engine.state = GAME_OVER
        clock.now = 500
        assert loop.pump() is None
        assert loop.next_tick_at is None

    def test_stop_cancels(self):
        """stop() drops the pending deadline."""
        loop, clock = make_loop()
        loop.start(initial_snake=[(10, 10)], food=(0, 0))
        loop.stop()
        clock.now = 500
        assert loop.pump() is None
        assert loop.engine.state == RUNNING


class TestDispatch:
    """Tests for renderer and audio dispatch."""

    def test_render_on_start_and_each_tick(self):
        """The renderer sees the initial board and every successful tick."""
        renderer = Mock()
        loop, clock = make_loop(renderer=renderer)
        loop.start(initial_snake=[(10, 10), (9, 10)], food=(0, 0))
        assert renderer.render.call_count == 1
        clock.now = 100
        loop.pump()
        assert renderer.render.call_count == 2
        snake, food, theme, grid = renderer.render.call_args[0]
        assert snake == [(11, 10), (10, 10)]
        assert food == (0, 0)
        assert grid == (20, 20)
        assert theme.snake_color == "#00ff88"

    def test_no_render_on_collision(self):
        """A collision tick is not rendered."""
        renderer = Mock()
        loop, clock = make_loop(renderer=renderer)
        loop.start(initial_snake=[(0, 5)], heading=LEFT, food=(10, 10))
        clock.now = 100
        loop.pump()
        assert renderer.render.call_count == 1

    def test_audio_cues(self):
        """start, eat and game over cues fire in order."""
        audio = Mock()
        engine = SimulationEngine(20, 20, spawner=QueueSpawner([(5, 5)]))
        loop, clock = make_loop(engine=engine, audio=audio)
        loop.start(initial_snake=[(18, 10)], heading=RIGHT, food=(19, 10))
        clock.now = 100
        loop.pump()
        clock.now = 200
        loop.pump()
        names = [call[0] for call in audio.method_calls]
        assert names == ["on_start", "on_eat", "on_game_over"]

    def test_failing_audio_does_not_break_tick(self):
        """Audio exceptions are swallowed at the boundary."""
        audio = Mock()
        audio.on_start.side_effect = RuntimeError("no device")
        audio.on_game_over.side_effect = RuntimeError("no device")
        on_game_over = Mock()
        loop, clock = make_loop(audio=audio, on_game_over=on_game_over)
        loop.start(initial_snake=[(0, 5)], heading=LEFT, food=(10, 10))
        clock.now = 100
        outcome = loop.pump()
        assert outcome.collided
        on_game_over.assert_called_once()


class TestRun:
    """Tests for the blocking driver."""

    def test_run_until_game_over(self):
        """run() sleeps the tick interval between ticks and stops at game over."""
        loop, clock = make_loop()
        loop.start(initial_snake=[(16, 5)], heading=RIGHT, food=(0, 0))
        outcome = loop.run()
        assert outcome.collided
        assert outcome.reason == "wall"
        assert loop.engine.tick_number == 3
        assert clock.sleeps == [0.1, 0.1, 0.1, 0.1]

    def test_run_max_ticks(self):
        """max_ticks bounds a headless run."""
        loop, clock = make_loop()
        loop.start(initial_snake=[(2, 5)], heading=RIGHT, food=(0, 0))
        loop.run(max_ticks=2)
        assert loop.engine.tick_number == 2
        assert loop.engine.state == RUNNING
