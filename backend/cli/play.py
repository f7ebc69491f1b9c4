#!/usr/bin/env python3
"""
Desktop frontend for NeonSnake (pygame).

The window is the viewport: its size (minus the score bar) is turned into a
grid with compute_grid() on every resize. Frames are drawn by BoardRenderer
and blitted into the window. Arrow keys / WASD steer, a mouse drag acts as a
swipe.

Usage:
    python backend/main.py [--width 400] [--height 400] [--tile-size 20] [--no-audio]
"""

import os
import sys
import random
import logging
from typing import Optional

# Add parent directory to path to import backend modules
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pygame

from data_access import HighScoreRepository
from domain.constants import RUNNING
from domain.game_state import RunState
from domain.geometry import compute_grid
from inputs import KeyboardInput, SwipeInput
from main import SimulationEngine
from services.audio import NullAudioCue, ToneAudioCue
from services.game_loop import GameLoop
from services.high_scores import HighScoreLedger, MAX_NAME_LENGTH
from services.renderer import BoardRenderer, ColorScheme, hex_to_rgb

logger = logging.getLogger(__name__)

HUD_HEIGHT = 40
FPS = 120

START = "start"
PLAYING = "playing"
GAME_OVER_SCREEN = "game_over"
NAME_ENTRY = "name_entry"


class WindowViewport:
    """Current playable pixel area of the pygame window."""

    def __init__(self, surface: pygame.Surface):
        self.surface = surface

    def size(self):
        width, height = self.surface.get_size()
        return width, max(0, height - HUD_HEIGHT)


class SnakeApp:
    def __init__(self, width: int, height: int, tile_size: int, audio_enabled: bool, seed: Optional[int]):
        pygame.init()
        pygame.display.set_caption("NeonSnake")
        self.window = pygame.display.set_mode((width, height + HUD_HEIGHT), pygame.RESIZABLE)
        self.viewport = WindowViewport(self.window)
        self.clock = pygame.time.Clock()
        self.font_large = pygame.font.SysFont(None, 48)
        self.font_small = pygame.font.SysFont(None, 26)

        self.tile_size = tile_size
        tiles_x, tiles_y = compute_grid(*self.viewport.size(), tile_size)
        self.engine = SimulationEngine(tiles_x, tiles_y, rng=random.Random(seed))
        self.renderer = BoardRenderer(tile_size=tile_size)
        self.audio = ToneAudioCue() if audio_enabled else NullAudioCue()
        self.ledger = HighScoreLedger(HighScoreRepository())
        self.loop = GameLoop(
            self.engine,
            renderer=self.renderer,
            audio=self.audio,
            on_game_over=self.handle_game_over,
            clock=pygame.time.get_ticks
        )
        self.keyboard = KeyboardInput(self.engine)
        self.swipe = SwipeInput(self.engine)

        self.screen = START
        self.final_run: Optional[RunState] = None
        self.name_buffer = ""

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_run(self) -> None:
        self.final_run = None
        self.loop.start()
        self.screen = PLAYING

    def handle_game_over(self, run: RunState) -> None:
        self.final_run = run
        if self.ledger.is_high_score(run.score) and run.score > 0:
            self.name_buffer = ""
            self.screen = NAME_ENTRY
        else:
            self.screen = GAME_OVER_SCREEN

    def on_resize(self, size) -> None:
        self.window = pygame.display.set_mode(size, pygame.RESIZABLE)
        self.viewport.surface = self.window
        tiles_x, tiles_y = compute_grid(*self.viewport.size(), self.tile_size)
        self.engine.resize(tiles_x, tiles_y)
        self.loop.redraw()

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def handle_events(self) -> bool:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.VIDEORESIZE:
                self.on_resize(event.size)
            elif event.type == pygame.KEYDOWN:
                if not self.handle_key(event):
                    return False
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.swipe.begin(*event.pos)
            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                if self.screen == PLAYING:
                    self.swipe.end(*event.pos)
                elif self.screen in (START, GAME_OVER_SCREEN):
                    self.start_run()
        return True

    def handle_key(self, event) -> bool:
        if self.screen == NAME_ENTRY:
            if event.key == pygame.K_RETURN:
                self.ledger.add_score(self.name_buffer, self.final_run.score)
                self.screen = GAME_OVER_SCREEN
            elif event.key == pygame.K_BACKSPACE:
                self.name_buffer = self.name_buffer[:-1]
            elif event.unicode and event.unicode.isprintable() and len(self.name_buffer) < MAX_NAME_LENGTH:
                self.name_buffer += event.unicode
            return True

        if event.key == pygame.K_ESCAPE:
            return False
        if self.screen == PLAYING:
            self.keyboard.handle_key(pygame.key.name(event.key))
        elif event.key in (pygame.K_SPACE, pygame.K_RETURN):
            self.start_run()
        return True

    # ------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------

    def draw(self) -> None:
        self.window.fill(hex_to_rgb(ColorScheme.BACKGROUND))
        self.draw_hud()

        frame = self.renderer.last_frame
        if frame is not None:
            surface = pygame.image.frombytes(frame.tobytes(), frame.size, "RGB")
            area_w, area_h = self.viewport.size()
            if surface.get_width() > area_w or surface.get_height() > area_h:
                scale = min(area_w / surface.get_width(), area_h / surface.get_height())
                target = (max(1, int(surface.get_width() * scale)), max(1, int(surface.get_height() * scale)))
                surface = pygame.transform.smoothscale(surface, target)
            offset_x = (area_w - surface.get_width()) // 2
            offset_y = HUD_HEIGHT + (area_h - surface.get_height()) // 2
            self.window.blit(surface, (offset_x, offset_y))

        if self.screen == START:
            self.draw_overlay("NEON SNAKE", "Press SPACE or click to start")
        elif self.screen == GAME_OVER_SCREEN:
            score = self.final_run.score if self.final_run else 0
            self.draw_overlay(f"GAME OVER - {score}", self.scores_line())
        elif self.screen == NAME_ENTRY:
            self.draw_overlay("NEW HIGH SCORE", f"Name: {self.name_buffer}_")

        pygame.display.flip()

    def draw_hud(self) -> None:
        run = self.engine.run_state
        best = self.ledger.entries[0].score if self.ledger.entries else 0
        text = f"Score {run.score}   Level {run.level}   Best {best}"
        label = self.font_small.render(text, True, hex_to_rgb(ColorScheme.TEXT))
        self.window.blit(label, (10, (HUD_HEIGHT - label.get_height()) // 2))

    def draw_overlay(self, title: str, subtitle: str) -> None:
        width, height = self.window.get_size()
        shade = pygame.Surface((width, height), pygame.SRCALPHA)
        shade.fill((0, 0, 0, 160))
        self.window.blit(shade, (0, 0))
        color = hex_to_rgb(self.engine.theme.snake_color)
        title_label = self.font_large.render(title, True, color)
        sub_label = self.font_small.render(subtitle, True, hex_to_rgb(ColorScheme.TEXT))
        self.window.blit(title_label, ((width - title_label.get_width()) // 2, height // 2 - 40))
        self.window.blit(sub_label, ((width - sub_label.get_width()) // 2, height // 2 + 10))

    def scores_line(self) -> str:
        if not self.ledger.entries:
            return "Press SPACE to play again"
        return "  ".join(f"{e.name} {e.score}" for e in self.ledger.entries)

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def run(self) -> None:
        running = True
        while running:
            running = self.handle_events()
            if self.engine.state == RUNNING:
                self.loop.pump()
            self.draw()
            self.clock.tick(FPS)
        pygame.quit()


def run_game(args) -> None:
    audio_enabled = not args.no_audio and os.getenv("SNAKE_AUDIO", "1") != "0"
    logger.info(f"Starting NeonSnake ({args.width}x{args.height}px, tile {args.tile_size}px, audio {audio_enabled})")
    app = SnakeApp(
        width=args.width,
        height=args.height,
        tile_size=args.tile_size,
        audio_enabled=audio_enabled,
        seed=args.seed
    )
    app.run()


if __name__ == "__main__":
    from main import main
    main()
