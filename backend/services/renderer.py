"""
Board rendering with Pillow.

Draws one frame of the board: dark background, food in the level's food
colour, body segments in the level's snake colour and a white head. Each
cell is drawn two pixels smaller than the tile to leave a visible gap.
"""

import logging
from typing import Optional, Sequence, Tuple

from PIL import Image, ImageDraw, ImageFilter

from domain.constants import Cell, TILE_SIZE
from domain.levels import Theme

logger = logging.getLogger(__name__)


class ColorScheme:
    """Fixed colours; per-level colours come from the Theme."""

    BACKGROUND = "#1a1a24"
    HEAD = "#ffffff"
    TEXT = "#ffffff"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


class BoardRenderer:
    """Render snake + food frames as RGB images."""

    def __init__(self, tile_size: int = TILE_SIZE, glow: bool = True):
        self.tile_size = tile_size
        self.glow = glow
        self.last_frame: Optional[Image.Image] = None

    def frame_size(self, grid_size: Tuple[int, int]) -> Tuple[int, int]:
        return (grid_size[0] * self.tile_size, grid_size[1] * self.tile_size)

    def _cell_box(self, cell: Cell) -> Tuple[int, int, int, int]:
        x, y = cell
        left = x * self.tile_size
        top = y * self.tile_size
        return (left, top, left + self.tile_size - 3, top + self.tile_size - 3)

    def render(
        self,
        snake: Sequence[Cell],
        food: Cell,
        theme: Theme,
        grid_size: Tuple[int, int]
    ) -> Image.Image:
        """Draw a frame and keep it as last_frame."""
        size = self.frame_size(grid_size)
        background = hex_to_rgb(ColorScheme.BACKGROUND)

        shapes = Image.new('RGB', size, background)
        draw = ImageDraw.Draw(shapes)

        draw.rectangle(self._cell_box(food), fill=hex_to_rgb(theme.food_color))
        body_color = hex_to_rgb(theme.snake_color)
        # Draw tail first so the head ends up on top
        for idx in range(len(snake) - 1, -1, -1):
            color = hex_to_rgb(ColorScheme.HEAD) if idx == 0 else body_color
            draw.rectangle(self._cell_box(snake[idx]), fill=color)

        if self.glow:
            halo = shapes.filter(ImageFilter.GaussianBlur(radius=max(1, self.tile_size // 3)))
            frame = Image.blend(halo, shapes, 0.6)
            # Keep the crisp shapes on top of their blurred halo
            mask = Image.new('L', size, 0)
            mask_draw = ImageDraw.Draw(mask)
            mask_draw.rectangle(self._cell_box(food), fill=255)
            for cell in snake:
                mask_draw.rectangle(self._cell_box(cell), fill=255)
            frame.paste(shapes, (0, 0), mask)
        else:
            frame = shapes

        self.last_frame = frame
        return frame

    def save_frame(self, path: str) -> None:
        if self.last_frame is None:
            raise ValueError("Nothing has been rendered yet.")
        self.last_frame.save(path)
        logger.info(f"Saved frame to {path}")
