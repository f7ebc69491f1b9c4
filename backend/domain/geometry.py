"""
Grid geometry: playable tile counts for a pixel viewport.
"""

from typing import Tuple

from .constants import MIN_TILE_COUNT


def compute_grid(viewport_width: int, viewport_height: int, tile_size: int) -> Tuple[int, int]:
    """
    Compute the playable grid for a viewport.

    Args:
        viewport_width: available width in pixels
        viewport_height: available height in pixels
        tile_size: edge length of one tile in pixels

    Returns:
        (tile_count_x, tile_count_y), each at least MIN_TILE_COUNT so that a
        tiny or zero-sized viewport still yields a playable board.
    """
    if tile_size <= 0:
        raise ValueError(f"tile_size must be positive, got {tile_size}")
    tiles_x = max(MIN_TILE_COUNT, int(viewport_width) // tile_size)
    tiles_y = max(MIN_TILE_COUNT, int(viewport_height) // tile_size)
    return tiles_x, tiles_y
