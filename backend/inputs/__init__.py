"""
Input sources for NeonSnake.

Input sources translate device events into heading requests; they never
touch the snake directly.
"""

from .base import InputSource
from .keyboard import KeyboardInput, KEY_BINDINGS, heading_for_key
from .swipe import SwipeInput, heading_from_vector

__all__ = [
    'InputSource',
    'KeyboardInput',
    'KEY_BINDINGS',
    'heading_for_key',
    'SwipeInput',
    'heading_from_vector',
]
