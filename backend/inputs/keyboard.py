"""
Keyboard input - arrow keys and WASD.
"""

from typing import Dict, Optional

from domain.constants import UP, DOWN, LEFT, RIGHT, Heading
from .base import InputSource

KEY_BINDINGS: Dict[str, Heading] = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
    "arrowup": UP,
    "arrowdown": DOWN,
    "arrowleft": LEFT,
    "arrowright": RIGHT,
    "w": UP,
    "s": DOWN,
    "a": LEFT,
    "d": RIGHT,
}


def heading_for_key(key_name: str) -> Optional[Heading]:
    return KEY_BINDINGS.get((key_name or "").strip().lower())


class KeyboardInput(InputSource):
    """Maps key names (as reported by pygame.key.name or a browser) to headings."""

    def handle_key(self, key_name: str) -> bool:
        return self.dispatch(heading_for_key(key_name))
