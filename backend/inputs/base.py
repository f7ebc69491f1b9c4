"""
Base input source interface for the game engine.
"""

from typing import Any


class InputSource:
    """
    Base class/interface for input translation.

    Each input source turns raw device events into heading requests and
    forwards them to the engine's request_heading(), which is the only way
    input may affect a run.
    """

    def __init__(self, engine: Any):
        self.engine = engine

    def dispatch(self, heading: Any) -> bool:
        """
        Forward a heading request to the engine.

        Returns:
            True if the engine accepted it as the new pending heading
        """
        if heading is None:
            return False
        return self.engine.request_heading(heading)
