"""
Data access layer for NeonSnake persistence.

This module provides the SQLite-backed store behind the high score ledger.
"""

from .repositories import BaseRepository, HighScoreRepository

__all__ = [
    'BaseRepository',
    'HighScoreRepository',
]
