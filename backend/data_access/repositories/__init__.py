"""
Repository classes for database access.
"""

from .base import BaseRepository
from .high_score_repository import HighScoreRepository

__all__ = [
    'BaseRepository',
    'HighScoreRepository',
]
