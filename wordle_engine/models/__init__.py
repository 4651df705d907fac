"""
Data Models Package

Contains all data models and error types used throughout the application.
"""

from .errors import (
    GameNotFoundError, GameOverError, GameServiceError, GuessError,
    IncludesNonAscii, InvalidGuessReason, InvalidWord, WrongWordLength,
)
from .game import GameState
from .letters import Letter, Position, Word, classify_known, position_rank

__all__ = [
    'GameState', 'Letter', 'Position', 'Word', 'classify_known', 'position_rank',
    'GuessError', 'IncludesNonAscii', 'InvalidGuessReason', 'InvalidWord', 'WrongWordLength',
    'GameServiceError', 'GameNotFoundError', 'GameOverError'
]
