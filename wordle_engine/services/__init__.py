"""
Services Package

Contains the game engine and the session service built on it.
"""

from .game_engine import (
    Game, is_valid_guess, is_win, make_guess, new_game, score_guess, validate_guess,
)
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'Game', 'is_valid_guess', 'is_win', 'make_guess', 'new_game', 'score_guess', 'validate_guess',
    'GameService', 'get_game_service', 'initialize_game_service'
]
