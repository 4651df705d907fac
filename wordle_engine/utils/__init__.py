"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import game_required
from .helpers import get_user_identity
from .game_logger import game_logger

__all__ = ['game_required', 'get_user_identity', 'game_logger']
