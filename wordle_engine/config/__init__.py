"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and word lists (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    ALPHABET, GOOD_WORDS, MAX_ATTEMPTS, VALID_WORDS, WORD_LENGTH,
    get_word_statistics, validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'ALPHABET', 'GOOD_WORDS', 'MAX_ATTEMPTS', 'VALID_WORDS', 'WORD_LENGTH',
    'validate_word_list_integrity', 'get_word_statistics'
]
