"""
Wordle Engine

The backend of a standard Wordle game: scoring guesses with the classic
repeated-letter rule, validating guesses against the word list, and keeping
the best-seen keyboard state for a game. Also ships a Flask API hosting
games and a terminal client.

Typical use:

    game = new_game()
    letters = make_guess(game, "crane")
    if is_win(letters):
        ...
"""

from flask import Flask
from flask_cors import CORS

from .config import Config
from .models import (
    GuessError, IncludesNonAscii, InvalidGuessReason, InvalidWord, Letter, Position, Word,
    WrongWordLength, classify_known,
)
from .services.game_engine import (
    Game, is_valid_guess, is_win, make_guess, new_game, score_guess, validate_guess,
)

__all__ = [
    'create_app',
    'Game', 'new_game', 'make_guess', 'validate_guess', 'is_valid_guess', 'is_win', 'score_guess',
    'Letter', 'Position', 'Word', 'classify_known',
    'GuessError', 'InvalidGuessReason', 'IncludesNonAscii', 'WrongWordLength', 'InvalidWord'
]


def create_app(config_class=Config):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use

    Returns:
        Flask application instance with all extensions initialized
    """
    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)

    # Register blueprints
    from .controllers.game_controller import game_bp

    app.register_blueprint(game_bp, url_prefix='/api')

    return app
