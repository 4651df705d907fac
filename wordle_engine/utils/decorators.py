"""
Endpoint Decorators

Contains decorators shared by the HTTP controllers.
"""

from functools import wraps
from flask import jsonify, request

from .game_logger import game_logger


def game_required(action: str):
    """
    Decorator for endpoints taking a game_id: answers 500 if the game service
    is not running and 404 if the game does not exist, otherwise calls the
    view with the service as an extra keyword argument.
    """
    def decorator(f):
        @wraps(f)
        def decorated_function(game_id, *args, **kwargs):
            from ..services.game_service import get_game_service

            game_service = get_game_service()
            if not game_service:
                return jsonify({
                    'success': False,
                    'error': 'Game service unavailable'
                }), 500

            if game_id not in game_service.games:
                error_response = {
                    'success': False,
                    'error': 'Game not found'
                }
                game_logger.log_server_response(request, action, False, error_response, game_id)
                return jsonify(error_response), 404

            kwargs['game_service'] = game_service
            return f(game_id, *args, **kwargs)

        return decorated_function
    return decorator
