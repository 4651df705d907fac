"""
Game Logger Module

Structured JSON logging for the game API. Every entry is one line on the
``wordle_game`` logger, and the logger keeps running counts of what it has
written so the health endpoint can report them without touching the log file.
"""

import json
import logging
import threading
from collections import Counter
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

from ..config.app_config import Config
from .helpers import get_user_identity

USER_ACTION = 'USER_ACTION'
RESPONSE_SUCCESS = 'SERVER_RESPONSE_SUCCESS'
RESPONSE_ERROR = 'SERVER_RESPONSE_ERROR'
GAME_EVENT = 'GAME_EVENT'
ERROR = 'ERROR'

_STAT_KEYS = {
    USER_ACTION: 'user_actions',
    RESPONSE_SUCCESS: 'server_responses',
    RESPONSE_ERROR: 'server_responses',
    GAME_EVENT: 'game_events',
    ERROR: 'errors',
}


class GameLogger:
    """
    Logs player actions, API responses, game events and errors for the game API.

    The log file is chosen once, when the logger is set up, and stays the
    same for the life of the process.
    """

    def __init__(self, log_dir: str = "logs", to_file: bool = True, level: str = "INFO"):
        self.log_dir = Path(log_dir)
        self.to_file = to_file
        self.level = logging.getLevelName(level.upper()) if isinstance(level, str) else level
        if not isinstance(self.level, int):
            self.level = logging.INFO

        self.started_at = datetime.now()
        self.log_file: Optional[Path] = (
            self.log_dir / f"wordle_server_{self.started_at.strftime('%Y-%m-%d')}.log" if to_file else None
        )

        self._counts: Counter = Counter()
        self._counts_lock = threading.Lock()

        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        logger = logging.getLogger('wordle_game')
        logger.setLevel(self.level)

        # Prevent duplicate handlers
        if logger.handlers:
            logger.handlers.clear()

        if self.log_file is not None:
            self.log_dir.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setLevel(self.level)
            file_handler.setFormatter(logging.Formatter(
                '%(asctime)s | %(levelname)s | %(message)s',
                datefmt='%Y-%m-%d %H:%M:%S'
            ))
            logger.addHandler(file_handler)

        # Console only shows warnings and errors
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(logging.Formatter('%(levelname)s: %(message)s'))
        logger.addHandler(console_handler)

        return logger

    def _emit(self,
              event_type: str,
              action: str,
              user_info: Dict[str, str],
              details: Dict[str, Any],
              level: int = logging.INFO,
              exc_info: Optional[BaseException] = None):
        """Write one JSON entry and count it."""
        entry = json.dumps({
            'timestamp': datetime.now().isoformat(),
            'event_type': event_type,
            'action': action,
            'user': user_info,
            'details': details
        }, ensure_ascii=False, default=str)

        with self._counts_lock:
            self._counts[_STAT_KEYS[event_type]] += 1
            self._counts['total_entries'] += 1
            if event_type == GAME_EVENT:
                self._counts[f'event_{action}'] += 1

        self.logger.log(level, entry, exc_info=exc_info)

    def log_user_action(self, request, action: str, game_id: Optional[str] = None, **kwargs):
        """
        Log an incoming player request.

        Args:
            request: Flask request object
            action: e.g. 'new_game', 'submit_guess', 'get_state'
            game_id: Game identifier if applicable
            **kwargs: Additional details to log
        """
        details = {
            'game_id': game_id,
            'endpoint': request.endpoint,
            'method': request.method,
            **kwargs
        }
        self._emit(USER_ACTION, action, get_user_identity(request), details)

    def log_server_response(self,
                            request,
                            action: str,
                            success: bool,
                            response_data: Dict[str, Any],
                            game_id: Optional[str] = None,
                            **kwargs):
        """Log the response sent for an action. Failed responses are logged as warnings."""
        details = {
            'game_id': game_id,
            'success': success,
            'response_data': self._sanitize_response_data(response_data),
            **kwargs
        }

        if success:
            self._emit(RESPONSE_SUCCESS, action, get_user_identity(request), details)
        else:
            self._emit(RESPONSE_ERROR, action, get_user_identity(request), details, logging.WARNING)

    def log_game_event(self, game_id: str, event: str, user_ip: str, **kwargs):
        """Log a game outcome such as 'game_won', 'game_lost' or 'game_deleted'."""
        self._emit(GAME_EVENT, event, {'user_ip': user_ip}, {'game_id': game_id, **kwargs})

    def log_error(self, request, error: Exception, action: str, game_id: Optional[str] = None):
        """Log an unexpected exception with its traceback."""
        details = {
            'game_id': game_id,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self._emit(ERROR, action, get_user_identity(request), details, logging.ERROR, exc_info=error)

    def _sanitize_response_data(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Keep answers and full boards out of the logs."""
        if not isinstance(data, dict):
            return {'data_type': type(data).__name__}

        sanitized = data.copy()

        if 'state' in sanitized and isinstance(sanitized['state'], dict):
            state = sanitized['state']
            sanitized['state'] = {
                'current_round': state.get('current_round'),
                'remaining_attempts': state.get('remaining_attempts'),
                'game_over': state.get('game_over'),
                'won': state.get('won'),
                'answer_revealed': state.get('answer') is not None
            }

        return sanitized

    def get_log_stats(self) -> Dict[str, Any]:
        """Counts of entries logged since startup, by kind."""
        with self._counts_lock:
            counts = dict(self._counts)

        stats = {
            'log_file': str(self.log_file) if self.log_file is not None else None,
            'since': self.started_at.isoformat(),
            'total_entries': counts.pop('total_entries', 0),
        }
        for key in ('user_actions', 'server_responses', 'game_events', 'errors'):
            stats[key] = counts.pop(key, 0)
        stats['game_outcomes'] = {key[len('event_'):]: value for key, value in counts.items()}

        return stats


# Global logger instance
game_logger = GameLogger(log_dir=Config.LOG_DIR, to_file=Config.LOG_TO_FILE, level=Config.LOG_LEVEL)
