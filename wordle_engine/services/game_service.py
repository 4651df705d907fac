"""
Game Service

Hosts game sessions for the HTTP API. The engine leaves the attempts
counter and win/loss detection to its caller; this service is that caller.
"""

import logging
import random
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Tuple

from ..config.game_settings import MAX_ATTEMPTS
from ..models.errors import GameNotFoundError, GameOverError, GuessError
from ..models.game import GameState
from ..models.letters import Word
from .game_engine import Game, is_win

logger = logging.getLogger('wordle_game.service')

GAME_TTL_SECONDS = 24 * 60 * 60
FINISHED_GAME_TTL_SECONDS = 5 * 60


@dataclass
class GameSession:
    """One hosted game plus the bookkeeping the engine does not do."""
    game: Game
    max_rounds: int
    guesses: List[str] = field(default_factory=list)
    results: List[Word] = field(default_factory=list)
    won: bool = False
    game_over: bool = False
    created_at: float = field(default_factory=time.time)
    finished_at: Optional[float] = None
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Secret word selection, kept on the server until the game ends
    - Attempt counting and win/loss detection
    - Serializing guesses per session, since Game itself is not thread-safe
    - Dropping sessions that are too old, or finished and no longer polled
    """

    def __init__(self, max_attempts: int = MAX_ATTEMPTS, seed: Optional[int] = None,
                 game_ttl_seconds: float = GAME_TTL_SECONDS,
                 finished_game_ttl_seconds: float = FINISHED_GAME_TTL_SECONDS,
                 clock: Callable[[], float] = time.time):
        self.games: Dict[str, GameSession] = {}
        self.max_attempts = max_attempts
        self.game_ttl_seconds = game_ttl_seconds
        self.finished_game_ttl_seconds = finished_game_ttl_seconds
        self._clock = clock
        self._rng = random.Random(seed)
        self._rng_lock = threading.Lock()

    def create_new_game(self) -> str:
        """
        Creates a new game session with a randomly selected word.

        Returns:
            str: Unique game ID for this session
        """
        self.sweep_expired_games()

        game_id = str(uuid.uuid4())

        with self._rng_lock:
            game = Game.new(self._rng)
        game.remaining_attempts = self.max_attempts

        self.games[game_id] = GameSession(game=game, max_rounds=self.max_attempts, created_at=self._clock())
        return game_id

    def sweep_expired_games(self) -> int:
        """
        Removes sessions older than game_ttl_seconds, and finished sessions
        whose game ended more than finished_game_ttl_seconds ago.

        Returns:
            int: Number of sessions removed
        """
        now = self._clock()
        expired = [
            game_id for game_id, session in list(self.games.items())
            if now - session.created_at >= self.game_ttl_seconds
            or (session.finished_at is not None and now - session.finished_at >= self.finished_game_ttl_seconds)
        ]

        for game_id in expired:
            self.games.pop(game_id, None)

        if expired:
            logger.info(f"Swept {len(expired)} expired game sessions, {len(self.games)} remaining")
        return len(expired)

    def _get_session(self, game_id: str) -> GameSession:
        session = self.games.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session (without revealing the answer).

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        session = self.games.get(game_id)
        if session is None:
            return None

        with session.lock:
            return self._snapshot(game_id, session)

    def _snapshot(self, game_id: str, session: GameSession) -> GameState:
        game = session.game
        return GameState(
            game_id=game_id,
            current_round=len(session.guesses),
            max_rounds=session.max_rounds,
            remaining_attempts=game.remaining_attempts,
            game_over=session.game_over,
            won=session.won,
            guesses=list(session.guesses),
            guess_results=[[letter.to_pair() for letter in word] for word in session.results],
            keyboard={letter: (position.value if position is not None else None)
                      for letter, position in game.keyboard.items()},
            answer=game.secret_word if session.game_over else None,
        )

    def is_valid_guess(self, game_id: str, guess: str) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        session = self.games.get(game_id)
        if session is None:
            return False, "Game not found"

        if session.game_over:
            return False, "Game is already over"

        if not guess or not isinstance(guess, str):
            return False, "Guess must be a valid string"

        try:
            session.game.validate_guess(guess.strip())
        except GuessError as e:
            return False, str(e)

        return True, ""

    def make_guess(self, game_id: str, guess: str) -> GameState:
        """
        Processes a guess and updates game state.

        Args:
            game_id: Unique game identifier
            guess: The 5-letter word guess

        Returns:
            Updated GameState

        Raises:
            GameNotFoundError: If there is no such game
            GameOverError: If the game has already been won or lost
            GuessError: If the guess is invalid; the game is left unchanged
        """
        session = self._get_session(game_id)

        with session.lock:
            if session.game_over:
                raise GameOverError(game_id)

            game = session.game
            normalized_guess = guess.strip()
            word = game.make_guess(normalized_guess)

            game.remaining_attempts -= 1
            session.guesses.append(normalized_guess.upper())
            session.results.append(word)

            if is_win(word):
                session.won = True
                session.game_over = True
            elif game.remaining_attempts <= 0:
                session.game_over = True

            if session.game_over:
                session.finished_at = self._clock()

            return self._snapshot(game_id, session)

    def delete_game(self, game_id: str) -> bool:
        """Delete a game session. Returns False if it did not exist."""
        return self.games.pop(game_id, None) is not None

    def active_game_count(self) -> int:
        return sum(1 for session in list(self.games.values()) if not session.game_over)


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(max_attempts: int = MAX_ATTEMPTS, seed: Optional[int] = None,
                            game_ttl_seconds: float = GAME_TTL_SECONDS,
                            finished_game_ttl_seconds: float = FINISHED_GAME_TTL_SECONDS) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(max_attempts=max_attempts, seed=seed,
                                game_ttl_seconds=game_ttl_seconds,
                                finished_game_ttl_seconds=finished_game_ttl_seconds)
    return _game_service
