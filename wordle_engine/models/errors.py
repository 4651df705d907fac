"""
Error Models

Guess validation errors are user-input errors: callers catch them and
re-prompt. Service errors describe requests against missing or finished games.
"""

from enum import Enum


class InvalidGuessReason(Enum):
    """Why a guess was rejected, with the message shown to the player."""
    NOT_ASCII = "Guess must be exclusively ASCII characters"
    WRONG_LENGTH = "Guess must be exactly 5 letters"
    NOT_A_WORD = "Guess must be a valid word"

    @property
    def message(self) -> str:
        return self.value


class GuessError(ValueError):
    """Base class for a rejected guess."""
    reason: InvalidGuessReason

    def __init__(self, guess: str):
        super().__init__(self.reason.message)
        self.guess = guess

    @classmethod
    def for_reason(cls, reason: InvalidGuessReason, guess: str) -> "GuessError":
        return _BY_REASON[reason](guess)


class IncludesNonAscii(GuessError):
    """The guess contains a character outside ASCII."""
    reason = InvalidGuessReason.NOT_ASCII


class WrongWordLength(GuessError):
    """The guess is not exactly 5 characters long."""
    reason = InvalidGuessReason.WRONG_LENGTH


class InvalidWord(GuessError):
    """The guess is not in the list of acceptable words."""
    reason = InvalidGuessReason.NOT_A_WORD


_BY_REASON = {
    InvalidGuessReason.NOT_ASCII: IncludesNonAscii,
    InvalidGuessReason.WRONG_LENGTH: WrongWordLength,
    InvalidGuessReason.NOT_A_WORD: InvalidWord,
}


class GameServiceError(Exception):
    """Base class for errors raised by the game session service."""


class GameNotFoundError(GameServiceError):
    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id


class GameOverError(GameServiceError):
    def __init__(self, game_id: str):
        super().__init__("Game is already over")
        self.game_id = game_id
