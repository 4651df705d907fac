"""
Letter Data Models

Contains the per-letter verdict enum and the scored letter value type.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import Optional, Tuple


@total_ordering
class Position(Enum):
    """
    Verdict for a single guessed letter.

    Members are ordered by how much they tell the player:
    NOT_IN_WORD < WRONG_POSITION < CORRECT.
    """
    NOT_IN_WORD = "NOT_IN_WORD"
    WRONG_POSITION = "WRONG_POSITION"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.rank < other.rank


_RANKS = {
    Position.NOT_IN_WORD: 1,
    Position.WRONG_POSITION: 2,
    Position.CORRECT: 3,
}


def position_rank(position: Optional[Position]) -> int:
    """Rank of a keyboard slot, where an unknown slot (None) ranks lowest."""
    return 0 if position is None else position.rank


def classify_known(guessed_char: str, secret_char: str, secret_word: str) -> Optional[Position]:
    """
    Classify a letter when that can be done without looking at the rest of the guess.

    Returns CORRECT if the letter matches the secret at this position and
    NOT_IN_WORD if the secret does not contain the letter at all. Otherwise
    returns None: the letter is either WRONG_POSITION or NOT_IN_WORD depending
    on how many of its occurrences the rest of the guess has already claimed.

    Comparison is case-sensitive; callers uppercase both sides first.
    """
    if guessed_char == secret_char:
        return Position.CORRECT
    if guessed_char not in secret_word:
        return Position.NOT_IN_WORD
    return None


@dataclass(frozen=True)
class Letter:
    """One scored character of a guess."""
    character: str
    classification: Position

    def __post_init__(self):
        character = self.character.upper()
        if len(character) != 1 or not ('A' <= character <= 'Z'):
            raise ValueError(f"Letter must be a single ASCII letter, got {self.character!r}")
        object.__setattr__(self, 'character', character)

    @classmethod
    def check_pair(cls, guessed_char: str, secret_char: str, secret_word: str) -> Optional["Letter"]:
        """Return the Letter for this position, or None if it needs whole-guess context."""
        position = classify_known(guessed_char, secret_char, secret_word)
        if position is None:
            return None
        return cls(guessed_char, position)

    def to_pair(self) -> Tuple[str, str]:
        """JSON friendly (letter, position) pair."""
        return self.character, self.classification.value


Word = Tuple[Letter, ...]
"""A scored guess: exactly WORD_LENGTH letters, in guess order."""
