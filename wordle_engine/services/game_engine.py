"""
Game Engine

Contains the guess scoring algorithm, guess validation and the Game
session entity. Nothing here performs I/O or tracks how many guesses are
left: that policy belongs to the caller (see GameService and the CLI).
"""

import logging
import random
from collections import Counter
from typing import AbstractSet, Dict, Optional, Sequence

from ..config.game_settings import ALPHABET, GOOD_WORDS, MAX_ATTEMPTS, VALID_WORDS, WORD_LENGTH
from ..models.errors import GuessError, InvalidGuessReason
from ..models.letters import Letter, Position, Word, position_rank

logger = logging.getLogger('wordle_game.engine')

Keyboard = Dict[str, Optional[Position]]


def score_guess(secret_word: str, guess: str) -> Word:
    """
    Score a guess against the secret word using the classic Wordle rules.

    A letter in the right place is CORRECT. A letter that is not in the
    secret at all is NOT_IN_WORD. A letter that is in the secret but in the
    wrong place is WRONG_POSITION only while the secret still has unclaimed
    occurrences of it: occurrences matched exactly are claimed first, and the
    remaining ones go to the misplaced copies from left to right. Any
    further copies are NOT_IN_WORD.

    For example, with secret DYSON the guess DADDY scores
    D=CORRECT, A, D, D=NOT_IN_WORD, Y=WRONG_POSITION.

    The guess is expected to have passed validate_guess already.

    Raises:
        ValueError: If either word is not WORD_LENGTH characters long
        AssertionError: If the letter accounting goes negative (a logic defect)
    """
    secret_word = secret_word.upper()
    guess = guess.upper()
    if len(secret_word) != WORD_LENGTH or len(guess) != WORD_LENGTH:
        raise ValueError(f"secret word and guess must both be {WORD_LENGTH} letters")

    # First pass: everything decidable from a single position
    known = [Letter.check_pair(g, s, secret_word) for g, s in zip(guess, secret_word)]

    total_in_secret = Counter(secret_word)
    confirmed_correct = Counter(
        letter.character for letter in known
        if letter is not None and letter.classification is Position.CORRECT
    )

    remaining_capacity = {}
    for char, total in total_in_secret.items():
        capacity = total - confirmed_correct[char]
        if capacity < 0:
            raise AssertionError(
                f"{char!r} confirmed correct {confirmed_correct[char]} times "
                f"but occurs only {total} times in the secret word"
            )
        remaining_capacity[char] = capacity

    # Second pass: deferred letters claim what is left, earliest position first
    result = []
    for char, letter in zip(guess, known):
        if letter is None:
            if remaining_capacity[char] > 0:
                remaining_capacity[char] -= 1
                letter = Letter(char, Position.WRONG_POSITION)
            else:
                letter = Letter(char, Position.NOT_IN_WORD)
        result.append(letter)

    return tuple(result)


def validate_guess(raw_text: str, valid_words: AbstractSet[str] = VALID_WORDS) -> None:
    """
    Check that a guess can be scored.

    The guess is uppercased first, so validation is case-insensitive. Checks
    run in a fixed order so the player sees the most precise message: ASCII
    first, then length, then word list membership.

    Raises:
        IncludesNonAscii: If the guess contains non-ASCII characters
        WrongWordLength: If the guess is not exactly WORD_LENGTH characters
        InvalidWord: If the guess is not in the acceptable word list
    """
    # str.upper can fold some non-ASCII letters into ASCII ones ('ß' -> 'SS')
    if not raw_text.isascii():
        raise GuessError.for_reason(InvalidGuessReason.NOT_ASCII, raw_text)

    guess = raw_text.upper()
    if len(guess) != WORD_LENGTH:
        raise GuessError.for_reason(InvalidGuessReason.WRONG_LENGTH, raw_text)
    if guess not in valid_words:
        raise GuessError.for_reason(InvalidGuessReason.NOT_A_WORD, raw_text)


def is_valid_guess(raw_text: str, valid_words: AbstractSet[str] = VALID_WORDS) -> bool:
    """Boolean form of validate_guess, for live validation while typing."""
    try:
        validate_guess(raw_text, valid_words)
    except GuessError:
        return False
    return True


def is_win(word: Word) -> bool:
    """True if every letter of a scored guess is CORRECT."""
    return len(word) == WORD_LENGTH and all(
        letter.classification is Position.CORRECT for letter in word
    )


class Game:
    """
    A single game of Wordle.

    Attributes:
        secret_word: The uppercase word the player is trying to guess
        keyboard: Every letter A-Z mapped to the best position it has been
            seen in so far, or None if it has not been guessed yet
        remaining_attempts: Guesses left. Starts at MAX_ATTEMPTS and is
            decremented by the caller; make_guess never touches it
    """

    def __init__(self, secret_word: str, valid_words: AbstractSet[str] = VALID_WORDS):
        secret_word = secret_word.upper()
        if len(secret_word) != WORD_LENGTH or not all('A' <= c <= 'Z' for c in secret_word):
            raise ValueError(f"Secret word must be {WORD_LENGTH} ASCII letters, got {secret_word!r}")

        self._secret_word = secret_word
        self.valid_words = valid_words
        self.keyboard: Keyboard = self.new_keyboard_map()
        self.remaining_attempts = MAX_ATTEMPTS

    @classmethod
    def new(cls, rng: Optional[random.Random] = None,
            good_words: Sequence[str] = GOOD_WORDS,
            valid_words: AbstractSet[str] = VALID_WORDS) -> "Game":
        """
        Create a game with a secret word chosen uniformly from good_words.

        Args:
            rng: Random source to draw from; the module-level random is used if None
        """
        if not good_words:
            raise ValueError("good_words should never be empty")
        chooser = rng if rng is not None else random
        game = cls(chooser.choice(good_words), valid_words=valid_words)
        logger.debug("New game created with secret word %s", game.secret_word)
        return game

    @property
    def secret_word(self) -> str:
        return self._secret_word

    @staticmethod
    def new_keyboard_map() -> Keyboard:
        """A keyboard map with every letter A-Z unknown."""
        return {letter: None for letter in ALPHABET}

    def validate_guess(self, raw_text: str) -> None:
        validate_guess(raw_text, self.valid_words)

    def make_guess(self, raw_text: str) -> Word:
        """
        Validate and score a guess, then fold the result into the keyboard.

        If the guess is invalid nothing is changed.

        Raises:
            GuessError: The matching subclass if the guess is invalid
        """
        self.validate_guess(raw_text)

        word = score_guess(self._secret_word, raw_text)
        self.update_keyboard(word)

        logger.debug("Scored guess %s: %s", raw_text.upper(),
                     [letter.classification.value for letter in word])
        return word

    def update_keyboard(self, word: Word) -> None:
        """Record each letter's position if it is better than what was seen before."""
        for letter in word:
            current = self.keyboard[letter.character]
            if position_rank(letter.classification) > position_rank(current):
                self.keyboard[letter.character] = letter.classification

    def __repr__(self):
        return f"{type(self).__name__}(remaining_attempts={self.remaining_attempts})"


def new_game(rng: Optional[random.Random] = None) -> Game:
    """Start a game with a random secret word."""
    return Game.new(rng)


def make_guess(game: Game, raw_text: str) -> Word:
    """Submit a guess to a game. See Game.make_guess."""
    return game.make_guess(raw_text)
