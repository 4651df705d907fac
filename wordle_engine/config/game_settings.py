"""
Game Rules and Word List Module

This module defines the fixed rules of the game and loads the two static
word lists the engine depends on:

- VALID_WORDS: every word accepted as a guess
- GOOD_WORDS: the curated subset eligible to be chosen as the secret word

Both lists ship as JSON arrays next to this module and are validated on import.
"""

import json
import os
import string
from typing import Final, FrozenSet, List, Optional, Tuple

# Core Game Configuration Constants
WORD_LENGTH: Final[int] = 5
"""Number of letters in every secret word and every guess."""

MAX_ATTEMPTS: Final[int] = 6
"""
Number of guesses a player gets per game.
Tracked by the caller, never by the engine itself.
"""

ALPHABET: Final[Tuple[str, ...]] = tuple(string.ascii_uppercase)
"""The 26 keys of the keyboard map."""


def _load_word_list(file_name: str, config_dir: Optional[str] = None) -> List[str]:
    """
    Load a word list from a JSON file, by default the one next to this module.

    Returns:
        List[str]: List of uppercase 5-letter words

    Raises:
        FileNotFoundError: If the JSON file is not found
        ValueError: If the JSON is malformed, the list is empty or contains invalid words
    """
    config_dir = config_dir or os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, file_name)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {file_name}: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError(f"{file_name} must contain an array of words")

    if not word_list:
        raise ValueError(f"Word list {file_name} cannot be empty")

    for index, word in enumerate(word_list):
        if not isinstance(word, str):
            raise ValueError(f"Entry at index {index} in {file_name} is not a string: {word!r}")

    uppercase_words = [word.upper() for word in word_list]

    for word in uppercase_words:
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word '{word}' in {file_name} is not {WORD_LENGTH} characters long")
        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word '{word}' in {file_name} contains non-ASCII-letter characters")

    return uppercase_words


GOOD_WORDS: Final[Tuple[str, ...]] = tuple(_load_word_list('good_words.json'))
VALID_WORDS: Final[FrozenSet[str]] = frozenset(_load_word_list('valid_words.json'))


def validate_word_list_integrity(good_words=GOOD_WORDS, valid_words=VALID_WORDS) -> bool:
    """
    Validates the integrity and consistency of the word lists.

    This function checks that:
    1. Neither list is empty
    2. Every word is exactly WORD_LENGTH uppercase ASCII letters
    3. The secret-eligible list has no duplicates
    4. Every secret-eligible word is also an acceptable guess

    Returns:
        bool: True if both lists pass all validation checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    if not good_words:
        raise ValueError("Secret word list cannot be empty")
    if not valid_words:
        raise ValueError("Valid word list cannot be empty")

    for index, word in enumerate(good_words):
        if len(word) != WORD_LENGTH:
            raise ValueError(f"Word at index {index} '{word}' is not {WORD_LENGTH} characters long")

        if not (word.isascii() and word.isalpha()):
            raise ValueError(f"Word at index {index} '{word}' contains non-ASCII-letter characters")

        if not word.isupper():
            raise ValueError(f"Word at index {index} '{word}' is not in uppercase format")

    if len(good_words) != len(set(good_words)):
        duplicates = sorted({word for word in good_words if good_words.count(word) > 1})
        raise ValueError(f"Duplicate words found in secret word list: {duplicates}")

    missing = sorted(set(good_words) - set(valid_words))
    if missing:
        raise ValueError(f"Secret words missing from the valid word list: {missing}")

    return True


def get_word_statistics() -> dict:
    """
    Summarizes the secret word list.

    Returns:
        dict: total_words, total_valid_words, avg_vowel_count,
        letter_frequency and most_common_letters
    """
    vowels = set('AEIOU')
    total_vowels = sum(len([char for char in word if char in vowels]) for word in GOOD_WORDS)

    letter_frequency = {}
    for word in GOOD_WORDS:
        for char in word:
            letter_frequency[char] = letter_frequency.get(char, 0) + 1

    return {
        "total_words": len(GOOD_WORDS),
        "total_valid_words": len(VALID_WORDS),
        "avg_vowel_count": round(total_vowels / len(GOOD_WORDS), 2),
        "letter_frequency": letter_frequency,
        "most_common_letters": sorted(letter_frequency.items(), key=lambda x: x[1], reverse=True)[:5]
    }


validate_word_list_integrity()


if __name__ == "__main__":
    print(f" Word lists loaded: {len(GOOD_WORDS)} secret words, {len(VALID_WORDS)} valid guesses")
    print(f" Game statistics: {get_word_statistics()}")
