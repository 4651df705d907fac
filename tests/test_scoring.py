import random
from collections import Counter

import pytest

from wordle_engine.config.game_settings import GOOD_WORDS, VALID_WORDS
from wordle_engine.models.letters import Position
from wordle_engine.services.game_engine import is_win, score_guess

N = Position.NOT_IN_WORD
W = Position.WRONG_POSITION
C = Position.CORRECT


@pytest.mark.parametrize("secret, guess, expected", [
    ("DYSON", "WORDY", [N, W, N, W, W]),
    ("DYSON", "DADDY", [C, N, N, N, W]),
    ("DYSON", "DYSON", [C, C, C, C, C]),
    ("BLEEP", "EERIE", [W, W, N, N, N]),
    ("EERIE", "BLEEP", [N, N, W, W, N]),
    ("TOTAL", "ALLOT", [W, W, N, W, W]),
    ("CABIN", "ABBEY", [W, N, C, N, N]),
    ("SPREE", "PRESS", [W, W, W, W, N]),
])
def test_scenarios(secret, guess, expected):
    result = score_guess(secret, guess)
    assert [letter.classification for letter in result] == expected
    assert "".join(letter.character for letter in result) == guess


def test_duplicates_are_not_scored_independently():
    # A per-letter classifier would mark every D of DADDY as present in DYSON
    result = score_guess("DYSON", "DADDY")
    d_hits = [l for l in result if l.character == "D" and l.classification is not N]
    assert len(d_hits) == 1


def test_earlier_misplaced_copy_claims_the_letter_first():
    # THEME has two Es; the exact match takes one and the leftmost misplaced E the other
    result = score_guess("THEME", "EERIE")
    assert [l.classification for l in result] == [W, N, N, N, C]


def test_lowercase_input_is_normalized():
    assert score_guess("dyson", "wordy") == score_guess("DYSON", "WORDY")


def test_wrong_length_is_rejected():
    with pytest.raises(ValueError):
        score_guess("DYSON", "DYSONS")


def test_is_win():
    assert is_win(score_guess("DYSON", "DYSON"))
    assert not is_win(score_guess("DYSON", "DADDY"))


def _sample_pairs(count=500, seed=2022):
    rng = random.Random(seed)
    guesses = sorted(VALID_WORDS)
    return [(rng.choice(GOOD_WORDS), rng.choice(guesses)) for _ in range(count)]


@pytest.mark.parametrize("secret, guess", _sample_pairs())
def test_scoring_properties(secret, guess):
    result = score_guess(secret, guess)

    assert len(result) == 5

    exact = sum(1 for s, g in zip(secret, guess) if s == g)
    assert sum(1 for l in result if l.classification is C) == exact

    credited = Counter(l.character for l in result if l.classification is not N)
    secret_counts = Counter(secret)
    for character, count in credited.items():
        assert count <= secret_counts[character]

    # Every copy is credited unless the secret has run out of that letter
    guess_counts = Counter(guess)
    for character in guess_counts:
        assert credited[character] == min(guess_counts[character], secret_counts[character])

    assert score_guess(secret, guess) == result
