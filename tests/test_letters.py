import pytest

from wordle_engine.models.letters import Letter, Position, classify_known, position_rank


def test_positions_are_ordered_by_informativeness():
    assert Position.NOT_IN_WORD < Position.WRONG_POSITION < Position.CORRECT
    assert max(Position) is Position.CORRECT
    assert sorted([Position.CORRECT, Position.NOT_IN_WORD, Position.WRONG_POSITION]) == [
        Position.NOT_IN_WORD, Position.WRONG_POSITION, Position.CORRECT,
    ]


def test_unknown_slot_ranks_below_every_position():
    assert position_rank(None) < min(position_rank(p) for p in Position)


def test_letter_is_uppercased():
    letter = Letter("w", Position.NOT_IN_WORD)
    assert letter.character == "W"
    assert letter == Letter("W", Position.NOT_IN_WORD)


@pytest.mark.parametrize("character", ["", "AB", "1", "Ö", " "])
def test_letter_rejects_non_letters(character):
    with pytest.raises(ValueError):
        Letter(character, Position.CORRECT)


def test_letter_is_immutable():
    letter = Letter("A", Position.CORRECT)
    with pytest.raises(AttributeError):
        letter.character = "B"


def test_classify_known():
    assert classify_known("D", "D", "DYSON") is Position.CORRECT
    assert classify_known("A", "Y", "DYSON") is Position.NOT_IN_WORD
    # In the word but elsewhere: needs the rest of the guess to decide
    assert classify_known("Y", "N", "DYSON") is None


def test_classify_known_is_case_sensitive():
    assert classify_known("d", "D", "DYSON") is Position.NOT_IN_WORD


def test_check_pair():
    assert Letter.check_pair("D", "D", "DYSON") == Letter("D", Position.CORRECT)
    assert Letter.check_pair("Z", "D", "DYSON") == Letter("Z", Position.NOT_IN_WORD)
    assert Letter.check_pair("O", "D", "DYSON") is None


def test_to_pair():
    assert Letter("e", Position.WRONG_POSITION).to_pair() == ("E", "WRONG_POSITION")
