import pytest

from haunted_radio.domain.riddle import GHOST_MORSE_MESSAGE, is_correct_answer, normalize_answer
from haunted_radio.domain.morse import encode_message


@pytest.mark.parametrize(
    "answer",
    ["shadow", "  SHADOW ", "my shadow", "Sombra", "la sombra!"],
)
def test_accepted_answers_match_as_substrings(answer):
    assert is_correct_answer(answer) is True


@pytest.mark.parametrize("answer", [None, "", "   ", "ghost", "shade"])
def test_other_answers_are_rejected(answer):
    assert is_correct_answer(answer) is False


def test_normalize_answer_trims_and_lowers():
    assert normalize_answer("  ShAdOw\n") == "shadow"
    assert normalize_answer(None) == ""


def test_ghost_message_is_fully_encodable():
    letters = GHOST_MORSE_MESSAGE.replace(" ", "")
    assert len(encode_message(GHOST_MORSE_MESSAGE)) == len(letters)
