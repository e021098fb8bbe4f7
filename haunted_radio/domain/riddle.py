"""Riddle gate that unlocks the ghost channel."""
from __future__ import annotations

RIDDLE_TITLE = "Ghostly Riddle"
RIDDLE_PROMPT = (
    "A ghostly voice whispers:\n"
    "\"I follow you all day but never make a sound.\n"
    "I grow long at dusk and vanish when the lights go out.\n"
    "What am I?\""
)
ACCEPTED_ANSWERS = ("shadow", "sombra")

GHOST_TRANSLATION = "That's an A plus"
# Apostrophes have no Morse entry, so the keyed message drops it.
GHOST_MORSE_MESSAGE = "THATS AN A PLUS"


def normalize_answer(answer: str | None) -> str:
    return "" if answer is None else str(answer).strip().lower()


def is_correct_answer(answer: str | None) -> bool:
    """Return True when any accepted answer appears inside the user's reply."""
    normalized = normalize_answer(answer)
    if not normalized:
        return False
    return any(accepted in normalized for accepted in ACCEPTED_ANSWERS)
