"""Morse encoding, timing and tone synthesis."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

from ..constants import (
    MORSE_DASH_MS,
    MORSE_DOT_MS,
    MORSE_LETTER_GAP_MS,
    MORSE_SAMPLE_RATE,
    MORSE_SYMBOL_GAP_MS,
    MORSE_TONE_HZ,
    MORSE_WORD_GAP_MS,
)

MORSE_TABLE: dict[str, str] = {
    "A": ".-",
    "B": "-...",
    "C": "-.-.",
    "D": "-..",
    "E": ".",
    "F": "..-.",
    "G": "--.",
    "H": "....",
    "I": "..",
    "J": ".---",
    "K": "-.-",
    "L": ".-..",
    "M": "--",
    "N": "-.",
    "O": "---",
    "P": ".--.",
    "Q": "--.-",
    "R": ".-.",
    "S": "...",
    "T": "-",
    "U": "..-",
    "V": "...-",
    "W": ".--",
    "X": "-..-",
    "Y": "-.--",
    "Z": "--..",
    "0": "-----",
    "1": ".----",
    "2": "..---",
    "3": "...--",
    "4": "....-",
    "5": ".....",
    "6": "-....",
    "7": "--...",
    "8": "---..",
    "9": "----.",
}

SYMBOL_DURATIONS_MS = {".": MORSE_DOT_MS, "-": MORSE_DASH_MS}

TONE = "tone"
GAP = "gap"


@dataclass(frozen=True)
class MorseEvent:
    kind: str
    millis: int
    symbol: str = ""


def encode_message(text: str) -> list[str]:
    """Return the dot/dash code of each encodable character, skipping everything else."""
    codes: list[str] = []
    for char in str(text or "").upper():
        code = MORSE_TABLE.get(char)
        if code is not None:
            codes.append(code)
    return codes


def format_morse(text: str) -> str:
    """Render text as Morse: letters separated by one space, words by three."""
    words = []
    for word in str(text or "").upper().split():
        codes = encode_message(word)
        if codes:
            words.append(" ".join(codes))
    return "   ".join(words)


def build_timeline(text: str) -> list[MorseEvent]:
    """Expand text into the ordered tone and gap events that make up its playback.

    Symbol gaps sit only between the symbols of one letter; every encoded
    letter is followed by a letter gap and every space adds a word gap.
    """
    events: list[MorseEvent] = []
    for char in str(text or "").upper():
        if char == " ":
            events.append(MorseEvent(GAP, MORSE_WORD_GAP_MS))
            continue
        code = MORSE_TABLE.get(char)
        if code is None:
            continue
        for index, symbol in enumerate(code):
            if index:
                events.append(MorseEvent(GAP, MORSE_SYMBOL_GAP_MS))
            events.append(MorseEvent(TONE, SYMBOL_DURATIONS_MS[symbol], symbol))
        events.append(MorseEvent(GAP, MORSE_LETTER_GAP_MS))
    return events


def timeline_duration_ms(events: Iterable[MorseEvent]) -> int:
    return sum(int(event.millis) for event in events)


def tone_samples(
    duration_ms: int,
    *,
    frequency: float = MORSE_TONE_HZ,
    sample_rate: int = MORSE_SAMPLE_RATE,
) -> np.ndarray:
    """Signed 8-bit mono sine burst; sample i is round(sin(i / (rate / freq)) * 127)."""
    count = max(0, int(duration_ms * sample_rate / 1000))
    index = np.arange(count, dtype=np.float64)
    wave = np.sin(index / (float(sample_rate) / float(frequency))) * 127.0
    return np.rint(wave).astype(np.int8)
