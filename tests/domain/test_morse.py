import math

import numpy as np

from haunted_radio.domain.morse import (
    GAP,
    MORSE_TABLE,
    TONE,
    MorseEvent,
    build_timeline,
    encode_message,
    format_morse,
    timeline_duration_ms,
    tone_samples,
)


def test_single_letter_timeline_has_gaps_only_between_symbols():
    events = build_timeline("A")

    assert events == [
        MorseEvent(TONE, 200, "."),
        MorseEvent(GAP, 150),
        MorseEvent(TONE, 600, "-"),
        MorseEvent(GAP, 300),
    ]
    assert timeline_duration_ms(events) == 1250


def test_timeline_durations_are_additive_over_words():
    single_e = timeline_duration_ms(build_timeline("E"))
    assert single_e == 200 + 300

    assert timeline_duration_ms(build_timeline("E E")) == single_e * 2 + 700
    s_letter = 3 * 200 + 2 * 150 + 300
    o_letter = 3 * 600 + 2 * 150 + 300
    assert timeline_duration_ms(build_timeline("SOS")) == s_letter + o_letter + s_letter


def test_unknown_characters_are_skipped_and_case_is_folded():
    assert encode_message("a!b?") == [".-", "-..."]
    assert build_timeline("'") == []
    assert build_timeline("ab") == build_timeline("AB")
    assert encode_message("") == []
    assert encode_message(None) == []


def test_table_covers_letters_and_digits():
    assert len(MORSE_TABLE) == 36
    assert MORSE_TABLE["0"] == "-----"
    assert MORSE_TABLE["Q"] == "--.-"


def test_format_morse_separates_letters_and_words():
    assert format_morse("sos") == "... --- ..."
    assert format_morse("A PLUS") == ".-   .--. .-.. ..- ..."
    assert format_morse("  ?!  ") == ""


def test_tone_samples_follow_rounded_sine():
    samples = tone_samples(200)

    assert samples.dtype == np.int8
    assert samples.shape == (8820,)
    assert samples[0] == 0
    assert int(samples.max()) <= 127
    assert int(samples.min()) >= -127
    for index in (1, 13, 55, 1000):
        expected = round(math.sin(index / (44100 / 800)) * 127)
        assert int(samples[index]) == expected


def test_tone_samples_for_zero_duration_are_empty():
    assert tone_samples(0).size == 0
