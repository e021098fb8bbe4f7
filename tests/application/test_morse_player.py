from conftest import FakeLineFactory, RecordingLogger
from haunted_radio.application.morse_player import MorsePlayer
from haunted_radio.domain.morse import tone_samples


def test_play_message_beeps_each_symbol_on_a_fresh_line():
    factory = FakeLineFactory()
    sleeps = []
    player = MorsePlayer(factory, logger=RecordingLogger(), sleep=sleeps.append)

    tones = player.play_message("a")

    assert tones == 2
    assert sleeps == [0.15, 0.3]
    assert [line.bytes_written for line in factory.lines] == [8820, 26460]
    assert factory.lines[0].writes == [tone_samples(200).tobytes()]
    for line in factory.lines:
        assert line.started and line.drained and line.closed
    fmt = factory.formats[0]
    assert (fmt.sample_rate, fmt.channels, fmt.sample_width, fmt.signed) == (44100, 1, 1, True)


def test_word_gap_and_unknown_characters():
    factory = FakeLineFactory()
    sleeps = []
    player = MorsePlayer(factory, logger=RecordingLogger(), sleep=sleeps.append)

    tones = player.play_message("E? E")

    assert tones == 2
    assert sleeps == [0.3, 0.7, 0.3]


def test_tone_failures_are_logged_and_playback_continues():
    factory = FakeLineFactory(fail=True)
    logger = RecordingLogger()
    sleeps = []
    player = MorsePlayer(factory, logger=logger, sleep=sleeps.append)

    tones = player.play_message("A")

    assert tones == 2
    assert len(logger.exceptions) == 2
    assert sleeps == [0.15, 0.3]


def test_failed_write_still_closes_line():
    factory = FakeLineFactory(fail_on_write=0)
    logger = RecordingLogger()
    player = MorsePlayer(factory, logger=logger, sleep=lambda _seconds: None)

    player.play_message("T")

    (line,) = factory.lines
    assert line.closed and not line.drained
    assert logger.exceptions == ["Morse tone of 600ms failed"]


def test_empty_message_plays_nothing():
    factory = FakeLineFactory()
    player = MorsePlayer(factory, logger=RecordingLogger(), sleep=lambda _seconds: None)
    assert player.play_message("") == 0
    assert factory.lines == []
