import pytest

from conftest import RecordingLogger
from haunted_radio.ui.common import channel_from_knob, channel_label, volume_from_knob
from haunted_radio.ui.radio_controller import RadioController


class _Player:
    volume = 0.85


class _ChannelManager:
    morse_message = "THATS AN A PLUS"

    def __init__(self):
        self.player = _Player()
        self.calls = []

    def play_channel(self, channel):
        self.calls.append(("channel", channel))

    def play_ghost(self):
        self.calls.append(("ghost",))
        return True

    def stop_audio(self):
        self.calls.append(("stop",))

    def set_volume(self, value):
        self.calls.append(("volume", value))
        return max(0.0, min(1.0, float(value)))

    def try_solve_riddle(self, answer):
        return "shadow" in str(answer or "").lower()


def _controller():
    manager = _ChannelManager()
    return RadioController(manager, logger=RecordingLogger()), manager


@pytest.mark.parametrize(
    "position, channel",
    [(0.0, 1), (0.12, 1), (0.13, 2), (0.5, 3), (0.8, 4), (1.0, 5), (-3, 1), (7, 5), ("x", 1)],
)
def test_channel_from_knob_snaps_to_detents(position, channel):
    assert channel_from_knob(position) == channel


def test_volume_from_knob_is_eased():
    assert volume_from_knob(0.0) == 0.0
    assert volume_from_knob(1.0) == 1.0
    assert volume_from_knob(0.5) == pytest.approx(0.5**1.2)
    assert volume_from_knob(2) == 1.0
    assert channel_label(666) == "CH 666"


def test_power_toggle_plays_and_stops():
    controller, manager = _controller()

    assert controller.status_text() == "OFF"
    assert controller.toggle_power() is True
    assert controller.toggle_power() is False

    assert manager.calls == [("channel", 1), ("stop",)]


def test_tuning_plays_only_when_powered_and_changed():
    controller, manager = _controller()

    controller.tune_to_position(0.5)
    assert manager.calls == []
    assert controller.channel == 3

    controller.toggle_power()
    controller.tune_to_position(0.5)
    controller.tune_to_position(0.75)

    assert manager.calls == [("channel", 3), ("channel", 4)]
    assert controller.status_text() == "CH 4"


def test_riddle_channel_prompts_until_solved():
    controller, manager = _controller()
    controller.toggle_power()

    controller.tune(5)
    assert controller.riddle_pending is True
    assert controller.submit_riddle_answer("a ghost") is False
    assert controller.riddle_pending is False
    assert controller.ghost_unlocked is False

    controller.tune(4)
    controller.tune(5)
    assert controller.riddle_pending is True
    assert controller.submit_riddle_answer("My Shadow") is True
    assert controller.ghost_unlocked is True

    controller.tune(4)
    controller.tune(5)
    assert controller.riddle_pending is False
    assert ("channel", 5) in manager.calls


def test_ghost_requires_unlock():
    controller, manager = _controller()

    assert controller.tune_ghost() is False
    assert manager.calls == []

    controller.ghost_unlocked = True
    assert controller.tune_ghost() is True
    assert controller.power_on is True
    assert controller.channel == 666
    assert manager.calls == [("ghost",)]
    assert controller.status_text().startswith("CH 666  - .... .- - ...")


def test_power_cycle_on_ghost_channel_replays_ghost():
    controller, manager = _controller()
    controller.ghost_unlocked = True
    controller.tune_ghost()
    controller.toggle_power()
    controller.toggle_power()
    assert manager.calls == [("ghost",), ("stop",), ("ghost",)]


def test_volume_and_shutdown():
    controller, manager = _controller()

    assert controller.volume == 0.85
    assert controller.set_volume_from_position(1.0) == 1.0
    controller.toggle_power()
    controller.shutdown()

    assert controller.power_on is False
    assert manager.calls[0] == ("volume", 1.0)
    assert manager.calls[-1] == ("stop",)


def test_ghost_status_shows_translation():
    controller, _manager = _controller()
    controller.ghost_unlocked = True
    controller.tune_ghost()

    assert controller.status_text().endswith('"That\'s an A plus"')
