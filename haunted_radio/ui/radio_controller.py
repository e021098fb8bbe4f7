"""Toolkit-independent radio state driving the channel manager."""
from __future__ import annotations

from ..constants import CHANNEL_DETENTS, GHOST_CHANNEL, RIDDLE_CHANNEL
from ..domain.morse import format_morse
from ..domain.riddle import GHOST_TRANSLATION
from .common import channel_from_knob, channel_label, volume_from_knob


class RadioController:
    """Power, tuning and riddle state of the radio face.

    The controller never touches audio devices itself; it only decides when
    to ask the channel manager for playback or a stop.
    """

    def __init__(self, channel_manager, *, logger, initial_channel: int = 1) -> None:
        self.channel_manager = channel_manager
        self.logger = logger
        self.power_on = False
        self.channel = max(1, min(CHANNEL_DETENTS, int(initial_channel)))
        self.ghost_unlocked = False
        self.riddle_pending = False
        self.volume = float(channel_manager.player.volume)

    def toggle_power(self) -> bool:
        self.power_on = not self.power_on
        self.logger.info("Power %s", "on" if self.power_on else "off")
        if self.power_on:
            self._play_current()
        else:
            self.riddle_pending = False
            self.channel_manager.stop_audio()
        return self.power_on

    def tune_to_position(self, position) -> int:
        return self.tune(channel_from_knob(position))

    def tune(self, channel: int) -> int:
        channel = max(1, min(CHANNEL_DETENTS, int(channel)))
        if channel == self.channel:
            return channel
        self.channel = channel
        self.logger.debug("Tuned to %s", channel_label(channel))
        if self.power_on:
            self._play_current()
        return channel

    def set_volume_from_position(self, position) -> float:
        self.volume = self.channel_manager.set_volume(volume_from_knob(position))
        return self.volume

    def submit_riddle_answer(self, answer: str | None) -> bool:
        self.riddle_pending = False
        if self.channel_manager.try_solve_riddle(answer):
            self.ghost_unlocked = True
            self.logger.info("Ghost channel unlocked")
            return True
        return False

    def dismiss_riddle(self) -> None:
        self.riddle_pending = False

    def tune_ghost(self) -> bool:
        if not self.ghost_unlocked:
            return False
        self.power_on = True
        self.channel = GHOST_CHANNEL
        self.logger.info("Tuned to the ghost channel")
        self.channel_manager.play_ghost()
        return True

    def shutdown(self) -> None:
        self.power_on = False
        self.riddle_pending = False
        self.channel_manager.stop_audio()

    def status_text(self) -> str:
        if not self.power_on:
            return "OFF"
        label = channel_label(self.channel)
        if self.channel == GHOST_CHANNEL:
            morse = format_morse(self.channel_manager.morse_message)
            return f"{label}  {morse}  \"{GHOST_TRANSLATION}\""
        if self.channel == RIDDLE_CHANNEL and self.ghost_unlocked:
            return f"{label}  ...the shadow remembers"
        return label

    def _play_current(self) -> None:
        if self.channel == GHOST_CHANNEL:
            self.channel_manager.play_ghost()
            return
        if self.channel == RIDDLE_CHANNEL and not self.ghost_unlocked:
            self.riddle_pending = True
        self.channel_manager.play_channel(self.channel)
