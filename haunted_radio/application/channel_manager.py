"""Map radio channels onto player and Morse playback."""
from __future__ import annotations

import random
import threading
from pathlib import Path
from typing import Callable, Optional

from ..constants import (
    EMPTY_CHANNEL_STATIC_MS,
    EPISODE_FALLBACK_MS,
    GHOST_CHANNEL,
    PODCAST_CHANNELS,
    RIDDLE_CHANNEL,
    RIDDLE_STATIC_MS,
)
from ..domain.riddle import GHOST_MORSE_MESSAGE, is_correct_answer


class ChannelManager:
    def __init__(
        self,
        assets,
        player,
        morse_player,
        *,
        logger,
        rng: random.Random | None = None,
        podcast_dir: str = "spanish_podcast",
        static_file: str = "static.wav",
        ghost_file: str = "ghost_broadcast.wav",
        podcast_glitch_chance: float = 0.12,
        ghost_glitch_chance: float = 0.18,
        morse_message: str = GHOST_MORSE_MESSAGE,
        thread_factory: Callable[..., threading.Thread] = threading.Thread,
    ) -> None:
        self.assets = assets
        self._player = player
        self.morse_player = morse_player
        self.logger = logger
        self.rng = rng if rng is not None else random.Random()
        self.podcast_dir = podcast_dir
        self.static_file = static_file
        self.ghost_file = ghost_file
        self.podcast_glitch_chance = float(podcast_glitch_chance)
        self.ghost_glitch_chance = float(ghost_glitch_chance)
        self.morse_message = morse_message
        self.thread_factory = thread_factory
        self._morse_thread: Optional[threading.Thread] = None
        self._morse_lock = threading.Lock()
        self.channel_episodes: dict[int, list[Path]] = {}
        self.reload_episodes()

    @property
    def player(self):
        return self._player

    def reload_episodes(self) -> int:
        episodes = self.assets.list_episodes(self.podcast_dir)
        self.channel_episodes = {channel: list(episodes) for channel in PODCAST_CHANNELS}
        self.logger.info("Loaded %s podcast episodes from %s", len(episodes), self.podcast_dir)
        return len(episodes)

    def play_channel(self, channel: int) -> None:
        channel = int(channel)
        if channel in PODCAST_CHANNELS:
            self._play_podcast(channel)
        elif channel == RIDDLE_CHANNEL:
            self.play_static(RIDDLE_STATIC_MS)
        elif channel == GHOST_CHANNEL:
            self.play_ghost()
        else:
            self.logger.debug("No programme on channel %s", channel)

    def play_ghost(self) -> bool:
        """Start the ghost broadcast and the Morse overlay.

        Returns False when a previous Morse broadcast is still keying, in which
        case only the audio is restarted.
        """
        ghost = self.assets.resolve(self.ghost_file)
        static = self.assets.resolve(self.static_file)
        if ghost is not None and static is not None:
            self._player.play_wav_with_occasional_glitch(ghost, static, self.ghost_glitch_chance)
        else:
            self.logger.warning("Ghost broadcast assets missing; playing static")
            self.play_static(EMPTY_CHANNEL_STATIC_MS)
        return self._start_morse()

    def play_static(self, millis: int) -> None:
        static = self.assets.resolve(self.static_file)
        if static is None:
            self.logger.warning("Static clip %s not found", self.static_file)
            self._player.stop_audio()
            return
        self._player.play_wav_in_background(static, millis)

    def try_solve_riddle(self, answer: str | None) -> bool:
        solved = is_correct_answer(answer)
        self.logger.info("Riddle answer %s", "accepted" if solved else "rejected")
        return solved

    def stop_audio(self) -> None:
        self._player.stop_audio()

    def set_volume(self, value) -> float:
        return self._player.set_volume(value)

    @property
    def morse_active(self) -> bool:
        thread = self._morse_thread
        return thread is not None and thread.is_alive()

    def _play_podcast(self, channel: int) -> None:
        episodes = self.channel_episodes.get(channel) or []
        if not episodes:
            self.logger.info("Channel %s has no episodes; playing static", channel)
            self.play_static(EMPTY_CHANNEL_STATIC_MS)
            return
        episode = episodes[self.rng.randrange(len(episodes))]
        static = self.assets.resolve(self.static_file)
        self.logger.info("Channel %s -> %s", channel, episode.name)
        if static is None:
            self._player.play_wav_in_background(episode, EPISODE_FALLBACK_MS)
        else:
            self._player.play_wav_with_occasional_glitch(
                episode, static, self.podcast_glitch_chance
            )

    def _start_morse(self) -> bool:
        with self._morse_lock:
            if self.morse_active:
                self.logger.info("Morse broadcast already running")
                return False
            thread = self.thread_factory(
                target=self._run_morse, name="morse-broadcast", daemon=True
            )
            self._morse_thread = thread
            thread.start()
            return True

    def _run_morse(self) -> None:
        try:
            self.morse_player.play_message(self.morse_message)
        except Exception:
            self.logger.exception("Morse broadcast failed")
