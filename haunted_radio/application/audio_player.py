"""Device-backed streaming player with glitch scheduling and hard stop."""

from __future__ import annotations

import random
import threading
import time
from pathlib import Path
from typing import Callable

from ..constants import DEFAULT_VOLUME, STOP_JOIN_TIMEOUT_MS, STREAM_BUFFER_BYTES
from ..domain.glitch_plan import GlitchPlan
from ..integrations.pcm_source import UnsupportedSourceError, open_pcm_source
from ..integrations.sound_device import LineUnavailableError
from ..utils import coerce_float
from .glitch_scheduler import GlitchScheduler, PlaybackWorker
from .player_state import PlayerState


class AudioPlayer:
    """Stream PCM to one output line at a time.

    Playback failures never reach the caller: a file that is missing, cannot
    be decoded, or finds no free device is replaced by silence of the same
    length so that glitch-plan pacing stays intact.
    """

    def __init__(
        self,
        line_factory,
        *,
        logger,
        rng: random.Random | None = None,
        source_opener: Callable = open_pcm_source,
        clock: Callable[[], float] = time.monotonic,
        buffer_bytes: int = STREAM_BUFFER_BYTES,
        volume: float = DEFAULT_VOLUME,
        stop_join_timeout_ms: int = STOP_JOIN_TIMEOUT_MS,
    ) -> None:
        self.line_factory = line_factory
        self.logger = logger
        self.source_opener = source_opener
        self.clock = clock
        self.buffer_bytes = max(256, int(buffer_bytes))
        self.stop_join_timeout = max(0, int(stop_join_timeout_ms)) / 1000.0
        self.state = PlayerState(
            volume=coerce_float(volume, default=DEFAULT_VOLUME, min_value=0.0, max_value=1.0)
        )
        self.scheduler = GlitchScheduler(self, rng=rng, logger=logger)

    @property
    def volume(self) -> float:
        return self.state.volume

    @property
    def current_line(self):
        return self.state.current_line

    @property
    def worker(self) -> PlaybackWorker | None:
        return self.state.worker

    def set_volume(self, value) -> float:
        volume = coerce_float(value, default=0.0, min_value=0.0, max_value=1.0)
        with self.state.lock:
            self.state.volume = volume
            line = self.state.current_line
        if line is not None and line.is_open:
            self._apply_gain(line, volume)
        return volume

    def stop_audio(self) -> None:
        line, worker = self.state.take_for_teardown()
        if line is not None:
            self._teardown_line(line)
        if (
            worker is not None
            and worker is not threading.current_thread()
            and worker.is_alive()
        ):
            worker.join(timeout=self.stop_join_timeout)
            if worker.is_alive():
                self.logger.debug("Playback worker still unwinding after stop: %s", worker.name)

    def play_wav_with_occasional_glitch(self, main, static, glitch_chance) -> PlaybackWorker:
        plan = GlitchPlan.create(main, static, glitch_chance)
        self.logger.info(
            "Glitch playback: main=%s static=%s chance=%.2f",
            plan.main,
            plan.static,
            plan.glitch_chance,
        )
        return self.scheduler.schedule_plan(plan)

    def play_wav_in_background(self, src, millis: int) -> PlaybackWorker:
        return self.scheduler.schedule_single(Path(src), int(millis))

    def play_wav_for_millis(
        self,
        src,
        millis: int,
        *,
        cancel_event: threading.Event | None = None,
    ) -> None:
        millis = int(millis)
        if millis <= 0:
            return
        if cancel_event is None:
            with self.state.lock:
                cancel_event = self.state.session_cancel
        if cancel_event.is_set():
            return
        path = Path(src)
        if not path.exists():
            self.logger.debug("Audio source missing, holding %sms: %s", millis, path)
            self._hold(millis, cancel_event)
            return

        streaming = False
        try:
            with self.source_opener(path) as source:
                line = self.line_factory.open_line(source.format)
                try:
                    if not self.state.publish_line(line, cancel_event):
                        return
                    self._apply_gain(line, self.state.volume)
                    line.start()
                    streaming = True
                    self._stream(source, line, millis, cancel_event)
                    if not cancel_event.is_set():
                        line.drain()
                finally:
                    self._teardown_line(line)
                    self.state.clear_line(line)
        except (UnsupportedSourceError, LineUnavailableError) as exc:
            if streaming:
                self._log_stream_failure(path, cancel_event, exc)
                return
            self.logger.warning("Playback unavailable for %s (%s); holding %sms", path, exc, millis)
            self._hold(millis, cancel_event)
        except Exception as exc:
            if streaming:
                self._log_stream_failure(path, cancel_event, exc)
                return
            self.logger.exception("Playback failed for %s; holding %sms", path, millis)
            self._hold(millis, cancel_event)

    def _stream(self, source, line, millis: int, cancel_event: threading.Event) -> None:
        deadline = self.clock() + millis / 1000.0
        while self.clock() < deadline and not cancel_event.is_set():
            chunk = source.read(self.buffer_bytes)
            if not chunk:
                break
            line.write(chunk)

    def _apply_gain(self, line, volume: float) -> None:
        control = getattr(line, "gain_control", None)
        if control is None:
            return
        try:
            control.set_value(control.minimum + (control.maximum - control.minimum) * volume)
        except Exception:
            self.logger.debug("Gain control rejected volume %.3f", volume, exc_info=True)

    def _teardown_line(self, line) -> None:
        try:
            line.abort()
        except Exception:
            self.logger.debug("Failed to abort output line", exc_info=True)
        try:
            line.close()
        except Exception:
            self.logger.debug("Failed to close output line", exc_info=True)

    def _log_stream_failure(self, path: Path, cancel_event: threading.Event, exc: Exception) -> None:
        if cancel_event.is_set():
            self.logger.debug("Stream for %s ended by stop: %s", path.name, exc)
        else:
            self.logger.warning("Stream for %s failed mid-playback: %s", path.name, exc)

    @staticmethod
    def _hold(millis: int, cancel_event: threading.Event) -> None:
        cancel_event.wait(millis / 1000.0)
