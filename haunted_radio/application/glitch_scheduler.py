"""Background supervisor that alternates main and static segments."""

from __future__ import annotations

import random
import threading
from pathlib import Path
from typing import Callable

from ..domain.glitch_plan import GlitchPlan, Segment, iter_segments


class PlaybackWorker(threading.Thread):
    """Daemon thread running one playback job with cooperative cancellation."""

    def __init__(
        self,
        job: Callable[[threading.Event], None],
        *,
        on_exit: Callable[["PlaybackWorker"], None] | None = None,
        name: str = "audio-play",
    ) -> None:
        super().__init__(name=name, daemon=True)
        self._job = job
        self._on_exit = on_exit
        self.cancel_event = threading.Event()

    @property
    def cancelled(self) -> bool:
        return self.cancel_event.is_set()

    def cancel(self) -> None:
        self.cancel_event.set()

    def run(self) -> None:
        try:
            self._job(self.cancel_event)
        finally:
            if self._on_exit is not None:
                self._on_exit(self)


class GlitchScheduler:
    """Start playback jobs on a single background worker owned by the player."""

    def __init__(self, player, *, rng: random.Random | None = None, logger) -> None:
        self.player = player
        self.rng = rng if rng is not None else random.Random()
        self.logger = logger

    def schedule_plan(self, plan: GlitchPlan) -> PlaybackWorker:
        self.player.stop_audio()

        def job(cancel_event: threading.Event) -> None:
            played = 0
            for segment in iter_segments(plan, self.rng):
                if cancel_event.is_set():
                    break
                self._play_segment(segment, cancel_event)
                played += 1
            self.logger.debug(
                "Glitch plan finished: main=%s segments=%s cancelled=%s",
                plan.main.name,
                played,
                cancel_event.is_set(),
            )

        return self._start(job)

    def schedule_single(self, source: Path, millis: int) -> PlaybackWorker:
        self.player.stop_audio()

        def job(cancel_event: threading.Event) -> None:
            if cancel_event.is_set():
                return
            self.player.play_wav_for_millis(source, millis, cancel_event=cancel_event)

        return self._start(job)

    def _play_segment(self, segment: Segment, cancel_event: threading.Event) -> None:
        self.logger.debug(
            "Segment %s: %s for %sms", segment.kind, segment.source.name, segment.millis
        )
        self.player.play_wav_for_millis(segment.source, segment.millis, cancel_event=cancel_event)

    def _start(self, job: Callable[[threading.Event], None]) -> PlaybackWorker:
        state = self.player.state
        worker = PlaybackWorker(job, on_exit=state.clear_worker)
        state.publish_worker(worker)
        worker.start()
        return worker
