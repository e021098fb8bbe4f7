"""Shared player state crossed between the UI thread and the playback worker."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any

from ..constants import DEFAULT_VOLUME


@dataclass(slots=True)
class PlayerState:
    """Mutable handles guarded by ``lock``.

    ``session_cancel`` is replaced on every stop so that callers which did not
    bring their own cancellation event still observe the stop that preceded
    them.
    """

    volume: float = DEFAULT_VOLUME
    current_line: Any = None
    worker: Any = None
    session_cancel: threading.Event = field(default_factory=threading.Event)
    lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def publish_line(self, line, cancel_event: threading.Event) -> bool:
        """Store a freshly opened line unless its playback was cancelled meanwhile."""
        with self.lock:
            if cancel_event.is_set():
                return False
            self.current_line = line
            return True

    def clear_line(self, line) -> None:
        with self.lock:
            if self.current_line is line:
                self.current_line = None

    def publish_worker(self, worker) -> None:
        with self.lock:
            self.worker = worker

    def clear_worker(self, worker) -> None:
        with self.lock:
            if self.worker is worker:
                self.worker = None

    def take_for_teardown(self) -> tuple[Any, Any]:
        """Detach line and worker, signal cancellation and start a fresh session."""
        with self.lock:
            line = self.current_line
            worker = self.worker
            self.current_line = None
            self.worker = None
            self.session_cancel.set()
            self.session_cancel = threading.Event()
            if worker is not None:
                worker.cancel()
            return line, worker
