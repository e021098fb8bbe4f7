"""Shared fakes for device-free tests.

Output lines and loggers are replaced through constructor injection; no test
needs PortAudio or a sound card.
"""

from __future__ import annotations

import threading
import time

import pytest

from haunted_radio.integrations.sound_device import GainControl, LineUnavailableError


class RecordingLogger:
    def __init__(self):
        self.infos = []
        self.debugs = []
        self.warnings = []
        self.exceptions = []

    def info(self, message, *args, **_kwargs):
        self.infos.append(message % args if args else message)

    def debug(self, message, *args, **_kwargs):
        self.debugs.append(message % args if args else message)

    def warning(self, message, *args, **_kwargs):
        self.warnings.append(message % args if args else message)

    def exception(self, message, *args, **_kwargs):
        self.exceptions.append(message % args if args else message)


class FakeLine:
    def __init__(self, audio_format, *, gain_control=None, write_delay=0.0, fail_on_write=None):
        self.format = audio_format
        self.gain_control = gain_control
        self.write_delay = write_delay
        self.fail_on_write = fail_on_write
        self.writes = []
        self.started = False
        self.drained = False
        self.aborted = False
        self.closed = False
        self._lock = threading.Lock()

    @property
    def is_open(self):
        return not self.closed

    @property
    def bytes_written(self):
        with self._lock:
            return sum(len(chunk) for chunk in self.writes)

    def start(self):
        if self.closed:
            raise LineUnavailableError("closed")
        self.started = True

    def write(self, data):
        if self.closed:
            raise LineUnavailableError("closed")
        if self.fail_on_write is not None and len(self.writes) >= self.fail_on_write:
            raise OSError("device lost")
        if self.write_delay:
            time.sleep(self.write_delay)
        with self._lock:
            self.writes.append(bytes(data))

    def drain(self):
        self.drained = True

    def abort(self):
        self.aborted = True

    def close(self):
        self.closed = True


class FakeLineFactory:
    def __init__(self, *, gain=True, fail=False, write_delay=0.0, fail_on_write=None):
        self.gain = gain
        self.fail = fail
        self.write_delay = write_delay
        self.fail_on_write = fail_on_write
        self.lines = []
        self.formats = []

    def open_line(self, audio_format):
        self.formats.append(audio_format)
        if self.fail:
            raise LineUnavailableError("no device")
        line = FakeLine(
            audio_format,
            gain_control=GainControl() if self.gain else None,
            write_delay=self.write_delay,
            fail_on_write=self.fail_on_write,
        )
        self.lines.append(line)
        return line


def wait_until(predicate, timeout=2.0, interval=0.005):
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        if predicate():
            return True
        time.sleep(interval)
    return predicate()


@pytest.fixture
def logger():
    return RecordingLogger()


@pytest.fixture
def line_factory():
    return FakeLineFactory()
