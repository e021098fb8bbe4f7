"""Output lines backed by PortAudio through sounddevice."""

from __future__ import annotations

import threading
from dataclasses import dataclass

import numpy as np

from ..constants import GAIN_MAX_DB, GAIN_MIN_DB
from .pcm_source import AudioFormat

try:
    import sounddevice as sd
except Exception:  # pragma: no cover - PortAudio may be missing at import time
    sd = None

LINE_OPEN = "open"
LINE_PLAYING = "playing"
LINE_DRAINED = "drained"
LINE_CLOSED = "closed"


class LineUnavailableError(RuntimeError):
    """Raised when no output line can be acquired or the line is already closed."""


@dataclass
class GainControl:
    """Master gain in decibels, applied to samples before they reach the device."""

    minimum: float = GAIN_MIN_DB
    maximum: float = GAIN_MAX_DB
    value: float = 0.0

    def set_value(self, db: float) -> float:
        self.value = max(self.minimum, min(self.maximum, float(db)))
        return self.value

    @property
    def factor(self) -> float:
        if self.value <= self.minimum:
            return 0.0
        return float(10.0 ** (self.value / 20.0))


class OutputLine:
    """One PortAudio output stream used for a single playback."""

    def __init__(
        self,
        stream,
        audio_format: AudioFormat,
        *,
        gain_control: GainControl | None = None,
    ) -> None:
        self._stream = stream
        self.format = audio_format
        self.gain_control = gain_control
        self._lock = threading.Lock()
        self._state = LINE_OPEN

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_open(self) -> bool:
        return self._state != LINE_CLOSED

    def start(self) -> None:
        with self._lock:
            if self._state == LINE_CLOSED:
                raise LineUnavailableError("Output line is closed")
            self._stream.start()
            self._state = LINE_PLAYING

    def write(self, data: bytes) -> None:
        if self._state == LINE_CLOSED:
            raise LineUnavailableError("Output line is closed")
        payload = self._apply_gain(data)
        if payload:
            self._stream.write(payload)

    def drain(self) -> None:
        """Block until queued samples have played, then stop the stream."""
        with self._lock:
            if self._state != LINE_PLAYING:
                return
        # Not under the lock: abort() from another thread must be able to cut a drain short.
        self._stream.stop()
        with self._lock:
            if self._state == LINE_PLAYING:
                self._state = LINE_DRAINED

    def abort(self) -> None:
        """Stop immediately, discarding queued samples."""
        with self._lock:
            if self._state == LINE_CLOSED:
                return
            self._stream.abort(ignore_errors=True)
            self._state = LINE_DRAINED

    def close(self) -> None:
        with self._lock:
            if self._state == LINE_CLOSED:
                return
            self._state = LINE_CLOSED
            self._stream.close(ignore_errors=True)

    def _apply_gain(self, data: bytes) -> bytes:
        frame_size = self.format.frame_size
        usable = len(data) - (len(data) % frame_size)
        if usable <= 0:
            return b""
        if self.gain_control is None:
            return bytes(data[:usable])
        factor = self.gain_control.factor
        if factor == 1.0:
            return bytes(data[:usable])
        dtype = self.format.numpy_dtype
        info = np.iinfo(dtype)
        samples = np.frombuffer(data[:usable], dtype=dtype).astype(np.float32)
        scaled = np.clip(np.rint(samples * factor), info.min, info.max)
        return scaled.astype(dtype).tobytes()


class SoundDeviceLineFactory:
    """Open raw PortAudio output lines for a given PCM format."""

    def __init__(
        self,
        *,
        sd_module=None,
        device: str | int | None = None,
        software_gain: bool = True,
        gain_range: tuple[float, float] = (GAIN_MIN_DB, GAIN_MAX_DB),
    ) -> None:
        self._sd = sd_module if sd_module is not None else sd
        self.device = _coerce_device(device)
        self.software_gain = bool(software_gain)
        self.gain_range = (float(gain_range[0]), float(gain_range[1]))

    @property
    def available(self) -> bool:
        return self._sd is not None

    def open_line(self, audio_format: AudioFormat) -> OutputLine:
        if self._sd is None:
            raise LineUnavailableError("sounddevice is not available")
        try:
            stream = self._sd.RawOutputStream(
                samplerate=float(audio_format.sample_rate),
                channels=int(audio_format.channels),
                dtype=audio_format.dtype,
                device=self.device,
            )
        except Exception as exc:
            raise LineUnavailableError(f"No output line for {audio_format}: {exc}") from exc
        gain_control = None
        if self.software_gain:
            minimum, maximum = self.gain_range
            gain_control = GainControl(minimum=minimum, maximum=maximum)
        return OutputLine(stream, audio_format, gain_control=gain_control)


def _coerce_device(device: str | int | None) -> str | int | None:
    if device is None:
        return None
    if isinstance(device, int):
        return device
    text = str(device).strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    return text
