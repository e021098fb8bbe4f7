"""PCM sources feeding the streaming player.

Decoding is kept apart from device I/O: a source hands out raw signed PCM
bytes together with the ``AudioFormat`` that describes them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

import numpy as np

from ..constants import PCM_SAMPLE_WIDTH

try:
    import soundfile as sf
except Exception:  # pragma: no cover - libsndfile may be missing at import time
    sf = None

_DTYPES = {1: "int8", 2: "int16"}


class UnsupportedSourceError(RuntimeError):
    """Raised when a file cannot be decoded to PCM on this host."""


@dataclass(frozen=True)
class AudioFormat:
    sample_rate: int
    channels: int
    sample_width: int = PCM_SAMPLE_WIDTH
    signed: bool = True
    little_endian: bool = True

    @classmethod
    def signed_pcm16(cls, sample_rate: int, channels: int) -> "AudioFormat":
        return cls(sample_rate=int(sample_rate), channels=int(channels), sample_width=2)

    @classmethod
    def signed_pcm8(cls, sample_rate: int, channels: int = 1) -> "AudioFormat":
        return cls(sample_rate=int(sample_rate), channels=int(channels), sample_width=1)

    @property
    def frame_size(self) -> int:
        return self.sample_width * self.channels

    @property
    def dtype(self) -> str:
        try:
            return _DTYPES[self.sample_width]
        except KeyError as exc:
            raise UnsupportedSourceError(
                f"Unsupported sample width: {self.sample_width}"
            ) from exc

    @property
    def numpy_dtype(self) -> np.dtype:
        if self.sample_width not in _DTYPES:
            raise UnsupportedSourceError(f"Unsupported sample width: {self.sample_width}")
        order = "<" if self.little_endian else ">"
        return np.dtype(f"{order}i{self.sample_width}")


class PcmSource(Protocol):
    format: AudioFormat

    def read(self, size: int) -> bytes:
        """Return up to ``size`` bytes of whole frames; empty bytes at EOF."""

    def close(self) -> None:
        """Release the underlying decoder."""


class SoundFilePcmSource:
    """Decode any libsndfile-readable file to signed 16-bit little-endian frames."""

    def __init__(self, path: Path | str, *, sf_module=None) -> None:
        module = sf_module if sf_module is not None else sf
        if module is None:
            raise UnsupportedSourceError("soundfile is not available")
        self.path = Path(path)
        try:
            self._handle = module.SoundFile(str(self.path), mode="r")
        except Exception as exc:
            raise UnsupportedSourceError(f"Cannot decode {self.path}: {exc}") from exc
        self.format = AudioFormat.signed_pcm16(
            int(self._handle.samplerate), int(self._handle.channels)
        )
        self._closed = False

    def read(self, size: int) -> bytes:
        if self._closed:
            return b""
        frames = max(1, int(size) // self.format.frame_size)
        data = self._handle.read(frames, dtype="float32", always_2d=True)
        if data.size == 0:
            return b""
        # Integer subtypes come back scaled to [-1, 1); float subtypes as stored.
        pcm = np.clip(np.rint(data * 32768.0), -32768, 32767)
        return np.ascontiguousarray(pcm, dtype="<i2").tobytes()

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        self._handle.close()

    def __enter__(self) -> "SoundFilePcmSource":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()


class BufferPcmSource:
    """In-memory PCM bytes exposed through the same read interface."""

    def __init__(self, data: bytes, audio_format: AudioFormat) -> None:
        frame_size = audio_format.frame_size
        usable = len(data) - (len(data) % frame_size)
        self._data = bytes(data[:usable])
        self._offset = 0
        self.format = audio_format

    @classmethod
    def from_samples(cls, samples: np.ndarray, audio_format: AudioFormat) -> "BufferPcmSource":
        array = np.ascontiguousarray(samples, dtype=audio_format.numpy_dtype)
        return cls(array.tobytes(), audio_format)

    def read(self, size: int) -> bytes:
        frame_size = self.format.frame_size
        size = max(frame_size, int(size) - (int(size) % frame_size))
        chunk = self._data[self._offset : self._offset + size]
        self._offset += len(chunk)
        return chunk

    def close(self) -> None:
        self._offset = len(self._data)

    def __enter__(self) -> "BufferPcmSource":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()


def open_pcm_source(path: Path | str, *, sf_module=None) -> SoundFilePcmSource:
    return SoundFilePcmSource(path, sf_module=sf_module)
