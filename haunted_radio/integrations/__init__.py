"""Device and decoder integrations."""

from .pcm_source import (
    AudioFormat,
    BufferPcmSource,
    PcmSource,
    SoundFilePcmSource,
    UnsupportedSourceError,
    open_pcm_source,
)
from .sound_device import (
    GainControl,
    LineUnavailableError,
    OutputLine,
    SoundDeviceLineFactory,
)

__all__ = [
    "AudioFormat",
    "BufferPcmSource",
    "GainControl",
    "LineUnavailableError",
    "OutputLine",
    "PcmSource",
    "SoundDeviceLineFactory",
    "SoundFilePcmSource",
    "UnsupportedSourceError",
    "open_pcm_source",
]
