"""Play Morse messages as short sine bursts on fresh output lines."""

from __future__ import annotations

import time
from typing import Callable

from ..constants import MORSE_SAMPLE_RATE, MORSE_TONE_HZ
from ..domain.morse import TONE, build_timeline, timeline_duration_ms, tone_samples
from ..integrations.pcm_source import AudioFormat, BufferPcmSource


class MorsePlayer:
    def __init__(
        self,
        line_factory,
        *,
        logger,
        sleep: Callable[[float], None] = time.sleep,
        frequency: float = MORSE_TONE_HZ,
        sample_rate: int = MORSE_SAMPLE_RATE,
    ) -> None:
        self.line_factory = line_factory
        self.logger = logger
        self.sleep = sleep
        self.frequency = float(frequency)
        self.sample_rate = int(sample_rate)
        self.audio_format = AudioFormat.signed_pcm8(self.sample_rate, 1)

    def play_message(self, text: str) -> int:
        """Play ``text`` synchronously and return the number of tones attempted."""
        events = build_timeline(text)
        self.logger.info(
            "Morse message: %r (%s events, %sms)",
            text,
            len(events),
            timeline_duration_ms(events),
        )
        tones = 0
        for event in events:
            if event.kind == TONE:
                tones += 1
                self._beep(event.millis)
            else:
                self.sleep(event.millis / 1000.0)
        return tones

    def _beep(self, millis: int) -> None:
        samples = tone_samples(millis, frequency=self.frequency, sample_rate=self.sample_rate)
        source = BufferPcmSource.from_samples(samples, self.audio_format)
        line = None
        try:
            line = self.line_factory.open_line(source.format)
            line.start()
            line.write(source.read(samples.size * self.audio_format.frame_size))
            line.drain()
        except Exception:
            self.logger.exception("Morse tone of %sms failed", millis)
        finally:
            if line is not None:
                try:
                    line.close()
                except Exception:
                    self.logger.debug("Failed to close Morse line", exc_info=True)
