"""Fixed design constants of the audio core."""
from __future__ import annotations

STREAM_BUFFER_BYTES = 4096
PCM_SAMPLE_WIDTH = 2

DEFAULT_VOLUME = 0.85
GAIN_MIN_DB = -80.0
GAIN_MAX_DB = 6.0206

SEGMENT_COUNT_MIN = 2
SEGMENT_COUNT_MAX = 4
MAIN_SEGMENT_MS_RANGE = (4000, 9000)
STATIC_BURST_MS_RANGE = (300, 700)

MORSE_DOT_MS = 200
MORSE_DASH_MS = 600
MORSE_SYMBOL_GAP_MS = 150
MORSE_LETTER_GAP_MS = 300
MORSE_WORD_GAP_MS = 700
MORSE_TONE_HZ = 800.0
MORSE_SAMPLE_RATE = 44100

PODCAST_CHANNELS = (1, 2, 3, 4)
RIDDLE_CHANNEL = 5
GHOST_CHANNEL = 666
CHANNEL_DETENTS = 5

EMPTY_CHANNEL_STATIC_MS = 1200
RIDDLE_STATIC_MS = 600
EPISODE_FALLBACK_MS = 5000

STOP_JOIN_TIMEOUT_MS = 250
