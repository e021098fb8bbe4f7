"""Pure domain logic: Morse, glitch plans and the riddle gate."""

from .glitch_plan import GlitchPlan, Segment, draw_segment_count, iter_segments
from .morse import (
    MORSE_TABLE,
    MorseEvent,
    build_timeline,
    encode_message,
    format_morse,
    timeline_duration_ms,
    tone_samples,
)
from .riddle import (
    ACCEPTED_ANSWERS,
    GHOST_MORSE_MESSAGE,
    GHOST_TRANSLATION,
    RIDDLE_PROMPT,
    RIDDLE_TITLE,
    is_correct_answer,
)

__all__ = [
    "ACCEPTED_ANSWERS",
    "GHOST_MORSE_MESSAGE",
    "GHOST_TRANSLATION",
    "GlitchPlan",
    "MORSE_TABLE",
    "MorseEvent",
    "RIDDLE_PROMPT",
    "RIDDLE_TITLE",
    "Segment",
    "build_timeline",
    "draw_segment_count",
    "encode_message",
    "format_morse",
    "is_correct_answer",
    "iter_segments",
    "timeline_duration_ms",
    "tone_samples",
]
