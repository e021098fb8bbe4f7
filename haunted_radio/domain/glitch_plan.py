"""Randomized segmentation plan for glitchy playback."""
from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from ..constants import (
    MAIN_SEGMENT_MS_RANGE,
    SEGMENT_COUNT_MAX,
    SEGMENT_COUNT_MIN,
    STATIC_BURST_MS_RANGE,
)
from ..utils import coerce_float

MAIN = "main"
STATIC = "static"


@dataclass(frozen=True)
class Segment:
    source: Path
    millis: int
    kind: str


@dataclass(frozen=True)
class GlitchPlan:
    main: Path
    static: Path
    glitch_chance: float

    @classmethod
    def create(cls, main, static, glitch_chance) -> "GlitchPlan":
        return cls(
            main=Path(main),
            static=Path(static),
            glitch_chance=coerce_float(glitch_chance, default=0.0, min_value=0.0, max_value=1.0),
        )


def draw_segment_count(rng: random.Random) -> int:
    return rng.randint(SEGMENT_COUNT_MIN, SEGMENT_COUNT_MAX)


def iter_segments(plan: GlitchPlan, rng: random.Random) -> Iterator[Segment]:
    """Yield main/static segments lazily so random draws follow playback order.

    The glitch roll for a main segment is only drawn when the consumer asks
    for the next segment, i.e. after that main segment has played.
    """
    count = draw_segment_count(rng)
    for _ in range(count):
        yield Segment(plan.main, rng.randrange(*MAIN_SEGMENT_MS_RANGE), MAIN)
        if rng.random() < plan.glitch_chance:
            yield Segment(plan.static, rng.randrange(*STATIC_BURST_MS_RANGE), STATIC)
