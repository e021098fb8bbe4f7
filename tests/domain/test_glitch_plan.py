import random
from pathlib import Path

from haunted_radio.domain.glitch_plan import (
    MAIN,
    STATIC,
    GlitchPlan,
    draw_segment_count,
    iter_segments,
)


def _plan(chance):
    return GlitchPlan.create(Path("main.wav"), Path("static.wav"), chance)


def test_segment_count_is_always_two_to_four():
    seen = {draw_segment_count(random.Random(seed)) for seed in range(200)}
    assert seen == {2, 3, 4}


def test_zero_chance_never_inserts_static():
    for seed in range(50):
        segments = list(iter_segments(_plan(0.0), random.Random(seed)))
        assert 2 <= len(segments) <= 4
        assert all(segment.kind == MAIN for segment in segments)
        assert all(4000 <= segment.millis < 9000 for segment in segments)
        assert all(segment.source == Path("main.wav") for segment in segments)


def test_full_chance_follows_every_main_with_static():
    for seed in range(50):
        segments = list(iter_segments(_plan(1.0), random.Random(seed)))
        kinds = [segment.kind for segment in segments]
        assert kinds == [MAIN, STATIC] * (len(kinds) // 2)
        assert 2 <= len(kinds) // 2 <= 4
        for segment in segments:
            if segment.kind == STATIC:
                assert 300 <= segment.millis < 700
                assert segment.source == Path("static.wav")


def test_seeded_plans_are_reproducible():
    first = list(iter_segments(_plan(0.5), random.Random(1234)))
    second = list(iter_segments(_plan(0.5), random.Random(1234)))
    assert first == second


def test_create_clamps_chance():
    assert _plan(2.5).glitch_chance == 1.0
    assert _plan(-1).glitch_chance == 0.0
    assert _plan(float("nan")).glitch_chance == 0.0
    assert _plan("0.25").glitch_chance == 0.25
    assert _plan("bogus").glitch_chance == 0.0
