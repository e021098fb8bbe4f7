"""UI-neutral helpers shared by the desktop surface."""
from __future__ import annotations

from ..constants import CHANNEL_DETENTS, GHOST_CHANNEL
from ..utils import coerce_float

APP_TITLE = "Haunted Radio"

VOLUME_EASING_EXPONENT = 1.2

PALETTE = {
    "bg": "#020702",
    "panel_bg": "#0a1a0a",
    "text_primary": "#e6e8ef",
    "text_muted": "#9aa3b2",
    "accent": "#00ff41",
    "danger": "#ff3b3b",
    "button_bg": "#0d220d",
    "button_hover": "#143514",
}


def channel_from_knob(position) -> int:
    """Snap a 0..1 tuning position onto one of the channel detents."""
    pos = coerce_float(position, default=0.0, min_value=0.0, max_value=1.0)
    channel = int(round(pos * (CHANNEL_DETENTS - 1))) + 1
    return max(1, min(CHANNEL_DETENTS, channel))


def volume_from_knob(position) -> float:
    pos = coerce_float(position, default=0.0, min_value=0.0, max_value=1.0)
    return float(pos**VOLUME_EASING_EXPONENT)


def channel_label(channel: int) -> str:
    if channel == GHOST_CHANNEL:
        return "CH 666"
    return f"CH {int(channel)}"
