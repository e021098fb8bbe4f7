"""Generic helper utilities used across the project."""
from __future__ import annotations

import math
import os
from typing import Any, Optional


def resolve_path(value: str, base_dir: str) -> str:
    """Resolve a path relative to base_dir when value is not absolute."""
    if not os.path.isabs(value):
        return os.path.join(base_dir, value)
    return value


def env_flag(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def parse_int_env(
    name: str,
    default: int,
    *,
    min_value: Optional[int] = None,
    max_value: Optional[int] = None,
) -> int:
    """Parse an integer environment variable with optional bounds."""
    try:
        value = int(os.getenv(name, str(default)))
    except ValueError:
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def parse_optional_int_env(name: str) -> Optional[int]:
    """Return the integer value of an environment variable, or None when unset or invalid."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None


def parse_float_env(
    name: str,
    default: float,
    *,
    min_value: Optional[float] = None,
    max_value: Optional[float] = None,
) -> float:
    """Parse a float environment variable with optional bounds."""
    try:
        value = float(os.getenv(name, str(default)))
    except ValueError:
        value = default
    if math.isnan(value):
        value = default
    if min_value is not None:
        value = max(min_value, value)
    if max_value is not None:
        value = min(max_value, value)
    return value


def coerce_float(
    value: Any,
    *,
    default: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    try:
        parsed = float(value)
    except Exception:
        parsed = float(default)
    if math.isnan(parsed):
        parsed = float(default)
    if min_value is not None:
        parsed = max(float(min_value), parsed)
    if max_value is not None:
        parsed = min(float(max_value), parsed)
    return float(parsed)
