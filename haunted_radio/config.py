"""Configuration loading from environment variables."""
from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

from .constants import DEFAULT_VOLUME, STOP_JOIN_TIMEOUT_MS, STREAM_BUFFER_BYTES
from .domain.riddle import GHOST_MORSE_MESSAGE
from .utils import (
    env_flag,
    parse_float_env,
    parse_int_env,
    parse_optional_int_env,
    resolve_path,
)


@dataclass(frozen=True)
class AppConfig:
    log_level: str
    file_log_level: str
    log_dir: str
    log_file: str
    audio_root: str
    podcast_dir: str = "spanish_podcast"
    static_file: str = "static.wav"
    ghost_file: str = "ghost_broadcast.wav"
    default_volume: float = DEFAULT_VOLUME
    podcast_glitch_chance: float = 0.12
    ghost_glitch_chance: float = 0.18
    ghost_morse_message: str = GHOST_MORSE_MESSAGE
    random_seed: Optional[int] = None
    output_device: Optional[str] = None
    software_gain_enabled: bool = True
    stream_buffer_bytes: int = STREAM_BUFFER_BYTES
    stop_join_timeout_ms: int = STOP_JOIN_TIMEOUT_MS


def load_config() -> AppConfig:
    base_dir = str(Path(__file__).resolve().parents[1])
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    file_log_level = os.getenv("FILE_LOG_LEVEL", "DEBUG").upper()
    log_dir = resolve_path(os.getenv("LOG_DIR", "logs"), base_dir)
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(
        log_dir, f"radio_{datetime.now().strftime('%Y%m%d_%H%M%S_%f')}.log"
    )
    audio_root = resolve_path(os.getenv("AUDIO_ROOT", "audio").strip() or "audio", base_dir)
    podcast_dir = os.getenv("PODCAST_DIR", "spanish_podcast").strip() or "spanish_podcast"
    static_file = os.getenv("STATIC_FILE", "static.wav").strip() or "static.wav"
    ghost_file = os.getenv("GHOST_FILE", "ghost_broadcast.wav").strip() or "ghost_broadcast.wav"
    default_volume = parse_float_env(
        "DEFAULT_VOLUME", DEFAULT_VOLUME, min_value=0.0, max_value=1.0
    )
    podcast_glitch_chance = parse_float_env(
        "PODCAST_GLITCH_CHANCE", 0.12, min_value=0.0, max_value=1.0
    )
    ghost_glitch_chance = parse_float_env(
        "GHOST_GLITCH_CHANCE", 0.18, min_value=0.0, max_value=1.0
    )
    ghost_morse_message = (
        os.getenv("GHOST_MORSE_MESSAGE", GHOST_MORSE_MESSAGE).strip() or GHOST_MORSE_MESSAGE
    )
    random_seed = parse_optional_int_env("RANDOM_SEED")
    output_device = os.getenv("OUTPUT_DEVICE", "").strip() or None
    software_gain_enabled = env_flag("SOFTWARE_GAIN_ENABLED", "1")
    stream_buffer_bytes = parse_int_env(
        "STREAM_BUFFER_BYTES", STREAM_BUFFER_BYTES, min_value=256, max_value=65536
    )
    stop_join_timeout_ms = parse_int_env(
        "STOP_JOIN_TIMEOUT_MS", STOP_JOIN_TIMEOUT_MS, min_value=0, max_value=5000
    )
    return AppConfig(
        log_level=log_level,
        file_log_level=file_log_level,
        log_dir=log_dir,
        log_file=log_file,
        audio_root=audio_root,
        podcast_dir=podcast_dir,
        static_file=static_file,
        ghost_file=ghost_file,
        default_volume=default_volume,
        podcast_glitch_chance=podcast_glitch_chance,
        ghost_glitch_chance=ghost_glitch_chance,
        ghost_morse_message=ghost_morse_message,
        random_seed=random_seed,
        output_device=output_device,
        software_gain_enabled=software_gain_enabled,
        stream_buffer_bytes=stream_buffer_bytes,
        stop_join_timeout_ms=stop_join_timeout_ms,
    )
