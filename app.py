"""Desktop entrypoint and compatibility facade for Haunted Radio."""

from __future__ import annotations

import atexit
import platform
import sys

import numpy as np

from haunted_radio.application.bootstrap import AppServices, initialize_app_services
from haunted_radio.config import load_config
from haunted_radio.integrations import pcm_source, sound_device
from haunted_radio.logging_config import setup_logging
from haunted_radio.utils import env_flag

CONFIG = load_config()
logger = setup_logging(CONFIG)

SKIP_APP_INIT = env_flag("HAUNTED_RADIO_SKIP_APP_INIT")

logger.info("Starting app")
logger.info("Log file: %s", CONFIG.log_file)
logger.debug(
    "Config: LOG_LEVEL=%s FILE_LOG_LEVEL=%s LOG_DIR=%s AUDIO_ROOT=%s PODCAST_DIR=%s "
    "STATIC_FILE=%s GHOST_FILE=%s DEFAULT_VOLUME=%s PODCAST_GLITCH_CHANCE=%s "
    "GHOST_GLITCH_CHANCE=%s RANDOM_SEED=%s OUTPUT_DEVICE=%s SOFTWARE_GAIN_ENABLED=%s "
    "STREAM_BUFFER_BYTES=%s STOP_JOIN_TIMEOUT_MS=%s",
    CONFIG.log_level,
    CONFIG.file_log_level,
    CONFIG.log_dir,
    CONFIG.audio_root,
    CONFIG.podcast_dir,
    CONFIG.static_file,
    CONFIG.ghost_file,
    CONFIG.default_volume,
    CONFIG.podcast_glitch_chance,
    CONFIG.ghost_glitch_chance,
    CONFIG.random_seed,
    CONFIG.output_device,
    CONFIG.software_gain_enabled,
    CONFIG.stream_buffer_bytes,
    CONFIG.stop_join_timeout_ms,
)
logger.debug("Python version: %s", sys.version.replace("\n", " "))
logger.debug("Platform: %s", platform.platform())
logger.debug("NumPy version: %s", np.__version__)
if sound_device.sd is not None:
    logger.debug("sounddevice version: %s", sound_device.sd.__version__)
else:
    logger.warning("sounddevice could not be imported; audio output is disabled")
if pcm_source.sf is not None:
    logger.debug("soundfile version: %s", pcm_source.sf.__version__)
else:
    logger.warning("soundfile could not be imported; audio files cannot be decoded")

SERVICES: AppServices | None = None
if not SKIP_APP_INIT:
    SERVICES = initialize_app_services(config=CONFIG, logger=logger)
else:
    logger.info("HAUNTED_RADIO_SKIP_APP_INIT enabled; skipping audio and UI initialization")


def _shutdown_runtime() -> None:
    if SERVICES is None:
        return
    try:
        SERVICES.shutdown()
    except Exception:
        logger.exception("Runtime shutdown failed")


atexit.register(_shutdown_runtime)


def launch() -> None:
    if SKIP_APP_INIT:
        logger.info("HAUNTED_RADIO_SKIP_APP_INIT enabled; launch skipped")
        return
    desktop_app = SERVICES.app if SERVICES is not None else None
    if desktop_app is None:
        raise RuntimeError("Desktop app is not initialized.")
    logger.info("Launching desktop app")
    desktop_app.launch()


if __name__ == "__main__":
    launch()
