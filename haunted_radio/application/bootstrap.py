"""Application bootstrap assembly for audio, assets, and UI services."""
from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import AppConfig
from ..integrations.pcm_source import open_pcm_source
from ..integrations.sound_device import SoundDeviceLineFactory
from ..storage.audio_assets import AudioAssets
from ..ui.desktop_types import DesktopApp
from ..ui.radio_controller import RadioController
from .audio_player import AudioPlayer
from .channel_manager import ChannelManager
from .morse_player import MorsePlayer


@dataclass(frozen=True)
class AppServices:
    line_factory: SoundDeviceLineFactory
    assets: AudioAssets
    player: AudioPlayer
    morse_player: MorsePlayer
    channel_manager: ChannelManager
    controller: RadioController
    app: Optional[DesktopApp]

    def shutdown(self) -> None:
        self.controller.shutdown()
        self.assets.close()


def build_rng(config: AppConfig) -> random.Random:
    if config.random_seed is None:
        return random.Random()
    return random.Random(config.random_seed)


def initialize_app_services(
    *,
    config: AppConfig,
    logger,
    sd_module=None,
    sf_module=None,
    create_ui: bool = True,
    app_factory: Callable[..., DesktopApp] | None = None,
) -> AppServices:
    """Construct all runtime services and return a typed service bundle."""
    rng = build_rng(config)
    line_factory = SoundDeviceLineFactory(
        sd_module=sd_module,
        device=config.output_device,
        software_gain=config.software_gain_enabled,
    )
    if not line_factory.available:
        logger.warning("sounddevice is unavailable; playback will be silent")

    def source_opener(path):
        return open_pcm_source(path, sf_module=sf_module)

    assets = AudioAssets(config.audio_root, logger)
    player = AudioPlayer(
        line_factory,
        logger=logger,
        rng=rng,
        source_opener=source_opener,
        buffer_bytes=config.stream_buffer_bytes,
        volume=config.default_volume,
        stop_join_timeout_ms=config.stop_join_timeout_ms,
    )
    morse_player = MorsePlayer(line_factory, logger=logger)
    channel_manager = ChannelManager(
        assets,
        player,
        morse_player,
        logger=logger,
        rng=rng,
        podcast_dir=config.podcast_dir,
        static_file=config.static_file,
        ghost_file=config.ghost_file,
        podcast_glitch_chance=config.podcast_glitch_chance,
        ghost_glitch_chance=config.ghost_glitch_chance,
        morse_message=config.ghost_morse_message,
    )
    controller = RadioController(channel_manager, logger=logger)

    app = None
    if create_ui:
        if app_factory is None:
            from ..ui.tkinter_app import create_tkinter_app

            app_factory = create_tkinter_app
        app = app_factory(controller=controller, logger=logger, on_close=assets.close)
        logger.debug("Desktop UI created: %s", type(app).__name__)

    return AppServices(
        line_factory=line_factory,
        assets=assets,
        player=player,
        morse_player=morse_player,
        channel_manager=channel_manager,
        controller=controller,
        app=app,
    )
