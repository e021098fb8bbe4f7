"""Application layer orchestration."""

from .audio_player import AudioPlayer
from .bootstrap import AppServices, initialize_app_services
from .channel_manager import ChannelManager
from .glitch_scheduler import GlitchScheduler, PlaybackWorker
from .morse_player import MorsePlayer
from .player_state import PlayerState

__all__ = [
    "AppServices",
    "AudioPlayer",
    "ChannelManager",
    "GlitchScheduler",
    "MorsePlayer",
    "PlaybackWorker",
    "PlayerState",
    "initialize_app_services",
]
