"""Storage layer for audio asset lookup."""

from .audio_assets import AudioAssets

__all__ = ["AudioAssets"]
