"""Locate audio assets on disk or inside the installed package."""
from __future__ import annotations

import os
from contextlib import ExitStack
from importlib import resources
from pathlib import Path
from typing import Optional

PACKAGE_NAME = "haunted_radio"
PACKAGED_AUDIO_DIR = "assets/audio"


class AudioAssets:
    """Resolve relative asset names, preferring the configured disk root.

    Packaged files are materialized with ``importlib.resources.as_file`` and
    the resulting paths stay valid until ``close()`` is called.
    """

    def __init__(
        self,
        root: str | os.PathLike,
        logger,
        *,
        package: str = PACKAGE_NAME,
        resource_dir: str = PACKAGED_AUDIO_DIR,
    ) -> None:
        self.root = Path(root)
        self.logger = logger
        self.package = package
        self.resource_dir = resource_dir
        self._stack = ExitStack()
        self._materialized: dict[str, Path] = {}
        self.logger.info("Audio root: %s", self.root)

    def resolve(self, relative: str) -> Optional[Path]:
        key = _normalize_relative(relative)
        if not key:
            return None
        disk_path = self.root / key
        if disk_path.is_file():
            return disk_path
        cached = self._materialized.get(key)
        if cached is not None:
            return cached
        packaged = self._packaged(key)
        if packaged is None:
            self.logger.debug("Audio asset not found: %s", key)
            return None
        try:
            path = Path(self._stack.enter_context(resources.as_file(packaged)))
        except Exception:
            self.logger.exception("Failed to materialize packaged asset %s", key)
            return None
        self._materialized[key] = path
        return path

    def list_episodes(self, folder: str) -> list[Path]:
        """Return the ``*.wav`` files of ``folder``, disk first, sorted by name."""
        key = _normalize_relative(folder)
        disk_dir = self.root / key
        if disk_dir.is_dir():
            return sorted(
                (path for path in disk_dir.iterdir() if _is_wav(path.name) and path.is_file()),
                key=lambda path: path.name.lower(),
            )
        packaged_dir = self._packaged(key, directory=True)
        if packaged_dir is None:
            self.logger.warning("Episode folder not found: %s", disk_dir)
            return []
        episodes = []
        for entry in sorted(packaged_dir.iterdir(), key=lambda item: item.name.lower()):
            if entry.is_file() and _is_wav(entry.name):
                resolved = self.resolve(f"{key}/{entry.name}")
                if resolved is not None:
                    episodes.append(resolved)
        return episodes

    def close(self) -> None:
        self._materialized.clear()
        self._stack.close()

    def _packaged(self, key: str, *, directory: bool = False):
        try:
            candidate = resources.files(self.package).joinpath(self.resource_dir)
            for part in key.split("/"):
                candidate = candidate.joinpath(part)
        except (ModuleNotFoundError, TypeError):
            return None
        if directory:
            return candidate if candidate.is_dir() else None
        return candidate if candidate.is_file() else None


def _normalize_relative(value: str) -> str:
    text = str(value or "").replace("\\", "/").strip().strip("/")
    if text.startswith("audio/"):
        text = text[len("audio/") :]
    return "/".join(part for part in text.split("/") if part and part not in (".", ".."))


def _is_wav(name: str) -> bool:
    return name.lower().endswith(".wav")
