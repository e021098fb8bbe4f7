"""Desktop UI interfaces."""

from __future__ import annotations

from typing import Protocol


class DesktopApp(Protocol):
    """Desktop application contract."""

    title: str

    def launch(self) -> None:
        """Start the UI main loop."""

    def build_for_test(self):
        """Build the widget tree without entering the main loop."""
