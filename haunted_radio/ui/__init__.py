"""User interface layer.

The Tkinter surface lives in ``haunted_radio.ui.tkinter_app`` and is imported
on demand so headless interpreters without Tk can still load the controller.
"""

from .common import APP_TITLE, channel_from_knob, volume_from_knob
from .desktop_types import DesktopApp
from .radio_controller import RadioController

__all__ = [
    "APP_TITLE",
    "DesktopApp",
    "RadioController",
    "channel_from_knob",
    "volume_from_knob",
]
