"""Haunted radio: segmented glitch playback, Morse broadcasts and a riddle gate."""

__version__ = "0.1.0"
