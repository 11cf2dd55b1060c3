"""
Terminal-facing pieces: control sequences, colours and display options.
"""

from . import ansi
from .format import OutputMode, ProgressFormat
from .theme import DEFAULT_SPINNER_FRAMES, THEME

__all__ = ["ansi", "OutputMode", "ProgressFormat", "DEFAULT_SPINNER_FRAMES", "THEME"]
