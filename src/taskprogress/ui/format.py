"""
Display options for the progress indicators.
"""

from dataclasses import dataclass
from enum import Enum


class OutputMode(Enum):
    """How indicators reach the terminal."""

    ANSI = "ansi"
    """Redraw the task block in place with cursor movements"""

    RAW = "raw"
    """Append one line per state change, no cursor movement"""


@dataclass(frozen=True)
class ProgressFormat:
    """
    Render options.

    The requested output mode is only honoured when stdout is an
    interactive terminal; otherwise raw output is used. That decision is
    made once, when ProgressIndicators is constructed.
    """

    show_intermediate_messages: bool = True
    show_finished_tasks: bool = True
    output: OutputMode = OutputMode.ANSI
    auto_close: bool = False
