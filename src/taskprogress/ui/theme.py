"""
UI theme configuration: colors, labels and spinner frames.
"""

from typing import Dict

THEME: Dict[str, str] = {
    # Task states
    "done": "green",
    "error": "red",
    "cancelled": "yellow",
    # Text types
    "message": "bright_black",  # Dark gray
}

STATUS_LABELS: Dict[str, str] = {
    "finished": "DONE",
    "error": "ERR",
    "cancelled": "CANCELLED",
}

STARTING_LABEL = "starting"

# Shown for running tasks without progress or spinner
PLACEHOLDER_INDICATOR = "..."

DEFAULT_SPINNER_FRAMES = ("*--", "-*-", "--*")
