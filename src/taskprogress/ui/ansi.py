"""
Terminal control surface.

Each helper maps to one fixed ANSI control sequence and returns a
rich Control, which can be handed to Console.control() or turned into the
raw escape string with str().
"""

from rich.color import ColorSystem
from rich.control import Control, ControlType
from rich.style import Style

PALETTE = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)

# Fixed SGR reset; rich closes every styled span rendered by colorize with it
RESET = "\x1b[0m"


def move_to(row: int, col: int) -> Control:
    """Move the cursor to a 1-based (row, col) position."""
    return Control.move_to(col - 1, row - 1)


def cursor_up(lines: int = 1) -> Control:
    """Move the cursor up; zero lines emits nothing."""
    return Control.move(y=-lines)


def cursor_down(lines: int = 1) -> Control:
    """Move the cursor down; zero lines emits nothing."""
    return Control.move(y=lines)


def clear_screen() -> Control:
    return Control.clear()


def clear_to_end_of_line() -> Control:
    return Control((ControlType.ERASE_IN_LINE, 0))


def hide_cursor() -> Control:
    return Control.show_cursor(False)


def show_cursor() -> Control:
    return Control.show_cursor(True)


def colorize(text: str, color: str) -> str:
    """
    Wrap text in a palette foreground color followed by a reset.

    Args:
        text: Text to color
        color: One of PALETTE

    Returns:
        The escaped string
    """
    if color not in PALETTE:
        raise ValueError(f"unknown palette color: {color!r}")
    return Style(color=color).render(text, color_system=ColorSystem.STANDARD)
