"""
Pytest configuration and fixtures.
"""

import io
import re
import sys
from pathlib import Path
from typing import List

import pytest


def pytest_configure(config):
    """Configure pytest."""
    # Add src to path
    src_path = Path(__file__).parent.parent / "src"
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def plain_environment(monkeypatch):
    """Keep host terminal settings from leaking into console detection."""
    monkeypatch.setenv("TERM", "xterm-256color")
    for name in (
        "FORCE_COLOR",
        "NO_COLOR",
        "TTY_COMPATIBLE",
        "TASKPROGRESS_TICK_INTERVAL",
        "TASKPROGRESS_ANIMATION_INTERVAL",
    ):
        monkeypatch.delenv(name, raising=False)


def make_terminal_console():
    from rich.console import Console

    return Console(
        file=io.StringIO(),
        force_terminal=True,
        color_system="standard",
        no_color=False,
        width=100,
    )


def make_piped_console():
    from rich.console import Console

    return Console(file=io.StringIO(), force_terminal=False, width=100)


@pytest.fixture
def terminal_console():
    """Console that believes it writes to an interactive terminal."""
    return make_terminal_console()


@pytest.fixture
def piped_console():
    """Console that writes to a pipe."""
    return make_piped_console()


@pytest.fixture
def fast_timing():
    from taskprogress.config import TimingConfig

    return TimingConfig(tick_interval=0.005, animation_interval=0.01)


ANSI_ESCAPE = re.compile(r"\x1b\[[\d;?]*[A-Za-z]")


def strip_ansi(text: str) -> str:
    return ANSI_ESCAPE.sub("", text)


class VirtualTerminal:
    """
    Minimal terminal emulator for checking redraws.

    Understands printable text, newlines, cursor up/down and erase to end
    of line. Colour and cursor visibility sequences are ignored.
    """

    _TOKEN = re.compile(r"\x1b\[\??([\d;]*)([A-Za-z])|\n|[^\x1b\n]+")

    def __init__(self) -> None:
        self.rows: List[str] = [""]
        self.row = 0
        self.col = 0

    def feed(self, data: str) -> None:
        for match in self._TOKEN.finditer(data):
            token = match.group(0)
            if token == "\n":
                self.row += 1
                self.col = 0
            elif match.group(2):
                self._control(match.group(1), match.group(2))
            else:
                self._write(token)
            while len(self.rows) <= self.row:
                self.rows.append("")

    def _control(self, param: str, command: str) -> None:
        count = int(param) if param.isdigit() else 1
        if command == "A":
            self.row = max(0, self.row - count)
        elif command == "B":
            self.row += count
        elif command == "K" and param in ("", "0"):
            self.rows[self.row] = self.rows[self.row][: self.col]

    def _write(self, text: str) -> None:
        line = self.rows[self.row].ljust(self.col)
        self.rows[self.row] = line[: self.col] + text + line[self.col + len(text) :]
        self.col += len(text)

    def above_cursor(self, count: int) -> List[str]:
        """The count rows right above the cursor."""
        return self.rows[max(0, self.row - count) : self.row]

    def below_cursor(self) -> List[str]:
        return self.rows[self.row :]


class StreamReader:
    """Hands out what was written to a console since the last read."""

    def __init__(self, console) -> None:
        self._file = console.file
        self._offset = 0

    def read(self) -> str:
        data = self._file.getvalue()
        new, self._offset = data[self._offset :], len(data)
        return new
