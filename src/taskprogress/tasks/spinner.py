"""
Spinner animations and the iterators that step through their frames.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional, Sequence

from ..ui.theme import DEFAULT_SPINNER_FRAMES


class SpinnerType(Enum):
    """How a spinner walks its frames."""

    LOOPING = "looping"
    BOUNCING = "bouncing"


class SpinnerIterator(Iterator[str]):
    """Endless cursor over a non-empty frame sequence."""

    def __init__(self, frames: Sequence[str]) -> None:
        self._frames = tuple(frames)
        self._index = 0
        self._current: Optional[str] = None

    def __iter__(self) -> "SpinnerIterator":
        return self

    def current(self) -> str:
        """Return the last frame without advancing, or the first one."""
        if self._current is None:
            return next(self)
        return self._current


class LoopingSpinnerIterator(SpinnerIterator):
    """Yields frames 0..N-1 and starts over."""

    def __next__(self) -> str:
        self._current = self._frames[self._index]
        self._index = (self._index + 1) % len(self._frames)
        return self._current


class BouncingSpinnerIterator(SpinnerIterator):
    """
    Walks frames forward then backward: 0..N-1..0..N-1.

    The end frames are never shown twice in a row.
    """

    def __init__(self, frames: Sequence[str]) -> None:
        super().__init__(frames)
        self._forward = True

    def __next__(self) -> str:
        count = len(self._frames)
        if count == 1:
            self._current = self._frames[0]
            return self._current

        if self._index == count:
            self._index -= 2
            self._forward = False
        elif self._index == -1:
            self._index = 1
            self._forward = True

        self._current = self._frames[self._index]
        self._index += 1 if self._forward else -1
        return self._current


@dataclass(frozen=True)
class Spinner:
    """An animation: ordered frames plus the way they are walked."""

    frames: Sequence[str] = DEFAULT_SPINNER_FRAMES
    spinner_type: SpinnerType = SpinnerType.LOOPING

    def __post_init__(self) -> None:
        frames = tuple(self.frames)
        if not frames:
            raise ValueError("a spinner needs at least one frame")
        object.__setattr__(self, "frames", frames)
        object.__setattr__(self, "spinner_type", SpinnerType(self.spinner_type))

    def make_iterator(self) -> SpinnerIterator:
        if self.spinner_type is SpinnerType.BOUNCING:
            return BouncingSpinnerIterator(self.frames)
        return LoopingSpinnerIterator(self.frames)
