"""Task state model: spinners, tasks and their registry."""

from .registry import TaskRegistry
from .spinner import (
    BouncingSpinnerIterator,
    LoopingSpinnerIterator,
    Spinner,
    SpinnerIterator,
    SpinnerType,
)
from .task import BarTask, ProgressTask, SpinnerTask, TaskPrinter, TaskStatus

__all__ = [
    "TaskRegistry",
    "BouncingSpinnerIterator",
    "LoopingSpinnerIterator",
    "Spinner",
    "SpinnerIterator",
    "SpinnerType",
    "BarTask",
    "ProgressTask",
    "SpinnerTask",
    "TaskPrinter",
    "TaskStatus",
]
