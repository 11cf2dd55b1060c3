"""
Task state model.

A task is running until it reaches exactly one terminal status: finished,
error or cancelled. Two kinds exist: SpinnerTask for work without a known
size and BarTask for work counted against a total.

Before registration a task is owned by its creator and guarded by a private
lock. Registration hands it the registry lock, which the render loop shares.
Reads are single attribute reads; every mutation takes the lock.
"""

from __future__ import annotations

import threading
from enum import Enum
from typing import Optional, Protocol

from ..ui.theme import PLACEHOLDER_INDICATOR
from .spinner import Spinner, SpinnerIterator


class TaskStatus(Enum):
    """Lifecycle state of a task."""

    RUNNING = "running"
    FINISHED = "finished"
    ERROR = "error"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self is not TaskStatus.RUNNING


class TaskPrinter(Protocol):
    """Receives task events in raw (append-only) output mode."""

    def print_task_start(self, task: "ProgressTask") -> None: ...

    def print_task_message(self, task: "ProgressTask", message: str) -> None: ...

    def print_task_end(self, task: "ProgressTask") -> None: ...


class ProgressTask:
    """Fields and transitions shared by SpinnerTask and BarTask."""

    def __init__(
        self,
        description: str,
        intermediate_message: Optional[str] = None,
        short_description: Optional[str] = None,
    ) -> None:
        self._description = description
        self._short_description = short_description
        self._intermediate_message = intermediate_message
        self._status = TaskStatus.RUNNING
        self._task_id: Optional[int] = None
        self._lock = threading.Lock()
        self._printer: Optional[TaskPrinter] = None
        self._spinner_iterator: Optional[SpinnerIterator] = None

    @property
    def description(self) -> str:
        return self._description

    @property
    def short_description(self) -> str:
        """Prefix used for raw-mode message lines."""
        return self._short_description or self._description

    @property
    def intermediate_message(self) -> Optional[str]:
        return self._intermediate_message

    @property
    def status(self) -> TaskStatus:
        return self._status

    @property
    def finished(self) -> bool:
        return self._status.is_terminal

    @property
    def is_error(self) -> bool:
        return self._status is TaskStatus.ERROR

    @property
    def is_cancelled(self) -> bool:
        return self._status is TaskStatus.CANCELLED

    @property
    def task_id(self) -> Optional[int]:
        """Registration index, None until the task is registered."""
        return self._task_id

    @property
    def progress(self) -> Optional[int]:
        """Percentage 0-100, or None to show an animation instead."""
        return None

    @property
    def spinner(self) -> Optional[Spinner]:
        return None

    @property
    def use_raw(self) -> bool:
        return self._printer is not None

    def set_message(self, message: str) -> None:
        """Replace the intermediate message, or print it in raw mode."""
        with self._lock:
            printer = self._printer
            if printer is None:
                self._intermediate_message = message
        if printer is not None:
            printer.print_task_message(self, message)

    def finish(self) -> None:
        self._transition(TaskStatus.FINISHED)

    def set_error(self) -> None:
        self._transition(TaskStatus.ERROR)

    def cancel(self) -> None:
        self._transition(TaskStatus.CANCELLED)

    def _transition(self, status: TaskStatus) -> None:
        with self._lock:
            changed = self._finish_locked(status)
            printer = self._printer
        if changed and printer is not None:
            printer.print_task_end(self)

    def _finish_locked(self, status: TaskStatus) -> bool:
        """Enter a terminal status once. Caller holds the lock."""
        if self._status.is_terminal:
            return False
        self._status = status
        return True

    def _attach(
        self, task_id: int, lock: threading.Lock, printer: Optional[TaskPrinter]
    ) -> None:
        self._task_id = task_id
        self._lock = lock
        self._printer = printer

    def _indicator(self, advance: bool) -> str:
        """
        Left column for a running task. Caller holds the lock.

        Args:
            advance: Step the spinner to its next frame

        Returns:
            Zero-padded percentage, spinner frame or placeholder
        """
        progress = self.progress
        if progress is not None:
            return f"{progress:03d}"
        spinner = self.spinner
        if spinner is None:
            return PLACEHOLDER_INDICATOR
        if self._spinner_iterator is None:
            self._spinner_iterator = spinner.make_iterator()
        if advance:
            return next(self._spinner_iterator)
        return self._spinner_iterator.current()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._description!r}, status={self._status.value})"


class SpinnerTask(ProgressTask):
    """Task of unknown size, shown with an animation."""

    def __init__(
        self,
        description: str,
        intermediate_message: Optional[str] = None,
        spinner: Optional[Spinner] = None,
        short_description: Optional[str] = None,
    ) -> None:
        super().__init__(description, intermediate_message, short_description)
        self._spinner = spinner or Spinner()

    @property
    def spinner(self) -> Spinner:
        return self._spinner


class BarTask(ProgressTask):
    """Task counted against a total; finished once the count reaches it."""

    def __init__(
        self,
        description: str,
        intermediate_message: Optional[str] = None,
        total: int = 100,
        start: int = 0,
        short_description: Optional[str] = None,
    ) -> None:
        if total <= 0:
            raise ValueError(f"total must be positive, got {total}")
        super().__init__(description, intermediate_message, short_description)
        self._total = total
        self._count = start
        if start >= total:
            self._status = TaskStatus.FINISHED

    @property
    def total(self) -> int:
        return self._total

    @property
    def count(self) -> int:
        return self._count

    @property
    def progress(self) -> int:
        return max(0, min(self._count * 100 // self._total, 100))

    def advance(self, count: int = 1) -> None:
        """Add to the counter; reaching the total finishes the task."""
        with self._lock:
            self._count += count
            completed = self._count >= self._total and self._finish_locked(
                TaskStatus.FINISHED
            )
            printer = self._printer
        if completed and printer is not None:
            printer.print_task_end(self)

    def _finish_locked(self, status: TaskStatus) -> bool:
        if not super()._finish_locked(status):
            return False
        self._count = self._total
        return True
