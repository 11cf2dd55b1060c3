"""
Ordered, append-only collection of tasks behind a single lock.
"""

from __future__ import annotations

import threading
from typing import Iterator, List, Optional

from ..errors import NoTaskError, TaskRef
from .task import ProgressTask, TaskPrinter


class TaskRegistry:
    """
    Tasks in insertion order.

    The registry lock is the one lock of the whole indicator set: task
    mutations, the render loop snapshot and the global message queue all
    serialize through it. Methods suffixed with _locked expect the caller
    to hold it.
    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self._tasks: List[ProgressTask] = []

    def add(
        self, task: ProgressTask, printer: Optional[TaskPrinter] = None
    ) -> ProgressTask:
        """
        Append a task and hand it the registry lock.

        Args:
            task: A task that is not registered anywhere yet
            printer: Raw-mode printer the task reports its events to

        Returns:
            The task, now carrying its task_id
        """
        self.register(task, printer)
        return task

    def register(
        self, task: ProgressTask, printer: Optional[TaskPrinter] = None
    ) -> bool:
        """
        Append a task and report whether it was already terminal.

        The status is read in the same lock scope that attaches the printer,
        so exactly one of the caller and the task prints its end line.

        Returns:
            True if the task finished before the printer was attached
        """
        if task.task_id is not None:
            raise ValueError(f"{task!r} is already registered")
        # A concurrent add of the same task blocks here, then sees the id
        with task._lock:
            with self.lock:
                if task.task_id is not None:
                    raise ValueError(f"{task!r} is already registered")
                task._attach(len(self._tasks), self.lock, printer)
                self._tasks.append(task)
                return task.finished

    def tasks_locked(self) -> List[ProgressTask]:
        return list(self._tasks)

    def all_finished_locked(self) -> bool:
        return all(task.finished for task in self._tasks)

    def snapshot(self) -> List[ProgressTask]:
        with self.lock:
            return self.tasks_locked()

    @property
    def all_finished(self) -> bool:
        """True when no running task exists (also when there are none)."""
        with self.lock:
            return self.all_finished_locked()

    def finish_all(self) -> None:
        for task in self.snapshot():
            task.finish()

    def get(
        self, name: Optional[str] = None, task_id: Optional[int] = None
    ) -> ProgressTask:
        """
        Look a task up by description (or short description) or by id.

        Raises:
            NoTaskError: If nothing matches
        """
        if (name is None) == (task_id is None):
            raise ValueError("pass exactly one of name or task_id")
        with self.lock:
            if task_id is not None:
                if 0 <= task_id < len(self._tasks):
                    return self._tasks[task_id]
                raise NoTaskError(TaskRef(task_id=task_id))
            for task in self._tasks:
                if name in (task.description, task.short_description):
                    return task
        raise NoTaskError(TaskRef(name=name))

    def __len__(self) -> int:
        with self.lock:
            return len(self._tasks)

    def __iter__(self) -> Iterator[ProgressTask]:
        return iter(self.snapshot())
