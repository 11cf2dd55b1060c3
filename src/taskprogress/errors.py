"""
Exceptions raised by the progress indicators.
"""

from dataclasses import dataclass
from typing import Optional


class TaskProgressError(Exception):
    """Base class for all taskprogress errors."""


@dataclass(frozen=True)
class TaskRef:
    """Identifies a task either by description or by numeric id."""

    name: Optional[str] = None
    task_id: Optional[int] = None

    def __str__(self) -> str:
        if self.name is not None:
            return f"named: {self.name}"
        return f"id: {self.task_id}"


class NoTaskError(TaskProgressError, LookupError):
    """Raised when a task lookup finds nothing."""

    def __init__(self, ref: TaskRef):
        self.ref = ref
        super().__init__(f"no task {ref}")


class IndicatorsClosedError(TaskProgressError):
    """Raised when a closed indicator set is asked to render again."""


class RenderLoopError(TaskProgressError):
    """Raised to callers when the background render loop died."""
