"""
Frame building: turns a locked snapshot of tasks into terminal lines.

Everything here is pure; the render loop takes the snapshot under the
registry lock and renders outside of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from rich.text import Text

from ..tasks.task import ProgressTask, TaskStatus
from ..ui.format import ProgressFormat
from ..ui.theme import STARTING_LABEL, STATUS_LABELS, THEME

_STATUS_STYLES = {
    TaskStatus.FINISHED: THEME["done"],
    TaskStatus.ERROR: THEME["error"],
    TaskStatus.CANCELLED: THEME["cancelled"],
}


@dataclass(frozen=True)
class TaskLine:
    """What one task shows in a frame."""

    status: TaskStatus
    description: str
    indicator: Optional[str] = None
    message: Optional[str] = None


def snapshot_lines(
    tasks: Iterable[ProgressTask], fmt: ProgressFormat, advance: bool
) -> List[TaskLine]:
    """
    Capture display state: finished tasks first, then running ones.

    Caller holds the registry lock. Spinners of running tasks are stepped
    here when advance is set.
    """
    finished: List[TaskLine] = []
    running: List[TaskLine] = []
    for task in tasks:
        if task.finished:
            if fmt.show_finished_tasks:
                finished.append(TaskLine(task.status, task.description))
            continue
        message = task.intermediate_message if fmt.show_intermediate_messages else None
        running.append(
            TaskLine(task.status, task.description, task._indicator(advance), message)
        )
    return finished + running


def physical_lines(text: Text) -> List[Text]:
    """Split on embedded newlines so every entry is one terminal line."""
    return list(text.split("\n", allow_blank=True))


def status_text(status: TaskStatus, description: str, use_color: bool) -> Text:
    """[DONE] / [ERR] / [CANCELLED] line of a finished task."""
    label = STATUS_LABELS[status.value]
    style = _STATUS_STYLES[status] if use_color else ""
    return Text.assemble("[", (label, style), "] ", description)


def starting_text(description: str) -> Text:
    return Text(f"[{STARTING_LABEL}] {description}")


def message_text(prefix: str, message: str) -> Text:
    return Text(f"[{prefix}] {message}")


def render_frame(lines: Iterable[TaskLine], use_color: bool) -> List[Text]:
    """
    Render task lines to terminal lines.

    Returns:
        One Text per physical line; len() is the frame height
    """
    rendered: List[Text] = []
    for line in lines:
        if line.status.is_terminal:
            rendered.extend(
                physical_lines(status_text(line.status, line.description, use_color))
            )
            continue
        rendered.extend(physical_lines(Text(f"[{line.indicator}] {line.description}")))
        if line.message:
            style = THEME["message"] if use_color else ""
            rendered.extend(physical_lines(Text(line.message, style=style)))
    return rendered
