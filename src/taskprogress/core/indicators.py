"""
Live progress indicators.

ProgressIndicators owns a task registry and shows it on a rich Console.
On an interactive terminal a background thread repaints the task block in
place: each tick moves the cursor back over the previous frame, prints the
new one and clears whatever the old frame left below it. Elsewhere (pipes,
log files, dumb terminals) every state change is appended as one line.

The number of lines the loop believes it printed must always match what the
terminal shows, otherwise the next cursor-up lands in the wrong place.
"""

from __future__ import annotations

import logging
import threading
import time
from types import TracebackType
from typing import List, Optional, Type

from rich.console import Console
from rich.text import Text

from ..config import TimingConfig, get_timing_config
from ..errors import IndicatorsClosedError, RenderLoopError
from ..tasks.registry import TaskRegistry
from ..tasks.spinner import Spinner
from ..tasks.task import BarTask, ProgressTask, SpinnerTask
from ..ui import ansi
from ..ui.format import OutputMode, ProgressFormat
from .frame import (
    message_text,
    render_frame,
    snapshot_lines,
    starting_text,
    status_text,
)

logger = logging.getLogger(__name__)


class ProgressIndicators:
    """
    A set of tasks rendered as one status block.

    Usage:
        indicators = ProgressIndicators(ProgressFormat(auto_close=True))
        build = indicators.bar_task("Building", total=10)
        indicators.show()
        for _ in range(10):
            build.advance()
        indicators.wait()

    An instance renders a single run: once closed it cannot be shown again.
    With auto_close, register tasks before show(); an empty set counts as
    finished.
    """

    def __init__(
        self,
        format: Optional[ProgressFormat] = None,
        console: Optional[Console] = None,
        timing: Optional[TimingConfig] = None,
    ) -> None:
        self.console = console or Console()
        self.timing = timing or get_timing_config()
        self.registry = TaskRegistry()
        self._lock = self.registry.lock
        self._format = format or ProgressFormat()

        interactive = self.console.is_terminal and not self.console.is_dumb_terminal
        self.output_mode = self._format.output if interactive else OutputMode.RAW
        self.use_color = (
            interactive
            and self.console.color_system is not None
            and not self.console.no_color
        )

        self._messages: List[str] = []
        self._can_close = False
        self._force_refresh = False
        self._finished = False
        self._thread: Optional[threading.Thread] = None
        self._closed = threading.Event()
        self._error: Optional[BaseException] = None

    @property
    def format(self) -> ProgressFormat:
        return self._format

    @property
    def raw_output(self) -> bool:
        return self.output_mode is OutputMode.RAW

    @property
    def tasks(self) -> List[ProgressTask]:
        return self.registry.snapshot()

    @property
    def all_finished(self) -> bool:
        return self.registry.all_finished

    @property
    def finished(self) -> bool:
        """
        True once the indicators are done.

        In raw mode this is simply "all tasks finished". In ANSI mode it
        turns true when the render loop closes.

        Raises:
            RenderLoopError: If the render loop died
        """
        self._raise_render_error()
        if self.raw_output:
            return self.all_finished
        with self._lock:
            return self._finished

    def set_format(self, format: ProgressFormat) -> None:
        """Swap display options; the next tick redraws everything."""
        with self._lock:
            self._format = format
            self._force_refresh = True
        if format.output is not self.output_mode:
            logger.debug(
                "Output mode stays %s for this run", self.output_mode.value
            )

    def set_can_close(self) -> None:
        """
        Allow the render loop to stop once every task is finished.

        Only needed when format.auto_close is False.
        """
        with self._lock:
            self._can_close = True

    def add_task(self, task: ProgressTask) -> ProgressTask:
        """Register a task; raw mode announces it right away."""
        if not self.raw_output:
            self.registry.add(task)
            return task
        if task.task_id is not None:
            raise ValueError(f"{task!r} is already registered")
        # The start line goes out before the printer is attached
        self.print_task_start(task)
        if self.registry.register(task, self):
            self.print_task_end(task)
        return task

    def spinner_task(
        self,
        description: str,
        intermediate_message: Optional[str] = None,
        spinner: Optional[Spinner] = None,
        short_description: Optional[str] = None,
    ) -> SpinnerTask:
        task = SpinnerTask(
            description,
            intermediate_message=intermediate_message,
            spinner=spinner,
            short_description=short_description,
        )
        self.add_task(task)
        return task

    def bar_task(
        self,
        description: str,
        intermediate_message: Optional[str] = None,
        total: int = 100,
        start: int = 0,
        short_description: Optional[str] = None,
    ) -> BarTask:
        task = BarTask(
            description,
            intermediate_message=intermediate_message,
            total=total,
            start=start,
            short_description=short_description,
        )
        self.add_task(task)
        return task

    def get_task(
        self, name: Optional[str] = None, task_id: Optional[int] = None
    ) -> ProgressTask:
        return self.registry.get(name=name, task_id=task_id)

    def finish_all(self) -> None:
        self.registry.finish_all()

    def global_message(self, message: str) -> None:
        """
        Print a message above the task block.

        Raw mode, and a render loop that already closed, print it as a
        plain line right away.
        """
        if not self.raw_output:
            with self._lock:
                if not self._finished:
                    self._messages.append(message)
                    return
        self._print_line(Text(message))

    def show(self) -> None:
        """
        Start showing the indicators.

        Raises:
            IndicatorsClosedError: If this instance already closed
        """
        if self._closed.is_set():
            raise IndicatorsClosedError(
                "indicators already closed; create a new instance"
            )
        if self.raw_output:
            logger.debug("Raw output: printing task events as they happen")
            return
        with self._lock:
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._run, name="taskprogress-render", daemon=True
            )
            self._thread.start()
        logger.debug("Render loop started")

    def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Block until the indicators are finished.

        Args:
            timeout: Give up after this many seconds

        Returns:
            Whether the indicators finished in time

        Raises:
            RenderLoopError: If the render loop died
        """
        if self.raw_output:
            deadline = None if timeout is None else time.monotonic() + timeout
            while not self.all_finished:
                if deadline is not None and time.monotonic() >= deadline:
                    return False
                time.sleep(self.timing.tick_interval)
            return True
        if self._thread is None:
            raise RuntimeError("show() must be called before wait()")
        self._closed.wait(timeout)
        return self.finished

    def __enter__(self) -> "ProgressIndicators":
        self.show()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if exc_type is not None:
            for task in self.registry.snapshot():
                task.cancel()
        self.set_can_close()
        if self.raw_output or self._thread is not None:
            self.wait()

    # Raw output

    def print_task_start(self, task: ProgressTask) -> None:
        self._print_line(starting_text(task.description))

    def print_task_message(self, task: ProgressTask, message: str) -> None:
        self._print_line(message_text(task.short_description, message))

    def print_task_end(self, task: ProgressTask) -> None:
        self._print_line(status_text(task.status, task.description, self.use_color))

    def _print_line(self, text: Text) -> None:
        self.console.print(text, soft_wrap=True)

    # Render loop

    def _run(self) -> None:
        try:
            self._render_loop()
        except Exception as exc:
            logger.exception("Render loop failed")
            self._error = exc
        finally:
            self._closed.set()

    def _raise_render_error(self) -> None:
        if self._error is not None:
            raise RenderLoopError("render loop failed") from self._error

    def _render_loop(self) -> None:
        self.console.control(ansi.hide_cursor())
        prev_line_count = self._draw(0, advance=False)
        last_frame = time.monotonic()
        prev_was_finished = False

        while True:
            time.sleep(self.timing.tick_interval)

            with self._lock:
                all_finished = self.registry.all_finished_locked()
                may_close = self._format.auto_close or self._can_close
                refresh = self._force_refresh or bool(self._messages)
                self._force_refresh = False

            if not all_finished:
                prev_was_finished = False
                now = time.monotonic()
                advance = now - last_frame >= self.timing.animation_interval
                if advance:
                    last_frame = now
                prev_line_count = self._draw(prev_line_count, advance)
                continue

            if prev_was_finished and not may_close and not refresh:
                continue
            prev_line_count = self._draw(prev_line_count, advance=False)
            prev_was_finished = True
            if not may_close:
                continue
            with self._lock:
                # Messages queued after the last draw keep the loop open
                self._finished = not self._messages
            if self._finished:
                self.console.control(ansi.show_cursor())
                logger.debug("Render loop closed")
                return

    def _draw(self, prev_line_count: int, advance: bool) -> int:
        """
        Replace the previous frame with the current one.

        Args:
            prev_line_count: Lines the previous frame occupies above the cursor
            advance: Step spinners to their next frame

        Returns:
            Lines the new frame occupies above the cursor
        """
        with self._lock:
            messages, self._messages = self._messages, []
            lines = snapshot_lines(
                self.registry.tasks_locked(), self._format, advance
            )

        # Every wrapped row of a message is one counted terminal line
        message_lines: List[Text] = []
        for message in messages:
            message_lines.extend(Text(message).wrap(self.console, self.console.width))
        frame = render_frame(lines, self.use_color)

        with self.console:
            self.console.control(ansi.cursor_up(prev_line_count))
            for line in message_lines + frame:
                self._print_cleared(line)
            orphaned = prev_line_count - len(message_lines) - len(frame)
            if orphaned > 0:
                for _ in range(orphaned):
                    self._print_cleared(Text())
                self.console.control(ansi.cursor_up(orphaned))
        return len(frame)

    def _print_cleared(self, line: Text) -> None:
        # Lines wider than the terminal are cut so each one takes exactly one row
        self.console.control(ansi.clear_to_end_of_line())
        self.console.print(line, no_wrap=True, overflow="ellipsis")
