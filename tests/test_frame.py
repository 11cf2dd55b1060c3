"""
Tests for frame building.
"""

from __future__ import annotations

from rich.text import Text

from taskprogress.core.frame import (
    TaskLine,
    physical_lines,
    render_frame,
    snapshot_lines,
    status_text,
)
from taskprogress.tasks.spinner import Spinner
from taskprogress.tasks.task import BarTask, SpinnerTask, TaskStatus
from taskprogress.ui.format import ProgressFormat


def _plain(lines) -> list[str]:
    return [line.plain for line in lines]


def _tasks():
    done = BarTask("Building module Logging", total=4)
    done.finish()
    running = SpinnerTask("Building module Main", spinner=Spinner(["x", "y"]))
    running.set_message("waiting on Logging")
    failed = SpinnerTask("Building module Net")
    failed.set_error()
    bar = BarTask("Building module Db", total=4, start=1)
    return [running, done, bar, failed]


def test_finished_tasks_come_first_in_registry_order() -> None:
    lines = snapshot_lines(_tasks(), ProgressFormat(), advance=False)
    assert [(line.status, line.description) for line in lines] == [
        (TaskStatus.FINISHED, "Building module Logging"),
        (TaskStatus.ERROR, "Building module Net"),
        (TaskStatus.RUNNING, "Building module Main"),
        (TaskStatus.RUNNING, "Building module Db"),
    ]


def test_render_frame_without_color() -> None:
    lines = snapshot_lines(_tasks(), ProgressFormat(), advance=False)
    assert _plain(render_frame(lines, use_color=False)) == [
        "[DONE] Building module Logging",
        "[ERR] Building module Net",
        "[x] Building module Main",
        "waiting on Logging",
        "[025] Building module Db",
    ]


def test_hidden_finished_tasks_and_messages() -> None:
    fmt = ProgressFormat(show_finished_tasks=False, show_intermediate_messages=False)
    lines = snapshot_lines(_tasks(), fmt, advance=False)
    assert _plain(render_frame(lines, use_color=False)) == [
        "[x] Building module Main",
        "[025] Building module Db",
    ]


def test_snapshot_advances_spinners_on_request() -> None:
    task = SpinnerTask("a", spinner=Spinner(["x", "y", "z"]))
    fmt = ProgressFormat()
    assert snapshot_lines([task], fmt, advance=False)[0].indicator == "x"
    assert snapshot_lines([task], fmt, advance=True)[0].indicator == "y"
    assert snapshot_lines([task], fmt, advance=False)[0].indicator == "y"


def test_multi_line_message_counts_each_line() -> None:
    line = TaskLine(TaskStatus.RUNNING, "a", "...", "first\nsecond\n\nfourth")
    assert _plain(render_frame([line], use_color=False)) == [
        "[...] a",
        "first",
        "second",
        "",
        "fourth",
    ]


def test_empty_message_prints_nothing() -> None:
    line = TaskLine(TaskStatus.RUNNING, "a", "...", "")
    assert len(render_frame([line], use_color=False)) == 1


def test_status_text_labels() -> None:
    assert status_text(TaskStatus.FINISHED, "a", use_color=False).plain == "[DONE] a"
    assert status_text(TaskStatus.ERROR, "a", use_color=False).plain == "[ERR] a"
    assert status_text(TaskStatus.CANCELLED, "a", use_color=False).plain == "[CANCELLED] a"


def test_status_text_colors_only_the_label() -> None:
    text = status_text(TaskStatus.CANCELLED, "a", use_color=True)
    assert [(text.plain[span.start : span.end], str(span.style)) for span in text.spans] == [
        ("CANCELLED", "yellow")
    ]
    assert status_text(TaskStatus.FINISHED, "a", use_color=False).spans == []


def test_message_style_follows_color_setting() -> None:
    line = TaskLine(TaskStatus.RUNNING, "a", "...", "note")
    colored = render_frame([line], use_color=True)[1]
    plain = render_frame([line], use_color=False)[1]
    assert str(colored.style) == "bright_black"
    assert str(plain.style) == ""


def test_physical_lines_keeps_blank_lines() -> None:
    assert _plain(physical_lines(Text("a\n"))) == ["a", ""]
    assert _plain(physical_lines(Text(""))) == [""]
