"""
Tests for the demo program and its command line.
"""

import logging
import sys

import pytest

import taskprogress.__main__ as demo
from taskprogress.tasks import SpinnerType
from taskprogress.ui.format import OutputMode, ProgressFormat
from taskprogress.utils import setup_logging
from taskprogress.utils.logging_config import PACKAGE_LOGGER


def test_raw_demo_transcript(piped_console) -> None:
    indicators = demo.run_demo(ProgressFormat(), step_delay=0, console=piped_console)

    assert indicators.finished
    assert piped_console.file.getvalue().splitlines() == [
        "[starting] Building module Main",
        "[Main] waiting on Logging",
        "[starting] Building module Logging",
        "We're halfway there",
        "[Logging] Almost done...",
        "[DONE] Building module Logging",
        "[DONE] Building module Main",
    ]


def test_demo_bounce_uses_bouncing_spinner(piped_console) -> None:
    indicators = demo.run_demo(
        ProgressFormat(), bounce=True, step_delay=0, console=piped_console
    )
    main = indicators.get_task(name="Main")
    assert main.spinner.spinner_type is SpinnerType.BOUNCING


@pytest.fixture
def captured_run(monkeypatch):
    calls = []

    def fake_run_demo(progress_format, bounce=False, **kwargs):
        calls.append((progress_format, bounce))

    monkeypatch.setattr(demo, "run_demo", fake_run_demo)
    monkeypatch.setattr(demo, "setup_logging", lambda verbose=False: None)
    return calls


def test_cli_defaults(monkeypatch, captured_run) -> None:
    monkeypatch.setattr(sys, "argv", ["taskprogress-demo"])
    demo.cli()
    assert captured_run == [(ProgressFormat(), False)]


def test_cli_flags(monkeypatch, captured_run) -> None:
    monkeypatch.setattr(
        sys,
        "argv",
        [
            "taskprogress-demo",
            "--raw",
            "--auto-close",
            "--hide-messages",
            "--hide-finished",
            "--bounce",
        ],
    )
    demo.cli()
    progress_format, bounce = captured_run[0]
    assert progress_format == ProgressFormat(
        show_intermediate_messages=False,
        show_finished_tasks=False,
        output=OutputMode.RAW,
        auto_close=True,
    )
    assert bounce


def test_cli_interrupt_exits_130(monkeypatch) -> None:
    def interrupted(*args, **kwargs):
        raise KeyboardInterrupt

    monkeypatch.setattr(sys, "argv", ["taskprogress-demo"])
    monkeypatch.setattr(demo, "run_demo", interrupted)
    monkeypatch.setattr(demo, "setup_logging", lambda verbose=False: None)
    with pytest.raises(SystemExit) as excinfo:
        demo.cli()
    assert excinfo.value.code == 130


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    logger.handlers, logger.level, logger.propagate = saved


def test_setup_logging_levels(package_logger) -> None:
    setup_logging(verbose=True)
    assert package_logger.level == logging.DEBUG
    setup_logging()
    assert package_logger.level == logging.WARNING
    assert len(package_logger.handlers) == 1
    assert package_logger.handlers[0].stream is sys.stderr
    assert not package_logger.propagate
