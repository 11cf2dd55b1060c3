"""
Demo: two module builds, one waiting on the other.
"""

import threading
import time
from typing import Optional

from rich.console import Console

from .core import ProgressIndicators
from .tasks import Spinner, SpinnerTask, SpinnerType
from .ui import OutputMode, ProgressFormat, ansi
from .utils import setup_logging


def build_logging(
    indicators: ProgressIndicators, main: SpinnerTask, step_delay: float
) -> None:
    """Drive the Logging build to completion, then release Main."""
    time.sleep(step_delay * 10)
    logging_task = indicators.bar_task(
        "Building module Logging", total=100, short_description="Logging"
    )
    for i in range(100):
        logging_task.advance()
        if i == 75:
            logging_task.set_message("Almost done...")
        elif i == 50:
            indicators.global_message("We're halfway there")
        time.sleep(step_delay)
    main.finish()


def run_demo(
    progress_format: ProgressFormat,
    bounce: bool = False,
    step_delay: float = 0.1,
    console: Optional[Console] = None,
) -> ProgressIndicators:
    indicators = ProgressIndicators(progress_format, console=console)
    indicators.show()

    spinner_type = SpinnerType.BOUNCING if bounce else SpinnerType.LOOPING
    main = indicators.spinner_task(
        "Building module Main",
        spinner=Spinner(spinner_type=spinner_type),
        short_description="Main",
    )
    main.set_message("waiting on Logging")

    worker = threading.Thread(
        target=build_logging, args=(indicators, main, step_delay), daemon=True
    )
    worker.start()
    worker.join()

    indicators.set_can_close()
    indicators.wait()
    return indicators


def cli():
    """CLI entry point with argument parsing."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Terminal progress indicators demo",
    )
    parser.add_argument(
        "--raw",
        action="store_true",
        help="Append plain lines instead of redrawing in place",
    )
    parser.add_argument(
        "--auto-close",
        action="store_true",
        help="Stop rendering as soon as every task is finished",
    )
    parser.add_argument(
        "--hide-messages",
        action="store_true",
        help="Do not show intermediate task messages",
    )
    parser.add_argument(
        "--hide-finished",
        action="store_true",
        help="Do not show finished tasks",
    )
    parser.add_argument(
        "--bounce",
        action="store_true",
        help="Use a bouncing spinner",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log render loop events to stderr",
    )

    args = parser.parse_args()
    setup_logging(verbose=args.verbose)

    progress_format = ProgressFormat(
        show_intermediate_messages=not args.hide_messages,
        show_finished_tasks=not args.hide_finished,
        output=OutputMode.RAW if args.raw else OutputMode.ANSI,
        auto_close=args.auto_close,
    )
    try:
        run_demo(progress_format, bounce=args.bounce)
    except KeyboardInterrupt:
        Console().control(ansi.show_cursor())
        raise SystemExit(130)


if __name__ == "__main__":
    cli()
