"""
Terminal progress indicators.

Tracks a set of concurrently running tasks (spinners and progress bars) and
keeps a compact status block up to date in the terminal, redrawing it in
place with cursor movements, or appending plain lines when output is not an
interactive terminal.
"""

import logging

from .config import TimingConfig, get_timing_config
from .core import ProgressIndicators
from .errors import (
    IndicatorsClosedError,
    NoTaskError,
    RenderLoopError,
    TaskProgressError,
    TaskRef,
)
from .tasks import (
    BarTask,
    BouncingSpinnerIterator,
    LoopingSpinnerIterator,
    ProgressTask,
    Spinner,
    SpinnerTask,
    SpinnerType,
    TaskRegistry,
    TaskStatus,
)
from .ui import OutputMode, ProgressFormat
from .utils import setup_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "TimingConfig",
    "get_timing_config",
    "ProgressIndicators",
    "IndicatorsClosedError",
    "NoTaskError",
    "RenderLoopError",
    "TaskProgressError",
    "TaskRef",
    "BarTask",
    "BouncingSpinnerIterator",
    "LoopingSpinnerIterator",
    "ProgressTask",
    "Spinner",
    "SpinnerTask",
    "SpinnerType",
    "TaskRegistry",
    "TaskStatus",
    "OutputMode",
    "ProgressFormat",
    "setup_logging",
]
