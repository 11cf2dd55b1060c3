"""
Timing configuration for the render loop.

All timing values are in seconds. Defaults can be overridden through the
environment (or a .env file):

- TASKPROGRESS_TICK_INTERVAL: pause between two render ticks
- TASKPROGRESS_ANIMATION_INTERVAL: minimum time between two spinner frames
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

TICK_INTERVAL_ENV = "TASKPROGRESS_TICK_INTERVAL"
ANIMATION_INTERVAL_ENV = "TASKPROGRESS_ANIMATION_INTERVAL"


@dataclass(frozen=True)
class TimingConfig:
    """
    Centralized timing configuration for the render loop.

    The tick interval controls how quickly state changes reach the
    terminal; the animation interval controls how fast spinners move.
    """

    tick_interval: float = 0.05
    """Time the render loop sleeps between two repaints"""

    animation_interval: float = 0.5
    """Spinners advance one frame at most this often"""


DEFAULT_TIMING = TimingConfig()


def _read_interval(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not a number", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value


def get_timing_config(
    tick_interval: Optional[float] = None,
    animation_interval: Optional[float] = None,
) -> TimingConfig:
    """
    Get the timing configuration.

    Explicit arguments win over environment variables, which win over the
    defaults.

    Args:
        tick_interval: Override the pause between render ticks
        animation_interval: Override the spinner frame interval

    Returns:
        TimingConfig with resolved values
    """
    load_dotenv()
    return TimingConfig(
        tick_interval=tick_interval
        if tick_interval is not None
        else _read_interval(TICK_INTERVAL_ENV, DEFAULT_TIMING.tick_interval),
        animation_interval=animation_interval
        if animation_interval is not None
        else _read_interval(
            ANIMATION_INTERVAL_ENV, DEFAULT_TIMING.animation_interval
        ),
    )
