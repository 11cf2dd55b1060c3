"""Configuration for the render loop."""

from .timing_config import DEFAULT_TIMING, TimingConfig, get_timing_config

__all__ = ["DEFAULT_TIMING", "TimingConfig", "get_timing_config"]
