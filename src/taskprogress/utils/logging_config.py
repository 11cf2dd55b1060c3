"""
Logging configuration for the taskprogress package.

The render stream belongs to the indicators, so package logs never go to
stdout. By default they are discarded; setup_logging() routes them to stderr.
"""

import logging
import sys

PACKAGE_LOGGER = "taskprogress"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """
    Configure the package logger.

    Args:
        verbose: If True, emit debug logs on stderr. If False, only warnings.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False
