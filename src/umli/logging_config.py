"""
Logging Configuration
Sets up the logger for the 'umli' namespace.
"""
from __future__ import annotations

import logging
import sys


def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Configures the 'umli' package logger to write to stderr.

    Args:
        level: Logging level (e.g. logging.DEBUG, "INFO")
    """
    logger = logging.getLogger("umli")
    logger.setLevel(level)

    # Avoid duplicate output when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)
    logger.debug("Logging initialized.")
