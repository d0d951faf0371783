"""Logging utilities for mime-to-ext."""

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


def configure_logging(level: str = "WARNING", stream: TextIO | None = None) -> None:
    """
    Configure logging for the application.

    Log records go to stderr by default so that command output on stdout
    stays clean.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        stream: Stream to write log records to.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
    )
