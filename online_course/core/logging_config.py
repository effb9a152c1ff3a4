# =============================================================================
# LOGGER - Logging Configuration
# =============================================================================
# Root logging setup for the API process.
# =============================================================================

from __future__ import annotations

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"


def configure_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure the ``online_course`` logger hierarchy.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string
        log_file: Optional file to write logs to

    Returns:
        The package logger
    """
    logger = logging.getLogger("online_course")
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Clear existing handlers so repeated app creation does not duplicate output
    logger.handlers.clear()

    formatter = logging.Formatter(format_string or DEFAULT_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
