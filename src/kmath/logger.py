"""
Logging configuration for kmath

The numeric kernels never log. Loggers are used by the configuration layer
(lenient-mode warnings) and by the `python -m kmath` entry point.

Copyright (c) 2026 kmath contributors

MIT License
"""

import logging
import sys
from typing import Optional


LOGGER_NAME = "kmath"


def set_global_logging(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
) -> logging.Logger:
    """
    Configure logging for an application using kmath.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_string: Custom format string for log messages
        log_file: Optional file path to write logs to

    Returns:
        The configured 'kmath' logger
    """
    if format_string is None:
        format_string = (
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )

    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stdout)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format=format_string,
        handlers=handlers,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)

    return logger


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: Logger name (defaults to 'kmath')

    Returns:
        Logger instance
    """
    if name is None:
        name = LOGGER_NAME
    return logging.getLogger(name)
