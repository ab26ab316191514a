"""
Configuration and argument-error handling for kmath.

Numeric domain problems (poles, non-finite inputs) are never routed through
here: kernels answer them with sentinel values. This module only governs what
happens when a caller passes an invalid *argument*, such as a digamma
precision below 1 or an inverted random range.

Copyright (c) 2026 kmath contributors

MIT License
"""

from enum import Enum
from typing import Type, Optional
from kmath.logger import get_logger

logger = get_logger(__name__)


class ErrorMode(Enum):
    """
    Error handling mode for kmath argument validation.

    STRICT: Invalid arguments raise exceptions (default, fail-fast)
    LENIENT: Recoverable problems are logged as warnings and the argument
        is corrected (clamped or swapped) before evaluation continues
    """
    STRICT = "strict"
    LENIENT = "lenient"


# Module-level default error mode
DEFAULT_ERROR_MODE: ErrorMode = ErrorMode.STRICT


def set_error_mode(mode: ErrorMode) -> None:
    """
    Set the default error mode for all kmath operations.

    Args:
        mode: The error mode to use
    """
    global DEFAULT_ERROR_MODE
    DEFAULT_ERROR_MODE = mode


def get_error_mode() -> ErrorMode:
    """
    Get the current default error mode.

    Returns:
        The current error mode
    """
    return DEFAULT_ERROR_MODE


def handle_error(
    message: str,
    fatal: bool = False,
    error_mode: Optional[ErrorMode] = None,
    exception_class: Type[Exception] = RuntimeError,
) -> bool:
    """
    Handle an argument error based on the error mode.

    In STRICT mode (or if fatal=True), raises an exception.
    In LENIENT mode (and fatal=False), logs a warning and returns True.

    Args:
        message: Error description
        fatal: If True, always raise regardless of mode
        error_mode: Override the default error mode (optional)
        exception_class: Exception type to raise (default: RuntimeError)

    Returns:
        True if the caller should continue with a corrected argument

    Raises:
        exception_class: If in STRICT mode or fatal=True

    Example:
        # In strict mode, raises ValueError
        # In lenient mode, logs warning and the caller clamps
        if precision < 1:
            if handle_error("precision must be >= 1", exception_class=ValueError):
                precision = 1

        # Always raises regardless of mode
        if len(coords) not in (1, 2, 3, 4):
            handle_error("noise needs 1-4 coordinates", fatal=True,
                         exception_class=ValueError)
    """
    mode = error_mode if error_mode is not None else DEFAULT_ERROR_MODE

    if fatal or mode == ErrorMode.STRICT:
        raise exception_class(message)
    else:
        logger.warning(message)
        return True
