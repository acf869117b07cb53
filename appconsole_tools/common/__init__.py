"""
================================================================================
App Console Tools - Common Utilities
================================================================================

Shared logging setup and filesystem helpers for the test suites and the
test runner.

Exports:
    - init_logger: Configure the loguru logger with standard settings
    - ensure_directory: Create a directory if it does not exist

Usage:
    from appconsole_tools.common import init_logger

    init_logger(level="DEBUG", log_file="logs/ui_tests.log")

================================================================================
"""

import os
import sys
from typing import Optional

from loguru import logger


DEFAULT_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)

_logger_initialized = False


def init_logger(
    level: str = "INFO",
    format_string: Optional[str] = None,
    log_file: Optional[str] = None,
    rotation: str = "10 MB",
    retention: str = "7 days",
    force: bool = False,
) -> None:
    """
    Initializes the loguru logger with standard settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_string: Log format string. Uses DEFAULT_FORMAT if not provided.
        log_file: Optional file path to write logs to.
        rotation: Rotation policy for the file sink
        retention: Retention policy for the file sink
        force: Re-initialize even if already configured

    Example:
        init_logger()  # Use defaults
        init_logger(level="DEBUG", log_file="logs/ui_tests.log")
    """
    global _logger_initialized

    if _logger_initialized and not force:
        return

    logger.remove()

    format_string = format_string or DEFAULT_FORMAT
    level = level.upper()

    logger.add(
        sys.stderr,
        format=format_string,
        level=level,
        colorize=True,
    )

    if log_file:
        ensure_directory(os.path.dirname(log_file))
        logger.add(
            log_file,
            format=format_string,
            level=level,
            rotation=rotation,
            retention=retention,
            colorize=False,
        )

    _logger_initialized = True
    logger.debug(f"Logger initialized with level: {level}")


def ensure_directory(path: str) -> str:
    """
    Ensures a directory exists, creating it if necessary.

    Args:
        path: Directory path (empty string means the current directory)

    Returns:
        The path (for chaining)
    """
    if path:
        os.makedirs(path, exist_ok=True)
    return path


__all__ = [
    "DEFAULT_FORMAT",
    "init_logger",
    "ensure_directory",
]
