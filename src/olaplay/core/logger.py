"""
Logging configuration for olaplay.
Provides centralized logging setup with console output only.
"""

import logging
import sys
from typing import Optional
from .config import LOGGING_CONFIG


def setup_logging(
    level: Optional[str] = None,
    enable_console: bool = True
) -> logging.Logger:
    """
    Set up logging configuration for the application.
    Console output only - no file logging.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_console: Whether to enable console logging

    Returns:
        Configured package logger
    """
    level_name = (level or LOGGING_CONFIG["LEVEL"]).upper()
    log_level = getattr(logging, level_name, None)
    if not isinstance(log_level, int):
        log_level = logging.INFO

    package_logger = logging.getLogger("olaplay")
    package_logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    package_logger.handlers.clear()

    if enable_console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)
        console_handler.setFormatter(logging.Formatter(LOGGING_CONFIG["FORMAT"]))
        package_logger.addHandler(console_handler)

    package_logger.propagate = False

    return package_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a specific module.

    Args:
        name: Logger name, relative to the package (e.g. "services.catalog")

    Returns:
        Logger instance
    """
    if not logging.getLogger("olaplay").handlers:
        setup_logging()

    return logging.getLogger(f"olaplay.{name}")
