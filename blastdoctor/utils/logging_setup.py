"""
Logging configuration utilities.

This module provides standardized logging setup for blastdoctor commands.
"""

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logging(
    name: str = None,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    console: bool = True,
    format_string: str = "%(asctime)s - %(levelname)s - %(message)s",
) -> logging.Logger:
    """
    Set up logging with optional file and console handlers.

    Args:
        name: Logger name (defaults to root logger if None)
        level: Logging level (default: INFO)
        log_file: Path to log file (optional)
        console: Whether to add console handler (default: True)
        format_string: Log message format

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logging("blastdoctor", level=logging.DEBUG)
        >>> logger.debug("Scanning databases")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(format_string)

    # Console output goes to stderr; stdout carries the diagnosis report
    if console:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def parse_level(level: str) -> int:
    """
    Convert a level name such as "debug" or "WARNING" to a logging level.

    Unknown names fall back to WARNING.
    """
    value = logging.getLevelName(str(level).upper())
    return value if isinstance(value, int) else logging.WARNING
