"""Logging configuration for command line tools."""
from __future__ import annotations

import logging
import sys
from typing import Optional

__all__ = ["get_log_level", "setup_logging"]

VERBOSE_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)-8s] %(name)s: %(message)s"
STANDARD_FORMAT = "%(asctime)s [%(levelname)-8s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

PACKAGE_LOGGERS = ("scapy_can_ids", "id_tools")


def setup_logging(
    level: int = logging.INFO,
    verbose: bool = False,
    log_file: Optional[str] = None,
    quiet: bool = False,
) -> None:
    """Configure the package loggers.

    Args:
        level: Base logging level.
        verbose: Include timestamps with milliseconds and logger names.
        log_file: Optional file path for log output.
        quiet: Suppress console output (only log to file if specified).
    """
    formatter = logging.Formatter(VERBOSE_FORMAT if verbose else STANDARD_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = []
    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)
    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a")
        except OSError as e:
            print(f"Warning: Could not open log file {log_file}: {e}", file=sys.stderr)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

    for name in PACKAGE_LOGGERS:
        package_logger = logging.getLogger(name)
        package_logger.setLevel(level)
        package_logger.handlers.clear()
        for handler in handlers:
            package_logger.addHandler(handler)

    # Reduce noise from scapy
    logging.getLogger("scapy").setLevel(logging.WARNING)


def get_log_level(verbosity: int) -> int:
    """Convert a count of ``-v`` flags to a logging level."""

    levels = {
        0: logging.WARNING,
        1: logging.INFO,
        2: logging.DEBUG,
    }
    return levels.get(min(verbosity, 2), logging.DEBUG)
