"""
Logging configuration using loguru.

The store and query engine log through loguru's global ``logger``. Call
``setup_logging()`` (or ``setup_logging_from_config()``) at app startup to
pick a level and an optional log file, or configure loguru directly.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from docstore.core.config import Config


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    fmt: str = "<level>[{level.name}]</level> {message}",
    rotation: str = "10 MB",
    retention: str = "7 days",
) -> None:
    """
    Configure loguru with console and optional file output.

    Args:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR).
        log_file: Path to log file. If None, only logs to stderr.
        fmt: Loguru format string.
        rotation: Log file rotation size.
        retention: How long to keep rotated logs.
    """
    logger.remove()
    logger.add(sys.stderr, level=level, format=fmt)

    if log_file:
        logger.add(
            log_file,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            rotation=rotation,
            retention=retention,
        )


def setup_logging_from_config(config: Config) -> None:
    """Apply the ``logging.*`` section of *config*."""
    level = str(config.get("logging.level", "WARNING")).upper()
    log_file = config.get("logging.file") or None
    setup_logging(level=level, log_file=log_file)
