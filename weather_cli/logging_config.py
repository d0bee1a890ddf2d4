"""Logging setup for the weather CLI.

Stdout is reserved for the weather table, so log lines go to stderr.
Setting a log file adds JSON records, rotated at 1MB.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from pythonjsonlogger.json import JsonFormatter

CONSOLE_FORMAT = "%(levelname)s %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def setup_logging(log_level: str = "WARNING", log_file: Path | None = None) -> logging.Logger:
    """Install the stderr handler and, if requested, the JSON file handler.

    Raises:
        OSError: If the log file cannot be opened
    """
    level = getattr(logging, log_level.upper())

    # Open the file first so a bad path leaves existing handlers untouched
    file_handler = None
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(log_file, maxBytes=1024 * 1024, backupCount=3, encoding="utf-8")
        file_handler.setFormatter(JsonFormatter(JSON_FORMAT, timestamp=True))
        file_handler.setLevel(logging.DEBUG)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    # The file gets every record; the console only what log_level allows
    root_logger.setLevel(logging.DEBUG if file_handler is not None else level)

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    stderr_handler.setLevel(level)
    root_logger.addHandler(stderr_handler)

    if file_handler is not None:
        root_logger.addHandler(file_handler)

    for noisy in ("httpx", "httpcore"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: str, message: str, **extra_fields: Any) -> None:
    """Log ``message`` at ``level`` with ``extra_fields`` attached to the record."""
    getattr(logger, level.lower())(message, extra=extra_fields)
