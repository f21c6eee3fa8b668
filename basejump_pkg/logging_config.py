"""Structured logging configuration for basejump.

The display writes its ``Cannot evaluate the expression "..."`` diagnostics
to stderr, so log records share that stream. When a log file is given,
every record goes to the file and stderr only receives errors.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

ROOT_LOGGER_NAME = "basejump"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class StructuredFormatter(logging.Formatter):
    """Format records as ``<iso timestamp> [LEVEL] name: message``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(
            timespec="milliseconds"
        )
        message = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


def setup_logging(
    level: str = "WARNING", log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Args:
        level: Logging level, one of LOG_LEVELS
        log_file: Optional file path; when set, it receives every record at
            ``level`` and above while stderr is limited to ERROR

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = StructuredFormatter()
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        console_handler.setLevel(logging.ERROR)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get the ``basejump.<name>`` logger for a module."""
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")
