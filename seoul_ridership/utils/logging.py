"""
Centralized logging for the ridership dashboard

Every module logs through ``get_logger(__name__)`` so that a single call to
``setup_logging`` controls level, format and destination.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

ROOT_LOGGER_NAME = "seoul_ridership"


class RidershipFormatter(logging.Formatter):
    """Colored console formatter: [TIMESTAMP] LEVEL | MODULE | MESSAGE"""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
        "RESET": "\033[0m",
    }

    def format(self, record):
        timestamp = datetime.fromtimestamp(record.created).strftime(
            "%Y-%m-%d %H:%M:%S"
        )
        color = self.COLORS.get(record.levelname, "")
        levelname = f"{color}{record.levelname}{self.COLORS['RESET']}"

        message = f"[{timestamp}] {levelname:8} | {record.name:20} | {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def setup_logging(
    level: Union[str, int] = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = True,
    format_type: str = "structured",
) -> logging.Logger:
    """
    Setup logging for the ridership dashboard

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path for log output
        console: Whether to log to console
        format_type: Format type ("structured", "simple", "json")

    Returns:
        Configured package logger
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper())

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    formatter: logging.Formatter
    if format_type == "structured":
        formatter = RidershipFormatter()
    elif format_type == "simple":
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "logger": "%(name)s", "level": "%(levelname)s", "message": "%(message)s"}'
        )

    if console:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger under the package namespace

    Args:
        name: Logger name (usually __name__)

    Returns:
        Logger instance
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")

