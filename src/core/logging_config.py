"""Logging configuration for Browser Selector."""

import logging
from logging.handlers import RotatingFileHandler

from .constants import (
    LOGS_DIR,
    DEBUG_LOG_FILE,
    HISTORY_LOG_FILE,
    DEBUG_LOG_MAX_BYTES,
    DEBUG_LOG_BACKUP_COUNT,
)

# Logger names
HISTORY_LOGGER_NAME = "history"

# Format strings
DEBUG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
HISTORY_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"


def _ensure_log_directory() -> None:
    """Create log directory if it doesn't exist."""
    LOGS_DIR.mkdir(parents=True, exist_ok=True)


def setup_logging(debug_mode: bool = False) -> None:
    """
    Configure application logging.

    Sets up two log targets:
    1. Debug log: Rotating file handler with DEBUG level
    2. History log: Append-only file with one line per launched link

    Args:
        debug_mode: If True, also output DEBUG to stderr
    """
    _ensure_log_directory()

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Clear any existing handlers
    root_logger.handlers.clear()

    # Debug file handler (rotating)
    debug_handler = RotatingFileHandler(
        DEBUG_LOG_FILE,
        maxBytes=DEBUG_LOG_MAX_BYTES,
        backupCount=DEBUG_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    debug_handler.setLevel(logging.DEBUG)
    debug_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
    root_logger.addHandler(debug_handler)

    # Console handler (only in debug mode)
    if debug_mode:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(logging.Formatter(DEBUG_FORMAT))
        root_logger.addHandler(console_handler)

    # Configure history logger (separate logger with its own handler)
    history_logger = logging.getLogger(HISTORY_LOGGER_NAME)
    history_logger.setLevel(logging.INFO)
    history_logger.propagate = False  # Don't send to root logger
    history_logger.handlers.clear()

    history_handler = logging.FileHandler(
        HISTORY_LOG_FILE,
        mode="a",
        encoding="utf-8",
    )
    history_handler.setLevel(logging.INFO)
    history_handler.setFormatter(logging.Formatter(HISTORY_FORMAT))
    history_logger.addHandler(history_handler)


def get_history_logger() -> logging.Logger:
    """Return the history logger instance."""
    return logging.getLogger(HISTORY_LOGGER_NAME)


def log_launch(
    browser_id: str,
    strategy: str,
    domain: str,
    stripped_params: int = 0,
) -> None:
    """
    Record a launched link in the history log.

    Only the domain is written, never the full URL.

    Args:
        browser_id: Catalog id of the browser used
        strategy: Name of the launch strategy
        domain: Host part of the opened URL
        stripped_params: Number of tracking parameters removed before launch
    """
    history = get_history_logger()
    history.info(
        "LAUNCH | browser=%s | strategy=%s | domain=%s | stripped=%d",
        browser_id,
        strategy,
        domain or "-",
        stripped_params,
    )
