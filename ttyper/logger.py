"""Logging configuration using loguru.

Logs are stored under ~/.local/share/ttyper/logs and kept for 1 week.
Output goes to file only by default (to avoid interfering with the TUI).
"""

import os
import sys
import tempfile
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    import loguru

# Remove default handler
logger.remove()


def _resolve_log_dir() -> Path:
    """Get the log directory.

    Defaults to ~/.local/share/ttyper/logs, overridable via TTYPER_LOG_DIR.
    Falls back to the temp directory when no home directory can be determined.
    """
    override_dir = os.environ.get("TTYPER_LOG_DIR")
    if override_dir:
        return Path(override_dir).expanduser().resolve()
    try:
        home = Path.home()
    except RuntimeError:
        return Path(tempfile.gettempdir()) / "ttyper" / "logs"
    return home / ".local" / "share" / "ttyper" / "logs"


LOG_DIR = _resolve_log_dir()
LOG_DIR.mkdir(parents=True, exist_ok=True)

STDERR_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class _LoggingState:
    """Internal state tracker for logging configuration.

    Note: stderr handler is NOT added by default to avoid interfering with the TUI.
    """

    def __init__(self) -> None:
        """Initialize logging state without stderr handler."""
        self.stderr_handler_id: int | None = None


_state = _LoggingState()

# Configure file handler with rotation and retention
logger.add(
    LOG_DIR / "ttyper_{time:YYYY-MM-DD}.log",
    level="DEBUG",
    format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
    rotation="00:00",  # New file at midnight
    retention="1 week",  # Keep logs for 1 week
    compression="gz",  # Compress old logs
    backtrace=True,
    diagnose=False,
)


def get_logger(name: str) -> "loguru.Logger":
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logger.bind(name=name)


def enable_stderr_logging(level: str = "DEBUG") -> int:
    """Mirror log output to stderr.

    Calling this again replaces the previous stderr handler.

    Args:
        level: Minimum log level for the stderr handler.

    Returns:
        The handler ID.
    """
    disable_stderr_logging()
    _state.stderr_handler_id = logger.add(sys.stderr, level=level, format=STDERR_FORMAT, colorize=True)
    return _state.stderr_handler_id


def disable_stderr_logging() -> None:
    """Remove the stderr handler if one is installed."""
    if _state.stderr_handler_id is not None:
        logger.remove(_state.stderr_handler_id)
        _state.stderr_handler_id = None
