"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Context binding support
- Dual output (stderr + optional file logging)

Configuration is loaded from awto.config.settings:
- LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR, CRITICAL). Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from awto.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("compile.completed", package="database")
"""

import logging
import os
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Optional

import structlog
from structlog.types import Processor

from awto.config import get_settings


def _get_log_level() -> int:
    """Get log level from settings.

    Returns:
        Logging level constant (e.g., logging.INFO, logging.DEBUG)
    """
    try:
        level_name = get_settings().LOG_LEVEL.upper()
    except Exception:
        # Settings may fail on a malformed .env file; logging must still work
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()

    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    """Check if file logging is enabled via environment."""
    log_to_file = os.getenv("LOG_TO_FILE", "").lower()
    return log_to_file in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    """Get the log file path with date-based naming."""
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: awto-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"awto-{date_str}.log"


def _configure_structlog(level: Optional[int] = None) -> None:
    """Configure structlog with JSON rendering.

    Sets up:
    - ISO-8601 timestamps
    - Logger name
    - Log level
    - JSON renderer
    - Dual output (stderr + optional file)

    Calling it again replaces the handlers installed by a previous call.
    """
    if level is None:
        level = _get_log_level()

    root = logging.getLogger()
    for handler in list(root.handlers):
        if getattr(handler, "_awto_handler", False):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)

    # Add stderr handler (always enabled)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter("%(message)s"))
    stream_handler.setLevel(level)
    stream_handler._awto_handler = True  # type: ignore[attr-defined]
    root.addHandler(stream_handler)

    # Add file handler if enabled
    if _should_log_to_file():
        log_file = _get_log_file_path()
        file_handler = TimedRotatingFileHandler(
            filename=str(log_file),
            when="midnight",
            interval=1,
            backupCount=30,  # 30-day retention
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        file_handler.setLevel(level)
        file_handler._awto_handler = True  # type: ignore[attr-defined]
        root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def configure_logging(verbose: bool = False) -> None:
    """Reconfigure logging for a CLI run.

    Args:
        verbose: Emit DEBUG events (stage transitions, written files) in
            addition to the configured level
    """
    _configure_structlog(logging.DEBUG if verbose else None)


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)

    Returns:
        A structlog BoundLogger configured with JSON rendering

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.info("compile.completed", package="database")
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Args:
        **kwargs: Context fields to bind (e.g., package="database",
            stage="trigger_build")

    Returns:
        A BoundLogger with the specified context already bound

    Example:
        >>> logger = bind_context(package="database", stage="trigger_build")
        >>> logger.debug("build.started")
    """
    return structlog.get_logger().bind(**kwargs)
