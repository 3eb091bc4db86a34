"""Centralized logging configuration with multi-level verbosity support.

Log output never goes to stdout: the generated completion script does, and
users redirect it straight into their fpath.

Supports both stderr and file logging via environment variables:
    LOG_FILE: Path to log file (optional, disables stderr when set)
    LOG_FORMAT: Log format string (optional)

Note: This code was generated with assistance from AI coding tools
and has been reviewed and tested by a human.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

DEFAULT_LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
CONSOLE_LOG_FORMAT = "[%(levelname)s] %(message)s"

# Library loggers only opened up at -vvv
LIBRARY_LOGGERS = ("click", "opentelemetry")


def setup_logging(
    verbose_count: int = 0,
    log_file: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure logging based on verbosity level.

    Args:
        verbose_count: Number of -v flags
            0: WARNING level
            1: INFO level
            2: DEBUG level
            3+: DEBUG, including library loggers
        log_file: Path to log file. Falls back to the LOG_FILE env var.
        log_format: Custom log format. Falls back to the LOG_FORMAT env var.

    Example:
        >>> setup_logging(0)  # WARNING only, to stderr
        >>> setup_logging(2, log_file="/tmp/zsh-completion-tool.log")
    """
    if verbose_count <= 0:
        level = logging.WARNING
    elif verbose_count == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    file_path = log_file or os.environ.get("LOG_FILE")
    fmt = log_format or os.environ.get("LOG_FORMAT")

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)

    if file_path:
        _setup_file_handler(root_logger, file_path, level, fmt)
    else:
        _setup_console_handler(root_logger, level, fmt)

    library_level = logging.DEBUG if verbose_count >= 3 else logging.WARNING
    for name in LIBRARY_LOGGERS:
        logging.getLogger(name).setLevel(library_level)


def _setup_console_handler(
    logger: logging.Logger,
    level: int,
    fmt: str | None = None,
) -> None:
    """Attach a stderr handler."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or CONSOLE_LOG_FORMAT))
    logger.addHandler(handler)


def _setup_file_handler(
    logger: logging.Logger,
    file_path: str,
    level: int,
    fmt: str | None = None,
    max_bytes: int = 10 * 1024 * 1024,  # 10 MB
    backup_count: int = 5,
) -> None:
    """Attach a rotating file handler, creating the parent directory."""
    Path(file_path).parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        file_path,
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_LOG_FORMAT, datefmt=DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
