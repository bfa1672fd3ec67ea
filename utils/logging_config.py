"""
Centralized logging configuration for SexSec.

The library modules only create loggers through get_logger. Handlers are
installed by setup_logging, which the CLI calls once at startup; when the
library is imported by another program, that program's logging setup
applies unchanged.
"""

import logging
import logging.handlers
import os
import sys
from typing import Optional

DEFAULT_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def _level_from_name(level: Optional[str]) -> int:
    return getattr(logging, (level or 'INFO').upper(), logging.INFO)


def _console_handler(formatter: logging.Formatter, level: int) -> logging.Handler:
    # stderr keeps stdout free for tokens and command output
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def _file_handler(
        log_file: str,
        formatter: logging.Formatter,
        level: int,
        max_files: int) -> logging.Handler:
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    # Import config here to avoid circular imports
    from sexsec.config import config as app_config
    handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=app_config.logging.max_file_size * 1024 * 1024,
        backupCount=max_files
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    log_format: Optional[str] = None,
    max_files: int = 5
) -> None:
    """
    Replace the root handlers with a stderr handler and, optionally, a
    rotating file handler.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL);
            unknown names fall back to INFO
        log_file: Optional file path; missing parent directories are created
        log_format: Optional custom log format
        max_files: Number of rotated log files to keep
    """
    numeric_level = _level_from_name(level)
    formatter = logging.Formatter(log_format or DEFAULT_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(formatter, numeric_level))
    if log_file:
        root_logger.addHandler(_file_handler(log_file, formatter, numeric_level, max_files))

    logger = logging.getLogger(__name__)
    logger.debug("Logging configured with level: %s", logging.getLevelName(numeric_level))
    if log_file:
        logger.debug("Logging to file: %s", log_file)


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` (usually ``__name__``)."""
    return logging.getLogger(name)
