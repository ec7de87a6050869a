"""Library logging: level control and a rotating log file."""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from traa.folder import append_filename, get_config_folder, get_directory, get_file_extension
from traa.types import LogLevel

LOGGER_NAME = "traa"
LOG_FILENAME = "traa.log"
DEFAULT_MAX_SIZE = 1024 * 1024 * 2
DEFAULT_MAX_FILES = 3

_TRACE = 5
logging.addLevelName(_TRACE, "TRACE")

_LEVELS = {
    LogLevel.TRACE: _TRACE,
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
    LogLevel.FATAL: logging.CRITICAL,
    LogLevel.OFF: logging.CRITICAL + 10,
}

_FORMAT = "[%(asctime)s.%(msecs)03d][%(process)d][%(thread)d][%(levelname)s][%(filename)s:%(lineno)d] %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def get_logger() -> logging.Logger:
    """The library's logger, at INFO level unless set otherwise."""
    logger = logging.getLogger(LOGGER_NAME)
    if logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    return logger


def to_logging_level(level: LogLevel) -> int:
    """Map a library log level onto a :mod:`logging` level."""
    return _LEVELS[LogLevel(level)]


def set_log_file(
    filename: Optional[str] = None,
    max_size: int = DEFAULT_MAX_SIZE,
    max_files: int = DEFAULT_MAX_FILES,
) -> str:
    """Send log records to stdout and to a rotating ``traa.log``; return that file's path.

    ``filename`` names a folder, or a file whose folder is used; when empty the
    user's config folder is used.
    """
    path = filename or get_config_folder()
    # A name with an extension is taken to be a file: keep only its folder.
    if get_file_extension(path):
        path = get_directory(path)
    path = append_filename(path, LOG_FILENAME)

    folder = os.path.dirname(path)
    if folder:
        os.makedirs(folder, exist_ok=True)

    formatter = logging.Formatter(_FORMAT, _DATE_FORMAT)
    console = logging.StreamHandler(sys.stdout)
    rotating = RotatingFileHandler(
        path, maxBytes=max_size, backupCount=max_files, encoding="utf-8"
    )
    for handler in (console, rotating):
        handler.setFormatter(formatter)

    logger = get_logger()
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()
    logger.addHandler(console)
    logger.addHandler(rotating)

    logger.info(
        "initialize logger to %s, max file size %s count %s", path, max_size, max_files
    )
    return path


def set_level(level: LogLevel) -> None:
    """Set the library's log level."""
    get_logger().setLevel(to_logging_level(level))


def get_level() -> LogLevel:
    """Current library log level."""
    effective = get_logger().getEffectiveLevel()
    current = LogLevel.TRACE
    for level, value in _LEVELS.items():
        if value <= effective:
            current = level
    return current