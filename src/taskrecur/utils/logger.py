"""File logging for taskrecur.

Everything under the ``taskrecur`` logger namespace ends up in one rotating
file in the platform's user log directory. Library modules only call
``logging.getLogger(__name__)``; the CLI calls :func:`get_logger` to attach the
file handler.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

LOGGER_NAME = "taskrecur"
LOG_FILE_NAME = "taskrecur.log"
LOG_MAX_BYTES = 5 * 1024 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s %(levelname)-8s [%(name)s] %(message)s"

_logger: logging.Logger | None = None


def log_file_path() -> Path:
    """Path of the active log file (the directory may not exist yet)."""
    return Path(user_log_dir(LOGGER_NAME)) / LOG_FILE_NAME


def _has_file_handler(logger: logging.Logger, path: Path) -> bool:
    target = os.path.abspath(path)
    return any(
        isinstance(handler, logging.handlers.RotatingFileHandler)
        and handler.baseFilename == target
        for handler in logger.handlers
    )


def get_logger() -> logging.Logger:
    """Return the ``taskrecur`` logger with its rotating file handler attached.

    Handlers other code has put on the logger (a host application, pytest's
    capture handlers) are left alone; the file handler is added once per path.
    """
    global _logger
    if _logger is not None:
        return _logger

    path = log_file_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG)
    if not _has_file_handler(logger, path):
        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%dT%H:%M:%S"))
        logger.addHandler(handler)
    logger.propagate = False

    _logger = logger
    return _logger
