"""Shared test fixtures and configuration.

Keeps config files and logs written by the CLI inside a temporary directory.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest


def _drop_file_handlers(logger: logging.Logger) -> None:
    """Close and remove our rotating file handlers, leaving pytest's alone."""
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            handler.close()
            logger.removeHandler(handler)


@pytest.fixture(autouse=True)
def isolated_dirs(tmp_path):
    """Point platformdirs lookups at *tmp_path* and reset module singletons."""
    import taskrecur.config as config_mod
    import taskrecur.utils.logger as logger_mod

    app_logger = logging.getLogger("taskrecur")
    config_mod._config_manager = None
    logger_mod._logger = None
    _drop_file_handlers(app_logger)

    with patch(
        "taskrecur.config.user_config_dir", return_value=str(tmp_path / "config")
    ):
        with patch(
            "taskrecur.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
        ):
            yield tmp_path

    _drop_file_handlers(app_logger)
    config_mod._config_manager = None
    logger_mod._logger = None
