"""Logging for taskmd.

Every record ends up in one rotating file, ``taskmd.log``. Modules log through
named children of the ``taskmd_cli`` logger (``get_logger("store")`` is
``taskmd_cli.store``), so the file shows which layer wrote each line.

The level and directory come from ``log.level`` / ``log.dir`` in the config,
overridden by ``TASKMD_LOG_LEVEL`` / ``TASKMD_LOG_DIR``. Until
``setup_logging`` has been called with the configured values, the first
``get_logger`` call sets up the file with the environment values alone.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

from platformdirs import user_log_dir

ROOT_LOGGER = "taskmd_cli"
LOG_FILE = "taskmd.log"
DEFAULT_LEVEL = "INFO"
ENV_LOG_LEVEL = "TASKMD_LOG_LEVEL"
ENV_LOG_DIR = "TASKMD_LOG_DIR"

_MAX_BYTES = 5 * 1024 * 1024  # 5 MB
_BACKUP_COUNT = 3

_handler: logging.Handler | None = None


def log_path(directory: str | None = None) -> Path:
    """Log file under $TASKMD_LOG_DIR, else *directory*, else user_log_dir."""
    base = os.environ.get(ENV_LOG_DIR) or directory or user_log_dir(ROOT_LOGGER)
    return Path(base).expanduser() / LOG_FILE


def _level_number(level: str | None) -> int:
    name = (os.environ.get(ENV_LOG_LEVEL) or level or DEFAULT_LEVEL).upper()
    number = logging.getLevelName(name)
    return number if isinstance(number, int) else logging.INFO


def setup_logging(
    level: str | None = None, directory: str | None = None
) -> logging.Logger:
    """(Re)configure the ``taskmd_cli`` logger.

    Args:
        level: Level name from the config; $TASKMD_LOG_LEVEL wins over it
        directory: Log directory from the config; $TASKMD_LOG_DIR wins over it

    Returns:
        The root ``taskmd_cli`` logger
    """
    global _handler
    root = logging.getLogger(ROOT_LOGGER)
    if _handler is not None:
        root.removeHandler(_handler)
        _handler.close()

    path = log_path(directory)
    path.parent.mkdir(parents=True, exist_ok=True)
    _handler = logging.handlers.RotatingFileHandler(
        path, maxBytes=_MAX_BYTES, backupCount=_BACKUP_COUNT, encoding="utf-8"
    )
    _handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    )

    root.addHandler(_handler)
    root.setLevel(_level_number(level))
    root.propagate = False
    return root


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``taskmd_cli`` or its child ``taskmd_cli.<name>``."""
    if _handler is None:
        setup_logging()
    return logging.getLogger(f"{ROOT_LOGGER}.{name}" if name else ROOT_LOGGER)
