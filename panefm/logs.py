"""File logging setup.

The terminal belongs to the UI while a session runs, so log records go to a
file under the user log directory instead of stderr.
"""

from __future__ import annotations

import logging
from pathlib import Path

from platformdirs import user_log_dir

from .config import APP_NAME

LOG_FILENAME = "panefm.log"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: int = logging.INFO, path: Path | None = None) -> logging.Handler:
    """Attach one handler to the ``panefm`` logger and return it.

    Falls back to a ``NullHandler`` when the log file cannot be opened.
    """
    logger = logging.getLogger(APP_NAME)
    log_path = default_log_path() if path is None else path
    handler: logging.Handler
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(log_path, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return handler
