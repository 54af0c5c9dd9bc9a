"""
Basic logging configuration for the application.

``setup_logging`` attaches a console handler (and optionally a file
handler) to the root logger.  Level and log file default to the values
from ``core.config``.  Calling it again after handlers exist is a no-op
apart from adjusting the level, so tests and repeated ``create_app``
calls do not stack handlers.
"""

import logging
from pathlib import Path
from typing import Optional

from .config import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level : Optional[str]
        Logging level name (e.g. ``"DEBUG"``).  Case insensitive;
        unknown names fall back to ``INFO``.  Defaults to
        ``config.log_level``.
    logfile : Optional[str]
        File to additionally log to.  Defaults to ``config.log_file``;
        the parent directory is created if missing.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, (level or config.log_level).upper(), logging.INFO)
    root.setLevel(numeric_level)
    if root.handlers:
        return

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root.addHandler(console_handler)

    logfile = logfile or config.log_file
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
