"""
Simple configuration management.

The ``Config`` dataclass reads process-level configuration directly from
environment variables.  Defaults are provided for all fields.  These
values describe where data lives and how the process logs; user-facing
preferences (dark mode, sort options) are stored separately in the
persisted ``Settings`` record managed by ``SettingsStore``.
"""

import os
from dataclasses import dataclass


@dataclass
class Config:
    """Application configuration loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Studio Manager")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path of the SQLite file backing the key-value store.  If a relative
    # path is provided, it will be resolved relative to the project root
    # by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "studio_manager.db")

    # Directory for JSON exports.  Empty means the system temp directory.
    export_dir: str = os.getenv("EXPORT_DIR", "")


# Instantiate once so other modules can import it without repeatedly
# reading environment variables.  Environment variables should be set
# before importing this module.
config = Config()
