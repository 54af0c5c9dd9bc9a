"""
Main entrypoint for Studio Manager.

``create_app`` performs one-time setup (logging, and database migrations
through ``KeyValueStore``) and returns a ``DataManager`` holding the
service, booking and settings stores.  Call it once at process start
and pass the result to the presentation layer::

    from studio_manager.app.main import create_app

    manager = create_app()
    manager.services.add(Service(name="Photo Session", price=100))
"""

import logging
from typing import Optional

from .core.config import config
from .core.logging_config import setup_logging
from .core.storage import KeyValueStore
from .services.data_manager import DataManager


def create_app(database_url: Optional[str] = None) -> DataManager:
    """Create a fully initialised ``DataManager``.

    Parameters
    ----------
    database_url : Optional[str]
        SQLite file to use instead of ``config.database_url``.

    Returns
    -------
    DataManager
        Stores loaded from the database, ready for use.
    """
    # Logging first so that loading the stores can report recoveries.
    setup_logging(config.log_level, config.log_file or None)

    storage = KeyValueStore(database_url)
    manager = DataManager(storage)
    logging.getLogger(__name__).info(
        "%s started with database %s", config.project_name, storage.database_path
    )
    return manager
