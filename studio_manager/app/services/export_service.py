"""
One-way JSON export of application data.

``export_data`` writes any value pydantic can serialize (a model, a list
of models, plain dicts and lists) as indented JSON to
``<directory>/<filename>.json``.  The directory defaults to
``config.export_dir`` and then to the system temp directory.  Failures
are logged and reported by returning ``None``; they are never raised.
"""

import logging
import tempfile
from pathlib import Path
from typing import Any, Optional

from pydantic_core import PydanticSerializationError, to_json

from studio_manager.app.core.config import config

logger = logging.getLogger(__name__)


def export_data(data: Any, filename: str, directory: Optional[str] = None) -> Optional[Path]:
    """Write ``data`` as pretty-printed JSON and return the file path.

    Parameters
    ----------
    data : Any
        Value to export.  Models are written with their camelCase
        field names.
    filename : str
        File name without the ``.json`` suffix.
    directory : Optional[str]
        Target directory; created if missing.

    Returns
    -------
    Optional[Path]
        Path of the written file, or ``None`` if encoding or writing
        failed.
    """
    try:
        payload = to_json(data, indent=2, by_alias=True)
    except PydanticSerializationError as exc:
        logger.error("Failed to encode data for export %s: %s", filename, exc)
        return None

    target_dir = Path(directory or config.export_dir or tempfile.gettempdir())
    path = target_dir / f"{filename}.json"
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_bytes(payload)
    except OSError:
        logger.exception("Failed to write export file %s", path)
        return None
    logger.info("Data exported to %s", path)
    return path
