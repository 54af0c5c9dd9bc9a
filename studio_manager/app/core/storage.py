"""
Key-value persistence adapter.

``KeyValueStore`` keeps one encoded blob per string key in the
``kv_store`` table.  Services, bookings and settings are three
independent keys, each written in full on every change; there is no
transaction spanning several keys.

``encode``/``decode`` convert typed values to and from JSON bytes with a
pydantic ``TypeAdapter``.  ``decode`` never raises: corrupt or
schema-mismatched bytes are logged and reported as ``None`` so callers
can fall back to an empty collection or default settings.
"""

import logging
from typing import Any, List, Optional, TypeVar

from pydantic import TypeAdapter, ValidationError

from .db import get_cursor, get_database_path, init_db

T = TypeVar("T")

SERVICES_KEY = "services"
BOOKINGS_KEY = "bookings"
SETTINGS_KEY = "settings"

logger = logging.getLogger(__name__)


def encode(adapter: TypeAdapter, value: Any) -> bytes:
    """Serialize ``value`` to JSON bytes using camelCase field aliases."""
    return adapter.dump_json(value, by_alias=True)


def decode(adapter: TypeAdapter[T], data: Optional[bytes]) -> Optional[T]:
    """Parse JSON bytes with ``adapter``; return ``None`` when absent or invalid."""
    if data is None:
        return None
    try:
        return adapter.validate_json(data)
    except ValidationError as exc:
        logger.warning("Discarding undecodable stored data: %s", exc.errors()[:3])
        return None


class KeyValueStore:
    """Synchronous key to bytes store on top of a local SQLite file.

    Pending migrations are applied on construction, so a new or
    never-migrated file behaves as an empty store.
    """

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.database_path = get_database_path(database_url)
        init_db(self.database_path)

    def load(self, key: str) -> Optional[bytes]:
        """Return the stored bytes for ``key`` or ``None`` if missing."""
        with get_cursor(self.database_path) as cursor:
            row = cursor.execute(
                "SELECT value FROM kv_store WHERE key = ?", (key,)
            ).fetchone()
        if row is None:
            return None
        value = row["value"]
        # Rows written by other tools may hold TEXT instead of BLOB
        return value.encode("utf-8") if isinstance(value, str) else bytes(value)

    def save(self, key: str, data: bytes) -> None:
        """Insert or overwrite ``key`` and commit immediately."""
        with get_cursor(self.database_path) as cursor:
            cursor.execute(
                "INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)"
                " ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = excluded.updated_at",
                (key, data),
            )
        logger.debug("Saved %d bytes under key %s", len(data), key)

    def remove(self, key: str) -> None:
        """Delete ``key``.  Missing keys are ignored."""
        with get_cursor(self.database_path) as cursor:
            cursor.execute("DELETE FROM kv_store WHERE key = ?", (key,))

    def keys(self) -> List[str]:
        with get_cursor(self.database_path) as cursor:
            rows = cursor.execute("SELECT key FROM kv_store ORDER BY key").fetchall()
        return [row["key"] for row in rows]
