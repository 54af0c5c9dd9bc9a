"""
Store for the single user settings record.

``SettingsStore`` loads the ``Settings`` record at construction (or
falls back to defaults) and writes it back whole whenever it changes.
It also owns ``reset_all``, which removes every persisted key.  Emptying
the in-memory service and booking collections is left to the caller,
normally ``DataManager.reset_all_data``.
"""

import logging
from typing import Any

from pydantic import TypeAdapter

from studio_manager.app.core.storage import (
    BOOKINGS_KEY,
    SERVICES_KEY,
    SETTINGS_KEY,
    KeyValueStore,
    decode,
    encode,
)
from studio_manager.app.schemas.settings import Settings

RESET_KEYS = (SERVICES_KEY, BOOKINGS_KEY, SETTINGS_KEY)


class SettingsStore:
    """Owner of the process-wide ``Settings`` record."""

    adapter = TypeAdapter(Settings)

    def __init__(self, storage: KeyValueStore) -> None:
        self.storage = storage
        self._settings = decode(self.adapter, storage.load(SETTINGS_KEY)) or Settings()

    def get(self) -> Settings:
        """Return the current settings."""
        return self._settings

    def set(self, settings: Settings) -> None:
        """Replace the settings record and persist it."""
        self._settings = settings
        self.storage.save(SETTINGS_KEY, encode(self.adapter, settings))
        logging.getLogger(__name__).info("Settings updated")

    def update(self, **changes: Any) -> Settings:
        """Change individual fields, validating the result, and persist.

        Raises
        ------
        ValueError
            If a keyword is not a ``Settings`` field name, or a value
            fails validation.
        """
        unknown = set(changes) - set(Settings.model_fields)
        if unknown:
            raise ValueError(f"Unknown settings fields: {sorted(unknown)}")
        data = self._settings.model_dump()
        data.update(changes)
        settings = Settings.model_validate(data)
        self.set(settings)
        return settings

    def reset_all(self) -> None:
        """Remove persisted services, bookings and settings.

        In-memory settings return to defaults but are not written back,
        so storage stays empty until the next change.  Calling this
        repeatedly leaves the same state.
        """
        for key in RESET_KEYS:
            self.storage.remove(key)
        self._settings = Settings()
        logging.getLogger(__name__).info("All persisted data removed")
