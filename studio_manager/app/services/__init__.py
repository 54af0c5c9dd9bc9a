"""
Store layer.

Each store owns one persisted collection (or, for settings, one record)
and writes it back after every change.  ``DataManager`` bundles the
three stores; ``views`` derives sorted and filtered lists from them.
"""

from .booking_store import BookingStore
from .data_manager import DataManager
from .service_store import ServiceStore
from .settings_store import SettingsStore

__all__ = ["BookingStore", "DataManager", "ServiceStore", "SettingsStore"]
