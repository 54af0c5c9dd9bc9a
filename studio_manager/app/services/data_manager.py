"""
Facade over the three stores.

``DataManager`` is built once at startup (see ``main.create_app``) and
passed to whatever needs data access.  It owns the operations that
touch more than one store: booking a catalog service and wiping all
data.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional
from uuid import UUID

from studio_manager.app.core.storage import KeyValueStore
from studio_manager.app.schemas.booking import Booking
from studio_manager.app.schemas.service import Service

from .booking_store import BookingStore
from .export_service import export_data
from .service_store import ServiceStore
from .settings_store import SettingsStore
from .views import booking_view, service_view


class DataManager:
    """Holds the service, booking and settings stores."""

    def __init__(self, storage: KeyValueStore) -> None:
        self.storage = storage
        self.services = ServiceStore(storage)
        self.bookings = BookingStore(storage)
        self.settings = SettingsStore(storage)

    def service_view(self, search_text: str = "") -> List[Service]:
        """Catalog sorted by the current settings and filtered by name."""
        return service_view(self.services.items, self.settings.get(), search_text)

    def booking_view(self, search_text: str = "") -> List[Booking]:
        """Bookings sorted by the current settings and filtered by customer name."""
        return booking_view(self.bookings.items, self.settings.get(), search_text)

    def book_service(
        self, service_id: UUID, customer_name: str, date: datetime, **fields: Any
    ) -> Booking:
        """Create and store a booking for a catalog service.

        The booking gets a copy of the service as it is right now.
        Extra keyword arguments are passed to ``Booking`` (``email``,
        ``notes``, ``payment_status`` and so on).

        Raises
        ------
        LookupError
            If no service with ``service_id`` exists.
        """
        service = self.services.get(service_id)
        if service is None:
            raise LookupError(f"Service {service_id} not found")
        booking = Booking(customer_name=customer_name, service=service, date=date, **fields)
        return self.bookings.add(booking)

    def reset_all_data(self) -> None:
        """Remove all persisted data and empty the in-memory collections."""
        self.settings.reset_all()
        self.services.reset()
        self.bookings.reset()
        logging.getLogger(__name__).info("Services, bookings and settings reset")

    def export_services(self, filename: str = "services", directory: Optional[str] = None) -> Optional[Path]:
        return export_data(self.services.items, filename, directory)

    def export_bookings(self, filename: str = "bookings", directory: Optional[str] = None) -> Optional[Path]:
        return export_data(self.bookings.items, filename, directory)

    def export_settings(self, filename: str = "settings", directory: Optional[str] = None) -> Optional[Path]:
        return export_data(self.settings.get(), filename, directory)
