"""
Store for customer bookings.

``BookingStore`` persists bookings under the ``bookings`` key.  It has
no dependency on ``ServiceStore``: each booking already carries a copy
of its service, so catalog edits and deletions never rewrite booking
history.
"""

from typing import List

from pydantic import TypeAdapter

from studio_manager.app.core.storage import BOOKINGS_KEY
from studio_manager.app.schemas.booking import Booking

from .collection_store import CollectionStore


class BookingStore(CollectionStore[Booking]):
    """Bookings with auto-persisting CRUD."""

    key = BOOKINGS_KEY
    adapter = TypeAdapter(List[Booking])
    label = "booking"

    @property
    def bookings(self) -> List[Booking]:
        return self.items
