"""
Pydantic schema definitions for persisted records.

Services, bookings and settings each have their own module.  The same
models are used in memory and for the JSON blobs written by the stores,
so a record read back from storage compares equal to the one saved.
"""

from .booking import Booking, PaymentStatus
from .service import SERVICE_CATEGORIES, Service
from .settings import BookingSortOption, ServiceSortOption, Settings, SortOrder

__all__ = [
    "Booking",
    "BookingSortOption",
    "PaymentStatus",
    "SERVICE_CATEGORIES",
    "Service",
    "ServiceSortOption",
    "Settings",
    "SortOrder",
]
