"""
Sorted and filtered views over services and bookings.

These are plain functions with no caching: each call sorts the given
collection by the option and order from ``Settings`` and then keeps the
entries whose name contains the search text.  Filtering runs after
sorting, so survivors keep their sorted order.  ``sorted`` is stable,
including with ``reverse=True``, so ties keep storage order.
"""

from typing import Callable, Dict, Iterable, List

from studio_manager.app.schemas.booking import Booking
from studio_manager.app.schemas.service import Service
from studio_manager.app.schemas.settings import (
    BookingSortOption,
    ServiceSortOption,
    Settings,
    SortOrder,
)

SERVICE_SORT_KEYS: Dict[ServiceSortOption, Callable[[Service], object]] = {
    ServiceSortOption.NAME: lambda service: service.name.lower(),
    ServiceSortOption.PRICE: lambda service: service.price,
}

BOOKING_SORT_KEYS: Dict[BookingSortOption, Callable[[Booking], object]] = {
    BookingSortOption.DATE: lambda booking: booking.date,
    BookingSortOption.CUSTOMER_NAME: lambda booking: booking.customer_name.lower(),
}


def sort_services(
    services: Iterable[Service], option: ServiceSortOption, order: SortOrder
) -> List[Service]:
    return sorted(
        services,
        key=SERVICE_SORT_KEYS[option],
        reverse=order == SortOrder.DESCENDING,
    )


def filter_services(services: Iterable[Service], search_text: str) -> List[Service]:
    """Keep services whose name contains ``search_text``, ignoring case."""
    needle = search_text.lower()
    if not needle:
        return list(services)
    return [service for service in services if needle in service.name.lower()]


def service_view(
    services: Iterable[Service], settings: Settings, search_text: str = ""
) -> List[Service]:
    ordered = sort_services(services, settings.service_sort_option, settings.sort_order)
    return filter_services(ordered, search_text)


def sort_bookings(
    bookings: Iterable[Booking], option: BookingSortOption, order: SortOrder
) -> List[Booking]:
    return sorted(
        bookings,
        key=BOOKING_SORT_KEYS[option],
        reverse=order == SortOrder.DESCENDING,
    )


def filter_bookings(bookings: Iterable[Booking], search_text: str) -> List[Booking]:
    """Keep bookings whose customer name contains ``search_text``, ignoring case."""
    needle = search_text.lower()
    if not needle:
        return list(bookings)
    return [booking for booking in bookings if needle in booking.customer_name.lower()]


def booking_view(
    bookings: Iterable[Booking], settings: Settings, search_text: str = ""
) -> List[Booking]:
    ordered = sort_bookings(bookings, settings.booking_sort_option, settings.sort_order)
    return filter_bookings(ordered, search_text)
