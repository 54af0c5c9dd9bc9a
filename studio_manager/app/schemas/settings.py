"""
Pydantic model for user preferences.

Exactly one ``Settings`` record exists per installation.  It controls
the theme and how the service and booking lists are ordered.  The enum
values are the labels shown to the user and are what gets persisted.
"""

from enum import Enum

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class ServiceSortOption(str, Enum):
    NAME = "Name"
    PRICE = "Price"


class BookingSortOption(str, Enum):
    DATE = "Date"
    CUSTOMER_NAME = "Customer Name"


class SortOrder(str, Enum):
    ASCENDING = "Ascending"
    DESCENDING = "Descending"


class Settings(BaseModel):
    is_dark_mode: bool = False
    service_sort_option: ServiceSortOption = ServiceSortOption.NAME
    booking_sort_option: BookingSortOption = BookingSortOption.DATE
    sort_order: SortOrder = SortOrder.ASCENDING

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }
