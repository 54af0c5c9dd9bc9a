"""
Pydantic models for customer bookings.

A booking embeds a full copy of the ``Service`` it was made for rather
than a reference to the catalog entry.  Deleting or repricing a service
therefore leaves booking history untouched.  Two bookings compare equal
when their identifiers match, regardless of the other fields.
"""

from datetime import datetime, timezone
from enum import Enum
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, field_validator
from pydantic.alias_generators import to_camel

from .service import Service


class PaymentStatus(str, Enum):
    PAID = "Paid"
    PENDING = "Pending"
    OVERDUE = "Overdue"


class Booking(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    customer_name: str = Field(..., examples=["Jane Doe"])
    contact_number: str = Field("", examples=["+1 555 0100"])
    # No format validation; the forms accept whatever the customer gives.
    email: str = ""
    service: Service
    date: datetime = Field(..., examples=["2025-09-01T10:00:00"])
    notes: str = ""
    special_requests: str = ""
    payment_status: PaymentStatus = PaymentStatus.PENDING

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }

    @field_validator("date")
    @classmethod
    def normalize_date(cls, value: datetime) -> datetime:
        """Convert aware dates to naive UTC; naive dates are taken as UTC already."""
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Booking):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
