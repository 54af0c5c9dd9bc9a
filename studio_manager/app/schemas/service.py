"""
Pydantic model for catalog services.

A ``Service`` is something the studio sells: a photo session, an
editing package, equipment rental.  Identifiers are generated when the
model is constructed and are never reassigned by the stores.  Field
names are snake_case in Python and camelCase in the persisted JSON.
"""

from uuid import UUID, uuid4

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

# Categories offered by the editing forms.  Stores accept any string.
SERVICE_CATEGORIES = ("Photography", "Videography", "Editing", "Rental")


class Service(BaseModel):
    id: UUID = Field(default_factory=uuid4)
    name: str = Field(..., min_length=1, examples=["Photo Session"])
    price: float = Field(..., ge=0, allow_inf_nan=False, examples=[100.0])
    duration: str = Field("", examples=["2 hours"], description="Free text, not parsed")
    notes: str = ""
    category: str = Field("", examples=["Photography"])
    availability: bool = True
    rating: float = Field(3.0, ge=1.0, le=5.0, allow_inf_nan=False)

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        # Records are replaced through the stores, never edited in place.
        "frozen": True,
        # Embedding an existing instance in a Booking yields a fresh copy,
        # so later edits to the catalog entry never reach the booking.
        "revalidate_instances": "always",
    }
