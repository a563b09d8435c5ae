"""Booking-related Pydantic schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from app.models.booking import Booking

# Keys older clients used for the requester before it was normalised to
# requester_contact.
REQUESTER_CONTACT_KEYS = ("requester_contact", "requesterContact", "userEmail")

# Caller-supplied keys that must never reach the extension map.
RESERVED_BOOKING_KEYS = frozenset(
    {"id", "_id", "status", "created_at", "createdAt", *REQUESTER_CONTACT_KEYS}
)


class BookingCreate(BaseModel):
    """Schema for creating a booking.

    Only the requester is interpreted. Everything else the caller sends
    (court, slot, price, ...) is kept as-is in the booking's extension map.
    """

    model_config = ConfigDict(extra="allow")

    requester_contact: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices(*REQUESTER_CONTACT_KEYS),
    )

    def extra_fields(self) -> dict[str, Any]:
        """Opaque fields to persist alongside the booking."""
        return {
            key: value
            for key, value in (self.model_extra or {}).items()
            if key not in RESERVED_BOOKING_KEYS
        }


class BookingResponse(BaseModel):
    """Schema for booking response, extension fields flattened in."""

    model_config = ConfigDict(extra="allow")

    id: UUID
    requester_contact: str
    status: str
    created_at: datetime

    @classmethod
    def from_booking(cls, booking: Booking) -> "BookingResponse":
        data = {
            **(booking.extra or {}),
            "id": booking.id,
            "requester_contact": booking.requester_contact,
            "status": booking.status,
            "created_at": booking.created_at,
        }
        return cls.model_validate(data)


class BookingStatusUpdate(BaseModel):
    """Schema for a status change request.

    ``status`` is optional here so that a missing value is reported by the
    state machine with the same error as an unknown one.
    """

    status: str | None = None


class UpdateOutcome(BaseModel):
    """Observed result of the booking write."""

    matched_count: int
    modified_count: int


class PromotionOutcome(BaseModel):
    """Result of running the promotion rule for a requester."""

    contact: str
    promoted: bool
    previous_role: str | None = None
    role: str | None = None
    reason: str | None = None  # user_not_found, role_not_eligible


class BookingStatusResponse(BaseModel):
    """Schema for the status change response."""

    message: str
    update_outcome: UpdateOutcome = Field(..., serialization_alias="updateOutcome")
    promotion: PromotionOutcome | None = None
