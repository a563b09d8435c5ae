"""Booking state machine.

States: pending → approved | rejected

Any existing booking may be moved to any of the three states; approved and
rejected are not enforced as terminal. Cancelling a booking deletes the
record and is not a transition.
"""

from app.core.exceptions import ValidationError

BOOKING_PENDING = "pending"
BOOKING_APPROVED = "approved"
BOOKING_REJECTED = "rejected"

BOOKING_STATUSES = frozenset({BOOKING_PENDING, BOOKING_APPROVED, BOOKING_REJECTED})

INITIAL_BOOKING_STATUS = BOOKING_PENDING


def assert_valid_booking_status(requested: str | None) -> str:
    """Validate a requested booking status.

    Args:
        requested: Status supplied by the caller, possibly missing

    Returns:
        The validated status

    Raises:
        ValidationError: If the status is missing or not an allowed value
    """
    if not requested or requested not in BOOKING_STATUSES:
        raise ValidationError("Invalid status value")
    return requested


def triggers_promotion(status: str) -> bool:
    """Whether moving a booking to ``status`` runs the promotion rule."""
    return status == BOOKING_APPROVED
