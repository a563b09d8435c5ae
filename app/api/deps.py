"""API dependencies shared by the routers."""

from app.database import get_db
from app.services.booking_service import BookingService, booking_service

__all__ = ["get_booking_service", "get_db"]


def get_booking_service() -> BookingService:
    """Booking service used by the booking endpoints."""
    return booking_service
