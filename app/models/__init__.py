"""Database models."""

from app.models.announcement import Announcement
from app.models.booking import Booking
from app.models.coupon import Coupon
from app.models.court import Court
from app.models.user import User

__all__ = [
    "Announcement",
    "Booking",
    "Coupon",
    "Court",
    "User",
]
