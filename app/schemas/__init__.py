"""Pydantic schemas for API validation."""

from app.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from app.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingStatusResponse,
    BookingStatusUpdate,
    PromotionOutcome,
    UpdateOutcome,
)
from app.schemas.common import MessageResponse
from app.schemas.coupon import CouponCreate, CouponResponse, CouponUpdate
from app.schemas.court import CourtCreate, CourtResponse, CourtUpdate
from app.schemas.user import UserResponse, UserUpdate, UserUpsert, UserUpsertResponse

__all__ = [
    # Announcement
    "AnnouncementCreate",
    "AnnouncementResponse",
    "AnnouncementUpdate",
    # Booking
    "BookingCreate",
    "BookingResponse",
    "BookingStatusResponse",
    "BookingStatusUpdate",
    "PromotionOutcome",
    "UpdateOutcome",
    # Common
    "MessageResponse",
    # Coupon
    "CouponCreate",
    "CouponResponse",
    "CouponUpdate",
    # Court
    "CourtCreate",
    "CourtResponse",
    "CourtUpdate",
    # User
    "UserResponse",
    "UserUpdate",
    "UserUpsert",
    "UserUpsertResponse",
]
