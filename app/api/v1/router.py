"""Main API router that includes all endpoint routers."""

from fastapi import APIRouter

from app.api.v1 import (
    announcements,
    bookings,
    coupons,
    courts,
    members,
    users,
)

api_router = APIRouter()

# Users
api_router.include_router(users.router, prefix="/users", tags=["Users"])

# Members
api_router.include_router(members.router, prefix="/members", tags=["Members"])

# Courts
api_router.include_router(courts.router, prefix="/courts", tags=["Courts"])

# Bookings
api_router.include_router(bookings.router, prefix="/bookings", tags=["Bookings"])

# Coupons
api_router.include_router(coupons.router, prefix="/coupons", tags=["Coupons"])

# Announcements
api_router.include_router(announcements.router, prefix="/announcements", tags=["Announcements"])
