"""Booking endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_booking_service, get_db
from app.domain.booking_state import BOOKING_PENDING
from app.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingStatusResponse,
    BookingStatusUpdate,
)
from app.schemas.common import MessageResponse
from app.services.booking_service import BookingService

router = APIRouter()


@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
async def create_booking(
    booking_data: BookingCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> BookingResponse:
    """Create a booking. It always starts out pending."""
    booking = await service.create_booking(db, booking_data)
    return BookingResponse.from_booking(booking)


@router.get("", response_model=list[BookingResponse])
async def list_bookings(
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
    status_filter: str | None = Query(default=None, alias="status"),
) -> list[BookingResponse]:
    """List all bookings, optionally only those with a given status (admin)."""
    bookings = await service.list_bookings(db, status=status_filter)
    return [BookingResponse.from_booking(b) for b in bookings]


@router.get("/pending", response_model=list[BookingResponse])
async def list_pending_bookings(
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> list[BookingResponse]:
    """List bookings awaiting a decision (admin)."""
    bookings = await service.list_by_status(db, BOOKING_PENDING)
    return [BookingResponse.from_booking(b) for b in bookings]


@router.get("/pending/{contact}", response_model=list[BookingResponse])
async def list_pending_bookings_for_requester(
    contact: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> list[BookingResponse]:
    """List a user's outstanding booking requests."""
    bookings = await service.list_pending_for_requester(db, contact)
    return [BookingResponse.from_booking(b) for b in bookings]


@router.get("/approved/{contact}", response_model=list[BookingResponse])
async def list_approved_bookings_for_requester(
    contact: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> list[BookingResponse]:
    """List a user's approved bookings."""
    bookings = await service.list_approved_for_requester(db, contact)
    return [BookingResponse.from_booking(b) for b in bookings]


@router.get("/{booking_id}", response_model=BookingResponse)
async def get_booking(
    booking_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> BookingResponse:
    """Get a booking by ID."""
    booking = await service.get_booking(db, booking_id)
    return BookingResponse.from_booking(booking)


@router.patch("/{booking_id}", response_model=BookingStatusResponse)
async def change_booking_status(
    booking_id: str,
    request: BookingStatusUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> BookingStatusResponse:
    """Approve, reject or reset a booking (admin).

    Approving promotes the requester from user to member.
    """
    return await service.request_status_change(db, booking_id, request.status)


@router.delete("/{booking_id}", response_model=MessageResponse)
async def cancel_booking(
    booking_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
    service: Annotated[BookingService, Depends(get_booking_service)],
) -> MessageResponse:
    """Cancel a booking by deleting it."""
    await service.cancel_booking(db, booking_id)
    return MessageResponse(message="Booking cancelled successfully")
