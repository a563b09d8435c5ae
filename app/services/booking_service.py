"""Booking lifecycle service."""

import logging
from datetime import UTC, datetime

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import NotFoundError, store_errors
from app.domain.booking_state import (
    BOOKING_APPROVED,
    BOOKING_PENDING,
    INITIAL_BOOKING_STATUS,
    assert_valid_booking_status,
    triggers_promotion,
)
from app.models.booking import Booking
from app.schemas.booking import (
    BookingCreate,
    BookingStatusResponse,
    UpdateOutcome,
)
from app.services.promotion_service import PromotionService, promotion_service
from app.utils.identifiers import parse_id

logger = logging.getLogger(__name__)


class BookingService:
    """Create, query, transition and cancel bookings."""

    def __init__(self, promotions: PromotionService = promotion_service) -> None:
        self.promotions = promotions

    async def create_booking(self, db: AsyncSession, booking_data: BookingCreate) -> Booking:
        """Persist a new booking.

        Status and creation time are always set here, whatever the caller
        sent.
        """
        booking = Booking(
            requester_contact=booking_data.requester_contact,
            status=INITIAL_BOOKING_STATUS,
            created_at=datetime.now(UTC),
            extra=booking_data.extra_fields(),
        )
        async with store_errors(db, "Failed to create booking"):
            db.add(booking)
            await db.commit()

        logger.info(f"Booking {booking.id} created for {booking.requester_contact}")
        return booking

    async def get_booking(self, db: AsyncSession, booking_id: str) -> Booking:
        """Load a booking or raise NotFoundError."""
        parsed_id = parse_id(booking_id, "Booking")
        async with store_errors(db, "Failed to fetch booking"):
            result = await db.execute(select(Booking).where(Booking.id == parsed_id))
            booking = result.scalar_one_or_none()
        if not booking:
            raise NotFoundError("Booking", booking_id)
        return booking

    async def list_bookings(
        self,
        db: AsyncSession,
        status: str | None = None,
        requester_contact: str | None = None,
    ) -> list[Booking]:
        """List bookings, optionally filtered by status and requester."""
        query = select(Booking)
        if status is not None:
            query = query.where(Booking.status == status)
        if requester_contact is not None:
            query = query.where(Booking.requester_contact == requester_contact)
        query = query.order_by(Booking.created_at.asc())

        async with store_errors(db, "Failed to fetch bookings"):
            result = await db.execute(query)
            return list(result.scalars().all())

    async def list_by_status(self, db: AsyncSession, status: str) -> list[Booking]:
        return await self.list_bookings(db, status=status)

    async def list_pending_for_requester(self, db: AsyncSession, contact: str) -> list[Booking]:
        """Outstanding requests of one user."""
        return await self.list_bookings(db, status=BOOKING_PENDING, requester_contact=contact)

    async def list_approved_for_requester(self, db: AsyncSession, contact: str) -> list[Booking]:
        """Approved bookings of one user."""
        return await self.list_bookings(db, status=BOOKING_APPROVED, requester_contact=contact)

    async def request_status_change(
        self,
        db: AsyncSession,
        booking_id: str,
        requested_status: str | None,
    ) -> BookingStatusResponse:
        """Move a booking to ``requested_status``.

        The status is validated before the store is touched. When the new
        status is approved the requester is promoted in the same
        transaction, so a booking is never left approved with its user
        unpromoted.

        Args:
            db: Database session
            booking_id: Booking identifier from the request path
            requested_status: Target status from the request body

        Returns:
            Write outcome and, for approvals, the promotion outcome

        Raises:
            ValidationError: If the status is missing or not allowed
            NotFoundError: If no booking has this id, including one deleted
                between the lookup and the write
            StoreError: If either write fails; nothing is committed
        """
        status = assert_valid_booking_status(requested_status)
        booking = await self.get_booking(db, booking_id)
        previous_status = booking.status
        contact = booking.requester_contact

        promotion = None
        async with store_errors(db, "Failed to update booking status"):
            result = await db.execute(
                update(Booking)
                .where(Booking.id == booking.id)
                .values(status=status)
                .execution_options(synchronize_session="evaluate")
            )
            if result.rowcount == 0:
                # Deleted since it was loaded; nothing to approve or promote.
                await db.rollback()
                raise NotFoundError("Booking", booking_id)
            if triggers_promotion(status):
                promotion = await self.promotions.maybe_promote(db, contact)
            await db.commit()

        logger.info(f"Booking {booking_id}: {previous_status} → {status}")
        return BookingStatusResponse(
            message=f"Booking {status} and user promoted if applicable",
            update_outcome=UpdateOutcome(
                matched_count=result.rowcount,
                modified_count=int(previous_status != status),
            ),
            promotion=promotion,
        )

    async def cancel_booking(self, db: AsyncSession, booking_id: str) -> None:
        """Delete a booking outright. Not a status transition."""
        parsed_id = parse_id(booking_id, "Booking")
        async with store_errors(db, "Failed to cancel booking"):
            result = await db.execute(delete(Booking).where(Booking.id == parsed_id))
            await db.commit()

        if result.rowcount == 0:
            raise NotFoundError("Booking", booking_id)
        logger.info(f"Booking {booking_id} cancelled")


booking_service = BookingService()
