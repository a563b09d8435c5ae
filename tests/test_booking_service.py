"""Tests for the booking lifecycle service."""

import pytest
from sqlalchemy import delete
from sqlalchemy.exc import OperationalError

from app.core.exceptions import NotFoundError, StoreError, ValidationError
from app.models.booking import Booking
from app.schemas.booking import BookingCreate
from app.services.booking_service import BookingService
from app.services.promotion_service import PromotionService


class UntouchableSession:
    """Stands in for a session that must not be used."""

    def __getattr__(self, name):
        raise AssertionError(f"store accessed via {name}")


class BrokenPromotionService(PromotionService):
    async def maybe_promote(self, db, contact):
        raise OperationalError("UPDATE users", {}, Exception("connection lost"))


@pytest.fixture
def service() -> BookingService:
    return BookingService()


async def _create(service, session_factory, **fields):
    async with session_factory() as db:
        return await service.create_booking(db, BookingCreate(**fields))


async def _status_of(service, session_factory, booking_id):
    async with session_factory() as db:
        return (await service.get_booking(db, str(booking_id))).status


async def test_create_forces_pending_and_keeps_extra_fields(service, session_factory):
    booking = await _create(
        service,
        session_factory,
        requesterContact="a@x.com",
        court="C1",
        slot="09:00",
        status="approved",
    )

    assert booking.status == "pending"
    assert booking.created_at is not None
    assert booking.requester_contact == "a@x.com"
    assert booking.extra == {"court": "C1", "slot": "09:00"}


async def test_invalid_status_never_reaches_store(service):
    with pytest.raises(ValidationError):
        await service.request_status_change(UntouchableSession(), "any-id", "cancelled")


async def test_unknown_booking_is_not_found(service, session_factory):
    async with session_factory() as db:
        with pytest.raises(NotFoundError):
            await service.request_status_change(
                db, "2b1c1a52-0d6f-4f47-9a55-3b8d3c1f0c11", "approved"
            )


async def test_malformed_id_is_not_found(service, session_factory):
    async with session_factory() as db:
        with pytest.raises(NotFoundError):
            await service.request_status_change(db, "nonexistent-id", "approved")


@pytest.mark.parametrize("status", ["pending", "approved", "rejected"])
async def test_transition_stores_requested_status(status, service, session_factory):
    booking = await _create(service, session_factory, requester_contact="a@x.com")

    async with session_factory() as db:
        result = await service.request_status_change(db, str(booking.id), status)

    assert result.update_outcome.matched_count == 1
    assert result.update_outcome.modified_count == int(status != "pending")
    assert await _status_of(service, session_factory, booking.id) == status


async def test_approved_booking_can_go_back_to_pending(service, session_factory):
    booking = await _create(service, session_factory, requester_contact="a@x.com")

    async with session_factory() as db:
        await service.request_status_change(db, str(booking.id), "approved")
    async with session_factory() as db:
        await service.request_status_change(db, str(booking.id), "pending")

    assert await _status_of(service, session_factory, booking.id) == "pending"


async def test_promotion_only_runs_on_approval(service, session_factory, make_user, get_user):
    await make_user("a@x.com", role="user")
    booking = await _create(service, session_factory, requester_contact="a@x.com")

    async with session_factory() as db:
        rejected = await service.request_status_change(db, str(booking.id), "rejected")

    assert rejected.promotion is None
    assert (await get_user("a@x.com")).role == "user"


async def test_failed_promotion_rolls_back_status(session_factory, make_user, get_user):
    service = BookingService(promotions=BrokenPromotionService())
    await make_user("a@x.com", role="user")
    booking = await _create(service, session_factory, requester_contact="a@x.com")

    async with session_factory() as db:
        with pytest.raises(StoreError) as exc_info:
            await service.request_status_change(db, str(booking.id), "approved")

    assert exc_info.value.status_code == 500
    assert "connection lost" in exc_info.value.details
    assert await _status_of(service, session_factory, booking.id) == "pending"
    assert (await get_user("a@x.com")).role == "user"


async def test_requester_queries(service, session_factory):
    mine = await _create(service, session_factory, requester_contact="a@x.com")
    approved = await _create(service, session_factory, requester_contact="a@x.com")
    await _create(service, session_factory, requester_contact="b@x.com")
    async with session_factory() as db:
        await service.request_status_change(db, str(approved.id), "approved")

    async with session_factory() as db:
        pending = await service.list_pending_for_requester(db, "a@x.com")
        approved_list = await service.list_approved_for_requester(db, "a@x.com")
        all_pending = await service.list_by_status(db, "pending")

    assert [b.id for b in pending] == [mine.id]
    assert [b.id for b in approved_list] == [approved.id]
    assert len(all_pending) == 2


async def test_cancel_deletes_booking(service, session_factory):
    booking = await _create(service, session_factory, requester_contact="a@x.com")

    async with session_factory() as db:
        await service.cancel_booking(db, str(booking.id))
    async with session_factory() as db:
        with pytest.raises(NotFoundError):
            await service.cancel_booking(db, str(booking.id))


class VanishingBookingService(BookingService):
    """Deletes the booking right after loading it, as a concurrent cancel would."""

    async def get_booking(self, db, booking_id):
        booking = await super().get_booking(db, booking_id)
        await db.execute(
            delete(Booking)
            .where(Booking.id == booking.id)
            .execution_options(synchronize_session=False)
        )
        return booking


async def test_booking_deleted_before_update_is_not_found(session_factory, make_user, get_user):
    service = VanishingBookingService()
    await make_user("a@x.com", role="user")
    booking = await _create(service, session_factory, requester_contact="a@x.com")

    async with session_factory() as db:
        with pytest.raises(NotFoundError):
            await service.request_status_change(db, str(booking.id), "approved")

    assert (await get_user("a@x.com")).role == "user"
