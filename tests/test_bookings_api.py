"""API tests for the booking endpoints."""

import pytest
from sqlalchemy.exc import OperationalError

from app.api.deps import get_booking_service, get_db
from app.main import app as fastapi_app
from app.services.booking_service import BookingService
from app.services.promotion_service import PromotionService

MISSING_ID = "5f0c3a8e-8a61-4d3e-9d0b-7f5a2c8f4e21"


async def create_booking(client, **fields):
    payload = {"requester_contact": "a@x.com", "court": "C1", "slot": "09:00", **fields}
    response = await client.post("/bookings", json=payload)
    assert response.status_code == 201
    return response.json()


async def test_create_booking_is_pending(client):
    response = await client.post(
        "/bookings",
        json={"court": "C1", "slot": "09:00", "requesterContact": "a@x.com", "status": "approved"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["id"]
    assert data["status"] == "pending"
    assert data["requester_contact"] == "a@x.com"
    assert data["court"] == "C1"
    assert data["slot"] == "09:00"
    assert data["created_at"]
    assert "requesterContact" not in data


async def test_create_booking_accepts_legacy_user_email(client):
    response = await client.post("/bookings", json={"userEmail": "old@x.com", "court": "C2"})

    assert response.status_code == 201
    assert response.json()["requester_contact"] == "old@x.com"


async def test_create_booking_requires_requester(client):
    response = await client.post("/bookings", json={"court": "C1"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing or invalid fields"


async def test_approval_promotes_user(client, make_user, get_user):
    await make_user("a@x.com", role="user")
    booking = await create_booking(client)

    response = await client.patch(f"/bookings/{booking['id']}", json={"status": "approved"})

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == "Booking approved and user promoted if applicable"
    assert data["updateOutcome"] == {"matched_count": 1, "modified_count": 1}
    assert data["promotion"]["promoted"] is True
    assert data["promotion"]["role"] == "member"

    stored = (await client.get(f"/bookings/{booking['id']}")).json()
    assert stored["status"] == "approved"
    assert (await get_user("a@x.com")).role == "member"


@pytest.mark.parametrize("role", ["member", "admin"])
async def test_approval_keeps_higher_roles(role, client, make_user, get_user):
    await make_user("a@x.com", role=role)
    booking = await create_booking(client)

    response = await client.patch(f"/bookings/{booking['id']}", json={"status": "approved"})

    assert response.status_code == 200
    assert response.json()["promotion"]["promoted"] is False
    assert (await get_user("a@x.com")).role == role


async def test_approval_without_matching_user_still_succeeds(client):
    booking = await create_booking(client, requester_contact="nobody@x.com")

    response = await client.patch(f"/bookings/{booking['id']}", json={"status": "approved"})

    assert response.status_code == 200
    assert response.json()["promotion"]["reason"] == "user_not_found"


async def test_approving_twice_matches_approving_once(client, make_user, get_user):
    await make_user("a@x.com", role="user")
    booking = await create_booking(client)

    first = await client.patch(f"/bookings/{booking['id']}", json={"status": "approved"})
    second = await client.patch(f"/bookings/{booking['id']}", json={"status": "approved"})

    assert first.status_code == second.status_code == 200
    assert second.json()["updateOutcome"]["modified_count"] == 0
    assert (await client.get(f"/bookings/{booking['id']}")).json()["status"] == "approved"
    assert (await get_user("a@x.com")).role == "member"


async def test_reject_does_not_promote(client, make_user, get_user):
    await make_user("a@x.com", role="user")
    booking = await create_booking(client)

    response = await client.patch(f"/bookings/{booking['id']}", json={"status": "rejected"})

    assert response.status_code == 200
    assert response.json()["promotion"] is None
    assert (await get_user("a@x.com")).role == "user"


async def test_invalid_status_is_rejected(client):
    booking = await create_booking(client)

    response = await client.patch(f"/bookings/{booking['id']}", json={"status": "cancelled"})

    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid status value"
    assert (await client.get(f"/bookings/{booking['id']}")).json()["status"] == "pending"


async def test_missing_status_is_rejected(client):
    booking = await create_booking(client)

    response = await client.patch(f"/bookings/{booking['id']}", json={})

    assert response.status_code == 400


@pytest.mark.parametrize("booking_id", ["nonexistent-id", MISSING_ID])
async def test_status_change_on_unknown_booking(booking_id, client):
    response = await client.patch(f"/bookings/{booking_id}", json={"status": "approved"})

    assert response.status_code == 404


async def test_invalid_status_checked_before_lookup(client):
    response = await client.patch("/bookings/nonexistent-id", json={"status": "cancelled"})

    assert response.status_code == 400


async def test_store_failure_is_reported(client, make_user):
    class BrokenPromotionService(PromotionService):
        async def maybe_promote(self, db, contact):
            raise OperationalError("UPDATE users", {}, Exception("connection lost"))

    await make_user("a@x.com", role="user")
    booking = await create_booking(client)
    fastapi_app.dependency_overrides[get_booking_service] = lambda: BookingService(
        promotions=BrokenPromotionService()
    )

    response = await client.patch(f"/bookings/{booking['id']}", json={"status": "approved"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to update booking status"
    assert "connection lost" in response.json()["details"]
    assert (await client.get(f"/bookings/{booking['id']}")).json()["status"] == "pending"


async def test_list_queries(client):
    first = await create_booking(client)
    second = await create_booking(client)
    await create_booking(client, requester_contact="b@x.com")
    await client.patch(f"/bookings/{second['id']}", json={"status": "approved"})

    all_bookings = (await client.get("/bookings")).json()
    pending = (await client.get("/bookings/pending")).json()
    approved = (await client.get("/bookings", params={"status": "approved"})).json()
    mine_pending = (await client.get("/bookings/pending/a@x.com")).json()
    mine_approved = (await client.get("/bookings/approved/a@x.com")).json()

    assert len(all_bookings) == 3
    assert len(pending) == 2
    assert [b["id"] for b in approved] == [second["id"]]
    assert [b["id"] for b in mine_pending] == [first["id"]]
    assert [b["id"] for b in mine_approved] == [second["id"]]


async def test_cancel_booking(client):
    booking = await create_booking(client)

    response = await client.delete(f"/bookings/{booking['id']}")

    assert response.status_code == 200
    assert response.json() == {"message": "Booking cancelled successfully"}
    assert (await client.get(f"/bookings/{booking['id']}")).status_code == 404
    assert (await client.delete(f"/bookings/{booking['id']}")).status_code == 404


async def test_create_store_failure_is_reported(client, session_factory):
    async def failing_commit():
        raise OperationalError("INSERT INTO bookings", {}, Exception("disk full"))

    async def override_get_db():
        async with session_factory() as session:
            session.commit = failing_commit
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db

    response = await client.post("/bookings", json={"requester_contact": "a@x.com", "court": "C1"})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to create booking"
    assert "disk full" in response.json()["details"]
