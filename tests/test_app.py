"""Tests for the application shell: root, health, middleware."""

from app.config import settings


async def test_root_banner(client):
    response = await client.get("/")

    assert response.status_code == 200
    assert response.json()["message"] == "Elite Arena SCMS Backend Running"


async def test_health(client):
    data = (await client.get("/health")).json()

    assert data["status"] == "healthy"
    assert data["version"] == settings.app_version


async def test_response_headers(client):
    response = await client.get("/health", headers={"X-Request-ID": "req-1"})

    assert response.headers["X-Request-ID"] == "req-1"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert "X-Response-Time" in response.headers


async def test_oversized_body_is_refused(client):
    padding = "x" * (settings.max_body_size + 1)

    response = await client.post("/bookings", json={"requester_contact": "a@x.com", "note": padding})

    assert response.status_code == 413
