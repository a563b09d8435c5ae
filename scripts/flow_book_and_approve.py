#!/usr/bin/env python3
"""
Booking approval flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls against a running server.
All rules live in the backend.

Usage:
    python scripts/flow_book_and_approve.py --email player@elitearena.club --court "Court 1" --slot 09:00

Flow:
    1. Register / log in the player
    2. Create booking
    3. List the player's pending bookings
    4. Approve booking (as admin)
    5. Check the player was promoted to member
    6. List the player's approved bookings
"""

import argparse
import sys

import httpx

BASE_URL = "http://localhost:5000"


def api_request(method: str, endpoint: str, data: dict | None = None) -> dict:
    """Make an API request and return status and decoded body."""
    response = httpx.request(method, f"{BASE_URL}{endpoint}", json=data, timeout=10.0)
    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def expect(result: dict, *statuses: int) -> dict:
    """Exit with the response body if the status is unexpected."""
    if result["status"] not in statuses:
        print(f"ERROR: unexpected status {result['status']}")
        print(result["data"])
        sys.exit(1)
    return result["data"]


def main():
    global BASE_URL

    parser = argparse.ArgumentParser(description="Book a court and approve it")
    parser.add_argument("--email", default="player@elitearena.club", help="Player email")
    parser.add_argument("--name", default="Test Player", help="Player name")
    parser.add_argument("--court", default="Court 1", help="Court name")
    parser.add_argument("--slot", default="09:00", help="Time slot")
    parser.add_argument("--base-url", default=BASE_URL, help="API base URL")
    args = parser.parse_args()
    BASE_URL = args.base_url.rstrip("/")

    print_step(1, "Register / log in player")
    data = expect(api_request("PUT", "/users", {"email": args.email, "name": args.name}), 200, 201)
    print(f"  {data['message']} role={data['user']['role']}")

    print_step(2, "Create booking")
    booking = expect(
        api_request(
            "POST",
            "/bookings",
            {"requester_contact": args.email, "court": args.court, "slot": args.slot},
        ),
        201,
    )
    booking_id = booking["id"]
    print(f"  Booking {booking_id} status={booking['status']}")

    print_step(3, "List pending bookings for player")
    pending = expect(api_request("GET", f"/bookings/pending/{args.email}"), 200)
    print(f"  {len(pending)} pending booking(s)")

    print_step(4, "Approve booking")
    result = expect(api_request("PATCH", f"/bookings/{booking_id}", {"status": "approved"}), 200)
    print(f"  {result['message']}")
    print(f"  promotion={result['promotion']}")

    print_step(5, "Check player role")
    user = expect(api_request("GET", f"/users/{args.email}"), 200)
    print(f"  role={user['role']}")

    print_step(6, "List approved bookings for player")
    approved = expect(api_request("GET", f"/bookings/approved/{args.email}"), 200)
    print(f"  {len(approved)} approved booking(s)")

    print("\nFlow complete.")


if __name__ == "__main__":
    main()
