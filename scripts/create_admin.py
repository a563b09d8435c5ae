#!/usr/bin/env python3
"""Create an admin user, or elevate an existing account to admin.

No API endpoint grants the admin role, so club administrators are set up
with this script.
"""

import asyncio
from datetime import UTC, datetime

from sqlalchemy import select

from app.database import AsyncSessionLocal
from app.domain.promotion import ROLE_ADMIN
from app.models.user import User


async def create_admin(
    email: str = "admin@elitearena.club",
    name: str = "Elite Arena Admin",
) -> None:
    """Create an admin user if it doesn't exist, otherwise elevate it."""
    async with AsyncSessionLocal() as session:
        result = await session.execute(select(User).where(User.email == email))
        existing = result.scalar_one_or_none()

        if existing:
            previous_role = existing.role
            existing.role = ROLE_ADMIN
            await session.commit()
            print(f"Updated existing user: {email} ({previous_role} → {ROLE_ADMIN})")
        else:
            now = datetime.now(UTC)
            admin = User(
                name=name,
                email=email,
                role=ROLE_ADMIN,
                created_at=now,
            )
            session.add(admin)
            await session.commit()
            print(f"Created admin user: {email}")

        print(f"Email: {email}")
        print(f"Role: {ROLE_ADMIN}")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create an admin user")
    parser.add_argument("--email", default="admin@elitearena.club", help="Admin email")
    parser.add_argument("--name", default="Elite Arena Admin", help="Display name")

    args = parser.parse_args()

    asyncio.run(create_admin(email=args.email, name=args.name))
