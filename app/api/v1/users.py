"""User endpoints."""

import logging
from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.exceptions import NotFoundError, store_errors
from app.domain.promotion import DEFAULT_ROLE, USER_ROLES
from app.models.user import User
from app.schemas.user import UserResponse, UserUpdate, UserUpsert, UserUpsertResponse

logger = logging.getLogger(__name__)

router = APIRouter()


async def _get_user_by_email(db: AsyncSession, email: str) -> User:
    async with store_errors(db, "Failed to fetch user"):
        result = await db.execute(select(User).where(User.email == email))
        user = result.scalar_one_or_none()
    if not user:
        raise NotFoundError(detail="User not found")
    return user


@router.put("", response_model=UserUpsertResponse)
async def save_user(
    user_data: UserUpsert,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> UserUpsertResponse:
    """Register a user, or record a login for an existing one.

    An existing account only gets its last login refreshed; name, image and
    role are left untouched.
    """
    now = datetime.now(UTC)
    async with store_errors(db, "User save failed", conflict="User already exists"):
        result = await db.execute(select(User).where(User.email == user_data.email))
        user = result.scalar_one_or_none()

        if user:
            user.last_logged_in = now
            await db.commit()
            response.status_code = status.HTTP_200_OK
            return UserUpsertResponse(
                message="User already exists. Updated lastLoggedIn.",
                created=False,
                user=UserResponse.model_validate(user),
            )

        user = User(
            name=user_data.name,
            email=user_data.email,
            image=user_data.image,
            role=DEFAULT_ROLE,
            created_at=now,
            last_logged_in=now,
        )
        db.add(user)
        await db.commit()

    logger.info(f"User {user.email} registered")
    response.status_code = status.HTTP_201_CREATED
    return UserUpsertResponse(
        message="User created successfully.",
        created=True,
        user=UserResponse.model_validate(user),
    )


@router.get("", response_model=list[UserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    search: str | None = Query(default=None),
    role: str | None = Query(default=None),
) -> list[User]:
    """List users, optionally by role and by a name/email search term.

    An unknown role is ignored rather than rejected.
    """
    query = select(User)
    if role and role in USER_ROLES:
        query = query.where(User.role == role)
    if search:
        pattern = f"%{search}%"
        query = query.where(or_(User.name.ilike(pattern), User.email.ilike(pattern)))

    async with store_errors(db, "Failed to fetch users"):
        result = await db.execute(query.order_by(User.created_at.asc()))
        return list(result.scalars().all())


@router.get("/{email}", response_model=UserResponse)
async def get_user(
    email: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Get a user's profile by email."""
    return await _get_user_by_email(db, email)


@router.patch("/{email}", response_model=UserResponse)
async def update_user(
    email: str,
    updates: UserUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> User:
    """Update a user's name and/or image."""
    user = await _get_user_by_email(db, email)

    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    async with store_errors(db, "Failed to update user"):
        for field, value in update_data.items():
            setattr(user, field, value)
        await db.commit()

    return user
