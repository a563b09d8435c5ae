"""Club member endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.exceptions import NotFoundError, store_errors
from app.domain.promotion import ROLE_MEMBER, ROLE_USER
from app.models.user import User
from app.schemas.common import MessageResponse
from app.schemas.user import UserResponse
from app.utils.identifiers import parse_id

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=list[UserResponse])
async def list_members(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[User]:
    """List users holding the member role."""
    async with store_errors(db, "Failed to fetch members"):
        result = await db.execute(
            select(User).where(User.role == ROLE_MEMBER).order_by(User.created_at.asc())
        )
        return list(result.scalars().all())


@router.patch("/downgrade/{user_id}", response_model=MessageResponse)
async def downgrade_member(
    user_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """Turn a member back into a plain user.

    This is the only path that lowers a role; booking approval never does.
    """
    not_found = NotFoundError(detail="User not found or already not a member")
    try:
        parsed_id = parse_id(user_id, "User")
    except NotFoundError:
        raise not_found from None

    async with store_errors(db, "Failed to downgrade member"):
        result = await db.execute(
            update(User)
            .where(User.id == parsed_id, User.role == ROLE_MEMBER)
            .values(role=ROLE_USER)
        )
        await db.commit()

    if result.rowcount == 0:
        raise not_found

    logger.info(f"User {user_id} downgraded to {ROLE_USER}")
    return MessageResponse(message="Member downgraded to user")
