"""Coupon endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.exceptions import ConflictError, NotFoundError, store_errors
from app.models.coupon import Coupon
from app.schemas.common import MessageResponse
from app.schemas.coupon import CouponCreate, CouponResponse, CouponUpdate
from app.utils.identifiers import parse_id

logger = logging.getLogger(__name__)

router = APIRouter()


async def _code_taken(db: AsyncSession, code: str, exclude: Coupon | None = None) -> bool:
    query = select(Coupon.id).where(Coupon.coupon == code)
    if exclude is not None:
        query = query.where(Coupon.id != exclude.id)
    result = await db.execute(query)
    return result.first() is not None


@router.post("", response_model=CouponResponse, status_code=status.HTTP_201_CREATED)
async def create_coupon(
    coupon_data: CouponCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Coupon:
    """Create a coupon. Codes are unique."""
    async with store_errors(db, "Failed to add coupon", conflict="Coupon already exists"):
        if await _code_taken(db, coupon_data.coupon):
            raise ConflictError("Coupon already exists")

        coupon = Coupon(**coupon_data.model_dump())
        db.add(coupon)
        await db.commit()
        await db.refresh(coupon)

    logger.info(f"Coupon {coupon.coupon} added")
    return coupon


@router.get("", response_model=list[CouponResponse])
async def list_coupons(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Coupon]:
    """List all coupons."""
    async with store_errors(db, "Failed to fetch coupons"):
        result = await db.execute(select(Coupon).order_by(Coupon.created_at.asc()))
        return list(result.scalars().all())


@router.patch("/{coupon_id}", response_model=CouponResponse)
async def update_coupon(
    coupon_id: str,
    updates: CouponUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Coupon:
    """Update a coupon."""
    parsed_id = parse_id(coupon_id, "Coupon")
    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    logger.debug(f"Updating coupon {coupon_id}: {update_data}")

    async with store_errors(db, "Failed to update coupon", conflict="Coupon already exists"):
        result = await db.execute(select(Coupon).where(Coupon.id == parsed_id))
        coupon = result.scalar_one_or_none()
        if not coupon:
            raise NotFoundError(detail="Coupon not found")

        code = update_data.get("coupon")
        if code and await _code_taken(db, code, exclude=coupon):
            raise ConflictError("Coupon already exists")

        for field, value in update_data.items():
            setattr(coupon, field, value)
        await db.commit()

    return coupon


@router.delete("/{coupon_id}", response_model=MessageResponse)
async def delete_coupon(
    coupon_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """Delete a coupon."""
    parsed_id = parse_id(coupon_id, "Coupon")
    async with store_errors(db, "Failed to delete coupon"):
        result = await db.execute(select(Coupon).where(Coupon.id == parsed_id))
        coupon = result.scalar_one_or_none()
        if not coupon:
            raise NotFoundError(detail="Coupon not found")
        await db.delete(coupon)
        await db.commit()

    return MessageResponse(message="Coupon deleted")
