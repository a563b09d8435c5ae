"""Court endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.exceptions import NotFoundError, store_errors
from app.models.court import Court
from app.schemas.common import MessageResponse
from app.schemas.court import CourtCreate, CourtResponse, CourtUpdate
from app.utils.identifiers import parse_id

router = APIRouter()


async def _get_court(db: AsyncSession, court_id: str) -> Court:
    parsed_id = parse_id(court_id, "Court")
    async with store_errors(db, "Failed to fetch court"):
        result = await db.execute(select(Court).where(Court.id == parsed_id))
        court = result.scalar_one_or_none()
    if not court:
        raise NotFoundError(detail="Court not found")
    return court


@router.post("", response_model=CourtResponse, status_code=status.HTTP_201_CREATED)
async def create_court(
    court_data: CourtCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CourtResponse:
    """Create a court."""
    court = Court(
        name=court_data.name,
        court_type=court_data.court_type,
        price=court_data.price,
        slots=court_data.slots,
        image=court_data.image,
        extra=court_data.extra_fields(),
    )
    async with store_errors(db, "Failed to create court"):
        db.add(court)
        await db.commit()
        await db.refresh(court)
    return CourtResponse.from_court(court)


@router.get("", response_model=list[CourtResponse])
async def list_courts(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[CourtResponse]:
    """List all courts."""
    async with store_errors(db, "Failed to fetch courts"):
        result = await db.execute(select(Court).order_by(Court.created_at.asc()))
        courts = result.scalars().all()
    return [CourtResponse.from_court(c) for c in courts]


@router.patch("/{court_id}", response_model=CourtResponse)
async def update_court(
    court_id: str,
    updates: CourtUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CourtResponse:
    """Update a court. Unknown fields are merged into its extension map."""
    court = await _get_court(db, court_id)

    update_data = updates.model_dump(exclude_unset=True, exclude_none=True)
    for key in updates.model_extra or {}:
        update_data.pop(key, None)

    async with store_errors(db, "Failed to update court"):
        for field, value in update_data.items():
            setattr(court, field, value)
        extra = updates.extra_fields()
        if extra:
            court.extra = {**(court.extra or {}), **extra}
        await db.commit()

    return CourtResponse.from_court(court)


@router.delete("/{court_id}", response_model=MessageResponse)
async def delete_court(
    court_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """Delete a court."""
    court = await _get_court(db, court_id)
    async with store_errors(db, "Failed to delete court"):
        await db.delete(court)
        await db.commit()
    return MessageResponse(message="Court deleted successfully")
