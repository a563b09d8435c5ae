"""Announcement endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.exceptions import NotFoundError, store_errors
from app.models.announcement import Announcement
from app.schemas.announcement import (
    AnnouncementCreate,
    AnnouncementResponse,
    AnnouncementUpdate,
)
from app.schemas.common import MessageResponse
from app.utils.identifiers import parse_id

router = APIRouter()


async def _get_announcement(db: AsyncSession, announcement_id: str) -> Announcement:
    parsed_id = parse_id(announcement_id, "Announcement")
    async with store_errors(db, "Failed to fetch announcement"):
        result = await db.execute(select(Announcement).where(Announcement.id == parsed_id))
        announcement = result.scalar_one_or_none()
    if not announcement:
        raise NotFoundError(detail="Announcement not found")
    return announcement


@router.post("", response_model=AnnouncementResponse, status_code=status.HTTP_201_CREATED)
async def create_announcement(
    announcement_data: AnnouncementCreate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Announcement:
    """Publish an announcement."""
    announcement = Announcement(**announcement_data.model_dump())
    async with store_errors(db, "Failed to create announcement"):
        db.add(announcement)
        await db.commit()
        await db.refresh(announcement)
    return announcement


@router.get("", response_model=list[AnnouncementResponse])
async def list_announcements(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> list[Announcement]:
    """List announcements, newest first."""
    async with store_errors(db, "Failed to fetch announcements"):
        result = await db.execute(
            select(Announcement).order_by(Announcement.created_at.desc())
        )
        return list(result.scalars().all())


@router.patch("/{announcement_id}", response_model=AnnouncementResponse)
async def update_announcement(
    announcement_id: str,
    updates: AnnouncementUpdate,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Announcement:
    """Edit an announcement."""
    announcement = await _get_announcement(db, announcement_id)
    async with store_errors(db, "Failed to update announcement"):
        for field, value in updates.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(announcement, field, value)
        await db.commit()
    return announcement


@router.delete("/{announcement_id}", response_model=MessageResponse)
async def delete_announcement(
    announcement_id: str,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """Delete an announcement."""
    announcement = await _get_announcement(db, announcement_id)
    async with store_errors(db, "Failed to delete announcement"):
        await db.delete(announcement)
        await db.commit()
    return MessageResponse(message="Announcement deleted")
