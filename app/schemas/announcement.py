"""Announcement-related Pydantic schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class AnnouncementCreate(BaseModel):
    """Schema for publishing an announcement."""

    title: str = Field(..., min_length=1, max_length=200)
    description: str = Field(..., min_length=1)


class AnnouncementUpdate(BaseModel):
    """Schema for editing an announcement."""

    title: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = Field(None, min_length=1)


class AnnouncementResponse(BaseModel):
    """Schema for announcement response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    title: str
    description: str
    created_at: datetime | None = None
