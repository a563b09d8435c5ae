"""User-related Pydantic schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class UserUpsert(BaseModel):
    """Schema for register / social login."""

    email: str = Field(..., min_length=1, max_length=255)
    name: str = Field(..., min_length=1, max_length=200)
    image: str | None = None


class UserUpdate(BaseModel):
    """Schema for updating a user's profile."""

    name: str | None = Field(None, min_length=1, max_length=200)
    image: str | None = None


class UserResponse(BaseModel):
    """Schema for user response."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    image: str | None = None
    role: str
    created_at: datetime | None = None
    last_logged_in: datetime | None = None


class UserUpsertResponse(BaseModel):
    """Schema for the register / login response."""

    message: str
    created: bool
    user: UserResponse
