"""Court-related Pydantic schemas."""

from datetime import datetime
from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from app.models.court import Court

COURT_COLUMNS = ("name", "court_type", "price", "slots", "image")


def _split_extra(model: BaseModel) -> dict[str, Any]:
    return {
        key: value
        for key, value in (model.model_extra or {}).items()
        if key not in ("id", "_id", "created_at")
    }


class CourtCreate(BaseModel):
    """Schema for creating a court. Unknown fields are kept."""

    model_config = ConfigDict(extra="allow")

    name: str = Field(..., min_length=1, max_length=200)
    court_type: str | None = Field(None, max_length=50)
    price: float | None = None
    slots: list[Any] = Field(default_factory=list)
    image: str | None = None

    def extra_fields(self) -> dict[str, Any]:
        return _split_extra(self)


class CourtUpdate(BaseModel):
    """Schema for partially updating a court."""

    model_config = ConfigDict(extra="allow")

    name: str | None = Field(None, min_length=1, max_length=200)
    court_type: str | None = Field(None, max_length=50)
    price: float | None = None
    slots: list[Any] | None = None
    image: str | None = None

    def extra_fields(self) -> dict[str, Any]:
        return _split_extra(self)


class CourtResponse(BaseModel):
    """Schema for court response, extension fields flattened in."""

    model_config = ConfigDict(extra="allow")

    id: UUID
    name: str
    court_type: str | None = None
    price: float | None = None
    slots: list[Any] = Field(default_factory=list)
    image: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_court(cls, court: Court) -> "CourtResponse":
        data = {
            **(court.extra or {}),
            "id": court.id,
            "created_at": court.created_at,
            **{column: getattr(court, column) for column in COURT_COLUMNS},
        }
        return cls.model_validate(data)
