"""Booking model."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.domain.booking_state import INITIAL_BOOKING_STATUS
from app.models.types import JSONDocument


class Booking(Base):
    """Court reservation request.

    ``requester_contact`` is a soft reference to ``User.email``; the user may
    not exist. Fields the caller sends beyond the typed columns live in
    ``extra`` and are never interpreted.
    """

    __tablename__ = "bookings"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    requester_contact: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=INITIAL_BOOKING_STATUS, index=True
    )  # pending, approved, rejected
    extra: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
