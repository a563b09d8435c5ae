"""Court listing model."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Float, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.sql import func

from app.database import Base
from app.models.types import JSONDocument


class Court(Base):
    """Bookable court."""

    __tablename__ = "courts"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    court_type: Mapped[str | None] = mapped_column(String(50))  # tennis, badminton, squash, ...
    price: Mapped[float | None] = mapped_column(Float)  # per session
    slots: Mapped[list[Any]] = mapped_column(JSONDocument, nullable=False, default=list)
    image: Mapped[str | None] = mapped_column(Text)
    extra: Mapped[dict[str, Any]] = mapped_column(JSONDocument, nullable=False, default=dict)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now()
    )
