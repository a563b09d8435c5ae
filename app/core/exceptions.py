"""Custom application exceptions."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import HTTPException, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


class AppException(HTTPException):
    """Base application exception."""

    def __init__(
        self,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail: str = "An unexpected error occurred",
        headers: dict[str, str] | None = None,
    ) -> None:
        super().__init__(status_code=status_code, detail=detail, headers=headers)

    def to_content(self) -> dict[str, Any]:
        """JSON body rendered for this exception."""
        return {"detail": self.detail}


class ValidationError(AppException):
    """Malformed, missing or out-of-range input."""

    def __init__(self, detail: str = "Validation failed", errors: list[dict[str, Any]] | None = None) -> None:
        self.errors = errors
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        if self.errors:
            content["errors"] = self.errors
        return content


class NotFoundError(AppException):
    """Resource not found exception."""

    def __init__(self, resource: str = "Resource", identifier: str | None = None, detail: str | None = None) -> None:
        if detail is None:
            detail = f"{resource} not found"
            if identifier:
                detail = f"{resource} with ID '{identifier}' not found"
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ConflictError(AppException):
    """Duplicate unique key."""

    def __init__(self, detail: str = "Resource already exists") -> None:
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)


class StoreError(AppException):
    """Underlying persistence failure."""

    def __init__(self, detail: str = "Store operation failed", details: str | None = None) -> None:
        self.details = details
        super().__init__(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=detail)

    def to_content(self) -> dict[str, Any]:
        content = super().to_content()
        if self.details:
            content["details"] = self.details
        return content


@asynccontextmanager
async def store_errors(
    db: AsyncSession, action: str, conflict: str = "Resource already exists"
) -> AsyncIterator[None]:
    """Roll back and re-raise any store failure as an application error.

    Args:
        db: Session the failing statements ran on
        action: Human readable action, e.g. "Failed to create booking"
        conflict: Message used when a unique key is violated

    Raises:
        ConflictError: If the wrapped block violated a unique constraint
        StoreError: If the wrapped block raised any other SQLAlchemyError
    """
    try:
        yield
    except IntegrityError as e:
        await db.rollback()
        logger.warning(f"{action}: {e.orig}")
        raise ConflictError(conflict) from e
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"{action}: {e}")
        raise StoreError(action, details=str(e)) from e
