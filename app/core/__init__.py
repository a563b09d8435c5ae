"""Core utilities: exceptions and middleware."""

from app.core.exceptions import (
    AppException,
    ConflictError,
    NotFoundError,
    StoreError,
    ValidationError,
    store_errors,
)

__all__ = [
    "AppException",
    "ConflictError",
    "NotFoundError",
    "StoreError",
    "ValidationError",
    "store_errors",
]
