"""Path identifier helpers."""

from uuid import UUID

from app.core.exceptions import NotFoundError


def parse_id(value: str, resource: str) -> UUID:
    """Parse a resource id taken from a URL.

    A malformed id cannot name any stored record, so it is reported as not
    found rather than as a validation failure.

    Args:
        value: Raw path segment
        resource: Resource name used in the error message

    Raises:
        NotFoundError: If ``value`` is not a valid UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise NotFoundError(resource, value) from None
