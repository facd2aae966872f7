"""Shared domain building blocks."""

from bookshelf.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from bookshelf.domain.shared.time import ensure_tz_aware, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "ValidationError",
    "ensure_tz_aware",
    "utc_now",
]
