"""SQLAlchemy models for persistence layer."""

from bookshelf.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from bookshelf.infrastructure.persistence.sqlalchemy.models.book_model import (
    BookModel,
)

__all__ = [
    "Base",
    "BookModel",
    "TimestampMixin",
]
