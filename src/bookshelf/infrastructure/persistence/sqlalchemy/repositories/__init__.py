"""SQLAlchemy repository implementations."""

from bookshelf.infrastructure.persistence.sqlalchemy.repositories.book_repository import (  # NOQA: E501
    BookRepositorySQLAlchemy,
)

__all__ = ["BookRepositorySQLAlchemy"]
