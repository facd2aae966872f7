"""SQLAlchemy model for Book entities."""

from typing import Optional
from uuid import UUID

from sqlalchemy import ForeignKey, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from bookshelf.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class BookModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting books.

    ``isbn`` is unique across all owners.
    """

    __tablename__ = "books"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    author: Mapped[str] = mapped_column(String(255), nullable=False)
    isbn: Mapped[str] = mapped_column(
        String(13),
        unique=True,
        nullable=False,
        index=True,
    )
    published_year: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    owner_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<BookModel(id={self.id}, isbn={self.isbn}, owner={self.owner_id})>"
