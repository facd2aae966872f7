"""Book schemas for request/response models."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import ConfigDict, Field, StringConstraints, field_validator

from bookshelf.domain.library import Book
from bookshelf.domain.library.entities import MIN_PUBLISHED_YEAR
from bookshelf.domain.shared.time import current_year
from bookshelf.presentation.api.schemas.common import CamelModel

# Trimmed before the length bounds apply
TextField = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=3, max_length=255),
]


class BookRequest(CamelModel):
    """Request schema for creating or replacing a book."""

    title: TextField
    author: TextField
    isbn: Annotated[
        str,
        StringConstraints(strip_whitespace=True, min_length=10, max_length=13),
    ]
    published_year: Optional[int] = Field(None, ge=MIN_PUBLISHED_YEAR)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "The Great Gatsby",
                "author": "F. Scott Fitzgerald",
                "isbn": "9780743273565",
                "publishedYear": 1925,
            },
        },
    )

    @field_validator("published_year")
    @classmethod
    def _not_in_future(cls, v: Optional[int]) -> Optional[int]:
        # Upper bound is the current year
        if v is not None and v > current_year():
            msg = f"Published year cannot be later than {current_year()}"
            raise ValueError(msg)
        return v


class BookResponse(CamelModel):
    """Response schema for a single book."""

    id: UUID
    title: str
    author: str
    isbn: str
    published_year: Optional[int]
    owner_id: UUID
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_book(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            isbn=book.isbn,
            published_year=book.published_year,
            owner_id=book.owner_id,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
