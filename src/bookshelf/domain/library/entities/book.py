"""Book entity - a single title in a user's personal collection."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional
from uuid import UUID, uuid4

from bookshelf.domain.shared.exceptions import ValidationError
from bookshelf.domain.shared.time import current_year, utc_now

MIN_PUBLISHED_YEAR = 1000


class Book:
    """
    A book owned by exactly one user.

    The owner is fixed at creation. Reads and mutations are always scoped
    by ``owner_id`` at the repository level, so the entity itself carries
    no access-control logic.
    """

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        author: str,
        isbn: str,
        owner_id: UUID,
        published_year: Optional[int] = None,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id or uuid4()
        self._title = self._require_text(title, "Title")
        self._author = self._require_text(author, "Author")
        self._isbn = self._require_text(isbn, "ISBN")
        self._published_year = self._check_year(published_year)
        self._owner_id = owner_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def author(self) -> str:
        return self._author

    @property
    def isbn(self) -> str:
        return self._isbn

    @property
    def published_year(self) -> Optional[int]:
        return self._published_year

    @property
    def owner_id(self) -> UUID:
        return self._owner_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_owned_by(self, user_id: UUID) -> bool:
        return self._owner_id == user_id

    @classmethod
    def create(
        cls,
        owner_id: UUID,
        title: str,
        author: str,
        isbn: str,
        published_year: Optional[int] = None,
    ) -> Book:
        return cls(
            title=title,
            author=author,
            isbn=isbn,
            owner_id=owner_id,
            published_year=published_year,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        title: str,
        author: str,
        isbn: str,
        owner_id: UUID,
        published_year: Optional[int],
        created_at: datetime,
        updated_at: datetime,
    ) -> Book:
        return cls(
            id=id,
            title=title,
            author=author,
            isbn=isbn,
            owner_id=owner_id,
            published_year=published_year,
            created_at=created_at,
            updated_at=updated_at,
        )

    @classmethod
    def clean_fields(
        cls,
        title: str,
        author: str,
        isbn: str,
        published_year: Optional[int] = None,
    ) -> dict[str, Any]:
        """Check replacement values and return them trimmed.

        Raises
        ------
        ValidationError
            With ``details["field"]`` naming the first bad field
        """
        return {
            "title": cls._require_text(title, "Title"),
            "author": cls._require_text(author, "Author"),
            "isbn": cls._require_text(isbn, "ISBN"),
            "published_year": cls._check_year(published_year),
        }

    @staticmethod
    def _require_text(value: str, field: str) -> str:
        stripped = (value or "").strip()
        if not stripped:
            msg = f"{field} cannot be empty"
            raise ValidationError(msg, details={"field": field.lower()})
        return stripped

    @staticmethod
    def _check_year(year: Optional[int]) -> Optional[int]:
        if year is None:
            return None
        if not MIN_PUBLISHED_YEAR <= year <= current_year():
            msg = (
                f"Published year must be between {MIN_PUBLISHED_YEAR} "
                f"and {current_year()}"
            )
            raise ValidationError(msg, details={"field": "published_year"})
        return year

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Book):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Book(id={self._id}, title={self._title!r}, isbn={self._isbn!r})"
