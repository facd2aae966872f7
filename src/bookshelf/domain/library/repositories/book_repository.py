"""Book repository interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from bookshelf.domain.library.entities.book import Book


@dataclass(frozen=True)
class BookUpdate:
    """Replacement values for an owned book."""

    title: str
    author: str
    isbn: str
    published_year: Optional[int] = None


class BookRepository(ABC):
    """Repository interface for Book entities.

    Every lookup and mutation takes the owner's id. Mutations are single
    filtered statements that report how many rows they touched; zero means
    the book does not exist for that owner.
    """

    @abstractmethod
    async def create(self, book: Book) -> None:
        """Persist a new book.

        Raises DuplicateIsbnError if the ISBN is taken.
        """

    @abstractmethod
    async def find_by_id(self, book_id: UUID, owner_id: UUID) -> Optional[Book]:
        """Find a book by id, only if it belongs to ``owner_id``."""

    @abstractmethod
    async def find_all(self, owner_id: UUID) -> list[Book]:
        """List all books of an owner, oldest first."""

    @abstractmethod
    async def exists_by_isbn(
        self,
        isbn: str,
        exclude_book_id: Optional[UUID] = None,
    ) -> bool:
        """Check whether any book (of any owner) uses ``isbn``."""

    @abstractmethod
    async def update_where(
        self,
        book_id: UUID,
        owner_id: UUID,
        changes: BookUpdate,
    ) -> int:
        """Apply ``changes`` to the book matching id and owner.

        Returns the number of matched rows. Raises DuplicateIsbnError if
        the new ISBN is taken.
        """

    @abstractmethod
    async def delete_where(self, book_id: UUID, owner_id: UUID) -> int:
        """Delete the book matching id and owner; return matched rows."""
