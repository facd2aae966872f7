"""Book service for owner-scoped collection management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from bookshelf.domain.library import (
    Book,
    BookNotFoundError,
    BookUpdate,
    DuplicateIsbnError,
)

if TYPE_CHECKING:
    from bookshelf.domain.library import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """
    Application service for a user's books.

    Every operation takes the owner's id explicitly; a book that exists
    but belongs to someone else is indistinguishable from a missing one.
    """

    def __init__(self, book_repository: BookRepository):
        self._book_repo = book_repository

    async def list_books(self, owner_id: UUID) -> list[Book]:
        return await self._book_repo.find_all(owner_id)

    async def get_book(self, book_id: UUID, owner_id: UUID) -> Book:
        """Return one of the owner's books.

        Raises
        ------
        BookNotFoundError
            If no book with this id belongs to ``owner_id``
        """
        book = await self._book_repo.find_by_id(book_id, owner_id)
        if book is None:
            raise BookNotFoundError(book_id)
        return book

    async def create_book(  # NOQA: PLR0913
        self,
        owner_id: UUID,
        title: str,
        author: str,
        isbn: str,
        published_year: Optional[int] = None,
    ) -> Book:
        """Add a book to the owner's collection.

        Raises
        ------
        DuplicateIsbnError
            If any book already uses ``isbn``
        """
        book = Book.create(
            owner_id=owner_id,
            title=title,
            author=author,
            isbn=isbn,
            published_year=published_year,
        )
        if await self._book_repo.exists_by_isbn(book.isbn):
            raise DuplicateIsbnError(book.isbn)
        await self._book_repo.create(book)

        logger.info("Book %s created for user %s", book.id, owner_id)
        return book

    async def update_book(  # NOQA: PLR0913
        self,
        book_id: UUID,
        owner_id: UUID,
        title: str,
        author: str,
        isbn: str,
        published_year: Optional[int] = None,
    ) -> None:
        """Replace the fields of one of the owner's books.

        Raises
        ------
        BookNotFoundError
            If no book with this id belongs to ``owner_id``
        DuplicateIsbnError
            If another book already uses ``isbn``
        """
        changes = BookUpdate(
            **Book.clean_fields(title, author, isbn, published_year),
        )
        if await self._book_repo.exists_by_isbn(
            changes.isbn,
            exclude_book_id=book_id,
        ):
            raise DuplicateIsbnError(changes.isbn)

        matched = await self._book_repo.update_where(book_id, owner_id, changes)
        if matched == 0:
            raise BookNotFoundError(book_id)

        logger.info("Book %s updated by user %s", book_id, owner_id)

    async def delete_book(self, book_id: UUID, owner_id: UUID) -> None:
        matched = await self._book_repo.delete_where(book_id, owner_id)
        if matched == 0:
            raise BookNotFoundError(book_id)

        logger.info("Book %s deleted by user %s", book_id, owner_id)
