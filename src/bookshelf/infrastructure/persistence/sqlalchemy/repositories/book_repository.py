"""SQLAlchemy implementation of BookRepository."""

import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import delete, exists, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.domain.library import (
    Book,
    BookRepository,
    BookUpdate,
    DuplicateIsbnError,
)
from bookshelf.domain.shared.time import ensure_tz_aware, utc_now
from bookshelf.infrastructure.persistence.sqlalchemy.models import BookModel
from bookshelf.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class BookRepositorySQLAlchemy(BookRepository):
    """SQLAlchemy implementation of the BookRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, book: Book) -> None:
        model = self._map_to_model(book)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateIsbnError(book.isbn) from e
            raise
        logger.info("Created book %s for owner %s", book.id, book.owner_id)

    async def find_by_id(self, book_id: UUID, owner_id: UUID) -> Optional[Book]:
        stmt = select(BookModel).where(
            BookModel.id == book_id,
            BookModel.owner_id == owner_id,
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_all(self, owner_id: UUID) -> list[Book]:
        stmt = (
            select(BookModel)
            .where(BookModel.owner_id == owner_id)
            .order_by(BookModel.created_at, BookModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._map_to_domain(model) for model in result.scalars().all()]

    async def exists_by_isbn(
        self,
        isbn: str,
        exclude_book_id: Optional[UUID] = None,
    ) -> bool:
        condition = BookModel.isbn == isbn
        if exclude_book_id is not None:
            condition = condition & (BookModel.id != exclude_book_id)
        result = await self._session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def update_where(
        self,
        book_id: UUID,
        owner_id: UUID,
        changes: BookUpdate,
    ) -> int:
        stmt = (
            update(BookModel)
            .where(BookModel.id == book_id, BookModel.owner_id == owner_id)
            .values(
                title=changes.title,
                author=changes.author,
                isbn=changes.isbn,
                published_year=changes.published_year,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = await self._session.execute(stmt)
        except IntegrityError as e:
            if is_unique_violation(e):
                raise DuplicateIsbnError(changes.isbn) from e
            raise

        logger.debug("Update of book %s matched %d row(s)", book_id, result.rowcount)
        return result.rowcount

    async def delete_where(self, book_id: UUID, owner_id: UUID) -> int:
        stmt = (
            delete(BookModel)
            .where(BookModel.id == book_id, BookModel.owner_id == owner_id)
            .execution_options(synchronize_session=False)
        )
        result = await self._session.execute(stmt)

        logger.debug("Delete of book %s matched %d row(s)", book_id, result.rowcount)
        return result.rowcount

    def _map_to_domain(self, model: BookModel) -> Book:
        return Book.reconstitute(
            id=model.id,
            title=model.title,
            author=model.author,
            isbn=model.isbn,
            owner_id=model.owner_id,
            published_year=model.published_year,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, book: Book) -> BookModel:
        return BookModel(
            id=book.id,
            title=book.title,
            author=book.author,
            isbn=book.isbn,
            owner_id=book.owner_id,
            published_year=book.published_year,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
