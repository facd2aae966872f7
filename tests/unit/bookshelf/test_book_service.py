"""Unit tests for BookService."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from bookshelf.application.services import BookService
from bookshelf.domain.library import BookNotFoundError, BookUpdate, DuplicateIsbnError
from bookshelf.domain.shared import ErrorCode, ValidationError
from tests.shared.fakes import InMemoryBookRepository

GATSBY = {
    "title": "The Great Gatsby",
    "author": "F. Scott Fitzgerald",
    "isbn": "9780743273565",
    "published_year": 1925,
}


class TestBookServiceWithFakeRepository:
    """Behaviour of the service over an in-memory repository."""

    def setup_method(self):
        self.repo = InMemoryBookRepository()
        self.service = BookService(self.repo)
        self.owner = uuid4()
        self.other = uuid4()

    @pytest.mark.asyncio
    async def test_create_and_get(self):
        book = await self.service.create_book(self.owner, **GATSBY)

        fetched = await self.service.get_book(book.id, self.owner)

        assert fetched.title == "The Great Gatsby"
        assert fetched.owner_id == self.owner

    @pytest.mark.asyncio
    async def test_list_is_empty_for_new_user(self):
        assert await self.service.list_books(self.owner) == []

    @pytest.mark.asyncio
    async def test_list_only_returns_own_books(self):
        mine = await self.service.create_book(self.owner, **GATSBY)
        await self.service.create_book(
            self.other,
            title="Dune",
            author="Frank Herbert",
            isbn="9780441013593",
        )

        books = await self.service.list_books(self.owner)

        assert [b.id for b in books] == [mine.id]

    @pytest.mark.asyncio
    async def test_duplicate_isbn_rejected_across_owners(self):
        await self.service.create_book(self.owner, **GATSBY)

        with pytest.raises(DuplicateIsbnError) as exc_info:
            await self.service.create_book(self.other, **GATSBY)

        assert exc_info.value.code is ErrorCode.DUPLICATE_ISBN

    @pytest.mark.asyncio
    async def test_foreign_book_is_not_found(self):
        """Test that another user's book looks exactly like a missing one."""
        book = await self.service.create_book(self.owner, **GATSBY)

        with pytest.raises(BookNotFoundError) as foreign:
            await self.service.get_book(book.id, self.other)
        with pytest.raises(BookNotFoundError) as missing:
            await self.service.get_book(uuid4(), self.other)

        assert foreign.value.message == missing.value.message == "Book not found"

    @pytest.mark.asyncio
    async def test_update_own_book(self):
        book = await self.service.create_book(self.owner, **GATSBY)

        await self.service.update_book(
            book.id,
            self.owner,
            title="The Great Gatsby (Annotated)",
            author="F. Scott Fitzgerald",
            isbn="9780743273565",
            published_year=1925,
        )

        updated = await self.service.get_book(book.id, self.owner)
        assert updated.title == "The Great Gatsby (Annotated)"

    @pytest.mark.asyncio
    async def test_update_foreign_book_leaves_it_unchanged(self):
        book = await self.service.create_book(self.owner, **GATSBY)

        with pytest.raises(BookNotFoundError):
            await self.service.update_book(
                book.id,
                self.other,
                title="Hijacked",
                author="Someone Else",
                isbn="9780743273565",
            )

        assert (await self.service.get_book(book.id, self.owner)).title == (
            "The Great Gatsby"
        )

    @pytest.mark.asyncio
    async def test_update_to_taken_isbn(self):
        await self.service.create_book(self.owner, **GATSBY)
        dune = await self.service.create_book(
            self.owner,
            title="Dune",
            author="Frank Herbert",
            isbn="9780441013593",
        )

        with pytest.raises(DuplicateIsbnError):
            await self.service.update_book(
                dune.id,
                self.owner,
                title="Dune",
                author="Frank Herbert",
                isbn="9780743273565",
            )

    @pytest.mark.asyncio
    async def test_delete_own_book(self):
        book = await self.service.create_book(self.owner, **GATSBY)

        await self.service.delete_book(book.id, self.owner)

        with pytest.raises(BookNotFoundError):
            await self.service.get_book(book.id, self.owner)

    @pytest.mark.asyncio
    async def test_delete_foreign_book(self):
        book = await self.service.create_book(self.owner, **GATSBY)

        with pytest.raises(BookNotFoundError):
            await self.service.delete_book(book.id, self.other)

        assert await self.service.get_book(book.id, self.owner)

    @pytest.mark.asyncio
    async def test_delete_twice(self):
        book = await self.service.create_book(self.owner, **GATSBY)
        await self.service.delete_book(book.id, self.owner)

        with pytest.raises(BookNotFoundError):
            await self.service.delete_book(book.id, self.owner)


class TestBookServiceRowCounts:
    """The service maps zero matched rows to not-found."""

    def setup_method(self):
        self.repo = AsyncMock()
        self.service = BookService(self.repo)

    @pytest.mark.asyncio
    async def test_update_zero_rows(self):
        self.repo.exists_by_isbn.return_value = False
        self.repo.update_where.return_value = 0

        with pytest.raises(BookNotFoundError):
            await self.service.update_book(uuid4(), uuid4(), **GATSBY)

    @pytest.mark.asyncio
    async def test_update_sends_single_filtered_change(self):
        book_id, owner_id = uuid4(), uuid4()
        self.repo.exists_by_isbn.return_value = False
        self.repo.update_where.return_value = 1

        await self.service.update_book(book_id, owner_id, **GATSBY)

        self.repo.update_where.assert_awaited_once_with(
            book_id,
            owner_id,
            BookUpdate(
                title="The Great Gatsby",
                author="F. Scott Fitzgerald",
                isbn="9780743273565",
                published_year=1925,
            ),
        )
        self.repo.find_by_id.assert_not_called()

    @pytest.mark.asyncio
    async def test_update_trims_values(self):
        book_id, owner_id = uuid4(), uuid4()
        self.repo.exists_by_isbn.return_value = False
        self.repo.update_where.return_value = 1

        await self.service.update_book(
            book_id,
            owner_id,
            title="  Dune ",
            author=" Frank Herbert",
            isbn="9780441013593 ",
        )

        changes = self.repo.update_where.await_args.args[2]
        assert changes == BookUpdate("Dune", "Frank Herbert", "9780441013593")

    @pytest.mark.asyncio
    async def test_update_rejects_blank_title_before_writing(self):
        self.repo.exists_by_isbn.return_value = False

        with pytest.raises(ValidationError):
            await self.service.update_book(
                uuid4(),
                uuid4(),
                title="   ",
                author="Frank Herbert",
                isbn="9780441013593",
            )

        self.repo.update_where.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_zero_rows(self):
        self.repo.delete_where.return_value = 0

        with pytest.raises(BookNotFoundError):
            await self.service.delete_book(uuid4(), uuid4())
