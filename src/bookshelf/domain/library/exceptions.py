"""Library domain exceptions."""

from uuid import UUID

from bookshelf.domain.shared.exceptions import (
    ConflictError,
    EntityNotFoundError,
    ErrorCode,
)


class BookNotFoundError(EntityNotFoundError):
    """Book does not exist or belongs to another user.

    Both cases share one error so that callers cannot learn whether a
    foreign book exists.
    """

    def __init__(self, book_id: UUID | str) -> None:
        super().__init__(
            "Book not found",
            code=ErrorCode.BOOK_NOT_FOUND,
            details={"book_id": str(book_id)},
        )
        self.book_id = book_id


class DuplicateIsbnError(ConflictError):
    """ISBN is already used by another book."""

    def __init__(self, isbn: str) -> None:
        super().__init__(
            f"A book with ISBN {isbn} already exists",
            code=ErrorCode.DUPLICATE_ISBN,
            details={"isbn": isbn},
        )
        self.isbn = isbn
