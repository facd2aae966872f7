"""Library domain: books in a user's personal collection.

Books reference their owner by user id only; identity lives in
``bookshelf_identity``.
"""

from bookshelf.domain.library.entities import Book
from bookshelf.domain.library.exceptions import BookNotFoundError, DuplicateIsbnError
from bookshelf.domain.library.repositories import BookRepository, BookUpdate

__all__ = [
    "Book",
    "BookNotFoundError",
    "BookRepository",
    "BookUpdate",
    "DuplicateIsbnError",
]
