from bookshelf.domain.library.repositories.book_repository import (
    BookRepository,
    BookUpdate,
)

__all__ = ["BookRepository", "BookUpdate"]
