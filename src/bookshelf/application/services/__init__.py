"""Application services."""

from bookshelf.application.services.book_service import BookService

__all__ = ["BookService"]
