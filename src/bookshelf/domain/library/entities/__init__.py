from bookshelf.domain.library.entities.book import MIN_PUBLISHED_YEAR, Book

__all__ = ["MIN_PUBLISHED_YEAR", "Book"]
