"""Unit tests for the Book entity."""

from uuid import uuid4

import pytest

from bookshelf.domain.library import Book
from bookshelf.domain.shared import ValidationError
from bookshelf.domain.shared.time import current_year


class TestBook:
    def setup_method(self):
        self.owner_id = uuid4()

    def test_create(self):
        book = Book.create(
            owner_id=self.owner_id,
            title=" The Great Gatsby ",
            author="F. Scott Fitzgerald",
            isbn="9780743273565",
            published_year=1925,
        )

        assert book.title == "The Great Gatsby"
        assert book.is_owned_by(self.owner_id)
        assert not book.is_owned_by(uuid4())
        assert book.created_at == book.updated_at

    def test_published_year_optional(self):
        book = Book.create(self.owner_id, "Dune", "Frank Herbert", "9780441013593")

        assert book.published_year is None

    @pytest.mark.parametrize("year", [999, current_year() + 1])
    def test_published_year_out_of_range(self, year):
        with pytest.raises(ValidationError, match="Published year"):
            Book.create(self.owner_id, "Dune", "Frank Herbert", "9780441013593", year)

    def test_published_year_bounds_inclusive(self):
        Book.create(self.owner_id, "Old", "Anonymous", "1234567890", 1000)
        Book.create(self.owner_id, "New", "Anonymous", "1234567891", current_year())

    @pytest.mark.parametrize("field", ["title", "author", "isbn"])
    def test_blank_text_rejected(self, field):
        values = {"title": "Dune", "author": "Frank Herbert", "isbn": "9780441013593"}
        values[field] = "   "

        with pytest.raises(ValidationError) as exc_info:
            Book.create(self.owner_id, **values)

        assert exc_info.value.details["field"] == field


class TestBookCleanFields:
    def test_returns_trimmed_values(self):
        fields = Book.clean_fields(" Dune ", "Frank Herbert ", " 9780441013593", 1965)

        assert fields == {
            "title": "Dune",
            "author": "Frank Herbert",
            "isbn": "9780441013593",
            "published_year": 1965,
        }

    def test_names_first_bad_field(self):
        with pytest.raises(ValidationError) as exc_info:
            Book.clean_fields("Dune", "  ", "", 1965)

        assert exc_info.value.field == "author"

    def test_year_checked(self):
        with pytest.raises(ValidationError) as exc_info:
            Book.clean_fields("Dune", "Frank Herbert", "9780441013593", 999)

        assert exc_info.value.field == "published_year"
