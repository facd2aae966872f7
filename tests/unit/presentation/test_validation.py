"""Tests for request validation helpers and schemas."""

import pytest

from bookshelf.presentation.api.schemas import (
    BookRequest,
    ChangePasswordRequest,
    RegisterRequest,
    UpdateProfileRequest,
)
from bookshelf.presentation.api.validation import (
    FieldError,
    field_errors_from,
    validate_payload,
)

VALID_REGISTRATION = {
    "email": "reader@example.com",
    "password": "Password123!",
    "firstName": "Ada",
    "lastName": "Reader",
}


class TestFieldErrorsFrom:
    def test_strips_location_root(self):
        errors = field_errors_from(
            [{"loc": ("body", "title"), "msg": "Field required", "type": "missing"}],
        )

        assert errors == [FieldError("title", "title is required")]

    def test_keeps_nested_path(self):
        errors = field_errors_from(
            [{"loc": ("body", "user", "email"), "msg": "bad", "type": "value_error"}],
        )

        assert errors[0].field == "user.email"

    def test_value_error_prefix_removed(self):
        errors = field_errors_from(
            [
                {
                    "loc": ("publishedYear",),
                    "msg": "Value error, Published year cannot be later than 2026",
                    "type": "value_error",
                },
            ],
        )

        assert errors[0].message == "Published year cannot be later than 2026"

    def test_other_messages_are_prefixed_with_field(self):
        errors = field_errors_from(
            [
                {
                    "loc": ("body", "isbn"),
                    "msg": "String should have at least 10 characters",
                    "type": "string_too_short",
                },
            ],
        )

        assert errors[0].message == "isbn: String should have at least 10 characters"

    def test_body_level_error(self):
        errors = field_errors_from([{"loc": ("body",), "msg": "Invalid JSON"}])

        assert errors[0].field == "body"

    def test_json_decode_error_reported_on_body(self):
        errors = field_errors_from(
            [
                {
                    "loc": ("body", 1),
                    "msg": "JSON decode error",
                    "type": "json_invalid",
                },
            ],
        )

        assert errors == [FieldError("body", "Malformed JSON body")]

    def test_to_dict(self):
        assert FieldError("isbn", "isbn is required").to_dict() == {
            "field": "isbn",
            "message": "isbn is required",
        }


class TestValidatePayload:
    def test_valid_registration(self):
        model, errors = validate_payload(RegisterRequest, VALID_REGISTRATION)

        assert errors == []
        assert model.first_name == "Ada"

    def test_snake_case_is_accepted(self):
        payload = {
            "email": "reader@example.com",
            "password": "Password123!",
            "first_name": "Ada",
            "last_name": "Reader",
        }

        model, errors = validate_payload(RegisterRequest, payload)

        assert errors == []
        assert model.last_name == "Reader"

    def test_errors_in_field_order(self):
        model, errors = validate_payload(RegisterRequest, {"password": "x"})

        assert model is None
        assert [e.field for e in errors] == ["email", "password", "firstName", "lastName"]

    @pytest.mark.parametrize(
        "password",
        ["password123!", "PASSWORD123!", "Password!!!", "Password123"],
    )
    def test_password_rules(self, password):
        model, errors = validate_payload(
            RegisterRequest,
            {**VALID_REGISTRATION, "password": password},
        )

        assert model is None
        assert [e.field for e in errors] == ["password"]

    def test_password_over_72_bytes(self):
        password = "Aa1!" + "a" * 69

        _, errors = validate_payload(
            RegisterRequest,
            {**VALID_REGISTRATION, "password": password},
        )

        assert errors[0].message == "Password cannot exceed 72 bytes"

    def test_change_password_checks_new_password_only(self):
        model, errors = validate_payload(
            ChangePasswordRequest,
            {"currentPassword": "anything", "newPassword": "NewPass456$"},
        )

        assert errors == []
        assert model.current_password == "anything"

    def test_profile_update_fields_are_optional(self):
        model, errors = validate_payload(UpdateProfileRequest, {})

        assert errors == []
        assert model.email is None
        assert model.first_name is None

    def test_profile_update_name_bounds(self):
        _, errors = validate_payload(UpdateProfileRequest, {"lastName": "X"})

        assert [e.field for e in errors] == ["lastName"]

    def test_names_trimmed_before_length_check(self):
        model, errors = validate_payload(
            RegisterRequest,
            {**VALID_REGISTRATION, "firstName": "  Ada  ", "lastName": " X "},
        )

        assert model is None
        assert [e.field for e in errors] == ["lastName"]

    def test_email_case_preserved(self):
        model, errors = validate_payload(
            RegisterRequest,
            {**VALID_REGISTRATION, "email": " Reader@Example.COM "},
        )

        assert errors == []
        assert model.email == "Reader@Example.COM"

    def test_invalid_email_message(self):
        _, errors = validate_payload(
            UpdateProfileRequest,
            {"email": "reader@"},
        )

        assert errors == [
            FieldError("email", "Email must be a valid email address"),
        ]


class TestBookRequest:
    def test_valid(self):
        model, errors = validate_payload(
            BookRequest,
            {
                "title": "Dune",
                "author": "Frank Herbert",
                "isbn": "9780441013593",
                "publishedYear": 1965,
            },
        )

        assert errors == []
        assert model.published_year == 1965

    def test_future_year(self, monkeypatch):
        monkeypatch.setattr(
            "bookshelf.presentation.api.schemas.books.current_year",
            lambda: 2020,
        )

        _, errors = validate_payload(
            BookRequest,
            {
                "title": "Dune",
                "author": "Frank Herbert",
                "isbn": "9780441013593",
                "publishedYear": 2021,
            },
        )

        assert errors == [
            FieldError("publishedYear", "Published year cannot be later than 2020"),
        ]

    def test_text_trimmed_before_length_check(self):
        model, errors = validate_payload(
            BookRequest,
            {
                "title": "  ab  ",
                "author": " Frank Herbert ",
                "isbn": "9780441013593",
            },
        )

        assert model is None
        assert [e.field for e in errors] == ["title"]

    def test_missing_fields(self):
        _, errors = validate_payload(BookRequest, {"title": "Dune"})

        assert errors == [
            FieldError("author", "author is required"),
            FieldError("isbn", "isbn is required"),
        ]
