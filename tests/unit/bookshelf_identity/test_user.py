"""Unit tests for the User aggregate and Email value object."""

import pytest

from bookshelf_identity import Email, InvalidEmailError, InvalidUserNameError, User


class TestEmail:
    def test_strips_whitespace(self):
        assert Email("  reader@example.com ").value == "reader@example.com"

    def test_preserves_case(self):
        assert Email("Reader@Example.com").value == "Reader@Example.com"
        assert Email("Reader@example.com") != Email("reader@example.com")

    @pytest.mark.parametrize("value", ["", "   ", "no-at-sign", "a@b", "a @b.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)

    def test_equals_plain_string(self):
        assert Email("reader@example.com") == "reader@example.com"


class TestUser:
    def test_create_sets_timestamps(self):
        user = User.create("reader@example.com", "Ada", "Reader")

        assert user.created_at == user.updated_at
        assert user.created_at.tzinfo is not None

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidUserNameError):
            User.create("reader@example.com", "  ", "Reader")

    def test_update_profile_only_touches_given_fields(self):
        user = User.create("reader@example.com", "Ada", "Reader")
        created = user.created_at

        user.update_profile(last_name="Lovelace")

        assert user.first_name == "Ada"
        assert user.last_name == "Lovelace"
        assert user.email == "reader@example.com"
        assert user.updated_at >= created

    def test_update_profile_email_keeps_case(self):
        user = User.create("reader@example.com", "Ada", "Reader")

        user.update_profile(email=" Ada@Example.COM ")

        assert user.email == "Ada@Example.COM"
        assert user.first_name == "Ada"

    def test_equality_by_id(self):
        user = User.create("reader@example.com", "Ada", "Reader")
        same = User.reconstitute(
            id=user.id,
            email="other@example.com",
            first_name="X",
            last_name="Y",
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

        assert user == same
        assert hash(user) == hash(same)
