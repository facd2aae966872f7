"""Email value object."""

import re

from bookshelf_identity.domain.user.exceptions import InvalidEmailError

_EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
MAX_EMAIL_LENGTH = 255


class Email:
    """A syntactically valid email address.

    Surrounding whitespace is stripped. Case is preserved, so two
    addresses that differ only in case are different emails.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str):
        normalized = (value or "").strip()
        if not normalized:
            msg = "Email cannot be empty"
            raise InvalidEmailError(msg)
        if len(normalized) > MAX_EMAIL_LENGTH:
            msg = f"Email cannot exceed {MAX_EMAIL_LENGTH} characters"
            raise InvalidEmailError(msg)
        if not _EMAIL_PATTERN.match(normalized):
            msg = f"Invalid email format: {normalized}"
            raise InvalidEmailError(msg)
        self._value = normalized

    @property
    def value(self) -> str:
        return self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Email):
            return self._value == other._value
        if isinstance(other, str):
            return self._value == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Email({self._value!r})"
