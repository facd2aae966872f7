"""Domain exceptions and the error codes clients see.

Every failure the books domain can report is a ``DomainException`` carrying
an ``ErrorCode``. The presentation layer maps codes to HTTP statuses in one
table, so new error kinds only need a code and a subclass.
"""

from enum import Enum
from typing import Any, ClassVar, Optional


class ErrorCode(str, Enum):
    """Machine-readable codes returned in the ``code`` field of error bodies.

    Clients match on these; renaming one is a breaking change.
    """

    # 400
    VALIDATION_ERROR = "VALIDATION_ERROR"
    WEAK_PASSWORD = "WEAK_PASSWORD"

    # 401
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"

    # 404
    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    BOOK_NOT_FOUND = "BOOK_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"

    # 409
    CONFLICT = "CONFLICT"
    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_ISBN = "DUPLICATE_ISBN"

    # 500
    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for books domain errors.

    Attributes
    ----------
    message
        Text shown to the client
    code
        ``ErrorCode`` for the response; subclasses pick a default
    details
        Context for the logs only, never sent to the client
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[ErrorCode] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.message!r}, "
            f"code={self.code.value}, details={self.details!r})"
        )


class ValidationError(DomainException):
    """Input breaks a domain rule."""

    default_code = ErrorCode.VALIDATION_ERROR

    @property
    def field(self) -> Optional[str]:
        return self.details.get("field")


class EntityNotFoundError(DomainException):
    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The change would violate a uniqueness rule."""

    default_code = ErrorCode.CONFLICT
