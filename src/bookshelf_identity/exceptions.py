"""Identity and authentication exceptions.

These exceptions are raised by the bookshelf_identity package and should be
caught and handled by the application layer.
"""

from enum import Enum


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token has a bad signature or is malformed."""

    def __init__(self, message: str = "Invalid token"):
        super().__init__(message)


class TokenExpiredError(AuthError):
    """Raised when a correctly signed JWT token is past its expiry."""

    def __init__(self, message: str = "Token has expired"):
        super().__init__(message)


class WeakPasswordError(AuthError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect.

    The default message is deliberately the same for an unknown email and
    a wrong password.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)


class AuthFailureReason(str, Enum):
    """Why a request could not be authenticated."""

    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    TOKEN_EXPIRED = "token_expired"
    USER_NOT_FOUND = "user_not_found"


class UnauthorizedError(AuthError):
    """Raised by the authentication gate when a request is rejected."""

    def __init__(self, reason: AuthFailureReason, message: str | None = None):
        self.reason = reason
        super().__init__(message or _REASON_MESSAGES[reason])


_REASON_MESSAGES = {
    AuthFailureReason.MISSING_TOKEN: "Authentication required",
    AuthFailureReason.INVALID_TOKEN: "Invalid token",
    AuthFailureReason.TOKEN_EXPIRED: "Token has expired",
    AuthFailureReason.USER_NOT_FOUND: "User not found",
}
