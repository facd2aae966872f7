"""Centralized exception handlers for the FastAPI application.

Domain, identity and request-validation errors are mapped to HTTP
responses with one consistent format.

Error Response Format:
    {
        "detail": "Human-readable error message",
        "code": "MACHINE_READABLE_ERROR_CODE"
    }

Validation errors additionally carry ``"errors": [{"field", "message"}]``.

Usage:
    from bookshelf.presentation.api.exception_handlers import (
        setup_exception_handlers,
    )

    app = FastAPI()
    setup_exception_handlers(app)
"""

import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from bookshelf.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ValidationError,
)
from bookshelf.presentation.api.validation import field_errors_from
from bookshelf_identity import (
    AuthError,
    AuthFailureReason,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    InvalidEmailError,
    InvalidUserNameError,
    TokenExpiredError,
    UnauthorizedError,
    UserNotFoundError,
    WeakPasswordError,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Error Code to HTTP Status Mapping
# =============================================================================

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    # 400 Bad Request - validation errors
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.WEAK_PASSWORD: status.HTTP_400_BAD_REQUEST,
    # 401 Unauthorized - authentication errors
    ErrorCode.AUTHENTICATION_REQUIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_TOKEN: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.TOKEN_EXPIRED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_CREDENTIALS: status.HTTP_401_UNAUTHORIZED,
    # 404 Not Found
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOK_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    # 409 Conflict - already exists
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_ISBN: status.HTTP_409_CONFLICT,
    # 500 Internal Server Error
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# USER_NOT_FOUND is reported as INVALID_TOKEN so clients cannot probe
# for deleted accounts
_REASON_TO_CODE: dict[AuthFailureReason, ErrorCode] = {
    AuthFailureReason.MISSING_TOKEN: ErrorCode.AUTHENTICATION_REQUIRED,
    AuthFailureReason.INVALID_TOKEN: ErrorCode.INVALID_TOKEN,
    AuthFailureReason.TOKEN_EXPIRED: ErrorCode.TOKEN_EXPIRED,
    AuthFailureReason.USER_NOT_FOUND: ErrorCode.INVALID_TOKEN,
}

_BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}


def _get_status_for_exception(exc: DomainException) -> int:
    """Determine HTTP status code for a domain exception.

    Uses the error code mapping, with fallback based on exception type.
    """
    if exc.code in ERROR_CODE_TO_STATUS:
        return ERROR_CODE_TO_STATUS[exc.code]

    if isinstance(exc, EntityNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(exc, ConflictError):
        return status.HTTP_409_CONFLICT
    if isinstance(exc, ValidationError):
        return status.HTTP_400_BAD_REQUEST

    return status.HTTP_400_BAD_REQUEST


def _create_error_response(
    status_code: int,
    message: str,
    code: str,
    headers: Optional[dict[str, str]] = None,
    extra: Optional[dict[str, Any]] = None,
) -> JSONResponse:
    """Create a standardized error response."""
    content: dict[str, Any] = {"detail": message, "code": code}
    if extra:
        content.update(extra)
    return JSONResponse(status_code=status_code, content=content, headers=headers)


def unauthorized_response(exc: UnauthorizedError) -> JSONResponse:
    """Build the 401 response for a rejected request."""
    code = _REASON_TO_CODE[exc.reason]
    message = exc.message
    if exc.reason is AuthFailureReason.USER_NOT_FOUND:
        message = "Invalid token"
    return _create_error_response(
        status_code=status.HTTP_401_UNAUTHORIZED,
        message=message,
        code=code.value,
        headers=_BEARER_CHALLENGE,
    )


def _auth_error_response(exc: AuthError) -> JSONResponse:  # NOQA: PLR0911
    if isinstance(exc, UnauthorizedError):
        return unauthorized_response(exc)
    if isinstance(exc, InvalidCredentialsError):
        return _create_error_response(
            status.HTTP_401_UNAUTHORIZED,
            exc.message,
            ErrorCode.INVALID_CREDENTIALS.value,
        )
    if isinstance(exc, WeakPasswordError):
        return _create_error_response(
            status.HTTP_400_BAD_REQUEST,
            exc.message,
            ErrorCode.WEAK_PASSWORD.value,
        )
    if isinstance(exc, TokenExpiredError):
        return _create_error_response(
            status.HTTP_401_UNAUTHORIZED,
            exc.message,
            ErrorCode.TOKEN_EXPIRED.value,
            headers=_BEARER_CHALLENGE,
        )
    return _create_error_response(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        ErrorCode.INVALID_TOKEN.value,
        headers=_BEARER_CHALLENGE,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Parameters
    ----------
    app
        The FastAPI application instance
    """

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Answer 400 with the first field error as ``detail``."""
        errors = field_errors_from(exc.errors())
        message = errors[0].message if errors else "Invalid request"

        logger.info(
            "Validation failed on %s %s: %s",
            request.method,
            request.url.path,
            [e.field for e in errors],
        )

        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=message,
            code=ErrorCode.VALIDATION_ERROR.value,
            extra={"errors": [e.to_dict() for e in errors]},
        )

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle all domain exceptions with structured response.

        Logs the full exception details for debugging while returning
        a safe, user-friendly message to the client.
        """
        status_code = _get_status_for_exception(exc)

        logger.warning(
            "Domain exception on %s %s: %s (code=%s, details=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.code.value,
            exc.details,
        )

        return _create_error_response(
            status_code=status_code,
            message=exc.message,
            code=exc.code.value,
        )

    @app.exception_handler(AuthError)
    async def auth_exception_handler(
        request: Request,
        exc: AuthError,
    ) -> JSONResponse:
        """Handle authentication failures.

        The real reason is logged; the client only sees the public code.
        """
        logger.warning(
            "Authentication error on %s %s: %s (%s)",
            request.method,
            request.url.path,
            exc.message,
            getattr(exc, "reason", type(exc).__name__),
        )
        return _auth_error_response(exc)

    @app.exception_handler(EmailAlreadyExistsError)
    async def email_exists_handler(
        request: Request,
        exc: EmailAlreadyExistsError,
    ) -> JSONResponse:
        logger.warning(
            "Duplicate email on %s %s",
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_409_CONFLICT,
            message="A user with this email already exists",
            code=ErrorCode.DUPLICATE_EMAIL.value,
        )

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(
        request: Request,
        exc: UserNotFoundError,
    ) -> JSONResponse:
        logger.warning(
            "User %s not found on %s %s",
            exc.user_id,
            request.method,
            request.url.path,
        )
        return _create_error_response(
            status_code=status.HTTP_404_NOT_FOUND,
            message="User not found",
            code=ErrorCode.USER_NOT_FOUND.value,
        )

    @app.exception_handler(InvalidEmailError)
    @app.exception_handler(InvalidUserNameError)
    async def identity_validation_handler(
        request: Request,
        exc: ValueError,
    ) -> JSONResponse:
        logger.info(
            "Identity validation failed on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=str(exc),
            code=ErrorCode.VALIDATION_ERROR.value,
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unhandled exceptions with consistent error format.

        This is the catch-all handler for any exceptions not handled by
        the specific handlers above.
        """
        logger.exception(
            "Unhandled exception on %s %s: %s",
            request.method,
            request.url.path,
            exc,
        )
        return _create_error_response(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            message="An internal error occurred",
            code=ErrorCode.INTERNAL_ERROR.value,
        )
