"""Pydantic request/response schemas for the Bookshelf API."""

from bookshelf.presentation.api.schemas.auth import (
    AuthResponse,
    ChangePasswordRequest,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
    UserEnvelope,
    UserResponse,
    VerifyResponse,
)
from bookshelf.presentation.api.schemas.books import BookRequest, BookResponse
from bookshelf.presentation.api.schemas.common import (
    ErrorResponse,
    FieldErrorResponse,
    HealthResponse,
    MessageResponse,
)

__all__ = [
    "AuthResponse",
    "BookRequest",
    "BookResponse",
    "ChangePasswordRequest",
    "ErrorResponse",
    "FieldErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MessageResponse",
    "RegisterRequest",
    "UpdateProfileRequest",
    "UserEnvelope",
    "UserResponse",
    "VerifyResponse",
]
