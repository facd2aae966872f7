"""Authentication schemas for request/response models."""

import re
from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from email_validator import EmailNotValidError, validate_email
from pydantic import ConfigDict, Field, StringConstraints, field_validator

from bookshelf.presentation.api.schemas.common import CamelModel
from bookshelf_identity import User
from bookshelf_identity.services import PasswordHashingService

PASSWORD_PATTERN = re.compile(
    r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]",
)
PASSWORD_RULE = (
    "must contain at least one uppercase letter, one lowercase letter, "
    "one number and one special character (@$!%*?&)"
)

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 50

# Trimmed before the length bounds apply
NameField = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    ),
]


def _check_email(value: str) -> str:
    """Check the format and return the address as sent, minus padding.

    ``validate_email`` normalizes the domain; its result is discarded so
    that stored emails keep the caller's casing.
    """
    value = value.strip()
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        msg = "Email must be a valid email address"
        raise ValueError(msg) from e
    return value


def _check_password_strength(value: str, label: str) -> str:
    if len(value.encode("utf-8")) > PasswordHashingService.MAX_BYTES:
        msg = f"{label} cannot exceed {PasswordHashingService.MAX_BYTES} bytes"
        raise ValueError(msg)
    if not PASSWORD_PATTERN.match(value):
        msg = f"{label} {PASSWORD_RULE}"
        raise ValueError(msg)
    return value


class RegisterRequest(CamelModel):
    """Request schema for user registration."""

    email: str = Field(..., description="User's email address")
    password: str = Field(
        ...,
        min_length=PasswordHashingService.MIN_LENGTH,
        description="Password (8-72 bytes, mixed case, digit and symbol)",
    )
    first_name: NameField
    last_name: NameField

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "reader@example.com",
                "password": "Password123!",
                "firstName": "Ada",
                "lastName": "Reader",
            },
        },
    )

    @field_validator("email")
    @classmethod
    def _email_format(cls, v: str) -> str:
        return _check_email(v)

    @field_validator("password")
    @classmethod
    def _password_strength(cls, v: str) -> str:
        return _check_password_strength(v, "Password")


class LoginRequest(CamelModel):
    """Request schema for user login."""

    email: str
    password: str = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "reader@example.com",
                "password": "Password123!",
            },
        },
    )

    @field_validator("email")
    @classmethod
    def _email_format(cls, v: str) -> str:
        return _check_email(v)


class ChangePasswordRequest(CamelModel):
    """Request schema for changing a user's password."""

    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=PasswordHashingService.MIN_LENGTH)

    @field_validator("new_password")
    @classmethod
    def _password_strength(cls, v: str) -> str:
        return _check_password_strength(v, "New password")


class UpdateProfileRequest(CamelModel):
    """Request schema for a partial profile update.

    Absent or null fields are left unchanged.
    """

    email: Optional[str] = None
    first_name: Optional[NameField] = None
    last_name: Optional[NameField] = None

    @field_validator("email")
    @classmethod
    def _email_format(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _check_email(v)


class UserResponse(CamelModel):
    """Response schema for user data. Never includes the password hash."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UserEnvelope(CamelModel):
    user: UserResponse


class AuthResponse(CamelModel):
    """Response schema for register and login."""

    user: UserResponse
    token: str
    token_type: str = Field(default="bearer")
    expires_in: int

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "550e8400-e29b-41d4-a716-446655440000",
                    "email": "reader@example.com",
                    "firstName": "Ada",
                    "lastName": "Reader",
                    "createdAt": "2025-01-01T12:00:00Z",
                    "updatedAt": "2025-01-01T12:00:00Z",
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "tokenType": "bearer",
                "expiresIn": 86400,
            },
        },
    )


class VerifyResponse(CamelModel):
    valid: bool = True
    user: UserResponse
