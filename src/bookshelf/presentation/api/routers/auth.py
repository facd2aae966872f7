"""Authentication router for registration, login and profile management."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from bookshelf.presentation.api.config import get_api_settings
from bookshelf.presentation.api.dependencies import (
    AuthService,
    CurrentUser,
    DBSession,
)
from bookshelf.presentation.api.schemas import (
    AuthResponse,
    ChangePasswordRequest,
    ErrorResponse,
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    UpdateProfileRequest,
    UserEnvelope,
    UserResponse,
    VerifyResponse,
)
from bookshelf_config.settings import Settings
from bookshelf_identity import User

logger = logging.getLogger(__name__)

router = APIRouter()

SettingsDep = Annotated[Settings, Depends(get_api_settings)]


def _create_auth_response(user: User, token: str, settings: Settings) -> AuthResponse:
    return AuthResponse(
        user=UserResponse.from_user(user),
        token=token,
        expires_in=settings.jwt_access_token_expire_hours * 3600,
    )


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={
        201: {"description": "User registered successfully"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def register(
    request: RegisterRequest,
    auth_service: AuthService,
    session: DBSession,
    settings: SettingsDep,
) -> AuthResponse:
    """Create an account and return it together with an access token."""
    try:
        user, token = await auth_service.register(
            email=str(request.email),
            password=request.password,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return _create_auth_response(user, token, settings)


@router.post(
    "/login",
    summary="Authenticate user",
    responses={
        200: {"description": "Login successful"},
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Invalid credentials"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    settings: SettingsDep,
) -> AuthResponse:
    """
    Authenticate with email and password.

    Unknown emails and wrong passwords get the same 401 response.
    """
    user, token = await auth_service.login(
        email=str(request.email),
        password=request.password,
    )
    return _create_auth_response(user, token, settings)


@router.get(
    "/profile",
    summary="Get current user's profile",
    responses={401: {"model": ErrorResponse, "description": "Not authenticated"}},
)
async def get_profile(user: CurrentUser, auth_service: AuthService) -> UserEnvelope:
    profile = await auth_service.get_profile(user.user_id)
    return UserEnvelope(user=UserResponse.from_user(profile))


@router.put(
    "/profile",
    summary="Update current user's profile",
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
    },
)
async def update_profile(
    request: UpdateProfileRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> UserEnvelope:
    """Update any of email, first name and last name."""
    try:
        updated = await auth_service.update_profile(
            user_id=user.user_id,
            email=str(request.email) if request.email is not None else None,
            first_name=request.first_name,
            last_name=request.last_name,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return UserEnvelope(user=UserResponse.from_user(updated))


@router.put(
    "/change-password",
    summary="Change password",
    responses={
        400: {"model": ErrorResponse, "description": "New password too weak"},
        401: {
            "model": ErrorResponse,
            "description": "Current password incorrect or not authenticated",
        },
    },
)
async def change_password(
    request: ChangePasswordRequest,
    user: CurrentUser,
    auth_service: AuthService,
    session: DBSession,
) -> MessageResponse:
    """
    Change the current user's password.

    Tokens issued before the change stay valid until they expire.
    """
    try:
        await auth_service.change_password(
            user_id=user.user_id,
            current_password=request.current_password,
            new_password=request.new_password,
        )
        await session.commit()
    except Exception:
        await session.rollback()
        raise

    return MessageResponse(message="Password changed successfully")


@router.get(
    "/verify",
    summary="Verify the bearer token",
    responses={401: {"model": ErrorResponse, "description": "Invalid token"}},
)
async def verify(user: CurrentUser, auth_service: AuthService) -> VerifyResponse:
    profile = await auth_service.get_profile(user.user_id)
    return VerifyResponse(user=UserResponse.from_user(profile))
