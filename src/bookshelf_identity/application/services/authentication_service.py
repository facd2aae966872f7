"""Authentication service for registration, login and profile management."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional
from uuid import UUID

from bookshelf_identity.domain.user import (
    EmailAlreadyExistsError,
    User,
    UserNotFoundError,
)
from bookshelf_identity.exceptions import InvalidCredentialsError

if TYPE_CHECKING:
    from bookshelf_identity.domain.user import UserRepository
    from bookshelf_identity.repositories import UserCredentialRepository
    from bookshelf_identity.services import JWTService, PasswordHashingService

logger = logging.getLogger(__name__)


class AuthenticationService:
    """
    Application service for user authentication.

    Orchestrates password hashing and JWT tokens with the User domain
    to provide:
    - User registration
    - Login with password
    - Profile read and update
    - Password change

    Password hashes only move between this service and the credential
    repository; every method returns plain ``User`` aggregates.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        credential_repository: UserCredentialRepository,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_repo = user_repository
        self._credential_repo = credential_repository
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def register(
        self,
        email: str,
        password: str,
        first_name: str,
        last_name: str,
    ) -> tuple[User, str]:
        """Create a new account and issue a token for it.

        Raises
        ------
        EmailAlreadyExistsError
            If the email is already registered
        WeakPasswordError
            If the password cannot be hashed safely
        """
        if await self._user_repo.exists_by_email(email):
            raise EmailAlreadyExistsError(email)

        password_hash = self._password_service.hash(password)
        user = User.create(email, first_name=first_name, last_name=last_name)
        await self._user_repo.save(user)
        await self._credential_repo.save(user_id=user.id, password_hash=password_hash)

        token = self._jwt_service.create_access_token(user.id)

        logger.info("User registered: %s", user.id)
        return user, token

    async def login(self, email: str, password: str) -> tuple[User, str]:
        """Check credentials and issue a token.

        Unknown email and wrong password raise the same error.
        A stored hash made with a different bcrypt cost is replaced.
        """
        user = await self._user_repo.find_by_email(email)
        if user is None:
            logger.warning("Login failed: unknown email")
            raise InvalidCredentialsError

        credential = await self._credential_repo.find_by_user_id(user.id)
        if credential is None:
            logger.warning("Login failed: no credentials for user %s", user.id)
            raise InvalidCredentialsError

        if not self._password_service.verify(password, credential.password_hash):
            logger.warning("Login failed: wrong password for user %s", user.id)
            raise InvalidCredentialsError

        if self._password_service.needs_rehash(credential.password_hash):
            new_hash = self._password_service.hash(password)
            await self._credential_repo.save(user_id=user.id, password_hash=new_hash)
            logger.info("Password hash upgraded for user: %s", user.id)

        token = self._jwt_service.create_access_token(user.id)

        logger.info("User logged in: %s", user.id)
        return user, token

    async def get_profile(self, user_id: UUID) -> User:
        user = await self._user_repo.find_by_id(user_id)
        if user is None:
            raise UserNotFoundError(str(user_id))
        return user

    async def update_profile(
        self,
        user_id: UUID,
        email: Optional[str] = None,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
    ) -> User:
        """Update the supplied profile fields of a user.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        EmailAlreadyExistsError
            If another user already has the new email
        """
        user = await self.get_profile(user_id)

        if email is not None and await self._user_repo.exists_by_email(
            email,
            exclude_user_id=user_id,
        ):
            raise EmailAlreadyExistsError(email)

        user.update_profile(email=email, first_name=first_name, last_name=last_name)
        await self._user_repo.save(user)

        logger.info("Profile updated for user: %s", user_id)
        return user

    async def change_password(
        self,
        user_id: UUID,
        current_password: str,
        new_password: str,
    ) -> None:
        """Replace a user's password after checking the current one.

        Raises
        ------
        UserNotFoundError
            If the user does not exist
        InvalidCredentialsError
            If ``current_password`` does not match
        WeakPasswordError
            If the new password cannot be hashed safely
        """
        await self.get_profile(user_id)

        credential = await self._credential_repo.find_by_user_id(user_id)
        if credential is None:
            msg = "User credentials not found"
            raise InvalidCredentialsError(msg)
        if not self._password_service.verify(
            current_password,
            credential.password_hash,
        ):
            msg = "Current password is incorrect"
            raise InvalidCredentialsError(msg)

        new_hash = self._password_service.hash(new_password)
        await self._credential_repo.save(user_id=user_id, password_hash=new_hash)

        logger.info("Password changed for user: %s", user_id)
