"""Authentication gate resolving bearer tokens to users."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from bookshelf_identity.application.context import UserContext
from bookshelf_identity.exceptions import (
    AuthFailureReason,
    InvalidTokenError,
    TokenExpiredError,
    UnauthorizedError,
)

if TYPE_CHECKING:
    from bookshelf_identity.domain.user import UserRepository
    from bookshelf_identity.services import JWTService

logger = logging.getLogger(__name__)


class AuthenticationGate:
    """Turn a raw bearer token into a ``UserContext`` or reject it.

    The gate is transport agnostic: the HTTP layer extracts the token
    and maps ``UnauthorizedError`` to a response.
    """

    def __init__(self, user_repository: UserRepository, jwt_service: JWTService):
        self._user_repo = user_repository
        self._jwt_service = jwt_service

    async def authenticate(self, token: Optional[str]) -> UserContext:
        """Resolve ``token`` to the user it was issued for.

        Raises
        ------
        UnauthorizedError
            With the reason the token was rejected: missing, invalid,
            expired, or pointing to a user that no longer exists
        """
        if not token:
            raise UnauthorizedError(AuthFailureReason.MISSING_TOKEN)

        try:
            payload = self._jwt_service.verify_token(token)
        except TokenExpiredError as e:
            logger.warning("Rejected expired token")
            raise UnauthorizedError(AuthFailureReason.TOKEN_EXPIRED) from e
        except InvalidTokenError as e:
            logger.warning("Rejected invalid token: %s", e.message)
            raise UnauthorizedError(AuthFailureReason.INVALID_TOKEN) from e

        user = await self._user_repo.find_by_id(payload.user_id)
        if user is None:
            logger.warning("Rejected token for unknown user: %s", payload.user_id)
            raise UnauthorizedError(AuthFailureReason.USER_NOT_FOUND)

        return UserContext.create(user)

    async def authenticate_optional(
        self,
        token: Optional[str],
    ) -> Optional[UserContext]:
        """Like ``authenticate`` but return None instead of rejecting."""
        try:
            return await self.authenticate(token)
        except UnauthorizedError:
            return None
