"""Unit tests for AuthenticationGate."""

from datetime import timedelta
from uuid import uuid4

import pytest

from bookshelf_identity import (
    AuthenticationGate,
    AuthFailureReason,
    JWTService,
    UnauthorizedError,
    User,
    UserContext,
)
from tests.shared.fakes import InMemoryUserRepository

SECRET = "gate-test-secret"


class TestAuthenticationGate:
    """Tests for resolving bearer tokens to users."""

    def setup_method(self):
        self.user_repo = InMemoryUserRepository()
        self.jwt_service = JWTService(secret_key=SECRET)
        self.gate = AuthenticationGate(self.user_repo, self.jwt_service)
        self.user = User.create("reader@example.com", "Ada", "Reader")
        self.user_repo.users[self.user.id] = self.user

    @pytest.mark.asyncio
    async def test_valid_token_yields_user_context(self):
        token = self.jwt_service.create_access_token(self.user.id)

        context = await self.gate.authenticate(token)

        assert context == UserContext(
            user_id=self.user.id,
            email="reader@example.com",
            first_name="Ada",
            last_name="Reader",
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, ""])
    async def test_missing_token(self, token):
        with pytest.raises(UnauthorizedError) as exc_info:
            await self.gate.authenticate(token)

        assert exc_info.value.reason is AuthFailureReason.MISSING_TOKEN

    @pytest.mark.asyncio
    async def test_garbage_token(self):
        with pytest.raises(UnauthorizedError) as exc_info:
            await self.gate.authenticate("not-a-jwt")

        assert exc_info.value.reason is AuthFailureReason.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_token_from_other_secret(self):
        token = JWTService(secret_key="other").create_access_token(self.user.id)

        with pytest.raises(UnauthorizedError) as exc_info:
            await self.gate.authenticate(token)

        assert exc_info.value.reason is AuthFailureReason.INVALID_TOKEN

    @pytest.mark.asyncio
    async def test_expired_token(self):
        token = self.jwt_service.create_access_token(
            self.user.id,
            expires_delta=timedelta(seconds=-1),
        )

        with pytest.raises(UnauthorizedError) as exc_info:
            await self.gate.authenticate(token)

        assert exc_info.value.reason is AuthFailureReason.TOKEN_EXPIRED
        assert exc_info.value.message == "Token has expired"

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self):
        token = self.jwt_service.create_access_token(uuid4())

        with pytest.raises(UnauthorizedError) as exc_info:
            await self.gate.authenticate(token)

        assert exc_info.value.reason is AuthFailureReason.USER_NOT_FOUND

    @pytest.mark.asyncio
    async def test_optional_returns_none_on_failure(self):
        assert await self.gate.authenticate_optional(None) is None
        assert await self.gate.authenticate_optional("not-a-jwt") is None

    @pytest.mark.asyncio
    async def test_optional_returns_context_on_success(self):
        token = self.jwt_service.create_access_token(self.user.id)

        context = await self.gate.authenticate_optional(token)

        assert context is not None
        assert context.user_id == self.user.id
