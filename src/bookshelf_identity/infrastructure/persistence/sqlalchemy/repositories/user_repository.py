"""SQLAlchemy implementation of UserRepository."""

import logging
from typing import Optional, Union
from uuid import UUID

from sqlalchemy import exists, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from bookshelf.domain.shared.time import ensure_tz_aware
from bookshelf.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)
from bookshelf_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    User,
    UserRepository,
)
from bookshelf_identity.infrastructure.persistence.sqlalchemy.models import UserModel

logger = logging.getLogger(__name__)


def _email_value(email: Union[str, Email]) -> str:
    return email.value if isinstance(email, Email) else Email(email).value


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, user_id: UUID) -> User | None:
        model = await self._find_model_by_id(user_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_email(self, email: Union[str, Email]) -> User | None:
        stmt = select(UserModel).where(UserModel.email == _email_value(email))
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def exists_by_email(
        self,
        email: Union[str, Email],
        exclude_user_id: Optional[UUID] = None,
    ) -> bool:
        condition = UserModel.email == _email_value(email)
        if exclude_user_id is not None:
            condition = condition & (UserModel.id != exclude_user_id)
        result = await self._session.execute(select(exists().where(condition)))
        return bool(result.scalar())

    async def save(self, user: User) -> None:
        existing = await self._find_model_by_id(user.id)

        try:
            if existing:
                self._update_model(existing, user)
                logger.debug("Updated user: %s", user.id)
            else:
                model = self._map_to_model(user)
                self._session.add(model)
                logger.info("Created user: %s", user.id)

            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

    async def delete(self, user_id: UUID) -> None:
        model = await self._find_model_by_id(user_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted user: %s", user_id)

    async def _find_model_by_id(self, user_id: UUID) -> UserModel | None:
        stmt = select(UserModel).where(UserModel.id == user_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            email=model.email,
            first_name=model.first_name,
            last_name=model.last_name,
            created_at=ensure_tz_aware(model.created_at),
            updated_at=ensure_tz_aware(model.updated_at),
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def _update_model(self, model: UserModel, user: User) -> None:
        model.email = user.email
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.updated_at = user.updated_at
