"""Domain services for user management."""

from __future__ import annotations

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_app.core.config import get_settings
from wallet_app.core.crypto import hash_password
from wallet_app.infrastructure.database.repositories.user_repository import SqlUserRepository

from .exceptions import UserAlreadyExistsError
from .models import User, UserCreateInput
from .repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Encapsulates user registration and lookup."""

    def __init__(self, repository: UserRepository, bcrypt_rounds: int = 12) -> None:
        self._repository = repository
        self._bcrypt_rounds = bcrypt_rounds

    @classmethod
    def with_session(cls, session: AsyncSession) -> "UserService":
        return cls(SqlUserRepository(session), get_settings().bcrypt_rounds)

    async def get_by_id(self, user_id: int) -> User | None:
        return await self._repository.get_by_id(user_id)

    async def find_by_email(self, email: str) -> User | None:
        return await self._repository.find_by_email(email)

    async def register(self, payload: UserCreateInput) -> User:
        existing = await self._repository.find_by_email(payload.email)
        if existing is not None:
            raise UserAlreadyExistsError(payload.email)

        user = await self._repository.save(
            User(
                name=payload.name,
                email=payload.email,
                password_hash=hash_password(payload.password, self._bcrypt_rounds),
            )
        )
        logger.info("Registered user %s", user.id)
        return user
