"""SQLAlchemy implementation of the user repository."""

from __future__ import annotations

from sqlalchemy import select

from wallet_app.infrastructure.database.models import User as UserModel
from wallet_app.modules.common.repository import AsyncRepository
from wallet_app.modules.users.models import User
from wallet_app.modules.users.repository import UserRepository


class SqlUserRepository(AsyncRepository[UserModel], UserRepository):
    """User repository backed by SQLAlchemy models."""

    model = UserModel

    async def save(self, user: User) -> User:
        self._require(name=user.name, email=user.email, password_hash=user.password_hash)

        async with self.savepoint():
            model = await self._get_model(user.id)
            if model is None:
                model = UserModel(id=user.id)
                self.session.add(model)
            model.name = user.name
            model.email = user.email
            model.password_hash = user.password_hash

        await self.session.refresh(model)
        return self._to_domain(model)

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self._get_model(user_id)
        return self._to_domain(model) if model else None

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
