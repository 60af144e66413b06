"""SQLAlchemy implementation for wallet ownership links"""

from __future__ import annotations

from sqlalchemy import delete, select

from wallet_app.infrastructure.database.models import UserWallet as UserWalletModel
from wallet_app.modules.common.repository import AsyncRepository
from wallet_app.modules.wallets.models import UserWallet
from wallet_app.modules.wallets.repository import UserWalletRepository


class SqlUserWalletRepository(AsyncRepository[UserWalletModel], UserWalletRepository):
    model = UserWalletModel

    async def save(self, link: UserWallet) -> UserWallet:
        self._require(user_id=link.user_id, wallet_id=link.wallet_id)
        model = await self.add(UserWalletModel(user_id=link.user_id, wallet_id=link.wallet_id))
        return self._to_domain(model)

    async def find_by_user_and_wallet(self, user_id: int, wallet_id: int) -> UserWallet | None:
        stmt = select(UserWalletModel).where(
            UserWalletModel.user_id == user_id,
            UserWalletModel.wallet_id == wallet_id,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_domain(model) if model else None

    async def list_wallet_ids(self, user_id: int) -> list[int]:
        stmt = (
            select(UserWalletModel.wallet_id)
            .where(UserWalletModel.user_id == user_id)
            .order_by(UserWalletModel.wallet_id)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_by_wallet(self, wallet_id: int) -> int:
        stmt = delete(UserWalletModel).where(UserWalletModel.wallet_id == wallet_id)
        result = await self._execute(stmt)
        return result.rowcount or 0

    @staticmethod
    def _to_domain(model: UserWalletModel) -> UserWallet:
        return UserWallet(id=model.id, user_id=model.user_id, wallet_id=model.wallet_id)
