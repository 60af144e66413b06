"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from wallet_app.infrastructure.database.models import Wallet as WalletModel
from wallet_app.modules.common.repository import AsyncRepository
from wallet_app.modules.wallets.models import Wallet
from wallet_app.modules.wallets.repository import WalletRepository


class SqlWalletRepository(AsyncRepository[WalletModel], WalletRepository):
    model = WalletModel

    async def save(self, wallet: Wallet) -> Wallet:
        self._require(name=wallet.name, value=wallet.value)

        async with self.savepoint():
            model = await self._get_model(wallet.id)
            if model is None:
                model = WalletModel(id=wallet.id)
                self.session.add(model)
            model.name = wallet.name
            model.value = wallet.value

        await self.session.refresh(model)
        return self._to_domain(model)

    async def find_by_id(self, wallet_id: int) -> Wallet | None:
        model = await self._get_model(wallet_id)
        return self._to_domain(model) if model else None

    async def delete_by_id(self, wallet_id: int) -> bool:
        return await self._delete_model(wallet_id)

    @staticmethod
    def _to_domain(model: WalletModel) -> Wallet:
        return Wallet(id=model.id, name=model.name, value=model.value)
