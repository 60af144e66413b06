"""Wallet item domain service"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_app.core.config import get_settings
from wallet_app.infrastructure.database.repositories.wallet_item_repository import SqlWalletItemRepository

from .models import WalletItem, WalletItemPage, WalletItemType
from .repository import WalletItemRepository


@dataclass(slots=True)
class WalletItemService:
    repository: WalletItemRepository
    items_per_page: int = 10

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletItemService":
        return cls(SqlWalletItemRepository(session), get_settings().items_per_page)

    async def save(self, item: WalletItem) -> WalletItem:
        return await self.repository.save(item)

    async def find_by_id(self, item_id: int) -> WalletItem | None:
        return await self.repository.find_by_id(item_id)

    async def delete_by_id(self, item_id: int) -> bool:
        return await self.repository.delete_by_id(item_id)

    async def find_between_dates(self, wallet_id: int, start: date, end: date, page: int) -> WalletItemPage:
        if page < 0:
            raise ValueError("page index must not be negative")
        return await self.repository.find_all_by_wallet_and_date_range(
            wallet_id, start, end, page, self.items_per_page
        )

    async def find_by_wallet_and_type(self, wallet_id: int, type: WalletItemType) -> list[WalletItem]:
        return list(await self.repository.find_by_wallet_and_type(wallet_id, type))

    async def sum_by_wallet_id(self, wallet_id: int) -> Decimal:
        return await self.repository.sum_by_wallet(wallet_id)
