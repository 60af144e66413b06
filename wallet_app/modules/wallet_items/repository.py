"""Repository protocol for wallet items."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Protocol, Sequence

from .models import WalletItem, WalletItemPage, WalletItemType


class WalletItemRepository(Protocol):
    async def save(self, item: WalletItem) -> WalletItem:
        ...

    async def find_by_id(self, item_id: int) -> WalletItem | None:
        ...

    async def delete_by_id(self, item_id: int) -> bool:
        ...

    async def delete_by_wallet(self, wallet_id: int) -> int:
        ...

    async def delete_all(self) -> int:
        ...

    async def find_all_by_wallet_and_date_range(
        self,
        wallet_id: int,
        start: date,
        end: date,
        page: int,
        page_size: int,
    ) -> WalletItemPage:
        ...

    async def find_by_wallet_and_type(self, wallet_id: int, type: WalletItemType) -> Sequence[WalletItem]:
        ...

    async def sum_by_wallet(self, wallet_id: int) -> Decimal:
        ...
