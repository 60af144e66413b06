"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from wallet_app.infrastructure.database.repositories import (
    SqlUserWalletRepository,
    SqlWalletItemRepository,
    SqlWalletRepository,
)
from wallet_app.modules.wallet_items.repository import WalletItemRepository

from .exceptions import WalletNotFoundError
from .models import UserWallet, Wallet
from .repository import UserWalletRepository, WalletRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository
    owners: UserWalletRepository
    items: WalletItemRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        return cls(
            SqlWalletRepository(session),
            SqlUserWalletRepository(session),
            SqlWalletItemRepository(session),
        )

    async def create_wallet(
        self,
        name: str,
        value: Decimal = Decimal("0"),
        owner_id: Optional[int] = None,
    ) -> Wallet:
        wallet = await self.repository.save(Wallet(name=name, value=value))
        if owner_id is not None:
            await self.owners.save(UserWallet(user_id=owner_id, wallet_id=wallet.id))
        return wallet

    async def get_wallet(self, wallet_id: int) -> Wallet | None:
        return await self.repository.find_by_id(wallet_id)

    async def list_wallet_ids(self, user_id: int) -> list[int]:
        return await self.owners.list_wallet_ids(user_id)

    async def is_owner(self, user_id: int, wallet_id: int) -> bool:
        return await self.owners.find_by_user_and_wallet(user_id, wallet_id) is not None

    async def reconcile_balance(self, wallet_id: int) -> Wallet:
        """Overwrite the stored wallet value with the sum of its items."""
        wallet = await self.repository.find_by_id(wallet_id)
        if wallet is None:
            raise WalletNotFoundError(wallet_id)

        wallet.value = await self.items.sum_by_wallet(wallet_id)
        wallet = await self.repository.save(wallet)
        logger.info("Wallet %s balance reconciled to %s", wallet_id, wallet.value)
        return wallet

    async def delete_wallet(self, wallet_id: int) -> bool:
        """Delete a wallet together with its items and ownership links."""
        if await self.repository.find_by_id(wallet_id) is None:
            return False
        removed_items = await self.items.delete_by_wallet(wallet_id)
        await self.owners.delete_by_wallet(wallet_id)
        deleted = await self.repository.delete_by_id(wallet_id)
        logger.info("Deleted wallet %s with %s items", wallet_id, removed_items)
        return deleted
