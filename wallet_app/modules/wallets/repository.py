"""Repository protocols for wallet operations."""

from __future__ import annotations

from typing import Protocol

from .models import UserWallet, Wallet


class WalletRepository(Protocol):
    async def save(self, wallet: Wallet) -> Wallet:
        ...

    async def find_by_id(self, wallet_id: int) -> Wallet | None:
        ...

    async def delete_by_id(self, wallet_id: int) -> bool:
        ...

    async def delete_all(self) -> int:
        ...


class UserWalletRepository(Protocol):
    async def save(self, link: UserWallet) -> UserWallet:
        ...

    async def find_by_user_and_wallet(self, user_id: int, wallet_id: int) -> UserWallet | None:
        ...

    async def list_wallet_ids(self, user_id: int) -> list[int]:
        ...

    async def delete_by_wallet(self, wallet_id: int) -> int:
        ...
