"""Tests for WalletService against the database."""

from datetime import date
from decimal import Decimal

import pytest

from wallet_app.modules.users import User
from wallet_app.modules.wallet_items import WalletItem, WalletItemType
from wallet_app.modules.wallets import WalletNotFoundError
from wallet_app.modules.wallets.service import WalletService


@pytest.fixture
def service(session):
    return WalletService.with_session(session)


@pytest.fixture
async def owner(user_repository):
    return await user_repository.save(User(name="Dono", email="dono@teste.com", password_hash="hash"))


class TestCreateWallet:
    async def test_create_without_owner(self, service):
        wallet = await service.create_wallet("Carteira")

        assert wallet.id is not None
        assert wallet.value == Decimal("0")

    async def test_create_with_owner(self, service, owner):
        wallet = await service.create_wallet("Carteira", Decimal("100"), owner_id=owner.id)

        assert await service.is_owner(owner.id, wallet.id) is True
        assert await service.list_wallet_ids(owner.id) == [wallet.id]

    async def test_not_owner(self, service, owner, wallet):
        assert await service.is_owner(owner.id, wallet.id) is False


class TestReconcileBalance:
    async def test_value_becomes_sum_of_items(self, service, item_repository, wallet):
        await item_repository.save(WalletItem(wallet.id, date(2024, 1, 1), WalletItemType.EN, Decimal("65.00")))
        await item_repository.save(WalletItem(wallet.id, date(2024, 1, 2), WalletItemType.EN, Decimal("150.80")))

        reconciled = await service.reconcile_balance(wallet.id)

        assert reconciled.value == Decimal("215.80")
        assert (await service.get_wallet(wallet.id)).value == Decimal("215.80")

    async def test_wallet_without_items(self, service, wallet):
        reconciled = await service.reconcile_balance(wallet.id)

        assert reconciled.value == Decimal("0")

    async def test_missing_wallet(self, service):
        with pytest.raises(WalletNotFoundError):
            await service.reconcile_balance(404)


class TestDeleteWallet:
    async def test_removes_items_and_links(self, service, item_repository, owner, wallet_item):
        wallet = await service.create_wallet("Carteira", owner_id=owner.id)
        item = await item_repository.save(WalletItem(wallet.id, date(2024, 1, 1), WalletItemType.SD, Decimal("9.90")))

        assert await service.delete_wallet(wallet.id) is True

        assert await service.get_wallet(wallet.id) is None
        assert await item_repository.find_by_id(item.id) is None
        assert await service.is_owner(owner.id, wallet.id) is False
        assert await item_repository.find_by_id(wallet_item.id) is not None

    async def test_missing_wallet(self, service):
        assert await service.delete_wallet(404) is False
