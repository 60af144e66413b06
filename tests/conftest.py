"""
Shared pytest fixtures for the wallet ledger tests.

Repository and service tests run against a fresh in-memory SQLite database
per test, with foreign keys enforced like in production.
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy.pool import StaticPool

from wallet_app.infrastructure.database.repositories import (
    SqlUserRepository,
    SqlUserWalletRepository,
    SqlWalletItemRepository,
    SqlWalletRepository,
)
from wallet_app.infrastructure.database.session import build_engine, build_session_factory, init_db
from wallet_app.modules.wallet_items import WalletItem, WalletItemType
from wallet_app.modules.wallets import Wallet

DATE = date(2024, 3, 10)
TYPE = WalletItemType.EN
DESCRIPTION = "Conta de Luz"
VALUE = Decimal("65")


@pytest.fixture
async def engine():
    engine = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def user_repository(session):
    return SqlUserRepository(session)


@pytest.fixture
def wallet_repository(session):
    return SqlWalletRepository(session)


@pytest.fixture
def user_wallet_repository(session):
    return SqlUserWalletRepository(session)


@pytest.fixture
def item_repository(session):
    return SqlWalletItemRepository(session)


@pytest.fixture
async def wallet(wallet_repository):
    return await wallet_repository.save(Wallet(name="Carteira Teste", value=Decimal("250")))


@pytest.fixture
async def wallet_item(item_repository, wallet):
    return await item_repository.save(WalletItem(wallet.id, DATE, TYPE, VALUE, DESCRIPTION))
