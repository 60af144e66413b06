"""
Create a demo user with one wallet and a couple of ledger entries.
"""
import asyncio
import logging
from datetime import date, timedelta
from decimal import Decimal

from wallet_app.core.config import get_settings
from wallet_app.core.logging import setup_logging
from wallet_app.infrastructure.database.session import dispose_engine, init_db, session_scope
from wallet_app.modules.users import UserCreateInput
from wallet_app.modules.users.service import UserService
from wallet_app.modules.wallet_items import WalletItem, WalletItemType
from wallet_app.modules.wallet_items.service import WalletItemService
from wallet_app.modules.wallets.service import WalletService

DEMO_EMAIL = "demo@wallet.local"

logger = logging.getLogger("init_wallet")


async def create_demo_wallet():
    await init_db()

    async with session_scope() as session:
        users = UserService.with_session(session)
        if await users.find_by_email(DEMO_EMAIL):
            logger.info("Demo user already exists")
            return

        user = await users.register(UserCreateInput(name="Demo", email=DEMO_EMAIL, password="demo1234"))
        wallets = WalletService.with_session(session)
        wallet = await wallets.create_wallet("Carteira Demo", owner_id=user.id)

        items = WalletItemService.with_session(session)
        today = date.today()
        await items.save(WalletItem(wallet.id, today, WalletItemType.EN, Decimal("1500.00"), "Salário"))
        await items.save(
            WalletItem(wallet.id, today + timedelta(days=1), WalletItemType.SD, Decimal("-65.00"), "Conta de Luz")
        )
        wallet = await wallets.reconcile_balance(wallet.id)

    logger.info("Demo wallet %s created for %s with balance %s", wallet.id, DEMO_EMAIL, wallet.value)


async def main():
    setup_logging(get_settings())
    try:
        await create_demo_wallet()
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main())
