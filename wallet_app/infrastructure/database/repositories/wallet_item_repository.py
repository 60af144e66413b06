"""SQLAlchemy implementation for wallet ledger entries"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import delete, func, select

from wallet_app.infrastructure.database.models import WalletItem as WalletItemModel
from wallet_app.modules.common.repository import AsyncRepository
from wallet_app.modules.wallet_items.models import WalletItem, WalletItemPage, WalletItemType
from wallet_app.modules.wallet_items.repository import WalletItemRepository

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


class SqlWalletItemRepository(AsyncRepository[WalletItemModel], WalletItemRepository):
    model = WalletItemModel

    async def save(self, item: WalletItem) -> WalletItem:
        self._require(wallet=item.wallet_id, date=item.date, type=item.type, value=item.value)

        async with self.savepoint():
            model = await self._get_model(item.id)
            if model is None:
                model = WalletItemModel(id=item.id)
                self.session.add(model)
            model.wallet_id = item.wallet_id
            model.date = item.date
            model.type = item.type
            model.description = item.description
            model.value = item.value

        await self.session.refresh(model)
        return self._to_domain(model)

    async def find_by_id(self, item_id: int) -> WalletItem | None:
        model = await self._get_model(item_id)
        return self._to_domain(model) if model else None

    async def delete_by_id(self, item_id: int) -> bool:
        return await self._delete_model(item_id)

    async def delete_by_wallet(self, wallet_id: int) -> int:
        stmt = delete(WalletItemModel).where(WalletItemModel.wallet_id == wallet_id)
        result = await self._execute(stmt)
        return result.rowcount or 0

    async def find_all_by_wallet_and_date_range(
        self,
        wallet_id: int,
        start: date,
        end: date,
        page: int,
        page_size: int,
    ) -> WalletItemPage:
        predicate = (
            (WalletItemModel.wallet_id == wallet_id)
            & (WalletItemModel.date >= start)
            & (WalletItemModel.date <= end)
        )
        query = (
            select(WalletItemModel)
            .where(predicate)
            .order_by(WalletItemModel.date, WalletItemModel.id)
            .offset(page * page_size)
            .limit(page_size)
        )
        count_query = select(func.count(WalletItemModel.id)).where(predicate)

        result = await self.session.execute(query)
        items = [self._to_domain(model) for model in result.scalars().all()]
        total = (await self.session.execute(count_query)).scalar() or 0
        logger.debug(
            "Wallet %s items between %s and %s: page %s has %s of %s",
            wallet_id, start, end, page, len(items), total,
        )
        return WalletItemPage(items=items, total=int(total), page=page, page_size=page_size)

    async def find_by_wallet_and_type(self, wallet_id: int, type: WalletItemType) -> list[WalletItem]:
        stmt = (
            select(WalletItemModel)
            .where(WalletItemModel.wallet_id == wallet_id, WalletItemModel.type == type)
            .order_by(WalletItemModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def sum_by_wallet(self, wallet_id: int) -> Decimal:
        stmt = select(func.coalesce(func.sum(WalletItemModel.value), 0)).where(
            WalletItemModel.wallet_id == wallet_id
        )
        total = (await self.session.execute(stmt)).scalar_one()
        # SQLite hands back floats for NUMERIC aggregates
        if not isinstance(total, Decimal):
            total = Decimal(str(total)).quantize(CENTS)
        return total

    @staticmethod
    def _to_domain(model: WalletItemModel) -> WalletItem:
        return WalletItem(
            id=model.id,
            wallet_id=model.wallet_id,
            date=model.date,
            type=model.type,
            description=model.description,
            value=model.value,
        )
