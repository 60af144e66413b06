"""Domain models for wallet ledger entries."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional


class WalletItemType(str, enum.Enum):
    """Ledger entry classification, stored as its two letter code."""

    EN = "EN"  # entrada (income)
    SD = "SD"  # saída (expense)


@dataclass(slots=True)
class WalletItem:
    wallet_id: Optional[int]
    date: Optional[date]
    type: Optional[WalletItemType]
    value: Optional[Decimal]
    description: Optional[str] = None
    id: Optional[int] = None


@dataclass(slots=True)
class WalletItemPage:
    items: list[WalletItem] = field(default_factory=list)
    total: int = 0
    page: int = 0
    page_size: int = 10

    @property
    def total_pages(self) -> int:
        if self.page_size <= 0:
            return 0
        return math.ceil(self.total / self.page_size)

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages
