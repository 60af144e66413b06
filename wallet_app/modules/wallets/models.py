"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class Wallet:
    name: Optional[str]
    value: Optional[Decimal] = Decimal("0")
    id: Optional[int] = None


@dataclass(slots=True)
class UserWallet:
    user_id: int
    wallet_id: int
    id: Optional[int] = None
