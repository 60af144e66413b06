"""SQLAlchemy-backed repository implementations."""

from .user_repository import SqlUserRepository
from .user_wallet_repository import SqlUserWalletRepository
from .wallet_item_repository import SqlWalletItemRepository
from .wallet_repository import SqlWalletRepository

__all__ = [
    "SqlUserRepository",
    "SqlUserWalletRepository",
    "SqlWalletItemRepository",
    "SqlWalletRepository",
]
