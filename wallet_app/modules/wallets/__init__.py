"""Wallet domain exports"""

from .exceptions import WalletError, WalletNotFoundError
from .models import UserWallet, Wallet

__all__ = [
    "UserWallet",
    "Wallet",
    "WalletError",
    "WalletNotFoundError",
]
