"""Wallet item domain exports"""

from .models import WalletItem, WalletItemPage, WalletItemType

__all__ = ["WalletItem", "WalletItemPage", "WalletItemType"]
