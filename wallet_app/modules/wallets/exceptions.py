"""Wallet domain specific exceptions."""

from wallet_app.modules.common.exceptions import DomainError


class WalletError(DomainError):
    """Base class for wallet domain errors."""


class WalletNotFoundError(WalletError):
    """Raised when the requested wallet cannot be found."""
