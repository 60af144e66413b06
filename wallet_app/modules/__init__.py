"""Domain modules: users, wallets and wallet items."""
