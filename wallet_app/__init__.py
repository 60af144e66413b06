"""Personal finance wallet ledger."""

__version__ = "0.1.0"
