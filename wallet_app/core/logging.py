"""Root logger configuration."""

from __future__ import annotations

import logging
import sys

from wallet_app.core.config import Settings


def setup_logging(settings: Settings) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    level = "DEBUG" if settings.debug else settings.logging.level.upper()
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(settings.logging.format))
    root.addHandler(handler)


__all__ = ["setup_logging"]
