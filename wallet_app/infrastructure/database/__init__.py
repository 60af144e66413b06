"""Database infrastructure helpers (engine, sessions, schema)."""

from .base import Base
from .session import get_engine, get_session, init_db, session_scope

__all__ = ["Base", "get_engine", "get_session", "init_db", "session_scope"]
