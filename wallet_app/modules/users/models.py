"""Domain models for users."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class User:
    name: Optional[str]
    email: Optional[str]
    password_hash: Optional[str] = field(default=None, repr=False)
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class UserCreateInput:
    name: str
    email: str
    password: str = field(repr=False)
