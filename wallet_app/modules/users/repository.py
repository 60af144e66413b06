"""Repository protocol for users."""

from __future__ import annotations

from typing import Protocol

from .models import User


class UserRepository(Protocol):
    """Abstract repository interface for user persistence."""

    async def save(self, user: User) -> User:
        ...

    async def get_by_id(self, user_id: int) -> User | None:
        ...

    async def find_by_email(self, email: str) -> User | None:
        ...

    async def delete_all(self) -> int:
        ...
