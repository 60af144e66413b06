"""Shared abstractions used across domain modules."""

from .exceptions import ConstraintViolationError, DomainError
from .repository import AsyncRepository

__all__ = ["AsyncRepository", "ConstraintViolationError", "DomainError"]
