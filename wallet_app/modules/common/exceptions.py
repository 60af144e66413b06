"""Errors shared by every domain module."""

from __future__ import annotations

from typing import Iterable


class DomainError(Exception):
    """Base class for domain errors."""


class ConstraintViolationError(DomainError):
    """Raised when an entity breaks a required-field, unique or foreign key constraint."""

    def __init__(self, violations: Iterable[str]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(self.violations))

    @classmethod
    def missing(cls, fields: Iterable[str]) -> "ConstraintViolationError":
        return cls(f"{name}: must not be null" for name in fields)
