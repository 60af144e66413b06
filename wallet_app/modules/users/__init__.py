"""User domain models and errors."""

from .exceptions import UserAlreadyExistsError, UserError
from .models import User, UserCreateInput

__all__ = [
    "User",
    "UserCreateInput",
    "UserError",
    "UserAlreadyExistsError",
]
