"""User domain specific exceptions."""

from wallet_app.modules.common.exceptions import ConstraintViolationError, DomainError


class UserError(DomainError):
    """Base class for user domain errors."""


class UserAlreadyExistsError(UserError, ConstraintViolationError):
    """Raised when registering a user with an email that is already taken."""

    def __init__(self, email: str) -> None:
        self.email = email
        ConstraintViolationError.__init__(self, [f"email: already registered ({email})"])
