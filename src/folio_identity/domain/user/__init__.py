"""User domain: the portfolio owner's identity and profile."""

from folio_identity.domain.user.aggregates import User
from folio_identity.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    UserNotFoundError,
)
from folio_identity.domain.user.repositories import UserRepository
from folio_identity.domain.user.value_objects import (
    Email,
    UserRole,
)

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
]
