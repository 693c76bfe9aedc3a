"""Folio Identity - the portfolio owner's account and authentication.

This package handles all identity-related concerns:
- User aggregate (identity plus public profile)
- Authentication (registration, login, tokens)
- Password hashing

The content domain (blogs, projects) only references user ids, keeping
identity concerns separated.
"""

from folio_identity.application.context import UserContext
from folio_identity.application.services import AuthenticationService
from folio_identity.domain.user import (
    Email,
    EmailAlreadyExistsError,
    InvalidEmailError,
    User,
    UserNotFoundError,
    UserRepository,
    UserRole,
)
from folio_identity.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
    PasswordMismatchError,
    RegistrationClosedError,
    WeakPasswordError,
)
from folio_identity.repositories import (
    UserCredentialData,
    UserCredentialRepository,
)
from folio_identity.schemas import TokenPayload
from folio_identity.services import (
    JWTService,
    PasswordHashingService,
)

__all__ = [
    # Domain - User
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserRole",
    # Exceptions
    "AuthError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "PasswordMismatchError",
    "RegistrationClosedError",
    "WeakPasswordError",
    # Repositories
    "UserCredentialData",
    "UserCredentialRepository",
    # Schemas
    "TokenPayload",
    # Services
    "JWTService",
    "PasswordHashingService",
    # Application
    "AuthenticationService",
    "UserContext",
]
