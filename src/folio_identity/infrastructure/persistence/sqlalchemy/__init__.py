"""SQLAlchemy persistence for identity data."""

from folio_identity.infrastructure.persistence.sqlalchemy.base import IdentityBase
from folio_identity.infrastructure.persistence.sqlalchemy.models import (
    UserCredentialModel,
    UserModel,
)
from folio_identity.infrastructure.persistence.sqlalchemy.repositories import (
    UserCredentialRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "IdentityBase",
    "UserCredentialModel",
    "UserCredentialRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
