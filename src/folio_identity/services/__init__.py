"""Authentication infrastructure services."""

from folio_identity.services.jwt_service import JWTService
from folio_identity.services.password_service import PasswordHashingService

__all__ = ["JWTService", "PasswordHashingService"]
