"""Identity and authentication exceptions.

These exceptions are raised by the folio_identity package. They extend the
shared domain hierarchy so the API exception handlers can map them to
HTTP responses without per-router try/except blocks.
"""

from folio.domain.shared.exceptions import DomainException, ErrorCode, ValidationError


class AuthError(DomainException):
    """Base exception for all authentication errors."""

    def __init__(
        self,
        message: str = "Authentication error",
        code: ErrorCode = ErrorCode.AUTHENTICATION_REQUIRED,
    ):
        super().__init__(message, code)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message, ErrorCode.INVALID_TOKEN)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login."""

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message, ErrorCode.INVALID_CREDENTIALS)


class RegistrationClosedError(AuthError):
    """Raised when registration is disabled and an account already exists."""

    def __init__(
        self,
        message: str = "Registration is disabled. An administrator already exists.",
    ):
        super().__init__(message, ErrorCode.REGISTRATION_CLOSED)


class WeakPasswordError(ValidationError):
    """Raised when a password doesn't meet strength requirements."""

    def __init__(self, message: str = "Password does not meet requirements"):
        super().__init__(message, ErrorCode.WEAK_PASSWORD)


class PasswordMismatchError(ValidationError):
    """Raised when the password confirmation differs from the password."""

    def __init__(self, message: str = "Passwords do not match"):
        super().__init__(message, ErrorCode.PASSWORD_MISMATCH)
