"""Shared domain building blocks (errors, time helpers)."""

from folio.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    RateLimitError,
    ValidationError,
)
from folio.domain.shared.time import as_utc, utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "EntityNotFoundError",
    "ErrorCode",
    "RateLimitError",
    "ValidationError",
    "as_utc",
    "utc_now",
]
