from enum import Enum


class UserRole(str, Enum):
    """User roles. The portfolio has a single administrator role."""

    ADMIN = "admin"
