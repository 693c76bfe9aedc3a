"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Union
from uuid import UUID

from folio_identity.domain.user.aggregates.user import User
from folio_identity.domain.user.value_objects.email import Email


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_id(self, user_id: UUID) -> Optional[User]:
        """Find a user by their ID."""

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UUID]) -> dict[UUID, User]:
        """Find several users at once, keyed by ID. Unknown IDs are omitted."""

    @abstractmethod
    async def find_by_email(self, email: Union[str, Email]) -> Optional[User]:
        """Find a user by their email address."""

    @abstractmethod
    async def find_first(self) -> Optional[User]:
        """Find the earliest registered user (the portfolio owner)."""

    @abstractmethod
    async def save(self, user: User) -> None:
        """Save or update a user."""

    @abstractmethod
    async def count(self) -> int:
        """Count total users."""
