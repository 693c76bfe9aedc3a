"""The authenticated principal, as seen by application commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from folio_identity.domain.user import User


@dataclass(frozen=True)
class UserContext:
    """
    Who is making the request.

    Commands receive this instead of the ``User`` aggregate so they cannot
    mutate the account by accident. Every authenticated user is an admin.
    """

    user_id: UUID
    email: str
    name: str = ""

    @classmethod
    def create(cls, user: User) -> UserContext:
        return cls(user_id=user.id, email=user.email, name=user.name)

    def __str__(self) -> str:
        return f"{self.name or self.email} <{self.user_id}>"
