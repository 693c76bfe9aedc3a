"""Get the portfolio owner's public profile."""

from __future__ import annotations

from typing import TYPE_CHECKING

from folio.application.dtos import ProfileDTO
from folio.domain.content.exceptions import ProfileNotFoundError
from folio_identity.domain.user import UserRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory


class GetProfileQuery:
    """The owner is the earliest registered user."""

    def __init__(self, user_repository: UserRepository):
        self._user_repo = user_repository

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> GetProfileQuery:
        return cls(user_repository=factory.user_repository())

    async def execute(self) -> ProfileDTO:
        owner = await self._user_repo.find_first()
        if owner is None:
            raise ProfileNotFoundError
        return ProfileDTO.from_user(owner)
