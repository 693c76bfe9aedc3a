"""Update the authenticated user's profile."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping, Optional

from folio_identity.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory
    from folio_identity.application.context import UserContext

logger = logging.getLogger(__name__)


class UpdateProfileCommand:
    """Apply a partial profile update; blank values keep the stored ones."""

    def __init__(self, user_repository: UserRepository, current_user: UserContext):
        self._user_repo = user_repository
        self._user_id = current_user.user_id

    @classmethod
    def from_factory(cls, factory: RepositoryFactory) -> UpdateProfileCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
        )

    async def execute(
        self,
        name: Optional[str] = None,
        title: Optional[str] = None,
        bio: Optional[str] = None,
        social_links: Optional[Mapping[str, str]] = None,
    ) -> User:
        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(self._user_id)

        user.update_profile(
            name=name,
            title=title,
            bio=bio,
            social_links=social_links,
        )
        await self._user_repo.save(user)
        logger.info("Profile updated: %s", user.email)
        return user
