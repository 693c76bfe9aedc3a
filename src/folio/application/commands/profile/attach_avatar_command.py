"""Upload a new avatar for the authenticated user."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from folio.application.ports.media import ImageUpload
from folio.application.services import ImageUploadService
from folio_identity.domain.user import User, UserNotFoundError, UserRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory
    from folio_identity.application.context import UserContext


class AttachAvatarCommand:
    FIELD = "avatar"

    def __init__(
        self,
        user_repository: UserRepository,
        current_user: UserContext,
        upload_service: ImageUploadService,
    ):
        self._user_repo = user_repository
        self._user_id = current_user.user_id
        self._uploads = upload_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        upload_service: ImageUploadService,
    ) -> AttachAvatarCommand:
        return cls(
            user_repository=factory.user_repository(),
            current_user=factory.current_user,
            upload_service=upload_service,
        )

    async def execute(self, upload: Optional[ImageUpload]) -> User:
        self._uploads.validate(upload)

        user = await self._user_repo.find_by_id(self._user_id)
        if user is None:
            raise UserNotFoundError(self._user_id)

        path = await self._uploads.store(self.FIELD, upload)
        user.set_avatar(path)
        await self._user_repo.save(user)
        return user
