"""Attach uploaded images to blogs and projects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional
from uuid import UUID

from folio.application.ports.media import ImageUpload
from folio.application.services import ImageUploadService
from folio.domain.content.entities import Blog, Project
from folio.domain.content.exceptions import BlogNotFoundError, ProjectNotFoundError
from folio.domain.content.repositories import BlogRepository, ProjectRepository

if TYPE_CHECKING:
    from folio.application.factories import RepositoryFactory


class AttachBlogCoverCommand:
    """Store an image and make it the blog's cover.

    The upload is validated before the blog is looked up, and the blog is
    looked up before anything is written to storage.
    """

    FIELD = "cover"

    def __init__(
        self,
        blog_repository: BlogRepository,
        upload_service: ImageUploadService,
    ):
        self._blog_repo = blog_repository
        self._uploads = upload_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        upload_service: ImageUploadService,
    ) -> AttachBlogCoverCommand:
        return cls(
            blog_repository=factory.blog_repository(),
            upload_service=upload_service,
        )

    async def execute(self, blog_id: UUID, upload: Optional[ImageUpload]) -> Blog:
        self._uploads.validate(upload)

        blog = await self._blog_repo.find_by_id(blog_id)
        if blog is None:
            raise BlogNotFoundError(blog_id=blog_id)

        path = await self._uploads.store(self.FIELD, upload)
        blog.set_cover_image(path)
        await self._blog_repo.save(blog)
        return blog


class AttachProjectThumbnailCommand:
    """Store an image and make it the project's thumbnail."""

    FIELD = "thumbnail"

    def __init__(
        self,
        project_repository: ProjectRepository,
        upload_service: ImageUploadService,
    ):
        self._project_repo = project_repository
        self._uploads = upload_service

    @classmethod
    def from_factory(
        cls,
        factory: RepositoryFactory,
        upload_service: ImageUploadService,
    ) -> AttachProjectThumbnailCommand:
        return cls(
            project_repository=factory.project_repository(),
            upload_service=upload_service,
        )

    async def execute(
        self,
        project_id: UUID,
        upload: Optional[ImageUpload],
    ) -> Project:
        self._uploads.validate(upload)

        project = await self._project_repo.find_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError(project_id)

        path = await self._uploads.store(self.FIELD, upload)
        project.set_thumbnail(path)
        await self._project_repo.save(project)
        return project
