"""Unit tests for blog commands."""

from uuid import uuid4

import pytest

from folio.application.commands import (
    AttachBlogCoverCommand,
    CreateBlogCommand,
    DeleteBlogCommand,
    UpdateBlogCommand,
)
from folio.application.ports.media import ImageUpload
from folio.domain.content import Blog, BlogNotFoundError, BlogSlugConflictError
from folio.domain.shared.exceptions import ValidationError


class TestCreateBlogCommand:
    @pytest.mark.asyncio
    async def test_create_sets_author_and_slug(self, blog_repo, current_user):
        command = CreateBlogCommand(blog_repo, current_user)

        blog = await command.execute(
            title="Hello World",
            content="# Hi",
            tags=["intro"],
            published=True,
        )

        assert blog.slug == "hello-world"
        assert blog.author_id == current_user.user_id
        assert blog.published is True
        blog_repo.save.assert_awaited_once_with(blog)

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_conflict(self, blog_repo, current_user):
        blog_repo.find_by_slug.return_value = Blog.create(
            title="Hello World",
            content="Existing",
            author_id=current_user.user_id,
        )
        command = CreateBlogCommand(blog_repo, current_user)

        with pytest.raises(BlogSlugConflictError):
            await command.execute(title="Hello, World!", content="Second")

        blog_repo.save.assert_not_called()


class TestUpdateBlogCommand:
    @pytest.mark.asyncio
    async def test_missing_blog(self, blog_repo):
        blog_repo.find_by_id.return_value = None

        with pytest.raises(BlogNotFoundError):
            await UpdateBlogCommand(blog_repo).execute(uuid4(), title="New")

    @pytest.mark.asyncio
    async def test_rename_checks_new_slug(self, blog_repo):
        blog = Blog.create(title="Old", content="Body", author_id=None)
        blog_repo.find_by_id.return_value = blog
        blog_repo.find_by_slug.return_value = Blog.create(
            title="Taken",
            content="Other",
            author_id=None,
        )

        with pytest.raises(BlogSlugConflictError):
            await UpdateBlogCommand(blog_repo).execute(blog.id, title="Taken")

        blog_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_body_edit_keeps_slug_without_lookup(self, blog_repo):
        blog = Blog.create(title="Stable", content="Body", author_id=None)
        blog_repo.find_by_id.return_value = blog

        updated = await UpdateBlogCommand(blog_repo).execute(
            blog.id,
            content="New body",
            published=True,
        )

        assert updated.slug == "stable"
        assert updated.content == "New body"
        assert updated.published is True
        blog_repo.find_by_slug.assert_not_called()
        blog_repo.save.assert_awaited_once_with(blog)


class TestDeleteBlogCommand:
    @pytest.mark.asyncio
    async def test_delete(self, blog_repo):
        blog_repo.delete.return_value = True
        blog_id = uuid4()

        await DeleteBlogCommand(blog_repo).execute(blog_id)

        blog_repo.delete.assert_awaited_once_with(blog_id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, blog_repo):
        blog_repo.delete.return_value = False

        with pytest.raises(BlogNotFoundError):
            await DeleteBlogCommand(blog_repo).execute(uuid4())


class TestAttachBlogCoverCommand:
    @pytest.mark.asyncio
    async def test_cover_stored_and_set(
        self,
        blog_repo,
        upload_service,
        image_storage,
        png_upload,
    ):
        blog = Blog.create(title="Post", content="Body", author_id=None)
        blog_repo.find_by_id.return_value = blog
        command = AttachBlogCoverCommand(blog_repo, upload_service)

        updated = await command.execute(blog.id, png_upload)

        assert updated.cover_image.startswith("/uploads/cover-")
        assert updated.cover_image.endswith(".png")
        stored_name = updated.cover_image.rsplit("/", 1)[-1]
        assert image_storage.files[stored_name] == png_upload.data
        blog_repo.save.assert_awaited_once_with(blog)

    @pytest.mark.asyncio
    async def test_invalid_upload_rejected_before_lookup(
        self,
        blog_repo,
        upload_service,
        image_storage,
    ):
        command = AttachBlogCoverCommand(blog_repo, upload_service)

        with pytest.raises(ValidationError, match="Please upload an image file"):
            await command.execute(uuid4(), None)

        blog_repo.find_by_id.assert_not_called()
        assert image_storage.files == {}

    @pytest.mark.asyncio
    async def test_missing_blog_stores_nothing(
        self,
        blog_repo,
        upload_service,
        image_storage,
    ):
        blog_repo.find_by_id.return_value = None
        command = AttachBlogCoverCommand(blog_repo, upload_service)

        with pytest.raises(BlogNotFoundError):
            await command.execute(
                uuid4(),
                ImageUpload(filename="a.jpg", data=b"jpeg", content_type="image/jpeg"),
            )

        assert image_storage.files == {}
