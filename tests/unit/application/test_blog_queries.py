"""Unit tests for blog queries."""

from unittest.mock import Mock

import pytest

from folio.application.ports.rendering import MarkdownRenderer
from folio.application.queries import GetBlogBySlugQuery, ListBlogsQuery
from folio.domain.content import Blog, BlogNotFoundError
from folio_identity import User


@pytest.fixture
def author() -> User:
    return User.create(name="Ada", email="ada@example.com")


@pytest.fixture
def renderer() -> Mock:
    renderer = Mock(spec=MarkdownRenderer)
    renderer.render.return_value = "<h1>Hi</h1>"
    return renderer


class TestListBlogsQuery:
    @pytest.mark.asyncio
    async def test_public_listing(self, blog_repo, user_repo, author):
        blog = Blog.create(
            title="Post",
            content="# Hi",
            author_id=author.id,
            published=True,
        )
        blog_repo.search.return_value = ([blog], 1)
        user_repo.find_by_ids.return_value = {author.id: author}

        page = await ListBlogsQuery(blog_repo, user_repo).execute(
            page=1,
            limit=10,
            search="  python   web ",
            tag=" intro ",
        )

        blog_repo.search.assert_awaited_once_with(
            offset=0,
            limit=10,
            published_only=True,
            terms=("python", "web"),
            tag="intro",
        )
        dto = page.items[0]
        assert dto.author.name == "Ada"
        assert dto.content is None
        assert page.total == 1

    @pytest.mark.asyncio
    async def test_admin_listing_includes_drafts_and_content(
        self,
        blog_repo,
        user_repo,
    ):
        draft = Blog.create(title="Draft", content="WIP", author_id=None)
        blog_repo.search.return_value = ([draft], 1)

        page = await ListBlogsQuery(blog_repo, user_repo).execute(
            include_drafts=True,
        )

        assert blog_repo.search.call_args.kwargs["published_only"] is False
        assert page.items[0].content == "WIP"
        assert page.items[0].author is None


class TestGetBlogBySlugQuery:
    @pytest.mark.asyncio
    async def test_view_counted_and_rendered(
        self,
        blog_repo,
        user_repo,
        renderer,
        author,
    ):
        blog = Blog.create(
            title="Post",
            content="# Hi",
            author_id=author.id,
            published=True,
        )
        blog_repo.find_by_slug.return_value = blog
        blog_repo.increment_views.return_value = 1
        user_repo.find_by_id.return_value = author

        dto = await GetBlogBySlugQuery(blog_repo, user_repo, renderer).execute("post")

        blog_repo.increment_views.assert_awaited_once_with(blog.id)
        renderer.render.assert_called_once_with("# Hi")
        assert dto.views == 1
        assert dto.content == "# Hi"
        assert dto.content_html == "<h1>Hi</h1>"
        assert dto.author.id == author.id

    @pytest.mark.asyncio
    async def test_draft_hidden_without_drafts_flag(
        self,
        blog_repo,
        user_repo,
        renderer,
    ):
        blog_repo.find_by_slug.return_value = Blog.create(
            title="Draft",
            content="WIP",
            author_id=None,
        )

        with pytest.raises(BlogNotFoundError):
            await GetBlogBySlugQuery(blog_repo, user_repo, renderer).execute("draft")

        blog_repo.increment_views.assert_not_called()

    @pytest.mark.asyncio
    async def test_draft_visible_with_drafts_flag(self, blog_repo, user_repo, renderer):
        blog_repo.find_by_slug.return_value = Blog.create(
            title="Draft",
            content="WIP",
            author_id=None,
        )
        blog_repo.increment_views.return_value = 4

        dto = await GetBlogBySlugQuery(blog_repo, user_repo, renderer).execute(
            "draft",
            include_drafts=True,
        )

        assert dto.views == 4
        assert dto.author is None

    @pytest.mark.asyncio
    async def test_unknown_slug(self, blog_repo, user_repo, renderer):
        blog_repo.find_by_slug.return_value = None

        with pytest.raises(BlogNotFoundError):
            await GetBlogBySlugQuery(blog_repo, user_repo, renderer).execute("nope")
