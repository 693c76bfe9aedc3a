"""Blog entity."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from folio.domain.content.entities._normalize import clean_string_list
from folio.domain.content.slug import slugify_title
from folio.domain.shared.exceptions import ValidationError
from folio.domain.shared.time import utc_now


class Blog:
    """
    A markdown blog post.

    The slug is derived from the title and only changes when the title does,
    so links to a post stay stable across edits of its body. Drafts
    (``published=False``) are hidden from anonymous readers.
    """

    MAX_TITLE_LENGTH = 300
    MAX_TAG_LENGTH = 100

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        content: str,
        excerpt: str = "",
        cover_image: str = "",
        tags: Optional[Iterable[str]] = None,
        published: bool = False,
        views: int = 0,
        author_id: Optional[UUID] = None,
        id: Optional[UUID] = None,
        slug: Optional[str] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        """
        Initialize a blog post.

        Parameters
        ----------
        title
            Post title, trimmed; drives the slug
        content
            Markdown body
        excerpt
            Short teaser shown in listings
        cover_image
            Public path of the uploaded cover image
        tags
            Free-form tags; trimmed, de-duplicated, order preserved
        published
            Whether anonymous readers can see the post
        views
            Read counter, incremented on every detail view
        author_id
            Id of the user who wrote the post
        slug
            Stored slug (only passed on reconstitution)
        """
        self._id = id if id is not None else uuid4()
        self._title = (title or "").strip()
        if not self._title:
            msg = "Blog title is required"
            raise ValidationError(msg, details={"field": "title"})
        self._slug = slug if slug is not None else slugify_title(self._title)
        self._content = content or ""
        self._excerpt = excerpt or ""
        self._cover_image = cover_image or ""
        self._tags = clean_string_list(tags)
        self._published = bool(published)
        self._views = views
        self._author_id = author_id
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self.validate()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        content: str,
        author_id: Optional[UUID],
        excerpt: str = "",
        cover_image: str = "",
        tags: Optional[Iterable[str]] = None,
        published: bool = False,
    ) -> "Blog":
        return cls(
            title=title,
            content=content,
            author_id=author_id,
            excerpt=excerpt,
            cover_image=cover_image,
            tags=tags,
            published=published,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        title: str,
        slug: str,
        content: str,
        excerpt: str,
        cover_image: str,
        tags: list[str],
        published: bool,
        views: int,
        author_id: Optional[UUID],
        created_at: datetime,
        updated_at: datetime,
    ) -> "Blog":
        return cls(
            id=id,
            title=title,
            slug=slug,
            content=content,
            excerpt=excerpt,
            cover_image=cover_image,
            tags=tags,
            published=published,
            views=views,
            author_id=author_id,
            created_at=created_at,
            updated_at=updated_at,
        )

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def title(self) -> str:
        return self._title

    @property
    def slug(self) -> str:
        return self._slug

    @property
    def content(self) -> str:
        return self._content

    @property
    def excerpt(self) -> str:
        return self._excerpt

    @property
    def cover_image(self) -> str:
        return self._cover_image

    @property
    def tags(self) -> list[str]:
        return list(self._tags)

    @property
    def published(self) -> bool:
        return self._published

    @property
    def views(self) -> int:
        return self._views

    @property
    def author_id(self) -> Optional[UUID]:
        return self._author_id

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def is_visible_to(self, include_drafts: bool) -> bool:
        return self._published or include_drafts

    def rename(self, title: str) -> bool:
        """Change the title; regenerate the slug only if the title changed.

        Returns True when the slug was regenerated.
        """
        new_title = (title or "").strip()
        if new_title == self._title:
            return False
        if not new_title:
            msg = "Blog title is required"
            raise ValidationError(msg, details={"field": "title"})
        new_slug = slugify_title(new_title)
        self._title = new_title
        self._slug = new_slug
        self._touch()
        return True

    def update(  # NOQA: PLR0913
        self,
        title: Optional[str] = None,
        content: Optional[str] = None,
        excerpt: Optional[str] = None,
        tags: Optional[Iterable[str]] = None,
        published: Optional[bool] = None,
        cover_image: Optional[str] = None,
    ) -> None:
        """Merge the given fields; ``None`` leaves a field untouched."""
        if title is not None:
            self.rename(title)
        if content is not None:
            self._content = content
        if excerpt is not None:
            self._excerpt = excerpt
        if tags is not None:
            self._tags = clean_string_list(tags)
        if published is not None:
            self._published = bool(published)
        if cover_image is not None:
            self._cover_image = cover_image
        self.validate()
        self._touch()

    def set_cover_image(self, path: str) -> None:
        self._cover_image = path
        self._touch()

    def validate(self) -> None:
        if not self._title:
            msg = "Blog title is required"
            raise ValidationError(msg, details={"field": "title"})
        if len(self._title) > self.MAX_TITLE_LENGTH:
            msg = f"Blog title cannot exceed {self.MAX_TITLE_LENGTH} characters"
            raise ValidationError(msg, details={"field": "title"})
        if not self._content.strip():
            msg = "Blog content is required"
            raise ValidationError(msg, details={"field": "content"})
        if any(len(tag) > self.MAX_TAG_LENGTH for tag in self._tags):
            msg = f"Tags cannot exceed {self.MAX_TAG_LENGTH} characters"
            raise ValidationError(msg, details={"field": "tags"})
        if self._views < 0:
            msg = "Views cannot be negative"
            raise ValidationError(msg, details={"field": "views"})

    def _touch(self) -> None:
        self._updated_at = utc_now()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Blog):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Blog(id={self._id}, slug={self._slug!r}, published={self._published})"
