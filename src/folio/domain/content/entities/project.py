"""Project entity."""

from datetime import datetime
from typing import Iterable, Optional
from uuid import UUID, uuid4

from folio.domain.content.entities._normalize import clean_string_list
from folio.domain.shared.exceptions import ValidationError
from folio.domain.shared.time import utc_now


class Project:
    """A portfolio project. Projects are always publicly readable."""

    MAX_TITLE_LENGTH = 300

    def __init__(  # NOQA: PLR0913
        self,
        title: str,
        description: str,
        tech_stack: Optional[Iterable[str]] = None,
        thumbnail: str = "",
        live_demo_url: str = "",
        github_url: str = "",
        featured: bool = False,
        order: int = 0,
        id: Optional[UUID] = None,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ):
        self._id = id if id is not None else uuid4()
        self._title = (title or "").strip()
        self._description = description or ""
        self._tech_stack = clean_string_list(tech_stack)
        self._thumbnail = thumbnail or ""
        self._live_demo_url = (live_demo_url or "").strip()
        self._github_url = (github_url or "").strip()
        self._featured = bool(featured)
        self._order = order
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or self._created_at
        self.validate()

    @classmethod
    def create(  # NOQA: PLR0913
        cls,
        title: str,
        description: str,
        tech_stack: Optional[Iterable[str]] = None,
        thumbnail: str = "",
        live_demo_url: str = "",
        github_url: str = "",
        featured: bool = False,
        order: int = 0,
    ) -> "Project":
        return cls(
            title=title,
            description=description,
            tech_stack=tech_stack,
            thumbnail=thumbnail,
            live_demo_url=live_demo_url,
            github_url=github_url,
            featured=featured,
            order=order,
        )

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        title: str,
        description: str,
        tech_stack: list[str],
        thumbnail: str,
        live_demo_url: str,
        github_url: str,
        featured: bool,
        order: int,
        created_at: datetime,
        updated_at: datetime,
    ) -> "Project":
        return cls(
            id=id,
            title=title,
            description=description,
            tech_stack=tech_stack,
            thumbnail=thumbnail,
            live_demo_url=live_demo_url,
            github_url=github_url,
            featured=featured,
            order=order,
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
    def description(self) -> str:
        return self._description

    @property
    def tech_stack(self) -> list[str]:
        return list(self._tech_stack)

    @property
    def thumbnail(self) -> str:
        return self._thumbnail

    @property
    def live_demo_url(self) -> str:
        return self._live_demo_url

    @property
    def github_url(self) -> str:
        return self._github_url

    @property
    def featured(self) -> bool:
        return self._featured

    @property
    def order(self) -> int:
        return self._order

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update(  # NOQA: PLR0913
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        tech_stack: Optional[Iterable[str]] = None,
        live_demo_url: Optional[str] = None,
        github_url: Optional[str] = None,
        featured: Optional[bool] = None,
        order: Optional[int] = None,
        thumbnail: Optional[str] = None,
    ) -> None:
        """Merge the given fields; ``None`` leaves a field untouched."""
        if title is not None:
            self._title = title.strip()
        if description is not None:
            self._description = description
        if tech_stack is not None:
            self._tech_stack = clean_string_list(tech_stack)
        if live_demo_url is not None:
            self._live_demo_url = live_demo_url.strip()
        if github_url is not None:
            self._github_url = github_url.strip()
        if featured is not None:
            self._featured = bool(featured)
        if order is not None:
            self._order = order
        if thumbnail is not None:
            self._thumbnail = thumbnail
        self.validate()
        self._updated_at = utc_now()

    def set_thumbnail(self, path: str) -> None:
        self._thumbnail = path
        self._updated_at = utc_now()

    def validate(self) -> None:
        if not self._title:
            msg = "Project title is required"
            raise ValidationError(msg, details={"field": "title"})
        if len(self._title) > self.MAX_TITLE_LENGTH:
            msg = f"Project title cannot exceed {self.MAX_TITLE_LENGTH} characters"
            raise ValidationError(msg, details={"field": "title"})
        if not self._description.strip():
            msg = "Project description is required"
            raise ValidationError(msg, details={"field": "description"})
        if isinstance(self._order, bool) or not isinstance(self._order, int):
            msg = "Project order must be an integer"
            raise ValidationError(msg, details={"field": "order"})

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Project):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Project(id={self._id}, title={self._title!r})"
