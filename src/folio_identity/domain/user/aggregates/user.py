"""User aggregate: the portfolio owner's identity and public profile."""

from datetime import datetime
from typing import Mapping, Optional, Union
from uuid import UUID, uuid4

from folio.domain.shared.exceptions import ValidationError
from folio.domain.shared.time import utc_now
from folio_identity.domain.user.value_objects import UserRole
from folio_identity.domain.user.value_objects.email import Email


class User:
    """
    User aggregate root.

    Holds identity (email, role) together with the public profile shown on
    the portfolio (name, title, bio, avatar, social links). Credentials are
    stored separately and never pass through this object.
    """

    def __init__(  # NOQA: PLR0913
        self,
        email: Union[str, Email],
        name: str,
        title: str = "",
        bio: str = "",
        avatar: str = "",
        social_links: Optional[Mapping[str, str]] = None,
        role: Union[str, UserRole] = UserRole.ADMIN,
        id: UUID | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
    ):
        self._email = email if isinstance(email, Email) else Email(email)
        self._name = self._clean_name(name)
        self._title = title or ""
        self._bio = bio or ""
        self._avatar = avatar or ""
        self._social_links = self._clean_social_links(social_links or {})
        self._id = id or uuid4()
        self._role = role if isinstance(role, UserRole) else UserRole(role)
        self._created_at = created_at or utc_now()
        self._updated_at = updated_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def email(self) -> str:
        return self._email.value

    @property
    def name(self) -> str:
        return self._name

    @property
    def title(self) -> str:
        return self._title

    @property
    def bio(self) -> str:
        return self._bio

    @property
    def avatar(self) -> str:
        return self._avatar

    @property
    def social_links(self) -> dict[str, str]:
        return dict(self._social_links)

    @property
    def role(self) -> UserRole:
        return self._role

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def update_profile(
        self,
        name: Optional[str] = None,
        title: Optional[str] = None,
        bio: Optional[str] = None,
        social_links: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Apply a partial profile update.

        Empty values are ignored so a form that submits blank fields does not
        wipe the stored profile. Social links are merged key by key.
        """
        if name:
            self._name = self._clean_name(name)
        if title:
            self._title = title
        if bio:
            self._bio = bio
        if social_links:
            merged = dict(self._social_links)
            merged.update(self._clean_social_links(social_links))
            self._social_links = merged
        self._updated_at = utc_now()

    def set_avatar(self, path: str) -> None:
        if not path:
            msg = "Avatar path cannot be empty"
            raise ValidationError(msg)
        self._avatar = path
        self._updated_at = utc_now()

    @staticmethod
    def _clean_name(name: str) -> str:
        cleaned = (name or "").strip()
        if not cleaned:
            msg = "Name is required"
            raise ValidationError(msg, details={"field": "name"})
        return cleaned

    @staticmethod
    def _clean_social_links(links: Mapping[str, str]) -> dict[str, str]:
        cleaned: dict[str, str] = {}
        for key, value in links.items():
            if not isinstance(key, str) or not isinstance(value, str):
                msg = "Social links must map names to URL strings"
                raise ValidationError(msg, details={"field": "social_links"})
            cleaned[key] = value.strip()
        return cleaned

    @classmethod
    def create(
        cls,
        name: str,
        email: Union[str, Email],
        role: UserRole = UserRole.ADMIN,
    ) -> "User":
        return cls(email=email, name=name, role=role)

    @classmethod
    def reconstitute(  # NOQA: PLR0913
        cls,
        id: UUID,
        email: Union[str, Email],
        name: str,
        title: str,
        bio: str,
        avatar: str,
        social_links: Mapping[str, str],
        role: Union[str, UserRole],
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            email=email,
            name=name,
            title=title,
            bio=bio,
            avatar=avatar,
            social_links=social_links,
            role=role,
            created_at=created_at,
            updated_at=updated_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email.value})"
