"""Email address value object."""

import re
from dataclasses import dataclass

from folio_identity.domain.user.exceptions import InvalidEmailError

# local@domain.tld, deliberately loose; deliverability is not checked
EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")
MAX_EMAIL_LENGTH = 254


@dataclass(frozen=True)
class Email:
    """
    A syntactically valid, lowercased email address.

    Accounts are looked up by this value, so ``Ada@Example.com`` and
    ``ada@example.com `` are the same login.
    """

    value: str

    def __post_init__(self) -> None:
        normalized = (self.value or "").strip().lower()
        if not normalized:
            msg = "Email is required"
            raise InvalidEmailError(msg)
        if len(normalized) > MAX_EMAIL_LENGTH or not EMAIL_PATTERN.match(normalized):
            msg = "Please provide a valid email"
            raise InvalidEmailError(msg)
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
