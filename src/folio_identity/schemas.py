"""Data passed between the identity services and the API layer."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID

ACCESS_TOKEN_TYPE = "access"


@dataclass(frozen=True)
class TokenPayload:
    """
    Claims of a verified bearer token.

    ``user_id`` comes from the ``sub`` claim. ``issued_at`` is None for
    tokens minted without an ``iat`` claim.
    """

    user_id: UUID
    email: str
    exp: datetime
    issued_at: Optional[datetime] = None
    token_type: str = ACCESS_TOKEN_TYPE

    def is_access_token(self) -> bool:
        return self.token_type == ACCESS_TOKEN_TYPE
