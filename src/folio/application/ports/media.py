"""Media port for storing uploaded images.

The application layer validates and names uploads; where the bytes end up
(local disk, object storage) is decided by the adapter.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class ImageUpload:
    """An uploaded file as received from the client."""

    filename: str
    data: bytes
    content_type: Optional[str] = None

    @property
    def size(self) -> int:
        return len(self.data)


class ImageStorage(ABC):
    """Persist image bytes under a generated file name."""

    @abstractmethod
    async def save(self, filename: str, data: bytes) -> None:
        """Write the bytes. ``filename`` is a bare name without directories."""
