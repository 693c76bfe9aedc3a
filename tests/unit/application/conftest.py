"""Shared fixtures for application-layer unit tests."""

from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from folio.application.ports.media import ImageStorage, ImageUpload
from folio.application.services import ImageUploadService
from folio_identity import UserContext

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class InMemoryImageStorage(ImageStorage):
    """Keeps stored files in a dict."""

    def __init__(self):
        self.files: dict[str, bytes] = {}

    async def save(self, filename: str, data: bytes) -> None:
        self.files[filename] = data


@pytest.fixture
def current_user() -> UserContext:
    return UserContext(user_id=uuid4(), email="ada@example.com")


@pytest.fixture
def blog_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_slug.return_value = None
    return repo


@pytest.fixture
def project_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def user_repo() -> AsyncMock:
    repo = AsyncMock()
    repo.find_by_ids.return_value = {}
    repo.find_by_id.return_value = None
    return repo


@pytest.fixture
def image_storage() -> InMemoryImageStorage:
    return InMemoryImageStorage()


@pytest.fixture
def upload_service(image_storage) -> ImageUploadService:
    return ImageUploadService(storage=image_storage, max_bytes=1024)


@pytest.fixture
def png_upload() -> ImageUpload:
    return ImageUpload(filename="photo.PNG", data=PNG_BYTES, content_type="image/png")
