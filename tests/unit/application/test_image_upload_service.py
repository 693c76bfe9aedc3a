"""Tests for ImageUploadService."""

import re

import pytest

from folio.application.ports.media import ImageUpload
from folio.application.services import ImageUploadService
from folio.domain.shared.exceptions import ErrorCode, ValidationError


class TestValidate:
    def test_accepts_image(self, upload_service, png_upload):
        assert upload_service.validate(png_upload) is png_upload

    @pytest.mark.parametrize(
        ("upload", "message"),
        [
            (None, "Please upload an image file"),
            (ImageUpload(filename="", data=b"x"), "Please upload an image file"),
            (ImageUpload(filename="a.png", data=b""), "Uploaded file is empty"),
            (
                ImageUpload(filename="notes.txt", data=b"x", content_type="text/plain"),
                "Only image files are allowed",
            ),
            (
                ImageUpload(filename="a.png", data=b"x", content_type="application/pdf"),
                "Only image files are allowed",
            ),
            (ImageUpload(filename="a.png", data=b"x" * 1025), "File too large"),
        ],
    )
    def test_rejects(self, upload_service, upload, message: str):
        with pytest.raises(ValidationError, match=message) as exc_info:
            upload_service.validate(upload)

        assert exc_info.value.code == ErrorCode.INVALID_UPLOAD

    def test_size_message_in_megabytes(self, image_storage):
        service = ImageUploadService(storage=image_storage, max_bytes=5 * 1024 * 1024)
        upload = ImageUpload(filename="a.jpg", data=b"x" * (5 * 1024 * 1024 + 1))

        with pytest.raises(ValidationError, match="Maximum size is 5 MB"):
            service.validate(upload)


class TestStore:
    @pytest.mark.asyncio
    async def test_store_returns_public_path(self, upload_service, image_storage):
        upload = ImageUpload(filename="Me.JPEG", data=b"jpeg", content_type="image/jpeg")

        path = await upload_service.store("avatar", upload)

        assert re.fullmatch(r"/uploads/avatar-\d+-\d+\.jpeg", path)
        assert path.rsplit("/", 1)[-1] in image_storage.files

    def test_generated_names_differ(self):
        first = ImageUploadService.generate_filename("cover", "a.png")
        second = ImageUploadService.generate_filename("cover", "a.png")

        assert first != second
