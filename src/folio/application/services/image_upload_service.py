"""Validate and store uploaded images."""

from __future__ import annotations

import logging
import secrets
import time
from pathlib import PurePath
from typing import Optional

from folio.application.ports.media import ImageStorage, ImageUpload
from folio.domain.shared.exceptions import ErrorCode, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MAX_BYTES = 5 * 1024 * 1024

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})
ALLOWED_CONTENT_TYPES = frozenset(
    {"image/jpeg", "image/jpg", "image/png", "image/gif", "image/webp"},
)


class ImageUploadService:
    """
    Gatekeeper between multipart uploads and the image storage.

    Accepts jpeg, png, gif and webp files up to ``max_bytes``. Stored files
    are named ``<field>-<unix-ms>-<random><ext>`` so two uploads never
    collide, and are addressed publicly as ``<url_prefix>/<filename>``.
    """

    def __init__(
        self,
        storage: ImageStorage,
        max_bytes: int = DEFAULT_MAX_BYTES,
        url_prefix: str = "/uploads",
    ):
        self._storage = storage
        self._max_bytes = max_bytes
        self._url_prefix = url_prefix.rstrip("/")

    @property
    def max_bytes(self) -> int:
        return self._max_bytes

    def validate(self, upload: Optional[ImageUpload]) -> ImageUpload:
        """Reject missing, empty, oversized or non-image uploads.

        Parameters
        ----------
        upload
            The received file, or None when the form field was absent

        Returns
        -------
        The same upload, for chaining

        Raises
        ------
        ValidationError
            With code INVALID_UPLOAD describing the first problem found
        """
        if upload is None or not upload.filename:
            msg = "Please upload an image file"
            raise ValidationError(msg, code=ErrorCode.INVALID_UPLOAD)

        if upload.size == 0:
            msg = "Uploaded file is empty"
            raise ValidationError(msg, code=ErrorCode.INVALID_UPLOAD)

        extension = self._extension_of(upload.filename)
        content_type = (upload.content_type or "").lower()
        if extension not in ALLOWED_IMAGE_EXTENSIONS or (
            content_type and content_type not in ALLOWED_CONTENT_TYPES
        ):
            msg = "Only image files are allowed (jpeg, jpg, png, gif, webp)"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_UPLOAD,
                details={"filename": upload.filename, "content_type": content_type},
            )

        if upload.size > self._max_bytes:
            limit_mb = self._max_bytes / (1024 * 1024)
            msg = f"File too large. Maximum size is {limit_mb:g} MB"
            raise ValidationError(
                msg,
                code=ErrorCode.INVALID_UPLOAD,
                details={"size": upload.size, "max_bytes": self._max_bytes},
            )

        return upload

    async def store(self, field: str, upload: Optional[ImageUpload]) -> str:
        """Validate, write and return the public path of the stored image."""
        upload = self.validate(upload)
        filename = self.generate_filename(field, upload.filename)

        await self._storage.save(filename, upload.data)
        logger.info("Stored %s upload as %s (%d bytes)", field, filename, upload.size)
        return f"{self._url_prefix}/{filename}"

    @staticmethod
    def generate_filename(field: str, original_name: str) -> str:
        timestamp_ms = int(time.time() * 1000)
        suffix = secrets.randbelow(10**9)
        extension = ImageUploadService._extension_of(original_name)
        return f"{field}-{timestamp_ms}-{suffix}{extension}"

    @staticmethod
    def _extension_of(filename: str) -> str:
        return PurePath(filename).suffix.lower()
