from folio.application.services.image_upload_service import (
    ALLOWED_IMAGE_EXTENSIONS,
    ImageUploadService,
)

__all__ = ["ALLOWED_IMAGE_EXTENSIONS", "ImageUploadService"]
