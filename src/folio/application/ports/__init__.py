"""Ports the application layer depends on, implemented in infrastructure."""

from folio.application.ports.media import ImageStorage, ImageUpload
from folio.application.ports.rendering import MarkdownRenderer

__all__ = ["ImageStorage", "ImageUpload", "MarkdownRenderer"]
