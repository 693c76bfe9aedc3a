"""Image storage on the local filesystem."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles
import aiofiles.os

from folio.application.ports.media import ImageStorage

logger = logging.getLogger(__name__)


class LocalImageStorage(ImageStorage):
    """Writes uploads into a single directory served at ``/uploads``."""

    def __init__(self, upload_dir: Path | str):
        self._upload_dir = Path(upload_dir)

    async def save(self, filename: str, data: bytes) -> None:
        file_path = self._resolve(filename)
        await aiofiles.os.makedirs(self._upload_dir, exist_ok=True)

        async with aiofiles.open(file_path, "wb") as f:
            await f.write(data)

        logger.debug("Wrote %d bytes to %s", len(data), file_path)

    def _resolve(self, filename: str) -> Path:
        if not filename or Path(filename).name != filename or filename in {".", ".."}:
            msg = f"Invalid upload file name: {filename!r}"
            raise ValueError(msg)
        return self._upload_dir / filename
