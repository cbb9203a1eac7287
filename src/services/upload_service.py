"""Image upload intake and storage."""

import logging
import secrets
import time
from dataclasses import dataclass
from pathlib import Path

from fastapi import UploadFile

from src.exceptions import ValidationError

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/png", "image/gif"})

CHUNK_SIZE = 64 * 1024


@dataclass(frozen=True)
class StoredFile:
    """Result of a successful upload."""

    filename: str
    path: str


def generate_storage_name(original_name: str | None) -> str:
    """Build a collision-resistant name: ``<epoch ms>-<random><original extension>``."""
    extension = Path(original_name or "").suffix
    return f"{int(time.time() * 1000)}-{secrets.randbelow(10**9)}{extension}"


class UploadService:
    """Validates and stores single image uploads."""

    def __init__(self, upload_dir: str | Path, max_bytes: int):
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def _read_limited(self, upload: UploadFile) -> bytes:
        """Read the upload body, stopping as soon as it exceeds the size limit."""
        chunks = []
        total = 0
        while chunk := upload.file.read(CHUNK_SIZE):
            total += len(chunk)
            if total > self.max_bytes:
                raise ValidationError(
                    f"File too large. Maximum size is {self.max_bytes // (1024 * 1024)} MB."
                )
            chunks.append(chunk)
        return b"".join(chunks)

    def save(self, upload: UploadFile | None) -> StoredFile:
        """Validate an uploaded image and write it to the upload directory.

        Raises:
            ValidationError: no file, disallowed content type, or file too large.
        """
        if upload is None or not upload.filename:
            raise ValidationError("No file selected.")

        if upload.content_type not in ALLOWED_CONTENT_TYPES:
            raise ValidationError("Invalid file type. Only JPEG, PNG, or GIF images are allowed.")

        content = self._read_limited(upload)

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        filename = generate_storage_name(upload.filename)
        destination = self.upload_dir / filename
        destination.write_bytes(content)

        logger.info(f"Stored upload {upload.filename!r} as {destination} ({len(content)} bytes)")
        return StoredFile(filename=filename, path=str(destination))
