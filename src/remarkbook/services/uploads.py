"""Profile image storage on the local filesystem.

Images are written under ``<UPLOAD_DIR>/profile-images/`` with a generated
file name and served by the static mount at ``/uploads``. The generated file
name doubles as the image's public ID and is the only handle used to delete
it later, so client-supplied names never reach the filesystem.

The stored extension is derived from the type detected in the file's own
header bytes, never from the client's filename or ``Content-Type``.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from uuid import UUID, uuid4

import aiofiles
import magic
from fastapi import UploadFile

from remarkbook.config import settings
from remarkbook.core.exceptions import StorageError, UploadError

logger = logging.getLogger(__name__)

PROFILE_IMAGE_SUBDIR = "profile-images"
UPLOADS_URL_PREFIX = "/uploads"

# Detected MIME type -> stored extension. Anything else is rejected.
ALLOWED_IMAGE_TYPES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/gif": ".gif",
    "image/webp": ".webp",
}


@dataclass(frozen=True)
class StoredImage:
    public_id: str
    url: str
    path: Path
    size: int


class ProfileImageStorage:
    """Validates and stores uploaded profile images.

    Constraints: a single file, declared as ``image/*`` and detected as PNG,
    JPEG, GIF or WebP from its content, at most ``PROFILE_IMAGE_MAX_SIZE_MB``
    megabytes.
    """

    CHUNK_SIZE = 64 * 1024

    def __init__(self, root: str | Path | None = None, max_size_mb: int | None = None):
        self.root = Path(root or settings.upload_dir)
        self.image_dir = self.root / PROFILE_IMAGE_SUBDIR
        self.max_size_mb = max_size_mb or settings.profile_image_max_size_mb
        self.max_bytes = self.max_size_mb * 1024 * 1024

    def validate_content_type(self, content_type: str | None) -> None:
        """Cheap first check on the declared type; the bytes are checked later."""
        if not content_type or not content_type.lower().startswith("image/"):
            raise UploadError("UPL_001", details={"content_type": content_type})

    def detect_image_type(self, head: bytes) -> str:
        """Return the stored extension for the image type found in ``head``.

        Raises:
            UploadError: If the bytes are not one of the allowed image types
        """
        mime_type = magic.from_buffer(head, mime=True)
        if mime_type not in ALLOWED_IMAGE_TYPES:
            raise UploadError("UPL_001", details={"detected_mime": mime_type})
        return ALLOWED_IMAGE_TYPES[mime_type]

    def path_for(self, public_id: str) -> Path:
        # Only the final path component is honoured.
        return self.image_dir / Path(public_id).name

    def url_for(self, public_id: str) -> str:
        return f"{UPLOADS_URL_PREFIX}/{PROFILE_IMAGE_SUBDIR}/{public_id}"

    async def save(self, user_id: UUID, upload: UploadFile | None) -> StoredImage:
        """Validate and write an uploaded image, returning where it was stored.

        Raises:
            UploadError: Missing or empty file, not an image, or too large
            StorageError: The file could not be written
        """
        if upload is None or not upload.filename:
            raise UploadError("UPL_003")
        self.validate_content_type(upload.content_type)

        head = await upload.read(self.CHUNK_SIZE)
        if not head:
            raise UploadError("UPL_003")
        extension = self.detect_image_type(head)

        public_id = f"profile-{user_id}-{uuid4().hex}{extension}"
        path = self.path_for(public_id)
        size = len(head)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as out:
                chunk = head
                while chunk:
                    await out.write(chunk)
                    chunk = await upload.read(self.CHUNK_SIZE)
                    size += len(chunk)
                    if size > self.max_bytes:
                        break
        except OSError as e:
            logger.error("Failed to store profile image %s: %s", public_id, e)
            await self.delete(public_id)
            raise StorageError("UPL_004", details={"public_id": public_id})

        if size > self.max_bytes:
            await self.delete(public_id)
            raise UploadError(
                "UPL_002",
                details={"max_size_mb": self.max_size_mb},
                message=f"File size too large. Maximum size is {self.max_size_mb}MB.",
            )

        logger.info("Profile image stored: %s (%d bytes)", public_id, size)
        return StoredImage(public_id=public_id, url=self.url_for(public_id), path=path, size=size)

    async def delete(self, public_id: str | None) -> bool:
        """Remove a stored image. Best-effort: failures are logged, never raised."""
        if not public_id:
            return False
        path = self.path_for(public_id)
        try:
            if path.exists():
                os.remove(path)
                logger.info("Profile image removed: %s", path.name)
                return True
            logger.debug("Profile image already gone: %s", path.name)
        except OSError as e:
            logger.warning("Failed to remove profile image %s: %s", path.name, e)
        return False
