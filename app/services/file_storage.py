"""Profile image upload pipeline: parse the multipart part, then persist it and return a reference path."""

import logging
import os
import time
import uuid
from typing import Protocol

from fastapi import UploadFile

from app.core.errors import InvalidRequestError, ServerError
from app.schemas.upload import ImageUpload

logger = logging.getLogger(__name__)

ALLOWED_IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp"})


class FileStorage(Protocol):
    def save(self, image: ImageUpload) -> str:
        """Persist image and return a stable reference path."""
        ...

    def delete(self, reference: str) -> None:
        """Remove a previously saved image; a missing file is not an error."""
        ...


async def parse_image_upload(upload: UploadFile | None, max_bytes: int) -> ImageUpload | None:
    """
    Read an optional multipart image part into an ImageUpload.

    Returns None when no file was sent (missing part or empty filename).
    Raises InvalidRequestError for non-image files or files over max_bytes.
    """
    if upload is None or not upload.filename:
        return None
    filename = os.path.basename(upload.filename)
    ext = os.path.splitext(filename)[1].lower()
    if ext not in ALLOWED_IMAGE_EXTENSIONS:
        raise InvalidRequestError(
            f"Profile image must be one of: {', '.join(sorted(ALLOWED_IMAGE_EXTENSIONS))}."
        )
    if upload.content_type and not upload.content_type.startswith("image/"):
        raise InvalidRequestError("Profile image must be an image file.")
    # Read one byte past the limit so oversize files are detected without reading them whole.
    content = await upload.read(max_bytes + 1)
    if len(content) > max_bytes:
        raise InvalidRequestError(
            f"Profile image must not exceed {max_bytes // (1024 * 1024) or 1} MB."
        )
    if not content:
        raise InvalidRequestError("Profile image is empty.")
    return ImageUpload(filename=filename, content_type=upload.content_type, content=content)


class LocalFileStorage:
    """Stores uploads on local disk under upload_dir; references are 'upload_dir/name'."""

    def __init__(self, upload_dir: str) -> None:
        self.upload_dir = upload_dir.rstrip("/") or "."

    def _generate_filename(self, original_filename: str) -> str:
        ext = os.path.splitext(original_filename)[1].lower() or ".jpg"
        return f"{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}{ext}"

    def save(self, image: ImageUpload) -> str:
        name = self._generate_filename(image.filename)
        try:
            os.makedirs(self.upload_dir, exist_ok=True)
            with open(os.path.join(self.upload_dir, name), "wb") as f:
                f.write(image.content)
        except OSError as e:
            logger.exception("Failed to store upload", extra={"upload_dir": self.upload_dir})
            raise ServerError() from e
        reference = f"{self.upload_dir}/{name}"
        logger.info("Stored upload", extra={"reference": reference, "bytes": image.size})
        return reference

    def delete(self, reference: str) -> None:
        path = os.path.join(self.upload_dir, os.path.basename(reference))
        try:
            os.remove(path)
        except FileNotFoundError:
            return
        except OSError:
            logger.warning("Failed to remove upload", extra={"reference": reference}, exc_info=True)
            return
        logger.info("Removed upload", extra={"reference": reference})
