"""Image ingestion service."""

import logging
from dataclasses import dataclass
from typing import Protocol

from frontridge.domain.errors import ConfigurationError, ValidationError
from frontridge.domain.images import UploadedImage

_logger = logging.getLogger(__name__)

ALLOWED_FORMATS = (
    "jpg",
    "jpeg",
    "png",
    "gif",
    "webp",
    "bmp",
    "tiff",
    "svg",
    "ico",
    "heic",
    "heif",
)

_SUBTYPE_ALIASES = {
    "pjpeg": "jpeg",
    "tif": "tiff",
    "svg+xml": "svg",
    "x-icon": "ico",
    "vnd.microsoft.icon": "ico",
    "x-ms-bmp": "bmp",
}


class ImageStorageClient(Protocol):
    """Interface for the external image object store."""

    async def upload(
        self, data: bytes, *, filename: str, mime_type: str, folder: str
    ) -> UploadedImage:
        """Store image bytes under a folder and return the hosted image."""


@dataclass
class ImageUploadService:
    """Validates uploads before handing them to object storage."""

    client: ImageStorageClient | None
    max_bytes: int
    default_folder: str = "uploads"

    async def upload(
        self,
        data: bytes,
        *,
        mime_type: str | None,
        filename: str | None,
        folder: str | None = None,
    ) -> UploadedImage:
        """Validate an image and upload it.

        Raises ``ConfigurationError`` when storage isn't configured and
        ``ValidationError`` for oversize or unsupported files. In both cases
        the provider is never contacted.
        """
        if self.client is None:
            raise ConfigurationError(
                "Image storage is not configured. Set CLOUDINARY_CLOUD_NAME, "
                "CLOUDINARY_API_KEY and CLOUDINARY_API_SECRET."
            )
        if not data:
            raise ValidationError("File is required")
        if len(data) > self.max_bytes:
            raise ValidationError(
                f"File is too large. Maximum size is {_format_size(self.max_bytes)}"
            )
        image_format = resolve_image_format(mime_type)
        target_folder = (folder or "").strip() or self.default_folder
        _logger.info(
            "Uploading image: format=%s bytes=%s folder=%s",
            image_format,
            len(data),
            target_folder,
        )
        return await self.client.upload(
            data,
            filename=filename or f"upload.{image_format}",
            mime_type=mime_type or "",
            folder=target_folder,
        )


def resolve_image_format(mime_type: str | None) -> str:
    """Map an image MIME type onto an allowed format name."""
    normalized = (mime_type or "").split(";", maxsplit=1)[0].strip().lower()
    if normalized.startswith("image/"):
        subtype = normalized.removeprefix("image/")
        image_format = _SUBTYPE_ALIASES.get(subtype, subtype)
        if image_format in ALLOWED_FORMATS:
            return image_format
    raise ValidationError(
        f"Invalid image format. Allowed formats: {', '.join(ALLOWED_FORMATS)}"
    )


def _format_size(size: int) -> str:
    megabytes = size / (1024 * 1024)
    if megabytes >= 1:
        return f"{megabytes:g}MB"
    return f"{size} bytes"
