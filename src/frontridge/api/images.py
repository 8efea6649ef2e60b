"""Image upload endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request
from starlette.datastructures import UploadFile

from frontridge.api.admin import require_admin
from frontridge.domain.errors import ValidationError

if TYPE_CHECKING:
    from frontridge.containers import AppContainer

router = APIRouter(prefix="/api/images", tags=["images"])


@router.post("/upload", dependencies=[Depends(require_admin)])
async def upload_image(request: Request) -> dict[str, object]:
    """Upload a multipart ``file`` to object storage.

    The body is only read after the auth gate has passed. At most one byte
    past the configured limit is buffered, and the form is closed on exit.
    """
    container: AppContainer = request.app.state.container
    service = container.image_service
    async with request.form() as form:
        upload = form.get("file")
        if not isinstance(upload, UploadFile):
            raise ValidationError("File is required")
        folder = form.get("folder")
        data = await upload.read(service.max_bytes + 1)
        image = await service.upload(
            data,
            mime_type=upload.content_type,
            filename=upload.filename,
            folder=folder if isinstance(folder, str) else None,
        )
    return {
        "url": image.url,
        "publicId": image.public_id,
        "bytes": image.byte_size,
        "format": image.format,
        "width": image.width,
        "height": image.height,
    }
