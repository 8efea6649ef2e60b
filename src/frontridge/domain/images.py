"""Models for uploaded images."""

from pydantic import BaseModel


class UploadedImage(BaseModel):
    """Result returned by the object storage provider."""

    url: str
    public_id: str
    byte_size: int
    format: str
    width: int | None = None
    height: int | None = None
