"""Request models for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Admin login payload."""

    password: str | None = None


class WorkPayload(BaseModel):
    """Create or update payload for a work.

    Every field is optional here; required fields and patch rules are enforced
    by the works service.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    description: str | None = None
    category: str | None = None
    title_image_url: str | None = Field(default=None, alias="titleImageUrl")
    gallery_image_urls: list[str | None] | None = Field(
        default=None, alias="galleryImageUrls"
    )


class ContactRequest(BaseModel):
    """Contact form payload."""

    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    phone: str | None = None
    email: str | None = None
    message: str | None = None
