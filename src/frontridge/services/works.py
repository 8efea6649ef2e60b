"""Services for managing portfolio works."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from frontridge.domain.errors import NotFoundError, ValidationError
from frontridge.domain.works import DEFAULT_CATEGORY, WorkCategory, WorkRecord

_logger = logging.getLogger(__name__)


class WorkRepository(Protocol):
    """Persistence interface for portfolio works."""

    def list_works(self) -> list[WorkRecord]:
        """Return all works, newest first."""

    def insert_work(self, fields: dict[str, object]) -> WorkRecord:
        """Insert a work and return it with its store-assigned id."""

    def update_work(
        self, work_id: UUID, fields: dict[str, object]
    ) -> WorkRecord | None:
        """Apply fields to a work and return it, or None when it doesn't exist."""

    def delete_work(self, work_id: UUID) -> bool:
        """Delete a work and return whether a row was removed."""


@dataclass
class WorksService:
    """Application service for works CRUD."""

    repository: WorkRepository

    def list_works(self) -> list[WorkRecord]:
        """Return all works, newest first."""
        works = self.repository.list_works()
        return sorted(works, key=lambda work: work.created_at, reverse=True)

    def create_work(  # noqa: PLR0913
        self,
        *,
        name: str | None,
        title_image_url: str | None,
        description: str | None = None,
        category: str | None = None,
        gallery_image_urls: Sequence[str | None] | None = None,
    ) -> WorkRecord:
        """Validate and insert a new work."""
        cleaned_name = _clean(name)
        cleaned_title_image = _clean(title_image_url)
        if not cleaned_name or not cleaned_title_image:
            raise ValidationError("Missing required fields")
        fields: dict[str, object] = {
            "name": cleaned_name,
            "description": _clean(description),
            "category": _parse_category(category) or DEFAULT_CATEGORY,
            "title_image_url": cleaned_title_image,
            "gallery_image_urls": _clean_gallery(gallery_image_urls or []),
            "created_at": datetime.now(tz=UTC),
        }
        work = self.repository.insert_work(fields)
        _logger.info("Work created: id=%s", work.id)
        return work

    def update_work(  # noqa: PLR0913
        self,
        work_id: str,
        *,
        name: str | None = None,
        description: str | None = None,
        category: str | None = None,
        title_image_url: str | None = None,
        gallery_image_urls: Sequence[str | None] | None = None,
    ) -> WorkRecord:
        """Apply a partial update to an existing work.

        Only string fields that are non-empty after trimming are applied. A
        provided gallery list replaces the stored one, even when empty.
        """
        parsed_id = parse_work_id(work_id)
        fields: dict[str, object] = {}
        for key, value in (
            ("name", name),
            ("description", description),
            ("title_image_url", title_image_url),
        ):
            cleaned = _clean(value)
            if cleaned:
                fields[key] = cleaned
        parsed_category = _parse_category(category)
        if parsed_category:
            fields["category"] = parsed_category
        if gallery_image_urls is not None:
            fields["gallery_image_urls"] = _clean_gallery(gallery_image_urls)
        if not fields:
            raise ValidationError("No valid fields provided")

        fields["updated_at"] = datetime.now(tz=UTC)
        work = self.repository.update_work(parsed_id, fields)
        if work is None:
            raise NotFoundError("Work not found")
        _logger.info("Work updated: id=%s fields=%s", parsed_id, sorted(fields))
        return work

    def delete_work(self, work_id: str) -> None:
        """Permanently delete a work."""
        parsed_id = parse_work_id(work_id)
        if not self.repository.delete_work(parsed_id):
            raise NotFoundError("Work not found")
        _logger.info("Work deleted: id=%s", parsed_id)


def parse_work_id(raw: str) -> UUID:
    """Parse a store identifier, raising ``ValidationError`` when malformed."""
    try:
        return UUID(raw)
    except (TypeError, ValueError) as exc:
        raise ValidationError("Invalid work id") from exc


def serialize_work(work: WorkRecord) -> dict[str, object]:
    """Return the public view of a work."""
    return {
        "id": str(work.id),
        "name": work.name,
        "description": work.description,
        "category": work.category.value,
        "titleImageUrl": work.title_image_url,
        "galleryImageUrls": list(work.gallery_image_urls),
        "createdAt": work.created_at.isoformat(),
        "updatedAt": work.updated_at.isoformat() if work.updated_at else None,
    }


def _clean(value: str | None) -> str:
    if not isinstance(value, str):
        return ""
    return value.strip()


def _clean_gallery(urls: Sequence[str | None]) -> list[str]:
    return [cleaned for cleaned in (_clean(url) for url in urls) if cleaned]


def _parse_category(raw: str | None) -> WorkCategory | None:
    cleaned = _clean(raw)
    if not cleaned:
        return None
    try:
        return WorkCategory(cleaned)
    except ValueError as exc:
        allowed = ", ".join(category.value for category in WorkCategory)
        raise ValidationError(f"Invalid category. Allowed: {allowed}") from exc
