"""Domain models for portfolio works."""

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from uuid import UUID


class WorkCategory(StrEnum):
    """Closed set of portfolio categories."""

    RESTAURANTS = "Restaurants"
    HEALTHCARE = "Healthcare"
    COMMERCIAL_OFFICES = "Commercial Offices"


DEFAULT_CATEGORY = WorkCategory.RESTAURANTS


@dataclass(frozen=True)
class WorkRecord:
    """A single portfolio entry as persisted in the store."""

    id: UUID
    name: str
    description: str
    category: WorkCategory
    title_image_url: str
    gallery_image_urls: list[str]
    created_at: datetime
    updated_at: datetime | None = None


@dataclass(frozen=True)
class PortfolioItem:
    """Site-facing view of a work, as consumed by the gallery pages."""

    id: str
    title: str
    description: str
    image: str
    gallery: list[str]
    slug: str
