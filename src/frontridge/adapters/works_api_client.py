"""HTTP client for the public works API."""

import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime

import httpx

from frontridge.domain.works import PortfolioItem
from frontridge.services.cache import TimedCache

_logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class HttpxWorksClient:
    """Fetches portfolio items for the public gallery, with a TTL cache."""

    base_url: str
    http_client: httpx.AsyncClient
    cache: TimedCache[list[PortfolioItem]] = field(default_factory=TimedCache)
    clock: Callable[[], datetime] = field(default=_utcnow)

    @classmethod
    def create(cls, base_url: str, ttl_seconds: float = 300) -> "HttpxWorksClient":
        """Create a works client with a managed httpx session."""
        return cls(
            base_url=base_url.rstrip("/"),
            http_client=httpx.AsyncClient(),
            cache=TimedCache(ttl_seconds),
        )

    async def fetch_works(self) -> list[PortfolioItem]:
        """Return all portfolio items, served from cache while fresh."""
        return await self.cache.get_or_refresh(self.clock(), self._load_works)

    async def find_work_by_slug(self, slug: str) -> PortfolioItem | None:
        """Return the portfolio item with the given slug, if any."""
        for item in await self.fetch_works():
            if item.slug == slug:
                return item
        return None

    def clear_cache(self) -> None:
        """Forget cached works so the next fetch hits the API."""
        self.cache.clear()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()

    async def _load_works(self) -> list[PortfolioItem]:
        response = await self.http_client.get(f"{self.base_url}/api/works", timeout=15)
        response.raise_for_status()
        works = response.json().get("works", [])
        _logger.info("Fetched works: count=%s", len(works))
        return [_to_portfolio_item(work) for work in works]


def slugify(name: str) -> str:
    """Build the gallery slug for a work name."""
    return _WHITESPACE.sub("-", name.lower())


def _to_portfolio_item(work: dict[str, object]) -> PortfolioItem:
    name = str(work.get("name", ""))
    return PortfolioItem(
        id=str(work.get("id", "")),
        title=name,
        description=str(work.get("description") or ""),
        image=str(work.get("titleImageUrl", "")),
        gallery=[str(url) for url in work.get("galleryImageUrls") or []],
        slug=slugify(name),
    )
