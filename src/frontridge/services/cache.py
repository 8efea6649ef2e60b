"""Simple cache abstractions."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class _CacheEntry(Generic[T]):
    value: T
    fetched_at: datetime


class TimedCache(Generic[T]):
    """Single-value cache that refreshes once its TTL has elapsed."""

    def __init__(self, ttl_seconds: float = 300) -> None:
        self.ttl = timedelta(seconds=ttl_seconds)
        self._entry: _CacheEntry[T] | None = None

    def get(self, now: datetime) -> T | None:
        """Return the cached value if it is still fresh."""
        entry = self._entry
        if entry is None or now - entry.fetched_at >= self.ttl:
            return None
        return entry.value

    def set(self, value: T, now: datetime) -> None:
        """Store a value fetched at ``now``."""
        self._entry = _CacheEntry(value=value, fetched_at=now)

    async def get_or_refresh(
        self, now: datetime, refresh: Callable[[], Awaitable[T]]
    ) -> T:
        """Return the fresh cached value or await ``refresh`` and cache it."""
        entry = self._entry
        if entry is not None and now - entry.fetched_at < self.ttl:
            return entry.value
        value = await refresh()
        self.set(value, now)
        return value

    def clear(self) -> None:
        """Drop the cached value."""
        self._entry = None
