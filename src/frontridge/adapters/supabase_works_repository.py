"""Supabase-backed works repository."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from uuid import UUID

from supabase import Client

from frontridge.domain.errors import StoreError
from frontridge.domain.works import DEFAULT_CATEGORY, WorkCategory, WorkRecord
from frontridge.services.works import WorkRepository

_COLUMNS = (
    "id, name, description, category, title_image_url, gallery_image_urls, "
    "created_at, updated_at"
)


@dataclass
class SupabaseWorksRepository(WorkRepository):
    """Supabase implementation for the works table."""

    client: Client
    table: str = "works"

    def list_works(self) -> list[WorkRecord]:
        """Return all works ordered by creation time, newest first."""
        response = _execute(
            self.client.table(self.table)
            .select(_COLUMNS)
            .order("created_at", desc=True),
            "Failed to fetch works",
        )
        return [_parse_work(row) for row in response.data or []]

    def insert_work(self, fields: dict[str, object]) -> WorkRecord:
        """Insert a work row and return it."""
        response = _execute(
            self.client.table(self.table).insert(_to_row(fields)),
            "Failed to save work",
        )
        if not response.data:
            raise StoreError("Failed to save work")
        return _parse_work(response.data[0])

    def update_work(
        self, work_id: UUID, fields: dict[str, object]
    ) -> WorkRecord | None:
        """Update a work row and return it, or None when no row matched."""
        response = _execute(
            self.client.table(self.table)
            .update(_to_row(fields))
            .eq("id", str(work_id)),
            "Failed to update work",
        )
        if not response.data:
            return None
        return _parse_work(response.data[0])

    def delete_work(self, work_id: UUID) -> bool:
        """Delete a work row and return whether one was removed."""
        response = _execute(
            self.client.table(self.table).delete().eq("id", str(work_id)),
            "Failed to delete work",
        )
        return bool(response.data)


def _execute(query, message: str):  # type: ignore[no-untyped-def]
    """Run a query, wrapping client failures as ``StoreError``."""
    try:
        return query.execute()
    except Exception as exc:
        detail = getattr(exc, "message", None) or str(exc)
        raise StoreError(detail or message) from exc


def _to_row(fields: dict[str, object]) -> dict[str, object]:
    row: dict[str, object] = {}
    for key, value in fields.items():
        if isinstance(value, datetime):
            row[key] = value.isoformat()
        elif isinstance(value, Enum):
            row[key] = value.value
        else:
            row[key] = value
    return row


def _parse_work(row: dict[str, object]) -> WorkRecord:
    """Parse a works row into a domain model."""
    updated_raw = row.get("updated_at")
    return WorkRecord(
        id=UUID(str(row["id"])),
        name=str(row.get("name", "")),
        description=str(row.get("description") or ""),
        category=_parse_category(row.get("category")),
        title_image_url=str(row.get("title_image_url", "")),
        gallery_image_urls=[
            str(url) for url in row.get("gallery_image_urls") or [] if url
        ],
        created_at=datetime.fromisoformat(str(row["created_at"])),
        updated_at=(
            datetime.fromisoformat(updated_raw)
            if isinstance(updated_raw, str) and updated_raw
            else None
        ),
    )


def _parse_category(raw: object) -> WorkCategory:
    try:
        return WorkCategory(raw)
    except ValueError:
        return DEFAULT_CATEGORY
