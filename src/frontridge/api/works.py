"""Works API endpoints.

The store client is synchronous, so these handlers run in the threadpool.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from frontridge.api.admin import require_admin
from frontridge.api.models import WorkPayload  # noqa: TC001
from frontridge.services.works import serialize_work

if TYPE_CHECKING:
    from frontridge.containers import AppContainer

router = APIRouter(prefix="/api/works", tags=["works"])


@router.get("")
def list_works(request: Request) -> dict[str, object]:
    """Return every work, newest first."""
    container: AppContainer = request.app.state.container
    works = container.works_service.list_works()
    return {"works": [serialize_work(work) for work in works]}


@router.post("", dependencies=[Depends(require_admin)])
def create_work(payload: WorkPayload, request: Request) -> dict[str, object]:
    """Create a work from already uploaded image URLs."""
    container: AppContainer = request.app.state.container
    work = container.works_service.create_work(
        name=payload.name,
        description=payload.description,
        category=payload.category,
        title_image_url=payload.title_image_url,
        gallery_image_urls=payload.gallery_image_urls,
    )
    return {"work": serialize_work(work)}


@router.put("/{work_id}", dependencies=[Depends(require_admin)])
def update_work(
    work_id: str, payload: WorkPayload, request: Request
) -> dict[str, object]:
    """Apply a partial update to a work."""
    container: AppContainer = request.app.state.container
    work = container.works_service.update_work(
        work_id,
        name=payload.name,
        description=payload.description,
        category=payload.category,
        title_image_url=payload.title_image_url,
        gallery_image_urls=payload.gallery_image_urls,
    )
    return {"work": serialize_work(work)}


@router.delete("/{work_id}", dependencies=[Depends(require_admin)])
def delete_work(work_id: str, request: Request) -> dict[str, bool]:
    """Permanently delete a work."""
    container: AppContainer = request.app.state.container
    container.works_service.delete_work(work_id)
    return {"success": True}
