"""Contact form endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Request

from frontridge.api.models import ContactRequest  # noqa: TC001

if TYPE_CHECKING:
    from frontridge.containers import AppContainer

router = APIRouter(prefix="/api/contact", tags=["contact"])


@router.post("")
async def submit_contact(
    payload: ContactRequest, request: Request
) -> dict[str, object]:
    """Relay a contact form submission by email."""
    container: AppContainer = request.app.state.container
    email_id = await container.contact_service.submit(
        full_name=payload.full_name,
        email=payload.email,
        message=payload.message,
        phone=payload.phone,
    )
    return {"success": True, "message": "Email sent successfully", "emailId": email_id}
