"""Admin session endpoints and the auth gate dependency."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Request, Response

from frontridge.api.models import LoginRequest  # noqa: TC001
from frontridge.domain.errors import NotAuthenticatedError, ValidationError
from frontridge.services.auth import SESSION_COOKIE_NAME

if TYPE_CHECKING:
    from frontridge.containers import AppContainer

router = APIRouter(prefix="/api/admin", tags=["admin"])


async def require_admin(request: Request) -> None:
    """Ensure the request carries a valid admin session cookie."""
    container: AppContainer = request.app.state.container
    if not container.auth_service.is_authenticated(request.cookies):
        raise NotAuthenticatedError


@router.post("/login")
async def login(
    payload: LoginRequest, request: Request, response: Response
) -> dict[str, bool]:
    """Exchange the admin password for a session cookie."""
    if not payload.password:
        raise ValidationError("Password is required")
    container: AppContainer = request.app.state.container
    session = container.auth_service.login(payload.password)
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value=session.token,
        expires=session.expires_at,
        path="/",
        httponly=True,
        samesite="lax",
        secure=container.settings.is_production,
    )
    return {"success": True}


@router.get("/session")
async def session_status(request: Request) -> dict[str, bool]:
    """Report whether the caller holds a valid session."""
    container: AppContainer = request.app.state.container
    return {"authenticated": container.auth_service.is_authenticated(request.cookies)}


@router.post("/logout")
async def logout(request: Request, response: Response) -> dict[str, bool]:
    """Clear the session cookie."""
    container: AppContainer = request.app.state.container
    response.set_cookie(
        key=SESSION_COOKIE_NAME,
        value="",
        expires=datetime.fromtimestamp(0, tz=UTC),
        path="/",
        httponly=True,
        samesite="lax",
        secure=container.settings.is_production,
    )
    return {"success": True}
