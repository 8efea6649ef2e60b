"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from frontridge.api.admin import router as admin_router
from frontridge.api.contact import router as contact_router
from frontridge.api.images import router as images_router
from frontridge.api.works import router as works_router
from frontridge.app_logging import configure_logging
from frontridge.containers import AppContainer
from frontridge.domain.errors import FrontRidgeError


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)
    app.include_router(works_router)
    app.include_router(images_router)
    app.include_router(contact_router)

    @app.exception_handler(FrontRidgeError)
    async def handle_app_error(request: Request, exc: FrontRidgeError) -> JSONResponse:
        if exc.status_code >= 500:  # noqa: PLR2004
            logger.exception(
                "%s %s failed",
                request.method,
                request.url.path,
                exc_info=exc,
            )
        else:
            logger.info(
                "%s %s rejected: %s %s",
                request.method,
                request.url.path,
                exc.status_code,
                exc.public_message,
            )
        return JSONResponse(
            status_code=exc.status_code, content={"error": exc.public_message}
        )

    @app.exception_handler(RequestValidationError)
    async def handle_invalid_body(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "%s %s rejected: invalid body", request.method, request.url.path
        )
        return JSONResponse(status_code=400, content={"error": "Invalid request body"})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
