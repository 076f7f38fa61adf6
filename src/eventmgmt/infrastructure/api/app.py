"""FastAPI application factory.

Domain exceptions are translated to HTTP status codes here and nowhere
else; routes let them propagate.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from eventmgmt.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    InvalidOperationError,
    ValidationError,
)
from eventmgmt.infrastructure.api.routes import admin_router, events_router, order_router
from eventmgmt.infrastructure.config import Settings

logger = structlog.get_logger(__name__)

STATUS_BY_EXCEPTION: dict[type[Exception], int] = {
    EntityNotFoundError: 404,
    InvalidArgumentError: 400,
    InvalidOperationError: 409,
    ValidationError: 422,
}


def _handler_for(status_code: int):
    async def handle(request: Request, exc: Exception) -> JSONResponse:
        logger.info(
            "Request rejected",
            path=request.url.path,
            status=status_code,
            error=type(exc).__name__,
            detail=str(exc),
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    return handle


def create_app(settings: Settings) -> FastAPI:
    """Build the app around an explicit ``Settings`` instance."""
    app = FastAPI(title=settings.api_title)
    app.state.settings = settings

    for exc_class, status_code in STATUS_BY_EXCEPTION.items():
        app.add_exception_handler(exc_class, _handler_for(status_code))

    app.include_router(events_router)
    app.include_router(admin_router)
    app.include_router(order_router)
    return app
