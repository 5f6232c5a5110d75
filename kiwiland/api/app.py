"""FastAPI application factory."""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from kiwiland.config import AppConfig, get_config
from kiwiland.domain.errors import KiwilandError
from kiwiland.services import RailwayQueryService

from .routes import router

logger = logging.getLogger(__name__)


def create_app(
    service: Optional[RailwayQueryService] = None,
    config: Optional[AppConfig] = None,
) -> FastAPI:
    """Build the API around a query service.

    Without an explicit service, the one from the default container is
    used, which builds the configured graph now. A construction error
    therefore aborts app creation.
    """
    config = config or get_config()
    if service is None:
        from kiwiland.container import get_container

        service = get_container().resolve(RailwayQueryService)

    app = FastAPI(
        title=config.api.title,
        description="Distances, trip counts and shortest routes on the Kiwiland railroad",
        version="1.0.0",
    )
    app.state.service = service

    app.include_router(router, prefix=config.api.prefix)

    @app.exception_handler(KiwilandError)
    async def handle_domain_error(request: Request, exc: KiwilandError):
        logger.info(
            "Rejected request",
            extra={"path": request.url.path, "error": type(exc).__name__},
        )
        return JSONResponse(status_code=400, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        fields = sorted({str(err["loc"][-1]) for err in exc.errors() if err.get("loc")})
        return JSONResponse(
            status_code=400,
            content={"error": f"Invalid value for: {', '.join(fields)}"},
        )

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_error(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return JSONResponse(status_code=404, content={"error": "Not Found"})
        return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})

    return app
