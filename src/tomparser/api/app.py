"""FastAPI application factory for the tabular model parser."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI

from tomparser import __version__
from tomparser.api.middleware import RequestBodyLimitMiddleware, RequestTimingMiddleware
from tomparser.api.routers import models
from tomparser.api.schemas import HealthResponse
from tomparser.settings import Settings


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    if settings is None:
        settings = Settings()

    app = FastAPI(
        title="Tabular Model Parser",
        description="Parses Power BI / Analysis Services .bim files into typed tabular models.",
        version=__version__,
    )
    app.state.settings = settings

    # Middleware
    app.add_middleware(
        RequestBodyLimitMiddleware, max_bytes=settings.max_body_mb * 1024 * 1024
    )
    app.add_middleware(RequestTimingMiddleware)

    app.include_router(models.router, prefix="/models", tags=["models"])

    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(status="ok", version=__version__)

    return app


def main() -> None:
    """Run the REST API server using settings from environment / .env file."""
    settings = Settings()

    logging.basicConfig(level=settings.log_level.upper())
    logger = logging.getLogger("tomparser.api")
    logger.info(
        "Tabular Model Parser API v%s starting (host=%s, port=%d)",
        __version__, settings.api_server_host, settings.effective_port,
    )

    uvicorn.run(
        "tomparser.api.app:create_app",
        factory=True,
        host=settings.api_server_host,
        port=settings.effective_port,
        log_level=settings.log_level.lower(),
    )
