"""
Finyx - Main Application Entry Point

A personal-finance dashboard service: records income and expense
transactions and serves month summaries, recent activity and charts.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse

from finyx import __version__
from finyx.core.config import settings
from finyx.core.dependencies import build_context
from finyx.core.environment import log_environment_status
from finyx.core.logging import setup_logging
from finyx.core.metrics import get_metrics, get_metrics_content_type
from finyx.presentation.api import api_router
from finyx.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging and report missing configuration
    - Build the store and the dashboard session
    - Close the store on shutdown
    """
    setup_logging(settings.log_level, settings.log_format)
    log_environment_status(settings)

    context = build_context(settings)
    app.state.context = context

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        store_backend=settings.store_backend,
    )

    yield

    await context.store.close()
    logger.info("application_stopped")


app = FastAPI(
    title="Finyx",
    description="Personal finance dashboard service",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(LoggingMiddleware)
app.add_middleware(RequestContextMiddleware)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    if not settings.metrics_enabled:
        return Response(status_code=404)
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


@app.get("/", include_in_schema=False)
async def root():
    """Redirect to API documentation."""

    return RedirectResponse(url="/docs")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("finyx.main:app", host=settings.host, port=settings.port)
