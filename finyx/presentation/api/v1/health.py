"""Liveness endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from finyx import __version__
from finyx.core.config import Settings
from finyx.core.dependencies import get_app_settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    service: str
    version: str
    store_backend: str


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Liveness probe. Does not contact the store.",
)
async def health_check(
    app_settings: Annotated[Settings, Depends(get_app_settings)],
) -> HealthResponse:
    return HealthResponse(
        service=app_settings.app_name,
        version=__version__,
        store_backend=app_settings.store_backend,
    )
