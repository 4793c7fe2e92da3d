"""Configuration status endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from finyx.core.config import Settings
from finyx.core.dependencies import get_app_settings
from finyx.core.environment import check_environment
from finyx.presentation.schemas import EnvironmentStatusSchema

config_router = APIRouter(prefix="/config")


@config_router.get(
    "/status",
    response_model=EnvironmentStatusSchema,
    summary="Configuration Status",
    description="Which store environment variables are missing or unset.",
)
async def get_config_status(
    app_settings: Annotated[Settings, Depends(get_app_settings)],
) -> EnvironmentStatusSchema:
    status = check_environment(app_settings)
    return EnvironmentStatusSchema(
        backend=app_settings.store_backend,
        is_valid=status.is_valid,
        missing=status.missing,
        warnings=status.warnings,
    )
