"""Configuration status schema."""

from pydantic import BaseModel, ConfigDict


class EnvironmentStatusSchema(BaseModel):
    """Schema for GET /v1/config/status response."""

    model_config = ConfigDict(from_attributes=True)

    backend: str
    is_valid: bool
    missing: list[str]
    warnings: list[str]
