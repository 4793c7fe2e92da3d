"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""
    error: str = Field(
        ...,
        description="Error code",
        examples=["STORE_ERROR"],
    )
    title: str = Field(
        ...,
        description="Short notice title shown to the user",
        examples=["Erro no banco de dados"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
        examples=["permission denied for table transactions"],
    )
    request_id: str | None = Field(
        None,
        description="Request ID for tracing",
    )
    required_variables: list[str] | None = Field(
        None,
        description="Environment variables to set when the store is not configured",
    )
    retry_path: str | None = Field(
        None,
        description="Endpoint that retries loading the dashboard",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "STORE_NOT_CONFIGURED",
                    "title": "Banco de dados não configurado",
                    "message": "Remote store is not configured. Set: SUPABASE_URL, SUPABASE_ANON_KEY",
                    "request_id": "abc123",
                    "required_variables": ["SUPABASE_URL", "SUPABASE_ANON_KEY"],
                    "retry_path": "/v1/dashboard/reload",
                }
            ]
        }
    }
