"""
Aggregation Settings for the Finyx dashboard.

Environment variables use the AGGREGATION_ prefix:
    AGGREGATION_RECENT_LIMIT=5
    AGGREGATION_TREND_MONTHS=6
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AggregationSettings(BaseSettings):
    """Tunable sizes of the dashboard's derived views."""

    model_config = SettingsConfigDict(
        env_prefix="AGGREGATION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    recent_limit: int = Field(
        default=5,
        ge=0,
        description="Number of transactions in the recent window",
    )
    trend_months: int = Field(
        default=6,
        ge=1,
        le=36,
        description="Number of months shown in the monthly evolution chart",
    )


@lru_cache
def get_aggregation_settings() -> AggregationSettings:
    """Get cached aggregation settings instance."""
    return AggregationSettings()


aggregation_settings = get_aggregation_settings()
