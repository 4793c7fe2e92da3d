"""Startup check of the environment variables the store depends on."""

from dataclasses import dataclass, field
from typing import List

import structlog

from .config import Settings

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EnvironmentVariable:
    name: str
    value: str
    required: bool
    description: str


@dataclass(frozen=True)
class EnvironmentStatus:
    """Result of checking the configured environment variables."""

    is_valid: bool
    missing: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)


REQUIRED_STORE_VARIABLES = ["SUPABASE_URL", "SUPABASE_ANON_KEY"]


def _variables(settings: Settings) -> List[EnvironmentVariable]:
    return [
        EnvironmentVariable(
            name="SUPABASE_URL",
            value=settings.supabase_url,
            required=True,
            description="Supabase project URL",
        ),
        EnvironmentVariable(
            name="SUPABASE_ANON_KEY",
            value=settings.supabase_anon_key,
            required=True,
            description="Supabase anonymous key",
        ),
        EnvironmentVariable(
            name="DATABASE_URL",
            value=settings.database_url,
            required=False,
            description="PostgreSQL connection URL (optional when using Supabase)",
        ),
        EnvironmentVariable(
            name="SUPABASE_SERVICE_ROLE_KEY",
            value=settings.supabase_service_role_key,
            required=False,
            description="Supabase service role key (administrative operations)",
        ),
    ]


def check_environment(settings: Settings) -> EnvironmentStatus:
    """
    Check which store variables are configured.

    Required variables that are blank are reported as missing, optional
    ones as warnings. With the postgres backend the database URL becomes
    the required variable instead of the Supabase pair.
    """
    missing: List[str] = []
    warnings: List[str] = []

    for var in _variables(settings):
        required = var.required
        if settings.store_backend == "postgres":
            required = var.name == "DATABASE_URL"

        if not var.value or not var.value.strip():
            entry = f"{var.name}: {var.description}"
            if required:
                missing.append(entry)
            else:
                warnings.append(entry)

    return EnvironmentStatus(
        is_valid=not missing,
        missing=missing,
        warnings=warnings,
    )


def log_environment_status(settings: Settings) -> EnvironmentStatus:
    """Check the environment and log the outcome."""
    status = check_environment(settings)

    if status.is_valid:
        logger.info("environment_configured", backend=settings.store_backend)
    else:
        logger.error(
            "environment_missing_variables",
            backend=settings.store_backend,
            missing=status.missing,
        )

    if status.warnings:
        logger.warning("environment_optional_variables_unset", warnings=status.warnings)

    return status
