"""Infrastructure adapters: remote store implementations."""

from finyx.core.config import Settings

from .clients import HttpSupabaseStore
from .repositories import SqlAlchemyStore


def build_store(settings: Settings):
    """Build the remote store selected by settings.store_backend."""
    if settings.store_backend == "postgres":
        return SqlAlchemyStore.from_url(settings.database_url)
    return HttpSupabaseStore(
        base_url=settings.supabase_url,
        api_key=settings.supabase_anon_key,
        timeout=settings.store_timeout,
    )


__all__ = [
    "HttpSupabaseStore",
    "SqlAlchemyStore",
    "build_store",
]
