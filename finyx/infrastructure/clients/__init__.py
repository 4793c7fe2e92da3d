"""External API client implementations."""

from .supabase_client import HttpSupabaseStore

__all__ = [
    "HttpSupabaseStore",
]
