"""Repository implementations."""

from .sql_store import SqlAlchemyStore

__all__ = [
    "SqlAlchemyStore",
]
