"""SQLAlchemy implementation of RemoteStore for a direct PostgreSQL connection."""

import asyncio
from datetime import date, datetime
from typing import Any, List

import structlog
from sqlalchemy import inspect, select
from sqlalchemy.exc import SQLAlchemyError

from finyx.core.config import settings
from finyx.core.metrics import (
    record_store_failure,
    record_store_success,
    track_store_latency,
)
from finyx.domain.exceptions import (
    StoreException,
    StoreNotConfiguredException,
    StoreTimeoutException,
)
from finyx.domain.interfaces import ORDER_COLUMNS, Record, RemoteStore
from finyx.infrastructure.database import MODELS_BY_ENTITY, DatabaseSessionManager

logger = structlog.get_logger(__name__)


class SqlAlchemyStore(RemoteStore):
    """
    PostgreSQL-backed store.

    Uses SQLAlchemy async sessions; each call runs in its own
    transactional scope.
    """

    def __init__(
        self,
        manager: DatabaseSessionManager,
        timeout: float | None = None,
    ):
        self._manager = manager
        self._timeout = timeout or settings.store_timeout

    @classmethod
    def from_url(cls, database_url: str, **engine_options) -> "SqlAlchemyStore":
        manager = DatabaseSessionManager()
        if database_url:
            manager.init(database_url, **engine_options)
        return cls(manager)

    def is_configured(self) -> bool:
        return self._manager.initialized

    async def list(self, entity: str) -> List[Record]:
        """Select every row of an entity, newest first."""
        model = self._model(entity)
        order_column = getattr(model, ORDER_COLUMNS.get(entity, "created_at"))
        stmt = select(model).order_by(order_column.desc())

        async def run() -> List[Record]:
            async with self._manager.session() as session:
                result = await session.execute(stmt)
                return [self._to_record(row) for row in result.scalars().all()]

        return await self._run("list", entity, run)

    async def insert(self, entity: str, record: Record) -> Record:
        """Insert one row and return it with its generated columns."""
        model = self._model(entity)
        columns = {attr.key for attr in inspect(model).column_attrs}
        unknown = set(record) - columns
        if unknown:
            raise StoreException(
                f"Unknown columns for {entity}: {', '.join(sorted(unknown))}",
                status_code=400,
            )

        async def run() -> Record:
            async with self._manager.session() as session:
                row = model(**record)
                session.add(row)
                await session.flush()
                await session.refresh(row)
                return self._to_record(row)

        return await self._run("insert", entity, run)

    async def close(self) -> None:
        await self._manager.close()

    async def _run(self, operation: str, entity: str, work) -> Any:
        if not self.is_configured():
            record_store_failure(operation, "not_configured")
            raise StoreNotConfiguredException(["DATABASE_URL"])

        try:
            with track_store_latency(operation):
                result = await asyncio.wait_for(work(), timeout=self._timeout)
        except asyncio.TimeoutError:
            record_store_failure(operation, "timeout")
            logger.warning("store_timeout", operation=operation, entity=entity)
            raise StoreTimeoutException()
        except SQLAlchemyError as e:
            record_store_failure(operation, "error")
            logger.error(
                "store_request_failed",
                operation=operation,
                entity=entity,
                error=str(e),
            )
            raise StoreException(f"Database error: {e.__class__.__name__}")

        record_store_success(operation)
        return result

    @staticmethod
    def _model(entity: str):
        try:
            return MODELS_BY_ENTITY[entity]
        except KeyError:
            raise StoreException(f"Unknown entity: {entity}", status_code=404)

    @staticmethod
    def _to_record(row) -> Record:
        """Convert an ORM row into the plain record shape PostgREST returns."""
        record: Record = {}
        for attr in inspect(row).mapper.column_attrs:
            value = getattr(row, attr.key)
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            record[attr.key] = value
        return record
