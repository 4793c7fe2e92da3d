"""Section service - accounts, goals and companies."""

from typing import Any, Callable, Generic, List, Mapping, Protocol, TypeVar

import structlog

from finyx.domain.exceptions import DomainException, InvalidRecordException
from finyx.domain.interfaces import RemoteStore

logger = structlog.get_logger(__name__)

EntityT = TypeVar("EntityT")


class NewRecord(Protocol):
    def validate(self) -> List[str]: ...

    def to_record(self) -> dict: ...


class SectionService(Generic[EntityT]):
    """
    Application service for a simple list-and-create section.

    Each auxiliary section is a table read and written as a whole,
    with no aggregation of its own.
    """

    def __init__(
        self,
        store: RemoteStore,
        entity: str,
        from_record: Callable[[Mapping[str, Any]], EntityT],
    ):
        self._store = store
        self._entity = entity
        self._from_record = from_record

    async def list(self) -> List[EntityT]:
        records = await self._store.list(self._entity)
        logger.info("section_loaded", entity=self._entity, count=len(records))
        return [self._from_record(record) for record in records]

    async def create(self, new: NewRecord) -> EntityT:
        """
        Validate and insert a record.

        Raises:
            InvalidRecordException: If validation fails
            StoreException: If the insert fails
        """
        errors = new.validate()
        if errors:
            raise InvalidRecordException(errors)

        try:
            record = await self._store.insert(self._entity, new.to_record())
        except DomainException as e:
            logger.error(
                "section_save_failed",
                entity=self._entity,
                code=e.code,
                error=e.message,
            )
            raise

        created = self._from_record(record)
        logger.info("section_record_saved", entity=self._entity)
        return created
