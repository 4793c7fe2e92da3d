"""Remote store interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

Record = Dict[str, Any]

TRANSACTIONS = "transactions"
ACCOUNTS = "accounts"
GOALS = "goals"
COMPANIES = "companies"

# Column each entity is listed by, newest first.
ORDER_COLUMNS = {
    TRANSACTIONS: "date",
    ACCOUNTS: "created_at",
    GOALS: "created_at",
    COMPANIES: "created_at",
}


class RemoteStore(ABC):
    """
    Abstract handle to the hosted relational backend.

    Implementations may talk to Supabase over HTTP, to PostgreSQL
    directly, or keep records in memory for tests.
    """

    @abstractmethod
    def is_configured(self) -> bool:
        """Whether the credentials needed to reach the store are present."""
        ...

    @abstractmethod
    async def list(self, entity: str) -> List[Record]:
        """
        Fetch every record of an entity.

        Args:
            entity: Table name, e.g. "transactions"

        Returns:
            Records ordered by the entity's order column, descending

        Raises:
            StoreNotConfiguredException: If credentials are absent
            StoreException: If the store returns an error
            StoreTimeoutException: If the request times out
        """
        ...

    @abstractmethod
    async def insert(self, entity: str, record: Record) -> Record:
        """
        Insert one record.

        Args:
            entity: Table name
            record: Column values to insert

        Returns:
            The canonical stored record, including the store-assigned
            id and created_at

        Raises:
            StoreNotConfiguredException: If credentials are absent
            StoreException: If the store rejects the insert
            StoreTimeoutException: If the request times out
        """
        ...

    async def close(self) -> None:
        """Release connections held by the store."""
        return None
