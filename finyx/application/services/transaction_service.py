"""Transaction service - reads and records transactions in the remote store."""

from typing import List

import structlog

from finyx.core.metrics import record_transaction_created
from finyx.domain.entities import NewTransaction, Transaction
from finyx.domain.exceptions import DomainException, InvalidTransactionException
from finyx.domain.interfaces import TRANSACTIONS, RemoteStore

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for transaction use cases.
    """

    def __init__(self, store: RemoteStore):
        self._store = store

    async def list_transactions(self) -> List[Transaction]:
        """
        Load every transaction from the store.

        Returns:
            Transactions in the order the store returned them

        Raises:
            StoreNotConfiguredException: If store credentials are absent
            StoreException: If the store request fails
        """
        records = await self._store.list(TRANSACTIONS)
        transactions = [Transaction.from_record(record) for record in records]
        logger.info("transactions_loaded", count=len(transactions))
        return transactions

    async def create_transaction(self, new: NewTransaction) -> Transaction:
        """
        Validate and insert a transaction.

        Args:
            new: The user-submitted transaction

        Returns:
            The canonical record returned by the store

        Raises:
            InvalidTransactionException: If validation fails
            StoreNotConfiguredException: If store credentials are absent
            StoreException: If the insert fails
        """
        errors = new.validate()
        if errors:
            raise InvalidTransactionException(errors)

        log = logger.bind(
            type=new.type,
            category=new.category,
            date=new.date,
        )

        try:
            record = await self._store.insert(TRANSACTIONS, new.to_record())
        except DomainException as e:
            log.error("transaction_save_failed", code=e.code, error=e.message)
            raise

        created = Transaction.from_record(record)
        record_transaction_created(created.type)
        log.info("transaction_saved", transaction_id=created.id)

        return created
