"""Dashboard session - owns the loaded transaction collection."""

import asyncio
from enum import Enum
from typing import List, Optional, Tuple

import structlog

from finyx.core.metrics import record_dashboard_load
from finyx.domain.entities import NewTransaction, Transaction
from finyx.domain.exceptions import (
    DashboardBusyException,
    DomainException,
    StoreNotConfiguredException,
)
from finyx.application.dto import Notice

from .transaction_service import TransactionService

logger = structlog.get_logger(__name__)

RELOAD_PATH = "/v1/dashboard/reload"


class DashboardState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def not_configured_notice(required: List[str]) -> Notice:
    return Notice(
        title="Banco de dados não configurado",
        message=(
            "Configure as variáveis de ambiente do Supabase para usar o "
            "banco de dados e tente novamente."
        ),
        required_variables=list(required),
        retry_path=RELOAD_PATH,
    )


def load_failed_notice(reason: str) -> Notice:
    return Notice(
        title="Erro ao carregar transações",
        message=f"{reason}. Verifique a conexão com o banco de dados.",
        retry_path=RELOAD_PATH,
    )


class DashboardSession:
    """
    In-memory transaction collection with its load state machine.

    States: idle -> loading -> ready | error. A load is started on first
    access or by an explicit reload; there is no automatic retry.

    Overlapping loads use cancel-and-replace: starting a load cancels the
    one in flight, and anyone still waiting on the cancelled load gets
    the outcome of the newest one.

    Inserts update the collection only after the store confirms them,
    prepending the canonical record returned by the store.
    """

    def __init__(self, transaction_service: TransactionService):
        self._service = transaction_service
        self._state = DashboardState.IDLE
        self._transactions: List[Transaction] = []
        self._notice: Optional[Notice] = None
        self._load_task: Optional[asyncio.Task] = None

    @property
    def state(self) -> DashboardState:
        return self._state

    @property
    def notice(self) -> Optional[Notice]:
        return self._notice

    @property
    def transactions(self) -> Tuple[Transaction, ...]:
        """Snapshot of the collection; callers cannot mutate it."""
        return tuple(self._transactions)

    async def ensure_loaded(self) -> DashboardState:
        """Start the first load, or wait for the one in flight."""
        if self._state == DashboardState.IDLE:
            return await self.load()
        if self._state == DashboardState.LOADING and self._load_task is not None:
            return await self._join(self._load_task)
        return self._state

    async def load(self) -> DashboardState:
        """
        (Re)load the collection from the store.

        Returns:
            The state after the newest load finished
        """
        previous = self._load_task
        if previous is not None and not previous.done():
            previous.cancel()
            record_dashboard_load("superseded")
            logger.info("dashboard_load_superseded")

        self._state = DashboardState.LOADING
        self._notice = None

        task = asyncio.ensure_future(self._fetch())
        self._load_task = task
        return await self._join(task)

    async def add_transaction(self, new: NewTransaction) -> Transaction:
        """
        Insert a transaction and prepend the stored record.

        The collection is left untouched when the insert fails.

        Raises:
            DashboardBusyException: If a load is in progress
            InvalidTransactionException: If validation fails
            StoreNotConfiguredException: If store credentials are absent
            StoreException: If the insert fails
        """
        if self._state == DashboardState.LOADING:
            raise DashboardBusyException()

        created = await self._service.create_transaction(new)
        self._transactions = [created, *self._transactions]
        return created

    async def _join(self, task: asyncio.Future) -> DashboardState:
        # Shielded: a waiter going away must not cancel a fetch others share
        try:
            await asyncio.shield(task)
        except asyncio.CancelledError:
            if not task.cancelled() or self._load_task is task:
                raise
            # Superseded by a newer load
            return await self._join(self._load_task)
        return self._state

    async def _fetch(self) -> None:
        try:
            transactions = await self._service.list_transactions()
        except StoreNotConfiguredException as e:
            self._fail(not_configured_notice(e.required))
            record_dashboard_load("not_configured")
            logger.warning("dashboard_store_not_configured", required=e.required)
            return
        except DomainException as e:
            self._fail(load_failed_notice(e.message))
            record_dashboard_load("error")
            logger.error("dashboard_load_failed", code=e.code, error=e.message)
            return
        except Exception as e:
            self._fail(load_failed_notice("Dados inválidos recebidos do banco de dados"))
            record_dashboard_load("error")
            logger.exception(
                "dashboard_load_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return

        self._transactions = transactions
        self._state = DashboardState.READY
        record_dashboard_load("ready")
        logger.info("dashboard_loaded", count=len(transactions))

    def _fail(self, notice: Notice) -> None:
        self._transactions = []
        self._notice = notice
        self._state = DashboardState.ERROR
