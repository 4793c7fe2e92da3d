"""
Fixtures for integration tests.

Provides:
- In-memory remote store with failure switches
- Dashboard session built on that store
- Test client for the FastAPI app
- In-memory SQLite engine for the SQL store
"""

import asyncio
from typing import AsyncGenerator, Dict, List

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

from finyx.main import app
from finyx.application.services import DashboardSession, TransactionService
from finyx.core.dependencies import AppContext, get_context
from finyx.core.environment import REQUIRED_STORE_VARIABLES
from finyx.domain.exceptions import StoreException, StoreNotConfiguredException
from finyx.domain.interfaces import ORDER_COLUMNS, TRANSACTIONS, Record, RemoteStore
from finyx.infrastructure.database import Base


# =============================================================================
# Test Data
# =============================================================================

SEED_TRANSACTIONS: List[Record] = [
    {
        "id": "t1",
        "type": "income",
        "category": "salario",
        "amount": 1000.0,
        "description": "Salário",
        "date": "2024-06-01",
        "created_at": "2024-06-01T09:00:00+00:00",
    },
    {
        "id": "t2",
        "type": "expense",
        "category": "moradia",
        "amount": 400.0,
        "description": "",
        "date": "2024-06-15",
        "created_at": "2024-06-15T09:00:00+00:00",
    },
    {
        "id": "t3",
        "type": "expense",
        "category": "lazer",
        "amount": 50.0,
        "description": "Cinema",
        "date": "2024-05-20",
        "created_at": "2024-05-20T09:00:00+00:00",
    },
]


# =============================================================================
# Mock Store
# =============================================================================

class MockRemoteStore(RemoteStore):
    """
    In-memory store that behaves like the Supabase table API.

    Switches:
    - configured: False raises StoreNotConfiguredException before any query
    - fail_list / fail_insert: raise StoreException
    - gate: when set to an asyncio.Event, list() waits on it
    """

    def __init__(self, tables: Dict[str, List[Record]] | None = None):
        self.tables: Dict[str, List[Record]] = {
            entity: [dict(r) for r in rows] for entity, rows in (tables or {}).items()
        }
        self.configured = True
        self.fail_list = False
        self.fail_insert = False
        self.gate: asyncio.Event | None = None
        self.list_calls = 0
        self.insert_calls = 0
        self.closed = False
        self._next_id = 0

    def is_configured(self) -> bool:
        return self.configured

    async def list(self, entity: str) -> List[Record]:
        if not self.configured:
            raise StoreNotConfiguredException(REQUIRED_STORE_VARIABLES)

        self.list_calls += 1
        if self.gate is not None:
            await self.gate.wait()

        if self.fail_list:
            raise StoreException("connection refused", status_code=500)

        order_column = ORDER_COLUMNS.get(entity, "created_at")
        rows = sorted(
            self.tables.get(entity, []),
            key=lambda r: r.get(order_column) or "",
            reverse=True,
        )
        return [dict(r) for r in rows]

    async def insert(self, entity: str, record: Record) -> Record:
        if not self.configured:
            raise StoreNotConfiguredException(REQUIRED_STORE_VARIABLES)

        self.insert_calls += 1
        if self.fail_insert:
            raise StoreException("new row violates row-level security policy", status_code=403)

        self._next_id += 1
        stored = {
            **record,
            "id": f"new-{self._next_id}",
            "created_at": "2026-10-17T12:00:00+00:00",
        }
        self.tables.setdefault(entity, []).append(stored)
        return dict(stored)

    async def close(self) -> None:
        self.closed = True


# =============================================================================
# Store and Session Fixtures
# =============================================================================

@pytest.fixture
def mock_store() -> MockRemoteStore:
    """Create a store seeded with three transactions."""
    return MockRemoteStore({TRANSACTIONS: SEED_TRANSACTIONS})


@pytest.fixture
def empty_store() -> MockRemoteStore:
    return MockRemoteStore()


@pytest.fixture
def unconfigured_store() -> MockRemoteStore:
    """Create a store whose credentials are missing."""
    store = MockRemoteStore({TRANSACTIONS: SEED_TRANSACTIONS})
    store.configured = False
    return store


@pytest.fixture
def failing_store() -> MockRemoteStore:
    """Create a store that fails every list call."""
    store = MockRemoteStore({TRANSACTIONS: SEED_TRANSACTIONS})
    store.fail_list = True
    return store


@pytest.fixture
def session(mock_store: MockRemoteStore) -> DashboardSession:
    return DashboardSession(TransactionService(mock_store))


# =============================================================================
# App Client Fixtures
# =============================================================================

async def _client_for(store: RemoteStore) -> AsyncGenerator[AsyncClient, None]:
    context = AppContext(
        store=store,
        session=DashboardSession(TransactionService(store)),
    )

    def override_get_context():
        return context

    app.dependency_overrides[get_context] = override_get_context

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client(mock_store: MockRemoteStore) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by the seeded in-memory store.

    The app lifespan does not run under ASGITransport, so the context
    built at startup is replaced through dependency overrides.
    """
    async for ac in _client_for(mock_store):
        yield ac


@pytest_asyncio.fixture
async def empty_client(empty_store: MockRemoteStore) -> AsyncGenerator[AsyncClient, None]:
    async for ac in _client_for(empty_store):
        yield ac


@pytest_asyncio.fixture
async def client_without_config(
    unconfigured_store: MockRemoteStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose store has no credentials."""
    async for ac in _client_for(unconfigured_store):
        yield ac


@pytest_asyncio.fixture
async def client_with_failing_store(
    failing_store: MockRemoteStore,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client whose store fails to list."""
    async for ac in _client_for(failing_store):
        yield ac


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def expense_request() -> dict:
    """Request body for a valid expense."""
    return {
        "type": "expense",
        "category": "alimentacao",
        "amount": 42.9,
        "description": "Mercado",
        "date": "2024-06-20",
    }
