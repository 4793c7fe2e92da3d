"""HTTP implementation of RemoteStore against Supabase's PostgREST API."""

from typing import Any, Dict, List

import httpx
import structlog

from finyx.core.config import settings
from finyx.core.environment import REQUIRED_STORE_VARIABLES
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

logger = structlog.get_logger(__name__)


class HttpSupabaseStore(RemoteStore):
    """
    HTTP client for a Supabase project.

    Reads and inserts rows through the PostgREST endpoint using the
    anonymous key. Failures are not retried here: retrying is left to
    the user through the dashboard reload.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = (
            settings.supabase_url if base_url is None else base_url
        ).rstrip("/")
        self._api_key = settings.supabase_anon_key if api_key is None else api_key
        self._timeout = timeout or settings.store_timeout
        self._transport = transport

    def is_configured(self) -> bool:
        return bool(self._base_url.strip() and self._api_key.strip())

    async def list(self, entity: str) -> List[Record]:
        """Select every row of an entity, newest first."""
        order_column = ORDER_COLUMNS.get(entity, "created_at")
        params = {"select": "*", "order": f"{order_column}.desc"}

        data = await self._request("list", entity, "GET", params=params)
        if not isinstance(data, list):
            raise StoreException(f"Unexpected response listing {entity}")
        return data

    async def insert(self, entity: str, record: Record) -> Record:
        """Insert one row and return the stored representation."""
        data = await self._request(
            "insert",
            entity,
            "POST",
            json=[record],
            headers={"Prefer": "return=representation"},
        )
        if isinstance(data, list):
            data = data[0] if data else None
        if not isinstance(data, dict):
            raise StoreException(f"Insert into {entity} returned no record")
        return data

    def _headers(self) -> Dict[str, str]:
        return {
            "apikey": self._api_key,
            "Authorization": f"Bearer {self._api_key}",
            "Content-Type": "application/json",
        }

    async def _request(
        self,
        operation: str,
        entity: str,
        method: str,
        params: Dict[str, str] | None = None,
        json: Any = None,
        headers: Dict[str, str] | None = None,
    ) -> Any:
        if not self.is_configured():
            record_store_failure(operation, "not_configured")
            raise StoreNotConfiguredException(REQUIRED_STORE_VARIABLES)

        url = f"{self._base_url}/rest/v1/{entity}"
        request_headers = {**self._headers(), **(headers or {})}

        try:
            with track_store_latency(operation):
                async with httpx.AsyncClient(
                    timeout=self._timeout,
                    transport=self._transport,
                ) as client:
                    response = await client.request(
                        method,
                        url,
                        params=params,
                        json=json,
                        headers=request_headers,
                    )
        except httpx.TimeoutException:
            record_store_failure(operation, "timeout")
            logger.warning("store_timeout", operation=operation, entity=entity)
            raise StoreTimeoutException()
        except httpx.HTTPError as e:
            record_store_failure(operation, "error")
            logger.error(
                "store_request_failed",
                operation=operation,
                entity=entity,
                error=str(e),
            )
            raise StoreException(f"Could not reach the store: {e}")

        if response.status_code >= 400:
            record_store_failure(operation, "error")
            message = self._error_message(response)
            logger.error(
                "store_request_rejected",
                operation=operation,
                entity=entity,
                status_code=response.status_code,
                message=message,
            )
            raise StoreException(message=message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError:
            record_store_failure(operation, "invalid_response")
            logger.error(
                "store_response_invalid",
                operation=operation,
                entity=entity,
                status_code=response.status_code,
                body=response.text[:200],
            )
            raise StoreException(
                f"Invalid response from the store for {entity}",
                status_code=response.status_code,
            )

        record_store_success(operation)
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull PostgREST's message out of an error body."""
        try:
            body = response.json()
        except ValueError:
            return f"Store error {response.status_code}: {response.text[:200]}"
        if isinstance(body, dict) and body.get("message"):
            return str(body["message"])
        return f"Store error {response.status_code}"
