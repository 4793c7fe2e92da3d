"""Prometheus metrics for the Finyx dashboard service.

Business Metrics:
- finyx_transactions_created_total: Transactions saved, by type
- finyx_dashboard_loads_total: Dashboard loads by outcome

Technical Metrics:
- finyx_store_requests_total: Remote store calls by operation/status
- finyx_store_failures_total: Remote store failures by error type
- finyx_store_latency_seconds: Remote store call latency
- finyx_http_requests_total: HTTP requests by endpoint/status
"""

import time
from contextlib import contextmanager
from typing import Generator

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

transactions_created = Counter(
    "finyx_transactions_created_total",
    "Total number of transactions saved to the store",
    ["type"],  # income, expense
)

dashboard_loads = Counter(
    "finyx_dashboard_loads_total",
    "Dashboard loads by outcome",
    ["outcome"],  # ready, error, not_configured, superseded
)


# =============================================================================
# Technical Metrics
# =============================================================================

store_requests_total = Counter(
    "finyx_store_requests_total",
    "Total number of remote store requests",
    ["operation", "status"],  # list/insert, success/failure
)

store_failures = Counter(
    "finyx_store_failures_total",
    "Total number of remote store failures",
    ["operation", "error_type"],  # timeout, error, invalid_response, not_configured
)

store_latency = Histogram(
    "finyx_store_latency_seconds",
    "Remote store request latency in seconds",
    ["operation"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0],
)

http_requests_total = Counter(
    "finyx_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "finyx_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_transaction_created(txn_type: str) -> None:
    """Record a transaction saved to the store."""
    transactions_created.labels(type=txn_type).inc()


def record_dashboard_load(outcome: str) -> None:
    """Record the outcome of a dashboard load."""
    dashboard_loads.labels(outcome=outcome).inc()


@contextmanager
def track_store_latency(operation: str) -> Generator[None, None, None]:
    """Context manager to track remote store latency."""
    start = time.perf_counter()
    try:
        yield
    finally:
        duration = time.perf_counter() - start
        store_latency.labels(operation=operation).observe(duration)


def record_store_success(operation: str) -> None:
    """Record a successful remote store request."""
    store_requests_total.labels(operation=operation, status="success").inc()


def record_store_failure(operation: str, error_type: str) -> None:
    """Record a remote store failure."""
    store_requests_total.labels(operation=operation, status="failure").inc()
    store_failures.labels(operation=operation, error_type=error_type).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
