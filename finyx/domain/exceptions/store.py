"""Remote store domain exceptions."""

from typing import List

from .base import DomainException


class StoreException(DomainException):
    """Raised when the remote store rejects or fails a request."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="STORE_ERROR",
        )
        self.status_code = status_code


class StoreTimeoutException(StoreException):
    """Raised when the remote store times out."""

    def __init__(self):
        super().__init__(
            message="Remote store request timed out",
            status_code=None,
        )
        self.code = "STORE_TIMEOUT"


class StoreNotConfiguredException(DomainException):
    """Raised when the store credentials are absent."""

    def __init__(self, required: List[str]):
        super().__init__(
            message="Remote store is not configured. Set: " + ", ".join(required),
            code="STORE_NOT_CONFIGURED",
        )
        self.required = required
