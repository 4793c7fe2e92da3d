"""Exceptions for invalid user-submitted records."""

from typing import List

from .base import DomainException


class InvalidRecordException(DomainException):
    """Raised when a submitted record fails validation."""

    def __init__(self, errors: List[str], code: str = "INVALID_RECORD"):
        super().__init__(
            message="; ".join(errors),
            code=code,
        )
        self.errors = errors


class InvalidTransactionException(InvalidRecordException):
    """Raised when a new transaction fails validation."""

    def __init__(self, errors: List[str]):
        super().__init__(errors, code="INVALID_TRANSACTION")
