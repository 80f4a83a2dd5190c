"""Exceptions raised by the storage sample."""

from typing import Any


class StorageSampleError(Exception):
    """Base exception for storage sample errors."""

    pass


class OperationFailedError(StorageSampleError):
    """A remote operation failed.

    Carries the name of the triggering call and the message of the
    underlying Azure SDK error.
    """

    def __init__(self, operation: str, message: str, details: dict[str, Any] | None = None):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation
        self.message = message
        self.details = details or {}


class NameUnavailableError(StorageSampleError):
    """The requested storage account name cannot be used."""

    def __init__(self, account_name: str, reason: str | None, message: str | None):
        super().__init__(f"'{account_name}' is not available")
        self.account_name = account_name
        self.reason = reason
        self.message = message
