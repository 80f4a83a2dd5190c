"""Core module initialization."""

from storage_sample.core.config import Settings, format_settings_error, get_settings
from storage_sample.core.exceptions import (
    NameUnavailableError,
    OperationFailedError,
    StorageSampleError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "format_settings_error",
    # Exceptions
    "StorageSampleError",
    "OperationFailedError",
    "NameUnavailableError",
]
