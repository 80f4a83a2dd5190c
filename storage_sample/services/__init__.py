"""Azure services module."""

from storage_sample.services.azure_client import (
    SampleContext,
    acquire_token,
    build_context,
)

__all__ = [
    "SampleContext",
    "acquire_token",
    "build_context",
]
