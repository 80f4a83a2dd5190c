"""Test fixtures for the storage walkthrough."""

from .storage_fixtures import (
    ORIGINAL_KEY_1,
    ORIGINAL_KEY_2,
    REGENERATED_KEY_1,
    TEST_ENV,
    make_account,
    make_key,
    make_usage,
)

__all__ = [
    "ORIGINAL_KEY_1",
    "ORIGINAL_KEY_2",
    "REGENERATED_KEY_1",
    "TEST_ENV",
    "make_account",
    "make_key",
    "make_usage",
]
