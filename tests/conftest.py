"""Shared fixtures for storage sample tests."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from azure.core.credentials import AccessToken

from storage_sample.core.config import REQUIRED_ENV_VARS, Settings, get_settings
from storage_sample.services.azure_client import SampleContext
from tests.fixtures import (
    ORIGINAL_KEY_1,
    ORIGINAL_KEY_2,
    REGENERATED_KEY_1,
    TEST_ENV,
    make_account,
    make_key,
    make_usage,
)

OPTIONAL_ENV_VARS = (
    "STORAGE_SAMPLE_LOCATION",
    "STORAGE_SAMPLE_GROUP_NAME",
    "STORAGE_SAMPLE_ACCOUNT_NAME",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Keep a developer's environment and .env file out of the tests."""
    monkeypatch.chdir(tmp_path)
    for name in REQUIRED_ENV_VARS + OPTIONAL_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sample_env(monkeypatch):
    """Set the four required Azure variables."""
    for name, value in TEST_ENV.items():
        monkeypatch.setenv(name, value)
    return dict(TEST_ENV)


@pytest.fixture
def settings(sample_env):
    return Settings(_env_file=None)


@pytest.fixture
def mock_credential():
    """Create a mock ClientSecretCredential."""
    credential = MagicMock()
    credential.get_token.return_value = AccessToken("test-token", 1700000000)
    return credential


@pytest.fixture
def mock_resource_client():
    """Create a mock ResourceManagementClient."""
    client = MagicMock()
    client.providers.register.return_value = SimpleNamespace(
        namespace="Microsoft.Storage", registration_state="Registered"
    )
    return client


@pytest.fixture
def mock_storage_client():
    """Create a mock StorageManagementClient where every call succeeds."""
    client = MagicMock()
    accounts = client.storage_accounts

    accounts.check_name_availability.return_value = SimpleNamespace(
        name_available=True, reason=None, message=None
    )
    accounts.begin_create.return_value.result.return_value = make_account()
    accounts.get_properties.return_value = make_account(tags={"owner": "someone"})
    accounts.list_by_resource_group.return_value = [make_account()]
    accounts.list.return_value = [make_account(), make_account("otheraccount")]
    accounts.list_keys.return_value = SimpleNamespace(
        keys=[make_key("key1", ORIGINAL_KEY_1), make_key("key2", ORIGINAL_KEY_2)]
    )
    accounts.regenerate_key.return_value = SimpleNamespace(
        keys=[make_key("key1", REGENERATED_KEY_1), make_key("key2", ORIGINAL_KEY_2)]
    )
    client.usages.list_by_location.return_value = [
        make_usage("StorageAccounts", 3, 250),
    ]
    return client


@pytest.fixture
def context(settings, mock_credential, mock_resource_client, mock_storage_client):
    """SampleContext wired to mock clients."""
    return SampleContext(
        settings=settings,
        credential=mock_credential,
        resource_client=mock_resource_client,
        storage_client=mock_storage_client,
    )
