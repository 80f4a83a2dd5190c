"""Azure SDK client wiring for the storage sample.

A single ClientSecretCredential is created from the settings and shared by
the resource and storage management clients. Everything is bundled into an
immutable SampleContext that is passed explicitly to each walkthrough step.
"""

import logging
from dataclasses import dataclass

from azure.core.credentials import AccessToken
from azure.identity import ClientSecretCredential
from azure.mgmt.resource import ResourceManagementClient
from azure.mgmt.storage import StorageManagementClient

from storage_sample.core.config import Settings

logger = logging.getLogger(__name__)

# Azure Resource Manager scope
AZURE_MANAGEMENT_SCOPE = "https://management.azure.com/.default"


@dataclass(frozen=True)
class SampleContext:
    """Credential, SDK clients and settings for one run."""

    settings: Settings
    credential: ClientSecretCredential
    resource_client: ResourceManagementClient
    storage_client: StorageManagementClient

    @property
    def group_name(self) -> str:
        return self.settings.group_name

    @property
    def account_name(self) -> str:
        return self.settings.account_name

    @property
    def location(self) -> str:
        return self.settings.location


def create_credential(settings: Settings) -> ClientSecretCredential:
    """Create the service principal credential from settings."""
    return ClientSecretCredential(
        tenant_id=settings.azure_tenant_id,
        client_id=settings.azure_client_id,
        client_secret=settings.azure_client_secret,
    )


def build_context(
    settings: Settings, credential: ClientSecretCredential | None = None
) -> SampleContext:
    """Create the credential and management clients for a subscription.

    Args:
        settings: Resolved sample settings
        credential: Optional pre-built credential (a new one is created if omitted)

    Returns:
        SampleContext shared by every step of the walkthrough
    """
    credential = credential or create_credential(settings)
    subscription_id = settings.azure_subscription_id

    context = SampleContext(
        settings=settings,
        credential=credential,
        resource_client=ResourceManagementClient(credential, subscription_id),
        storage_client=StorageManagementClient(credential, subscription_id),
    )
    logger.debug(
        f"Created management clients for subscription {subscription_id} "
        f"(tenant {settings.azure_tenant_id})"
    )
    return context


def acquire_token(context: SampleContext) -> AccessToken:
    """Obtain a Resource Manager access token via the client-credential flow.

    The credential caches the token, so the management clients reuse it
    for the rest of the run.
    """
    token = context.credential.get_token(AZURE_MANAGEMENT_SCOPE)
    logger.debug(f"Acquired management token expiring at {token.expires_on}")
    return token
