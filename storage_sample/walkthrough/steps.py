"""Individual steps of the storage account walkthrough.

Each step issues one remote call (two for the account listing) through the
clients in the SampleContext and prints its outcome to stdout. Steps do not
catch SDK errors; WalkthroughRunner turns them into OperationFailedError.
"""

import logging

from azure.mgmt.storage.models import (
    Kind,
    Sku,
    SkuName,
    StorageAccountCheckNameAvailabilityParameters,
    StorageAccountCreateParameters,
    StorageAccountRegenerateKeyParameters,
    StorageAccountUpdateParameters,
)

from storage_sample.core.exceptions import NameUnavailableError, OperationFailedError
from storage_sample.services.azure_client import SampleContext
from storage_sample.walkthrough.models import (
    AccountKeyInfo,
    AccountSummary,
    UsageRecord,
)

logger = logging.getLogger(__name__)

STORAGE_PROVIDER = "Microsoft.Storage"
STORAGE_ACCOUNT_TYPE = "Microsoft.Storage/storageAccounts"

# Tags written by update_storage_account, replacing whatever was there
SAMPLE_TAGS: dict[str, str] = {
    "who rocks": "python",
    "where": "on azure",
}


def register_resource_provider(context: SampleContext) -> str | None:
    """Register the storage resource provider for the subscription."""
    print("Register resource provider...")
    provider = context.resource_client.providers.register(STORAGE_PROVIDER)
    state = getattr(provider, "registration_state", None)
    logger.debug(f"{STORAGE_PROVIDER} registration state: {state}")
    return state


def check_account_availability(context: SampleContext) -> None:
    """Check the account name is free.

    Raises:
        NameUnavailableError: If the provider reports the name as taken or invalid
    """
    print("Check account name availability...")
    result = context.storage_client.storage_accounts.check_name_availability(
        StorageAccountCheckNameAvailabilityParameters(
            name=context.account_name,
            type=STORAGE_ACCOUNT_TYPE,
        )
    )

    if result.name_available:
        print(f"\t'{context.account_name}' is available!")
        return

    reason = getattr(result.reason, "value", result.reason)
    print(
        f"\t'{context.account_name}' is not available :(\n"
        f"\tReason: {reason}\n"
        f"\tMessage: {result.message}"
    )
    print("No resources were created.")
    raise NameUnavailableError(context.account_name, reason, result.message)


def create_resource_group(context: SampleContext) -> None:
    print("Create resource group...")
    context.resource_client.resource_groups.create_or_update(
        context.group_name,
        {"location": context.location},
    )


def create_storage_account(context: SampleContext) -> str | None:
    """Create the storage account and block until provisioning finishes."""
    print("Create storage account...")
    poller = context.storage_client.storage_accounts.begin_create(
        context.group_name,
        context.account_name,
        StorageAccountCreateParameters(
            sku=Sku(name=SkuName.STANDARD_LRS),
            kind=Kind.STORAGE_V2,
            location=context.location,
        ),
    )
    account = poller.result()
    state = getattr(account.provisioning_state, "value", account.provisioning_state)
    logger.info(f"Storage account {context.account_name} provisioned: {state}")
    return state


def get_storage_account_properties(context: SampleContext) -> AccountSummary:
    print("Get storage account properties...")
    account = context.storage_client.storage_accounts.get_properties(
        context.group_name, context.account_name
    )
    summary = AccountSummary.from_sdk(account)

    print(f"'{summary.name}' storage account properties")
    print(f"\t                ID: {summary.id}")
    print(f"\t          Sku Name: {summary.sku_name}")
    print(f"\t              Type: {summary.type}")
    print(f"\t          Location: {summary.location}")
    print(f"\tProvisioning State: {summary.provisioning_state}")
    return summary


def _print_account_names(accounts) -> list[str]:
    names = [account.name for account in accounts]
    for name in names:
        print(f"\t{name}")
    return names


def list_storage_accounts_by_resource_group(context: SampleContext) -> list[str]:
    print(f"List all storage accounts in '{context.group_name}' resource group")
    accounts = context.storage_client.storage_accounts.list_by_resource_group(
        context.group_name
    )
    return _print_account_names(accounts)


def list_storage_accounts_by_subscription(context: SampleContext) -> list[str]:
    print("List all storage accounts under the subscription")
    accounts = context.storage_client.storage_accounts.list()
    return _print_account_names(accounts)


def _print_key(key: AccountKeyInfo) -> None:
    print(
        f"\tKey name: {key.key_name}\n"
        f"\tValue: {key.value_prefix}\n"
        f"\tPermissions: {key.permissions}"
    )


def get_storage_keys(context: SampleContext) -> list:
    """Fetch both account keys and print their masked values.

    Returns:
        The SDK key objects; the first key's name is needed for regeneration
    """
    print("Get storage account keys...")
    result = context.storage_client.storage_accounts.list_keys(
        context.group_name, context.account_name
    )
    keys = list(result.keys or [])

    print(f"'{context.account_name}' storage account keys")
    for key in keys:
        _print_key(AccountKeyInfo.from_sdk(key))
        print("\t----------------")
    return keys


def regenerate_storage_key(context: SampleContext, keys: list) -> AccountKeyInfo:
    """Regenerate the first account key and print its new value."""
    print("Regenerate account key...")
    if not keys:
        raise OperationFailedError("RegenerateKey", "ListKeys returned no account keys")
    key_name = keys[0].key_name
    result = context.storage_client.storage_accounts.regenerate_key(
        context.group_name,
        context.account_name,
        StorageAccountRegenerateKeyParameters(key_name=key_name),
    )

    new_keys = list(result.keys or [])
    # The response lists every key; report the one that was regenerated.
    new_key = next((k for k in new_keys if k.key_name == key_name), None)
    if new_key is None:
        if not new_keys:
            raise OperationFailedError("RegenerateKey", "response contained no account keys")
        new_key = new_keys[0]
    info = AccountKeyInfo.from_sdk(new_key)

    print("New key")
    _print_key(info)
    return info


def update_storage_account(context: SampleContext) -> dict[str, str]:
    print("Update storage account...")
    tags = dict(SAMPLE_TAGS)
    context.storage_client.storage_accounts.update(
        context.group_name,
        context.account_name,
        StorageAccountUpdateParameters(tags=tags),
    )
    return tags


def list_usage(context: SampleContext) -> list[UsageRecord]:
    print("List usage for storage accounts in subscription...")
    usages = context.storage_client.usages.list_by_location(context.location)

    records = [UsageRecord.from_sdk(usage) for usage in usages]
    for record in records:
        print(f"\t{record}")
    return records


def delete_storage_account(context: SampleContext) -> None:
    print("Delete storage account...")
    context.storage_client.storage_accounts.delete(
        context.group_name, context.account_name
    )


def delete_resource_group(context: SampleContext) -> None:
    """Delete the resource group and wait for the operation to finish."""
    print("Delete resource group...")
    poller = context.resource_client.resource_groups.begin_delete(context.group_name)
    poller.result()
