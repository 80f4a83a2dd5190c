"""Core configuration settings.

Centralized configuration using Pydantic Settings. The four Azure service
principal variables are required; resource names and location have
sample defaults that can be overridden from the environment.
"""

import logging
import re
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

# Storage account names: 3-24 characters, lowercase letters and digits only
ACCOUNT_NAME_PATTERN = re.compile(r"^[a-z0-9]{3,24}$")

# Tenant IDs are GUIDs or domain names
TENANT_ID_PATTERN = re.compile(r"^[A-Za-z0-9.-]+$")

EMPTY_VALUE_MESSAGE = "value is empty"

REQUIRED_ENV_VARS = (
    "AZURE_TENANT_ID",
    "AZURE_CLIENT_ID",
    "AZURE_CLIENT_SECRET",
    "AZURE_SUBSCRIPTION_ID",
)


class Settings(BaseSettings):
    """Sample settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # =========================================================================
    # Azure Service Principal (required)
    # =========================================================================

    azure_tenant_id: str = Field(alias="AZURE_TENANT_ID")
    azure_client_id: str = Field(alias="AZURE_CLIENT_ID")
    azure_client_secret: str = Field(alias="AZURE_CLIENT_SECRET", repr=False)
    azure_subscription_id: str = Field(alias="AZURE_SUBSCRIPTION_ID")

    # =========================================================================
    # Sample Resources
    # =========================================================================

    location: str = Field(default="westus", alias="STORAGE_SAMPLE_LOCATION")
    group_name: str = Field(
        default="your-azure-sample-group", alias="STORAGE_SAMPLE_GROUP_NAME"
    )
    account_name: str = Field(
        default="pythonrocksonazure", alias="STORAGE_SAMPLE_ACCOUNT_NAME"
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    @field_validator(
        "azure_tenant_id",
        "azure_client_id",
        "azure_client_secret",
        "azure_subscription_id",
        mode="before",
    )
    @classmethod
    def require_non_empty(cls, v: str | None) -> str:
        """Treat blank credentials the same as unset ones."""
        if v is None or not str(v).strip():
            raise ValueError(EMPTY_VALUE_MESSAGE)
        return str(v).strip()

    @field_validator("azure_tenant_id")
    @classmethod
    def validate_tenant_id(cls, v: str) -> str:
        """Reject tenant IDs the identity client would refuse."""
        if not TENANT_ID_PATTERN.match(v):
            raise ValueError(
                "tenant IDs may contain only letters, digits, '-' and '.'"
            )
        return v

    @field_validator("account_name")
    @classmethod
    def validate_account_name(cls, v: str) -> str:
        """Storage account names must be globally unique DNS labels."""
        if not ACCOUNT_NAME_PATTERN.match(v):
            raise ValueError(
                "storage account names must be 3-24 lowercase letters or digits"
            )
        return v

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level '{v}'")
        return level


def format_settings_error(error: ValidationError) -> list[str]:
    """Turn a settings ValidationError into one console line per problem.

    Missing or blank credentials are reported by their environment variable
    name so the message matches what the user has to export.
    """
    lines = []
    for err in error.errors():
        name = str(err["loc"][0]) if err["loc"] else "settings"
        if err["type"] == "missing" or (
            name in REQUIRED_ENV_VARS and err["msg"].endswith(EMPTY_VALUE_MESSAGE)
        ):
            lines.append(f"Missing environment variable {name}")
        else:
            message = err["msg"].removeprefix("Value error, ")
            lines.append(f"Invalid value for {name}: {message}")
    return lines


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
