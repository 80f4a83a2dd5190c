"""Pydantic models for the storage walkthrough."""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

# Number of key characters shown on the console and in reports
KEY_PREFIX_LENGTH = 5


def mask_key(value: str | None) -> str:
    """Return the printable prefix of an account key."""
    return f"{(value or '')[:KEY_PREFIX_LENGTH]}..."


def _enum_value(value: Any) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "value", value))


class StepStatus(str, Enum):
    """Enumeration of possible step statuses."""

    PASS = "pass"
    FAIL = "fail"
    SKIPPED = "skipped"


class StepResult(BaseModel):
    """Result of a single walkthrough step."""

    step_id: str = Field(..., description="Identifier of the step")
    operation: str = Field(..., description="Remote operation the step performs")
    status: StepStatus = Field(..., description="Outcome of the step")
    message: str = Field("", description="Human-readable description of the result")
    details: dict[str, Any] = Field(
        default_factory=dict, description="Non-secret data returned by the step"
    )
    duration_ms: float = Field(0, description="Execution time in milliseconds")
    timestamp: datetime = Field(
        default_factory=datetime.utcnow, description="When this step was run"
    )

    def is_pass(self) -> bool:
        return self.status == StepStatus.PASS

    def is_fail(self) -> bool:
        return self.status == StepStatus.FAIL


class WalkthroughReport(BaseModel):
    """Record of one walkthrough run."""

    id: str = Field(..., description="Unique identifier for this run")
    subscription_id: str = Field(..., description="Subscription the run targeted")
    group_name: str = Field(..., description="Resource group used by the run")
    account_name: str = Field(..., description="Storage account used by the run")
    location: str = Field(..., description="Azure region of the resources")
    started_at: datetime = Field(
        default_factory=datetime.utcnow, description="When the run started"
    )
    completed_at: datetime | None = Field(None, description="When the run completed")
    results: list[StepResult] = Field(default_factory=list)
    resources_deleted: bool = Field(False, description="Whether cleanup ran")

    @property
    def passed_count(self) -> int:
        return sum(1 for r in self.results if r.status == StepStatus.PASS)

    @property
    def failed_count(self) -> int:
        return sum(1 for r in self.results if r.status == StepStatus.FAIL)

    @property
    def skipped_count(self) -> int:
        return sum(1 for r in self.results if r.status == StepStatus.SKIPPED)

    @property
    def total_duration_ms(self) -> float:
        return sum(r.duration_ms for r in self.results)

    @property
    def is_success(self) -> bool:
        """A run succeeds when no step failed."""
        return self.failed_count == 0

    def get_failed_steps(self) -> list[StepResult]:
        return [r for r in self.results if r.status == StepStatus.FAIL]

    def get_summary(self) -> dict[str, Any]:
        """Get a summary of the run."""
        return {
            "id": self.id,
            "started_at": self.started_at.isoformat(),
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "passed": self.passed_count,
            "failed": self.failed_count,
            "skipped": self.skipped_count,
            "total": len(self.results),
            "duration_ms": self.total_duration_ms,
            "resources_deleted": self.resources_deleted,
            "is_success": self.is_success,
        }


class AccountKeyInfo(BaseModel):
    """Printable view of a storage account key. Holds only the masked value."""

    key_name: str
    value_prefix: str
    permissions: str | None = None

    @classmethod
    def from_sdk(cls, key: Any) -> "AccountKeyInfo":
        return cls(
            key_name=key.key_name,
            value_prefix=mask_key(key.value),
            permissions=_enum_value(key.permissions),
        )


class UsageRecord(BaseModel):
    """Subscription usage metric for storage accounts."""

    name: str
    current_value: int
    limit: int

    @classmethod
    def from_sdk(cls, usage: Any) -> "UsageRecord":
        return cls(
            name=usage.name.value,
            current_value=usage.current_value,
            limit=usage.limit,
        )

    def __str__(self) -> str:
        return f"{self.name}: {self.current_value} / {self.limit}"


class AccountSummary(BaseModel):
    """Properties of a storage account as reported by the provider."""

    name: str
    id: str | None = None
    sku_name: str | None = None
    type: str | None = None
    location: str | None = None
    provisioning_state: str | None = None
    tags: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_sdk(cls, account: Any) -> "AccountSummary":
        return cls(
            name=account.name,
            id=account.id,
            sku_name=_enum_value(account.sku.name) if account.sku else None,
            type=account.type,
            location=account.location,
            provisioning_state=_enum_value(account.provisioning_state),
            tags=dict(account.tags or {}),
        )
