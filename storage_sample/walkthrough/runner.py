"""Walkthrough runner - executes the storage sample steps in order.

Steps run strictly sequentially. The first failure aborts the run: SDK
errors are wrapped in OperationFailedError naming the remote operation,
and nothing already created is rolled back.
"""

import logging
import time
import uuid
from collections.abc import Callable
from datetime import datetime
from typing import Any

from azure.core.exceptions import AzureError

from storage_sample.core.exceptions import NameUnavailableError, OperationFailedError
from storage_sample.services.azure_client import SampleContext, acquire_token
from storage_sample.walkthrough import steps
from storage_sample.walkthrough.models import StepResult, StepStatus, WalkthroughReport

logger = logging.getLogger(__name__)

CONFIRM_TOKEN = "y"


class WalkthroughRunner:
    """Runs the provisioning, inspection and cleanup steps for one account."""

    def __init__(
        self,
        context: SampleContext,
        assume_yes: bool | None = None,
        prompt: Callable[[str], str] | None = None,
    ):
        """Initialize the runner.

        Args:
            context: Credential, clients and settings for the run
            assume_yes: Answer the cleanup prompt without asking
                (True deletes, False keeps). None prompts interactively.
            prompt: Function used to read the confirmation answer (defaults to input)
        """
        self.context = context
        self.assume_yes = assume_yes
        self._prompt = prompt or input
        self._current_report: WalkthroughReport | None = None

    @property
    def current_report(self) -> WalkthroughReport | None:
        """Get the report of the current or last run."""
        return self._current_report

    def _run_step(
        self,
        step_id: str,
        operation: str,
        func: Callable[..., Any],
        *args: Any,
        describe: Callable[[Any], dict[str, Any]] | None = None,
    ) -> Any:
        """Run one step and record its result.

        Raises:
            OperationFailedError: If the step's remote call fails
            NameUnavailableError: Propagated from the availability check
        """
        report = self._current_report
        start = time.perf_counter()
        logger.debug(f"Running step {step_id} ({operation})")

        try:
            value = func(self.context, *args)
        except AzureError as e:
            duration_ms = (time.perf_counter() - start) * 1000
            message = str(e)
            report.results.append(
                StepResult(
                    step_id=step_id,
                    operation=operation,
                    status=StepStatus.FAIL,
                    message=message,
                    details={"error_type": type(e).__name__},
                    duration_ms=duration_ms,
                )
            )
            logger.error(f"Step {step_id} failed after {duration_ms:.2f}ms: {message}")
            raise OperationFailedError(
                operation, message, {"error_type": type(e).__name__}
            ) from e
        except OperationFailedError as e:
            report.results.append(
                StepResult(
                    step_id=step_id,
                    operation=operation,
                    status=StepStatus.FAIL,
                    message=e.message,
                    details=e.details,
                    duration_ms=(time.perf_counter() - start) * 1000,
                )
            )
            logger.error(f"Step {step_id} failed: {e.message}")
            raise
        except NameUnavailableError as e:
            report.results.append(
                StepResult(
                    step_id=step_id,
                    operation=operation,
                    status=StepStatus.FAIL,
                    message=str(e),
                    details={"reason": e.reason, "message": e.message},
                    duration_ms=(time.perf_counter() - start) * 1000,
                )
            )
            raise

        duration_ms = (time.perf_counter() - start) * 1000
        report.results.append(
            StepResult(
                step_id=step_id,
                operation=operation,
                status=StepStatus.PASS,
                message=f"{operation} succeeded",
                details=describe(value) if describe else {},
                duration_ms=duration_ms,
            )
        )
        logger.debug(f"Step {step_id} completed in {duration_ms:.2f}ms")
        return value

    def _skip_step(self, step_id: str, operation: str, message: str) -> None:
        self._current_report.results.append(
            StepResult(
                step_id=step_id,
                operation=operation,
                status=StepStatus.SKIPPED,
                message=message,
            )
        )

    def confirm_cleanup(self) -> bool:
        """Ask whether the sample resources should be deleted.

        Only the exact answer "y" confirms. End of input declines.
        """
        if self.assume_yes is not None:
            logger.info(f"Cleanup answered from command line: {self.assume_yes}")
            return self.assume_yes

        try:
            answer = self._prompt(
                f"Delete the resource group '{self.context.group_name}'? (y/n) "
            )
        except EOFError:
            print()
            return False
        return answer.strip() == CONFIRM_TOKEN

    def run(self) -> WalkthroughReport:
        """Run the full walkthrough.

        Returns:
            WalkthroughReport with one result per executed step

        Raises:
            OperationFailedError: On the first failed remote call
            NameUnavailableError: If the account name is already taken
        """
        ctx = self.context
        report = WalkthroughReport(
            id=str(uuid.uuid4()),
            subscription_id=ctx.settings.azure_subscription_id,
            group_name=ctx.group_name,
            account_name=ctx.account_name,
            location=ctx.location,
            started_at=datetime.utcnow(),
        )
        self._current_report = report

        logger.info(
            f"Starting storage walkthrough: account={ctx.account_name}, "
            f"group={ctx.group_name}, location={ctx.location}"
        )

        try:
            self._run_step(
                "acquire_token",
                "GetToken",
                acquire_token,
                describe=lambda token: {"expires_on": token.expires_on},
            )
            self._run_step(
                "register_provider",
                "Register",
                steps.register_resource_provider,
                describe=lambda state: {"registration_state": state},
            )
            self._run_step(
                "check_name_availability",
                "CheckNameAvailability",
                steps.check_account_availability,
            )
            self._run_step(
                "create_resource_group", "CreateOrUpdate", steps.create_resource_group
            )
            self._run_step(
                "create_storage_account",
                "Create",
                steps.create_storage_account,
                describe=lambda state: {"provisioning_state": state},
            )
            self._run_step(
                "get_properties",
                "GetProperties",
                steps.get_storage_account_properties,
                describe=lambda summary: summary.model_dump(),
            )
            self._run_step(
                "list_by_resource_group",
                "ListByResourceGroup",
                steps.list_storage_accounts_by_resource_group,
                describe=lambda names: {"accounts": names},
            )
            self._run_step(
                "list_by_subscription",
                "List",
                steps.list_storage_accounts_by_subscription,
                describe=lambda names: {"accounts": names},
            )
            keys = self._run_step(
                "list_keys",
                "ListKeys",
                steps.get_storage_keys,
                describe=lambda keys: {"key_names": [k.key_name for k in keys]},
            )
            self._run_step(
                "regenerate_key",
                "RegenerateKey",
                steps.regenerate_storage_key,
                keys,
                describe=lambda info: info.model_dump(),
            )
            self._run_step(
                "update_tags",
                "Update",
                steps.update_storage_account,
                describe=lambda tags: {"tags": tags},
            )
            self._run_step(
                "list_usage",
                "ListUsage",
                steps.list_usage,
                describe=lambda records: {"usages": [r.model_dump() for r in records]},
            )

            if self.confirm_cleanup():
                self._run_step(
                    "delete_storage_account", "Delete", steps.delete_storage_account
                )
                self._run_step(
                    "delete_resource_group",
                    "DeleteResourceGroup",
                    steps.delete_resource_group,
                )
                report.resources_deleted = True
            else:
                logger.info("Cleanup declined, sample resources were kept")
                self._skip_step(
                    "delete_storage_account", "Delete", "Cleanup declined"
                )
                self._skip_step(
                    "delete_resource_group", "DeleteResourceGroup", "Cleanup declined"
                )
        finally:
            report.completed_at = datetime.utcnow()

        logger.info(
            f"Storage walkthrough finished: {report.passed_count} steps passed "
            f"in {report.total_duration_ms:.2f}ms"
        )
        return report
