"""Storage account walkthrough.

The runner executes the steps in a fixed order against one storage
account and records a report of the run:

   >>> from storage_sample.services import build_context
   >>> from storage_sample.walkthrough import WalkthroughRunner
   >>> report = WalkthroughRunner(build_context(settings)).run()
"""

from storage_sample.walkthrough.models import (
    AccountKeyInfo,
    AccountSummary,
    StepResult,
    StepStatus,
    UsageRecord,
    WalkthroughReport,
)
from storage_sample.walkthrough.reports import ReportGenerator
from storage_sample.walkthrough.runner import WalkthroughRunner

__all__ = [
    # Models
    "AccountKeyInfo",
    "AccountSummary",
    "StepResult",
    "StepStatus",
    "UsageRecord",
    "WalkthroughReport",
    # Runner and reports
    "ReportGenerator",
    "WalkthroughRunner",
]
