"""Report generation for walkthrough runs.

Provides JSON and Markdown renderings. Only the masked key prefixes that
the steps record ever appear in a report.
"""

import json

from storage_sample.walkthrough.models import StepStatus, WalkthroughReport

STATUS_LABELS = {
    StepStatus.PASS: "✅ pass",
    StepStatus.FAIL: "❌ fail",
    StepStatus.SKIPPED: "⏭️ skipped",
}


class ReportGenerator:
    """Generate reports from a walkthrough run."""

    def __init__(self, report: WalkthroughReport):
        self.report = report

    def to_json(self, pretty: bool = True) -> str:
        """Generate JSON report.

        Args:
            pretty: Whether to pretty-print the JSON

        Returns:
            JSON string representation of the report
        """
        data = {
            "id": self.report.id,
            "subscription_id": self.report.subscription_id,
            "resources": {
                "group_name": self.report.group_name,
                "account_name": self.report.account_name,
                "location": self.report.location,
                "deleted": self.report.resources_deleted,
            },
            "summary": self.report.get_summary(),
            "results": [
                {
                    "step_id": r.step_id,
                    "operation": r.operation,
                    "status": r.status.value,
                    "message": r.message,
                    "details": r.details,
                    "duration_ms": r.duration_ms,
                    "timestamp": r.timestamp.isoformat(),
                }
                for r in self.report.results
            ],
        }

        if pretty:
            return json.dumps(data, indent=2, default=str)
        return json.dumps(data, default=str)

    def to_markdown(self) -> str:
        """Generate Markdown report."""
        report = self.report
        lines = [
            "# Storage Walkthrough Report",
            "",
            f"**Run ID:** `{report.id}`",
            f"**Started:** {report.started_at.strftime('%Y-%m-%d %H:%M:%S')} UTC",
        ]
        if report.completed_at:
            lines.append(
                f"**Completed:** {report.completed_at.strftime('%Y-%m-%d %H:%M:%S')} UTC"
            )

        lines.extend([
            "",
            "## Resources",
            "",
            f"- **Resource group:** `{report.group_name}`",
            f"- **Storage account:** `{report.account_name}`",
            f"- **Location:** {report.location}",
            f"- **Deleted:** {'yes' if report.resources_deleted else 'no'}",
            "",
            f"## Overall Status: **{'SUCCESS' if report.is_success else 'FAILED'}**",
            "",
            "| Step | Operation | Status | Duration |",
            "|---|---|---|---|",
        ])

        for r in report.results:
            lines.append(
                f"| {r.step_id} | {r.operation} | {STATUS_LABELS[r.status]} "
                f"| {r.duration_ms:.2f}ms |"
            )

        failed = report.get_failed_steps()
        if failed:
            lines.extend(["", "## Failures", ""])
            for r in failed:
                lines.append(f"- **{r.operation}:** {r.message}")

        return "\n".join(lines) + "\n"
