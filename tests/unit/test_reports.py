"""Tests for walkthrough models and report generation."""

import json
from datetime import datetime
from types import SimpleNamespace

from storage_sample.walkthrough.models import (
    AccountKeyInfo,
    AccountSummary,
    StepResult,
    StepStatus,
    UsageRecord,
    WalkthroughReport,
    mask_key,
)
from storage_sample.walkthrough.reports import ReportGenerator
from tests.fixtures import make_account, make_key, make_usage


def _report(*statuses: StepStatus) -> WalkthroughReport:
    return WalkthroughReport(
        id="run-1",
        subscription_id="sub-12345",
        group_name="your-azure-sample-group",
        account_name="pythonrocksonazure",
        location="westus",
        started_at=datetime(2024, 1, 1, 12, 0, 0),
        completed_at=datetime(2024, 1, 1, 12, 5, 0),
        results=[
            StepResult(
                step_id=f"step_{i}",
                operation=f"Op{i}",
                status=status,
                message="failed hard" if status == StepStatus.FAIL else "ok",
                duration_ms=10.0,
            )
            for i, status in enumerate(statuses)
        ],
    )


class TestModels:
    def test_mask_key(self):
        assert mask_key("abcdefghij") == "abcde..."
        assert mask_key("abc") == "abc..."
        assert mask_key(None) == "..."

    def test_account_key_info_from_sdk(self):
        info = AccountKeyInfo.from_sdk(
            make_key("key1", "secretvalue", SimpleNamespace(value="Full"))
        )

        assert info.key_name == "key1"
        assert info.value_prefix == "secre..."
        assert info.permissions == "Full"

    def test_usage_record_str(self):
        record = UsageRecord.from_sdk(make_usage("StorageAccounts", 7, 250))

        assert str(record) == "StorageAccounts: 7 / 250"

    def test_account_summary_from_sdk(self):
        summary = AccountSummary.from_sdk(make_account(tags=None, sku=None))

        assert summary.name == "pythonrocksonazure"
        assert summary.sku_name is None
        assert summary.tags == {}

    def test_report_counts(self):
        report = _report(StepStatus.PASS, StepStatus.PASS, StepStatus.SKIPPED)

        assert report.passed_count == 2
        assert report.skipped_count == 1
        assert report.total_duration_ms == 30.0
        assert report.is_success
        assert report.get_summary()["total"] == 3

    def test_report_failure(self):
        report = _report(StepStatus.PASS, StepStatus.FAIL)

        assert not report.is_success
        assert [r.step_id for r in report.get_failed_steps()] == ["step_1"]


class TestReportGenerator:
    def test_to_json(self):
        data = json.loads(ReportGenerator(_report(StepStatus.PASS)).to_json())

        assert data["id"] == "run-1"
        assert data["resources"]["group_name"] == "your-azure-sample-group"
        assert data["summary"]["passed"] == 1
        assert data["results"][0]["status"] == "pass"

    def test_to_json_compact(self):
        assert "\n" not in ReportGenerator(_report(StepStatus.PASS)).to_json(pretty=False)

    def test_to_markdown_success(self):
        markdown = ReportGenerator(_report(StepStatus.PASS, StepStatus.SKIPPED)).to_markdown()

        assert "**Run ID:** `run-1`" in markdown
        assert "**Completed:** 2024-01-01 12:05:00 UTC" in markdown
        assert "## Overall Status: **SUCCESS**" in markdown
        assert "| step_1 | Op1 | ⏭️ skipped | 10.00ms |" in markdown
        assert "## Failures" not in markdown

    def test_to_markdown_lists_failures(self):
        markdown = ReportGenerator(_report(StepStatus.FAIL)).to_markdown()

        assert "## Overall Status: **FAILED**" in markdown
        assert "- **Op0:** failed hard" in markdown
