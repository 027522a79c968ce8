"""
Curl Reporting for Failing Checks

This package records failing order API checks as reproducible curl
commands in a plain-text report file.

Features:
    - Replayable curl command per failing request
    - Response snapshot (status, headers, body)
    - Failure summary with expected/actual values
    - Heuristic fix-action line for automated triage
    - Thread-safe, append-only writes

Usage:
    from orderchecks.reporting import CurlReporter, FailureDetails

    reporter = CurlReporter("build/reports/curl-report.txt")
    reporter.reset_report()

    reporter.log_failure(
        "get_order_status",
        request,
        None,
        response,
        error,
        FailureDetails(
            assertion='stage == "PACKING"',
            expected='"PACKING"',
            actual='"SHIPPED"',
        ),
    )
"""

# Models
from .models import (
    AUTOMATION_SUITE_REPO,
    DEFAULT_REPORT_PATH,
    PIPELINE_REPO,
    UNKNOWN,
    ErrorDescriptor,
    FailureDetails,
    Outcome,
    ReportEntry,
    value_or_default,
)

# Helpers
from .curl import to_curl
from .fix_actions import suggest_fix_action

# Reporter
from .reporter import CurlReporter, ReportWriteError

__all__ = [
    # Models
    "AUTOMATION_SUITE_REPO",
    "DEFAULT_REPORT_PATH",
    "PIPELINE_REPO",
    "UNKNOWN",
    "ErrorDescriptor",
    "FailureDetails",
    "Outcome",
    "ReportEntry",
    "value_or_default",
    # Helpers
    "to_curl",
    "suggest_fix_action",
    # Reporter
    "CurlReporter",
    "ReportWriteError",
]
