"""
Report data models for failing order API checks.

This module defines the records appended to the curl report:
the outcome enum, structured failure details, the error descriptor
and the full report entry with its text rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..transport.models import HttpResponse


DEFAULT_REPORT_PATH = Path("build", "reports", "curl-report.txt")
PIPELINE_REPO = "https://github.com/prudhviraj55/app-test-pipeline.git"
AUTOMATION_SUITE_REPO = "https://github.com/prudhviraj55/api-automation.git"

UNKNOWN = "unknown"


class Outcome(str, Enum):
    """Outcome of a single check invocation."""
    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"


def value_or_default(value: str | None, default: str = UNKNOWN) -> str:
    """Return `default` when value is None or blank."""
    if value is None or not value.strip():
        return default
    return value


def is_success(outcome: Outcome | str) -> bool:
    """Case-insensitive check for the SUCCESS outcome."""
    text = outcome.value if isinstance(outcome, Outcome) else str(outcome)
    return text.upper() == Outcome.SUCCESS.value


@dataclass
class FailureDetails:
    """
    Structured description of what a check verified and what it found.

    Every field is optional. Use `resolved()` to read a field with the
    "unknown" placeholder substituted for missing values.
    """
    assertion: str | None = None
    expected: str | None = None
    actual: str | None = None
    suspect_file: str | None = None
    recent_change: str | None = None
    stack_top: str | None = None

    def resolved(self, name: str, default: str = UNKNOWN) -> str:
        """Get a field by name, substituting `default` for null/blank."""
        if name not in {f.name for f in fields(self)}:
            raise AttributeError(f"FailureDetails has no field {name!r}")
        return value_or_default(getattr(self, name), default)


@dataclass
class ErrorDescriptor:
    """Short kind name, message and top stack frame of an exception."""
    kind: str
    message: str
    stack_top: str

    @classmethod
    def from_exception(cls, error: BaseException) -> ErrorDescriptor:
        kind = type(error).__name__
        return cls(kind=kind, message=str(error), stack_top=_top_frame(error, kind))


@dataclass
class ReportEntry:
    """
    One block in the curl report.

    Entries produced by `CurlReporter.log` carry no error; entries from
    `CurlReporter.log_failure` always carry one and render the
    failure summary.
    """
    test_name: str
    timestamp: datetime
    outcome: str
    curl: str
    response: HttpResponse | None = None
    error: ErrorDescriptor | None = None
    failure_details: FailureDetails | None = None
    fix_action: str | None = None
    pipeline_repo: str = PIPELINE_REPO
    automation_repo: str = AUTOMATION_SUITE_REPO

    def render(self) -> str:
        """Render the entry as the text block appended to the report."""
        lines = [
            f"=== Test: {self.test_name} @ {self.timestamp.isoformat()} ===",
            f"Outcome: {self.outcome}",
            "Request (curl):",
            self.curl,
            "",
        ]

        if self.response is not None:
            lines.append("Response:")
            lines.append(f"Status: {self.response.status}")
            lines.append("Headers:")
            for name, values in self.response.headers.items():
                lines.append(f"  {name}: {', '.join(values)}")
            lines.append("Body:")
            lines.append(self.response.body)
        else:
            lines.append("Response: none (request failed)")

        if self.error is not None:
            lines.extend(self._failure_lines())

        lines.append(f"Repo: {self.pipeline_repo}")
        lines.append(f"Automation Repo: {self.automation_repo}")
        return "\n".join(lines) + "\n\n"

    def _failure_lines(self) -> list[str]:
        details = self.failure_details or FailureDetails()
        lines = [
            f"Error: {self.error.kind} - {self.error.message}",
            "Failure Summary:",
            f"- Assertion: {details.resolved('assertion')}",
            f"- Expected: {details.resolved('expected')}",
            f"- Actual: {details.resolved('actual')}",
            f"- Stack (top): {details.resolved('stack_top', self.error.stack_top)}",
        ]
        if self.fix_action:
            lines.append(f"- Fix action: {self.fix_action}")
        return lines


def _top_frame(error: BaseException, kind: str) -> str:
    """Describe the innermost traceback frame as '<Kind> at <module>:<line>'."""
    tb = error.__traceback__
    if tb is None:
        return kind
    while tb.tb_next is not None:
        tb = tb.tb_next
    module = tb.tb_frame.f_globals.get("__name__", "<unknown>")
    return f"{kind} at {module}:{tb.tb_lineno}"
