"""
Curl reporter for failing order API checks.

This module provides the CurlReporter class, which appends one text
block per failing check to the report file. Each block carries a
replayable curl command, the response snapshot and a short failure
summary.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING

from .curl import to_curl
from .fix_actions import suggest_fix_action
from .models import (
    AUTOMATION_SUITE_REPO,
    DEFAULT_REPORT_PATH,
    PIPELINE_REPO,
    ErrorDescriptor,
    FailureDetails,
    Outcome,
    ReportEntry,
    is_success,
)

if TYPE_CHECKING:
    from ..config import SuiteConfig
    from ..transport.models import HttpRequest, HttpResponse

logger = logging.getLogger(__name__)


class ReportWriteError(RuntimeError):
    """The report file could not be reset or written. Fatal for the run."""


class CurlReporter:
    """
    Append-only failure log shared by every check in a run.

    All file-mutating operations go through one lock, so entries from
    concurrent callers are never interleaved. The file is opened and
    closed on every call.

    Example:
        reporter = CurlReporter(tmp_path / "curl-report.txt")
        reporter.reset_report()

        try:
            response = await transport.send(request)
        except Exception as e:
            reporter.log_failure("create_order", request, request.body, None, e)
            raise
    """

    def __init__(
        self,
        report_path: str | Path = DEFAULT_REPORT_PATH,
        pipeline_repo: str = PIPELINE_REPO,
        automation_repo: str = AUTOMATION_SUITE_REPO,
    ):
        self.report_path = Path(report_path)
        self.pipeline_repo = pipeline_repo
        self.automation_repo = automation_repo
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls, config: SuiteConfig) -> CurlReporter:
        """Create a reporter using the report settings of a suite config."""
        return cls(
            report_path=config.report_path,
            pipeline_repo=config.pipeline_repo,
            automation_repo=config.automation_repo,
        )

    def reset_report(self) -> None:
        """
        Create the report directory and truncate the report to empty.

        Raises:
            ReportWriteError: If the filesystem is not writable
        """
        with self._lock:
            try:
                self.report_path.parent.mkdir(parents=True, exist_ok=True)
                self.report_path.write_text("", encoding="utf-8")
            except OSError as e:
                raise ReportWriteError(f"Failed to reset curl report at {self.report_path}") from e
        logger.info(f"Curl report reset: {self.report_path}")

    def log(
        self,
        test_name: str,
        request: HttpRequest,
        request_body: str | None,
        response: HttpResponse | None,
        outcome: Outcome | str,
    ) -> ReportEntry | None:
        """
        Record a check result. Successful outcomes are not written.

        Returns:
            The written entry, or None for a SUCCESS outcome
        """
        if is_success(outcome):
            return None

        entry = self._new_entry(
            test_name,
            request,
            request_body,
            response,
            outcome.value if isinstance(outcome, Outcome) else str(outcome),
        )
        self._append(entry, "Failed to write curl report")
        return entry

    def log_failure(
        self,
        test_name: str,
        request: HttpRequest,
        request_body: str | None,
        response: HttpResponse | None,
        error: BaseException,
        failure_details: FailureDetails | None = None,
    ) -> ReportEntry:
        """
        Record a failed check.

        Args:
            test_name: Name of the failing check
            request: The request that was sent (or attempted)
            request_body: Raw body text of the request, if any
            response: The response, or None if the request itself failed
            error: The assertion or transport error
            failure_details: What was checked and what was found

        Returns:
            The written entry
        """
        entry = self._new_entry(
            test_name, request, request_body, response, Outcome.FAILURE.value
        )
        entry.error = ErrorDescriptor.from_exception(error)
        entry.failure_details = failure_details
        entry.fix_action = suggest_fix_action(failure_details)
        self._append(entry, "Failed to write curl failure report")
        return entry

    def read(self) -> str:
        """Return the current report contents (empty if not created yet)."""
        with self._lock:
            if not self.report_path.exists():
                return ""
            return self.report_path.read_text(encoding="utf-8")

    def _new_entry(
        self,
        test_name: str,
        request: HttpRequest,
        request_body: str | None,
        response: HttpResponse | None,
        outcome: str,
    ) -> ReportEntry:
        return ReportEntry(
            test_name=test_name,
            timestamp=datetime.now().astimezone(),
            outcome=outcome,
            curl=to_curl(request, request_body),
            response=response,
            pipeline_repo=self.pipeline_repo,
            automation_repo=self.automation_repo,
        )

    def _append(self, entry: ReportEntry, failure_message: str) -> None:
        text = entry.render()
        with self._lock:
            try:
                self.report_path.parent.mkdir(parents=True, exist_ok=True)
                with open(self.report_path, "a", encoding="utf-8") as f:
                    f.write(text)
            except OSError as e:
                raise ReportWriteError(f"{failure_message} at {self.report_path}") from e
        logger.debug(f"Appended {entry.outcome} entry for {entry.test_name}")

    def __repr__(self) -> str:
        return f"CurlReporter(report_path={str(self.report_path)!r})"
