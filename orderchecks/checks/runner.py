"""
Sequential runner for the order checks.

Used by the command line: resets the curl report, runs each check
once over a single transport and collects pass/fail outcomes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path

from ..config import SuiteConfig
from ..reporting import CurlReporter, ReportWriteError
from ..transport import BaseTransport, create_transport
from .orders import OrderChecks

logger = logging.getLogger(__name__)


@dataclass
class CheckOutcome:
    """Pass/fail record of one check."""
    name: str
    passed: bool
    duration_ms: float
    error: str | None = None


@dataclass
class RunSummary:
    """Outcomes of a run and where its failures were reported."""
    report_path: Path
    outcomes: list[CheckOutcome] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return all(outcome.passed for outcome in self.outcomes)

    @property
    def failed_count(self) -> int:
        return sum(1 for outcome in self.outcomes if not outcome.passed)


async def run_order_checks(
    config: SuiteConfig,
    reporter: CurlReporter | None = None,
    transport: BaseTransport | None = None,
) -> RunSummary:
    """
    Run create_order then get_order_status against the configured API.

    A failing check does not stop the run. Report write failures do:
    ReportWriteError propagates to the caller.

    Args:
        config: Suite configuration
        reporter: Reporter to use (built from config if omitted)
        transport: Transport to use (built from config if omitted)

    Returns:
        RunSummary with one CheckOutcome per check
    """
    reporter = reporter or CurlReporter.from_config(config)
    reporter.reset_report()

    transport = transport or create_transport(config)
    summary = RunSummary(report_path=reporter.report_path)

    async with transport:
        checks = OrderChecks(transport, reporter, config)
        for name, check in (
            ("create_order", checks.create_order),
            ("get_order_status", checks.get_order_status),
        ):
            started_at = datetime.now(timezone.utc)
            try:
                await check(name)
            except ReportWriteError:
                raise
            except Exception as e:
                duration_ms = _elapsed_ms(started_at)
                logger.info(f"{name} failed: {type(e).__name__}: {e}")
                summary.outcomes.append(
                    CheckOutcome(name, False, duration_ms, f"{type(e).__name__}: {e}")
                )
                continue
            duration_ms = _elapsed_ms(started_at)
            summary.outcomes.append(CheckOutcome(name, True, duration_ms))

    return summary


def _elapsed_ms(started_at: datetime) -> float:
    return (datetime.now(timezone.utc) - started_at).total_seconds() * 1000
