"""
Typed configuration for the order API check suite.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..reporting.models import AUTOMATION_SUITE_REPO, DEFAULT_REPORT_PATH, PIPELINE_REPO
from ..transport.http import DEFAULT_CONNECT_TIMEOUT_S, DEFAULT_REQUEST_TIMEOUT_S

DEFAULT_BASE_URL = "http://localhost:9090"
BASE_URL_ENV = "API_BASE_URL"
DEFAULT_ORDER_ID = "abcd-12345"
DEFAULT_SUSPECT_SOURCE = "src/main/java/com/example/apptestpipeline/order/OrderController.java"


@dataclass
class SuiteConfig:
    """
    Settings for one run of the order checks.

    Attributes:
        base_url: Root URL of the order API
        connect_timeout_s: Connect timeout for each request
        request_timeout_s: Total timeout for each request
        report_path: Where failing requests are written as curl commands
        pipeline_repo: First repository reference appended to each entry
        automation_repo: Second repository reference appended to each entry
        order_id: Order whose status is fetched
        suspect_source: Server source file named in suspect-file hints
    """
    base_url: str = DEFAULT_BASE_URL
    connect_timeout_s: float = DEFAULT_CONNECT_TIMEOUT_S
    request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S
    report_path: Path = field(default_factory=lambda: DEFAULT_REPORT_PATH)
    pipeline_repo: str = PIPELINE_REPO
    automation_repo: str = AUTOMATION_SUITE_REPO
    order_id: str = DEFAULT_ORDER_ID
    suspect_source: str = DEFAULT_SUSPECT_SOURCE
