"""
Config parser for the order API check suite.

This module converts validated YAML data into a typed SuiteConfig.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .models import SuiteConfig


class ConfigParser:
    """Parses and converts validated YAML to a typed SuiteConfig."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> SuiteConfig:
        """Convert validated data to SuiteConfig, keeping defaults for missing keys."""
        config = SuiteConfig()
        api = self.data.get("api") or {}
        report = self.data.get("report") or {}
        orders = self.data.get("orders") or {}

        if "base_url" in api:
            config.base_url = api["base_url"]
        if "connect_timeout_s" in api:
            config.connect_timeout_s = float(api["connect_timeout_s"])
        if "request_timeout_s" in api:
            config.request_timeout_s = float(api["request_timeout_s"])

        if "path" in report:
            config.report_path = Path(report["path"])
        if "pipeline_repo" in report:
            config.pipeline_repo = report["pipeline_repo"]
        if "automation_repo" in report:
            config.automation_repo = report["automation_repo"]

        if "order_id" in orders:
            config.order_id = orders["order_id"]
        if "suspect_source" in orders:
            config.suspect_source = orders["suspect_source"]

        return config
