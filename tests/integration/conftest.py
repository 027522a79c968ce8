"""Fixtures for live checks against a running order API.

Select them with ``pytest -m integration``; the target is taken from
API_BASE_URL (default http://localhost:9090).
"""

import pytest

from orderchecks.config import load_config
from orderchecks.reporting import CurlReporter


@pytest.fixture(scope="session")
def live_config():
    config, validation = load_config()
    if config is None:
        pytest.fail(f"Invalid suite config:\n{validation}")
    return config


@pytest.fixture(scope="session")
def live_reporter(live_config):
    """One report per session, truncated before the first check."""
    reporter = CurlReporter.from_config(live_config)
    reporter.reset_report()
    return reporter
