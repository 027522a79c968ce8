"""
orderchecks - Order API Integration Checks with Curl Failure Reports

This package runs integration checks against an order-management HTTP API
and writes every failing request/response pair to a text report as a
reproducible curl command.

Subpackages:
    - config: Suite configuration (YAML file, API_BASE_URL)
    - transport: HTTP transport and request/response models
    - assertions: Assertion engine for response validation
    - reporting: Curl failure reports
    - checks: The order API checks and their runner

Usage:
    from orderchecks import load_config, create_transport, CurlReporter, OrderChecks

    config, _ = load_config()
    reporter = CurlReporter.from_config(config)
    reporter.reset_report()

    async with create_transport(config) as transport:
        checks = OrderChecks(transport, reporter, config)
        await checks.create_order()
        await checks.get_order_status()
"""

__version__ = "0.1.0"

# Re-export config for convenience
from .config import (
    SuiteConfig,
    ValidationError,
    ValidationResult,
    load_config,
    load_config_string,
    validate_config_yaml,
)

# Re-export transport for convenience
from .transport import (
    BaseTransport,
    HTTPTransport,
    HttpRequest,
    HttpResponse,
    create_transport,
)

# Re-export assertions for convenience
from .assertions import (
    AssertionEngine,
    AssertionFailure,
    AssertionResult,
    AssertionStatus,
    expect,
)

# Re-export reporting for convenience
from .reporting import (
    CurlReporter,
    FailureDetails,
    Outcome,
    ReportEntry,
    ReportWriteError,
    suggest_fix_action,
    to_curl,
)

# Re-export checks for convenience
from .checks import (
    CheckOutcome,
    OrderChecks,
    RunSummary,
    run_order_checks,
)

__all__ = [
    # Package info
    "__version__",
    # Config
    "SuiteConfig",
    "ValidationError",
    "ValidationResult",
    "load_config",
    "load_config_string",
    "validate_config_yaml",
    # Transport
    "BaseTransport",
    "HTTPTransport",
    "HttpRequest",
    "HttpResponse",
    "create_transport",
    # Assertions
    "AssertionEngine",
    "AssertionFailure",
    "AssertionResult",
    "AssertionStatus",
    "expect",
    # Reporting
    "CurlReporter",
    "FailureDetails",
    "Outcome",
    "ReportEntry",
    "ReportWriteError",
    "suggest_fix_action",
    "to_curl",
    # Checks
    "CheckOutcome",
    "OrderChecks",
    "RunSummary",
    "run_order_checks",
]
