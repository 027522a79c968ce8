"""
Suite Configuration

This package loads the settings for a run of the order checks:
API base URL and timeouts, report location and repository references,
and the order used by the status check.

Config file layout (every key optional):

    api:
      base_url: http://localhost:9090
      connect_timeout_s: 5
      request_timeout_s: 10
    report:
      path: build/reports/curl-report.txt
    orders:
      order_id: abcd-12345

Usage:
    from orderchecks.config import load_config

    config, result = load_config("orderchecks.yaml")
    if not result.is_valid:
        print(result)
"""

# Loader functions
from .loader import apply_env, load_config, load_config_string, validate_config_yaml

# Models
from .models import (
    BASE_URL_ENV,
    DEFAULT_BASE_URL,
    DEFAULT_ORDER_ID,
    DEFAULT_SUSPECT_SOURCE,
    SuiteConfig,
)

# Validation
from .validation import ConfigValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "apply_env",
    "load_config",
    "load_config_string",
    "validate_config_yaml",
    # Models
    "BASE_URL_ENV",
    "DEFAULT_BASE_URL",
    "DEFAULT_ORDER_ID",
    "DEFAULT_SUSPECT_SOURCE",
    "SuiteConfig",
    # Validation
    "ConfigValidator",
    "ValidationError",
    "ValidationResult",
]
