"""
Assertion Engine for Order API Responses

This package provides assertion capabilities for validating order API
responses against expected conditions.

Supported assertions:
    - status_in: Check a status code against allowed values
    - not_empty: Check a response body has content
    - exists: Check if a JSONPath exists in data
    - equals: Check if a value at a path equals expected

Usage:
    from orderchecks.assertions import AssertionEngine, expect

    data = {"overallStatus": "ACTIVE", "payment": {"status": "CLEARED"}}

    engine = AssertionEngine()
    result = engine.equals(data, "$.payment.status", "CLEARED")

    if not result.passed:
        print(result)  # Detailed failure message

    # Or raise AssertionFailure when it does not pass
    expect(engine.equals(data, "$.overallStatus", "ACTIVE"))
"""

# Models
from .models import AssertionFailure, AssertionResult, AssertionStatus, expect

# Engine
from .engine import PATH_NOT_FOUND, AssertionEngine

__all__ = [
    # Models
    "AssertionFailure",
    "AssertionResult",
    "AssertionStatus",
    "expect",
    # Engine
    "AssertionEngine",
    "PATH_NOT_FOUND",
]
