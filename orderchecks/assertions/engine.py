"""
Assertion engine for evaluating checks on order API responses.

This module provides the assertion logic used by the order checks:
status code membership, non-empty bodies and JSONPath lookups on
parsed JSON bodies.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError

from .models import AssertionResult

PATH_NOT_FOUND = "<path not found>"


class AssertionEngine:
    """
    Engine for running assertions on HTTP responses and JSON data.

    Supports:
    - status_in: Check a status code against allowed values
    - not_empty: Check a body has content
    - exists: Check if a JSONPath exists in the data
    - equals: Check if the value at a JSONPath equals an expected value

    Example:
        engine = AssertionEngine()
        data = {"stage": "PACKING", "payment": {"status": "CLEARED"}}

        result = engine.exists(data, "$.payment")
        result = engine.equals(data, "$.payment.status", "CLEARED")
    """

    def status_in(self, status: int, allowed: Collection[int]) -> AssertionResult:
        """Assert that a status code is one of the allowed values."""
        expected = " or ".join(str(code) for code in sorted(allowed))
        if status in allowed:
            return AssertionResult.passed_result(
                message=f"Status code {status} is allowed",
                actual=status,
            )
        return AssertionResult.failed_result(
            message=f"Expected status {expected} but got {status}",
            expected=expected,
            actual=status,
        )

    def not_empty(self, body: str | None) -> AssertionResult:
        """Assert that a response body is not empty."""
        if body:
            return AssertionResult.passed_result(
                message="Body is not empty",
                actual=f"{len(body)} characters",
            )
        return AssertionResult.failed_result(
            message="Response body should contain order info or error details.",
            expected="non-empty body",
            actual="empty body",
        )

    def exists(self, data: Any, path: str) -> AssertionResult:
        """
        Assert that a path exists in the data and is not null.

        Args:
            data: The JSON data to search
            path: JSONPath expression

        Returns:
            AssertionResult indicating pass/fail
        """
        matches, error = self._evaluate_path(data, path)
        if error:
            return error

        if matches and matches[0].value is not None:
            return AssertionResult.passed_result(
                message="Path exists",
                path=path,
                actual=self._summarize_matches(matches),
            )
        return AssertionResult.failed_result(
            message="Path does not exist",
            path=path,
            expected="path to exist",
            actual="no matches found" if not matches else "null",
        )

    def equals(self, data: Any, path: str, expected: Any) -> AssertionResult:
        """
        Assert that the value at a path equals an expected value.

        Args:
            data: The JSON data to search
            path: JSONPath expression
            expected: The expected value

        Returns:
            AssertionResult indicating pass/fail
        """
        matches, error = self._evaluate_path(data, path)
        if error:
            return error

        if not matches:
            return AssertionResult.failed_result(
                message="Path does not exist",
                path=path,
                expected=expected,
                actual=PATH_NOT_FOUND,
            )

        actual = matches[0].value

        if actual == expected and isinstance(actual, bool) == isinstance(expected, bool):
            return AssertionResult.passed_result(
                message="Value matches expected",
                path=path,
                actual=actual,
            )
        return AssertionResult.failed_result(
            message=f"{path} should be {expected}",
            path=path,
            expected=expected,
            actual=actual,
            details=self._type_mismatch_hint(expected, actual),
        )

    def _evaluate_path(self, data: Any, path: str) -> tuple[list, AssertionResult | None]:
        """
        Evaluate a JSONPath expression on data.

        Returns:
            Tuple of (matches, error). If error is not None, matches is empty.
        """
        try:
            jsonpath_expr = parse_jsonpath(path)
        except JSONPathError as e:
            return [], AssertionResult.error_result(
                message="Invalid JSONPath expression",
                path=path,
                details={"error": str(e)},
            )
        except Exception as e:
            return [], AssertionResult.error_result(
                message="Failed to parse JSONPath",
                path=path,
                details={"error": f"{type(e).__name__}: {e}"},
            )

        try:
            matches = jsonpath_expr.find(data)
            return matches, None
        except Exception as e:
            return [], AssertionResult.error_result(
                message="Failed to evaluate JSONPath",
                path=path,
                details={"error": f"{type(e).__name__}: {e}"},
            )

    def _summarize_matches(self, matches: list) -> Any:
        """Summarize matches for display."""
        if len(matches) == 1:
            return matches[0].value
        return [m.value for m in matches]

    def _type_mismatch_hint(self, expected: Any, actual: Any) -> dict[str, Any]:
        """Generate a hint if types don't match."""
        if type(expected) != type(actual):
            return {
                "hint": f"Type mismatch: expected {type(expected).__name__}, got {type(actual).__name__}"
            }
        return {}
