"""
Heuristic fix-action suggestions for failed checks.

The suggestion is a single sentence phrased for downstream automated
parsing. Rules are tried in a fixed order:

    1. status code assertions with a numeric actual value
    2. quoted string literal mismatches
    3. generic "return expected instead of actual"
"""

from __future__ import annotations

import re

from .models import UNKNOWN, FailureDetails

_NUMERIC = re.compile(r"\d+")


def suggest_fix_action(details: FailureDetails | None) -> str | None:
    """
    Pick a fix-action sentence for the given failure details.

    Returns:
        The sentence, or None when there is nothing to suggest
        (no details, no assertion, or a non-error status code).
    """
    if details is None or details.assertion is None:
        return None

    assertion = details.assertion.lower()
    expected = details.resolved("expected")
    actual = details.resolved("actual")
    suspect = details.resolved("suspect_file")

    if "status code" in assertion and _NUMERIC.fullmatch(actual):
        status = int(actual)
        if status >= 500:
            return (
                f"API returns {status} error. Check server logs and fix the internal "
                f"server error in {suspect}. Review exception handling and null checks."
            )
        if status >= 400:
            return (
                f"API returns {status} error. Fix request validation or input "
                f"handling in {suspect}."
            )
        return None

    if expected != UNKNOWN and actual != UNKNOWN and '"' in expected and '"' in actual:
        return f"Replace {actual} with {expected} in {suspect}."

    return f"In {suspect}, ensure the code returns {expected} instead of {actual}."

