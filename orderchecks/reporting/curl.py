"""
Curl reconstruction for captured HTTP requests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..transport.models import HttpRequest


def shell_quote_body(body: str) -> str:
    """Escape single quotes so the body survives inside '...' in a shell."""
    return body.replace("'", "'\"'\"'")


def to_curl(request: HttpRequest, request_body: str | None = None) -> str:
    """
    Rebuild a request as a directly executable curl command.

    Args:
        request: The request that was sent
        request_body: Raw body text, omitted from the command when empty

    Returns:
        e.g. ``curl -X POST 'http://x/y' -H 'Content-Type: application/json' --data-raw '{"a":1}'``
    """
    parts = [f"curl -X {request.method} '{request.url}'"]

    for name, values in request.headers.items():
        for value in values:
            parts.append(f"-H '{name}: {value}'")

    if request_body:
        parts.append(f"--data-raw '{shell_quote_body(request_body)}'")

    return " ".join(parts)
