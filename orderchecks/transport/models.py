"""
Transport layer models for order API communication.

This module defines the plain request and response records that
flow from the HTTP transport to the checks and the reporter.
Headers are kept as ordered multi-maps: name -> list of values.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

JSON_CONTENT_TYPE = "application/json"

Headers = dict[str, list[str]]


def to_multimap(headers: Mapping[str, str] | Iterable[tuple[str, str]] | None) -> Headers:
    """
    Collect header pairs into an ordered multi-map.

    Repeated names (e.g. from a CIMultiDict) keep every value in order.
    """
    result: Headers = {}
    if headers is None:
        return result
    items = headers.items() if isinstance(headers, Mapping) else headers
    for name, value in items:
        result.setdefault(name, []).append(value)
    return result


@dataclass
class HttpRequest:
    """An HTTP request as it is sent and later reported."""
    method: str
    url: str
    headers: Headers = field(default_factory=dict)
    body: str | None = None

    def add_header(self, name: str, value: str) -> HttpRequest:
        """Append a header value, keeping earlier values for the same name."""
        self.headers.setdefault(name, []).append(value)
        return self

    def header_items(self) -> list[tuple[str, str]]:
        """Flatten the header multi-map into (name, value) pairs."""
        return [(name, value) for name, values in self.headers.items() for value in values]

    @classmethod
    def get(cls, url: str, headers: Mapping[str, str] | None = None) -> HttpRequest:
        return cls(method="GET", url=url, headers=to_multimap(headers))

    @classmethod
    def post_json(
        cls,
        url: str,
        payload: Any,
        headers: Mapping[str, str] | None = None,
    ) -> HttpRequest:
        """Build a POST with a JSON body and a Content-Type header."""
        request = cls(
            method="POST",
            url=url,
            headers=to_multimap(headers),
            body=json.dumps(payload, separators=(",", ":")),
        )
        if "Content-Type" not in request.headers:
            request.add_header("Content-Type", JSON_CONTENT_TYPE)
        return request


@dataclass
class HttpResponse:
    """A received HTTP response with its body decoded as text."""
    status: int
    headers: Headers = field(default_factory=dict)
    body: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

    def header(self, name: str) -> str | None:
        """Get the first value of a header, matching the name case-insensitively."""
        lowered = name.lower()
        for key, values in self.headers.items():
            if key.lower() == lowered and values:
                return values[0]
        return None

    def json(self) -> Any:
        """
        Parse the body as JSON.

        Raises:
            json.JSONDecodeError: If the body is not valid JSON
        """
        return json.loads(self.body)
