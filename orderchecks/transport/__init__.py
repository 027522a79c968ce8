"""
Order API Transport Layer

This package sends HTTP requests to the order API and returns plain
request/response records that the reporter can serialize.

Usage:
    from orderchecks.transport import HTTPTransport

    async with HTTPTransport("http://localhost:9090") as transport:
        request = transport.build_get("/api/orders/abcd-12345/status")
        response = await transport.send(request)
        print(response.status, response.json())
"""

# Factory
from .factory import create_transport

# Transport implementations
from .base import BaseTransport
from .http import HTTPTransport

# Models
from .models import (
    Headers,
    HttpRequest,
    HttpResponse,
    to_multimap,
)

__all__ = [
    # Factory
    "create_transport",
    # Base
    "BaseTransport",
    # Implementations
    "HTTPTransport",
    # Models
    "Headers",
    "HttpRequest",
    "HttpResponse",
    "to_multimap",
]
