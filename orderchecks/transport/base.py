"""
Base transport interface for order API communication.

This module defines the abstract base class that all transport
implementations must follow.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from .models import HttpRequest, HttpResponse


class BaseTransport(ABC):
    """
    Abstract base class for transports.

    A transport sends an HttpRequest and returns the HttpResponse.
    Network failures are raised, never turned into responses, so that
    callers can report them and fail the check.
    """

    base_url: str = ""

    @abstractmethod
    async def connect(self) -> None:
        """Open the underlying client session."""
        pass

    @abstractmethod
    async def disconnect(self) -> None:
        """Close the underlying client session."""
        pass

    @abstractmethod
    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request and return the response.

        Args:
            request: The request to send

        Returns:
            HttpResponse with status, headers and body text

        Raises:
            Transport-specific errors when the request cannot be sent
        """
        pass

    @property
    @abstractmethod
    def is_connected(self) -> bool:
        """Return True if the transport is currently connected."""
        pass

    def url_for(self, path: str) -> str:
        """Join a path onto the base URL."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def build_get(self, path: str, headers: Mapping[str, str] | None = None) -> HttpRequest:
        return HttpRequest.get(self.url_for(path), headers)

    def build_post_json(
        self,
        path: str,
        payload: Any,
        headers: Mapping[str, str] | None = None,
    ) -> HttpRequest:
        return HttpRequest.post_json(self.url_for(path), payload, headers)

    async def __aenter__(self) -> BaseTransport:
        """Async context manager entry."""
        await self.connect()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.disconnect()
