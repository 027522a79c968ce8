"""
HTTP transport for the order API.

This module sends HttpRequests with aiohttp, using a fixed connect
timeout and a fixed per-request timeout.
"""

from __future__ import annotations

import asyncio
import logging

import aiohttp

from .base import BaseTransport
from .models import HttpRequest, HttpResponse, to_multimap

logger = logging.getLogger(__name__)

DEFAULT_CONNECT_TIMEOUT_S = 5.0
DEFAULT_REQUEST_TIMEOUT_S = 10.0


class HTTPTransport(BaseTransport):
    """
    aiohttp-based transport for the order API.

    Only the headers set on the HttpRequest are sent explicitly, so the
    reported curl command matches what the check asked for.
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout_s: float = DEFAULT_CONNECT_TIMEOUT_S,
        request_timeout_s: float = DEFAULT_REQUEST_TIMEOUT_S,
    ):
        """
        Initialize HTTP transport.

        Args:
            base_url: The order API root (e.g., "http://localhost:9090")
            connect_timeout_s: Timeout for establishing a connection
            request_timeout_s: Total timeout for one request
        """
        self.base_url = base_url.rstrip("/")
        self.connect_timeout_s = connect_timeout_s
        self.request_timeout_s = request_timeout_s
        self._session: aiohttp.ClientSession | None = None

    @property
    def is_connected(self) -> bool:
        return self._session is not None and not self._session.closed

    async def connect(self) -> None:
        """Create the HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(connect=self.connect_timeout_s),
            )

    async def disconnect(self) -> None:
        """Close the HTTP session."""
        if self._session:
            await self._session.close()
            self._session = None

    async def send(self, request: HttpRequest) -> HttpResponse:
        """
        Send a request over HTTP.

        Raises:
            RuntimeError: If the transport is not connected
            aiohttp.ClientError: On connection or protocol failures
            asyncio.TimeoutError: If the request exceeds its timeout
        """
        if not self.is_connected:
            raise RuntimeError("Transport not connected. Call connect() first.")

        timeout = aiohttp.ClientTimeout(
            total=self.request_timeout_s,
            connect=self.connect_timeout_s,
        )
        data = request.body.encode("utf-8") if request.body else None

        logger.debug(f"{request.method} {request.url}")
        try:
            async with self._session.request(
                request.method,
                request.url,
                headers=request.header_items(),
                data=data,
                timeout=timeout,
            ) as resp:
                body = await resp.text(errors="replace")
                logger.debug(f"Response status: {resp.status}")
                return HttpResponse(
                    status=resp.status,
                    headers=to_multimap(resp.headers.items()),
                    body=body,
                )

        except asyncio.TimeoutError:
            logger.warning(
                f"{request.method} {request.url} timed out after {self.request_timeout_s}s"
            )
            raise
        except aiohttp.ClientConnectorError as e:
            logger.warning(f"Connection failed: {e}")
            raise
        except aiohttp.ClientError as e:
            logger.warning(f"HTTP error: {e}")
            raise

    def __repr__(self) -> str:
        status = "connected" if self.is_connected else "disconnected"
        return f"HTTPTransport(base_url={self.base_url!r}, status={status})"
