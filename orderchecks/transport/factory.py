"""
Transport factory for creating transports from configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .base import BaseTransport
from .http import HTTPTransport

if TYPE_CHECKING:
    from ..config import SuiteConfig


def create_transport(config: SuiteConfig) -> BaseTransport:
    """
    Create a transport instance from a SuiteConfig.

    Args:
        config: Suite configuration (base URL and timeouts)

    Returns:
        An HTTPTransport, not yet connected

    Raises:
        ValueError: If the base URL is missing or not HTTP(S)

    Example:
        config, _ = load_config("orderchecks.yaml")
        async with create_transport(config) as transport:
            response = await transport.send(transport.build_get("/api/orders/1/status"))
    """
    if not config.base_url:
        raise ValueError("HTTP transport requires a base URL")
    if not config.base_url.startswith(("http://", "https://")):
        raise ValueError(f"Base URL must be HTTP(S): {config.base_url!r}")

    return HTTPTransport(
        base_url=config.base_url,
        connect_timeout_s=config.connect_timeout_s,
        request_timeout_s=config.request_timeout_s,
    )
