"""Tests for the aiohttp transport against the in-process fake order API."""

import aiohttp
import pytest

from orderchecks.config import SuiteConfig
from orderchecks.transport import HTTPTransport, create_transport


@pytest.mark.asyncio
async def test_get_returns_status_headers_and_body(transport, order_api):
    response = await transport.send(transport.build_get("/api/orders/abcd-12345/status"))

    assert response.status == 200
    assert response.header("Content-Type").startswith("application/json")
    assert response.json()["stage"] == "PACKING"
    assert order_api.status_requests == ["abcd-12345"]


@pytest.mark.asyncio
async def test_post_sends_json_body(transport, order_api):
    request = transport.build_post_json("api/orders", {"customerId": "cust-123"})

    response = await transport.send(request)

    assert response.status == 201
    assert order_api.created == [{"customerId": "cust-123"}]
    assert request.url == f"{order_api.base_url}/api/orders"


@pytest.mark.asyncio
async def test_error_status_is_returned_not_raised(transport, order_api):
    order_api.status_code = 503
    order_api.status_body = {"error": "unavailable"}

    response = await transport.send(transport.build_get("/api/orders/x/status"))

    assert response.status == 503
    assert not response.ok


@pytest.mark.asyncio
async def test_invalid_utf8_body_is_decoded_with_replacement(transport, order_api):
    order_api.status_code = 500
    order_api.raw_status_body = b"caf\xe9"

    response = await transport.send(transport.build_get("/api/orders/x/status"))

    assert response.status == 500
    assert response.body == "caf\ufffd"


@pytest.mark.asyncio
async def test_send_requires_connect(order_api):
    transport = HTTPTransport(order_api.base_url)

    with pytest.raises(RuntimeError, match="not connected"):
        await transport.send(transport.build_get("/api/orders/x/status"))


@pytest.mark.asyncio
async def test_connection_refused_is_raised(unreachable_url):
    async with HTTPTransport(unreachable_url, connect_timeout_s=1, request_timeout_s=2) as transport:
        with pytest.raises(aiohttp.ClientConnectorError):
            await transport.send(transport.build_get("/api/orders/x/status"))


@pytest.mark.asyncio
async def test_context_manager_closes_session(order_api):
    transport = HTTPTransport(order_api.base_url)

    async with transport:
        assert transport.is_connected

    assert not transport.is_connected


def test_create_transport_from_config():
    transport = create_transport(
        SuiteConfig(base_url="http://orders:9090/", connect_timeout_s=1, request_timeout_s=3)
    )

    assert isinstance(transport, HTTPTransport)
    assert transport.base_url == "http://orders:9090"
    assert transport.connect_timeout_s == 1
    assert transport.request_timeout_s == 3


@pytest.mark.parametrize("base_url", ["", "orders:9090"])
def test_create_transport_rejects_bad_url(base_url):
    with pytest.raises(ValueError):
        create_transport(SuiteConfig(base_url=base_url))
