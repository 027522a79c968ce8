"""Shared fixtures: temporary reporters and an in-process fake order API."""

from __future__ import annotations

import copy
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from orderchecks.config import SuiteConfig
from orderchecks.reporting import CurlReporter
from orderchecks.transport import HTTPTransport, HttpRequest

HEALTHY_STATUS = {
    "orderId": "abcd-12345",
    "overallStatus": "ACTIVE",
    "stage": "PACKING",
    "progressPercent": 50,
    "payment": {"status": "CLEARED", "method": "CARD"},
}

# Nothing listens on port 1, so connections are refused right away.
UNREACHABLE_URL = "http://127.0.0.1:1"


class FakeOrderApi:
    """Order API stand-in whose responses tests can change per case."""

    def __init__(self):
        self.base_url = ""
        self.create_status = 201
        self.create_body: Any = {"id": "abcd-12345", "status": "CREATED"}
        self.status_code = 200
        self.status_body: Any = copy.deepcopy(HEALTHY_STATUS)
        self.raw_create_body: bytes | None = None
        self.raw_status_body: str | bytes | None = None
        self.created: list[Any] = []
        self.status_requests: list[str] = []

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_post("/api/orders", self.create_order)
        app.router.add_get("/api/orders/{order_id}/status", self.order_status)
        return app

    async def create_order(self, request: web.Request) -> web.Response:
        self.created.append(await request.json())
        if self.raw_create_body is not None:
            return self._raw(self.create_status, self.raw_create_body)
        if self.create_body is None:
            return web.Response(status=self.create_status, text="")
        return web.json_response(self.create_body, status=self.create_status)

    async def order_status(self, request: web.Request) -> web.Response:
        self.status_requests.append(request.match_info["order_id"])
        if self.raw_status_body is not None:
            return self._raw(self.status_code, self.raw_status_body)
        return web.json_response(self.status_body, status=self.status_code)

    @staticmethod
    def _raw(status: int, body: str | bytes) -> web.Response:
        """Serve a body as-is, declared as UTF-8 JSON whether or not it is."""
        if isinstance(body, str):
            body = body.encode("utf-8")
        return web.Response(
            status=status,
            body=body,
            content_type="application/json",
            charset="utf-8",
        )


@pytest.fixture
def unreachable_url():
    return UNREACHABLE_URL


@pytest.fixture
def report_path(tmp_path):
    return tmp_path / "build" / "reports" / "curl-report.txt"


@pytest.fixture
def reporter(report_path):
    reporter = CurlReporter(report_path)
    reporter.reset_report()
    return reporter


@pytest.fixture
def post_request():
    return HttpRequest(
        method="POST",
        url="http://x/y",
        headers={"Content-Type": ["application/json"]},
        body='{"a":1}',
    )


@pytest_asyncio.fixture
async def order_api():
    """Start the fake order API on a free local port."""
    api = FakeOrderApi()
    server = TestServer(api.app())
    await server.start_server()
    api.base_url = f"http://{server.host}:{server.port}"
    try:
        yield api
    finally:
        await server.close()


@pytest.fixture
def suite_config(order_api, report_path):
    return SuiteConfig(base_url=order_api.base_url, report_path=report_path)


@pytest_asyncio.fixture
async def transport(order_api):
    async with HTTPTransport(order_api.base_url) as transport:
        yield transport
