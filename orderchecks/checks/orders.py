"""
Order API checks.

Each check sends one request, asserts on the status code and JSON
fields, and reports the outcome to the CurlReporter. A failing check
is logged with structured FailureDetails and the original error is
re-raised, so the caller still sees the failure.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from ..assertions import (
    PATH_NOT_FOUND,
    AssertionEngine,
    AssertionFailure,
    AssertionResult,
    AssertionStatus,
    expect,
)
from ..config import SuiteConfig
from ..reporting import CurlReporter, FailureDetails, Outcome, ReportWriteError
from ..transport import BaseTransport, HttpRequest, HttpResponse

logger = logging.getLogger(__name__)

ORDERS_PATH = "/api/orders"
OK_STATUSES = (200, 201)

ORDER_PAYLOAD: dict[str, Any] = {
    "customerId": "cust-123",
    "productSku": "sku-456",
    "quantity": 2,
    "shippingAddress": "123 Main St, Springfield",
    "unitPrice": 19.99,
    "deliveryNotes": "Leave at porch",
    "promoCode": "SPRING10",
    "giftWrap": True,
    "requestedDeliveryDate": "2024-05-30",
}


@dataclass(frozen=True)
class FieldCheck:
    """An expected value at a JSONPath of the order status body."""
    name: str
    path: str
    expected: Any
    handler_hint: str | None = None
    requires: str | None = None  # parent object that must be present

    @property
    def assertion(self) -> str:
        return f"{self.name} == {literal(self.expected)}"


STATUS_FIELD_CHECKS = (
    FieldCheck("overallStatus", "$.overallStatus", "ACTIVE"),
    FieldCheck("stage", "$.stage", "PACKING", handler_hint="getOrderStatus"),
    FieldCheck("progressPercent", "$.progressPercent", 50),
    FieldCheck(
        "payment.status",
        "$.payment.status",
        "CLEARED",
        handler_hint="PaymentStatus status literal",
        requires="payment",
    ),
)


def literal(value: Any) -> str:
    """Render a value the way it appears in an assertion: strings quoted, None as null."""
    if value is None:
        return "null"
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def found_literal(result: AssertionResult) -> str | None:
    """Literal of the value a comparison found; None when nothing was found."""
    if result.status == AssertionStatus.ERROR or result.actual == PATH_NOT_FOUND:
        return None
    return literal(result.actual)


def status_recent_change(status: int) -> str | None:
    """Recent-change hint for an unexpected status code."""
    if status >= 500:
        return (
            "Server error - check for recent code changes causing exceptions, "
            "null pointer errors, or unhandled edge cases"
        )
    if status >= 400:
        return "Client error - check for validation issues or incorrect request handling"
    return None


class OrderChecks:
    """
    Checks against the order API.

    Example:
        reporter = CurlReporter.from_config(config)
        reporter.reset_report()

        async with create_transport(config) as transport:
            checks = OrderChecks(transport, reporter, config)
            await checks.create_order()
            status = await checks.get_order_status()
    """

    def __init__(
        self,
        transport: BaseTransport,
        reporter: CurlReporter,
        config: SuiteConfig | None = None,
        engine: AssertionEngine | None = None,
    ):
        self.transport = transport
        self.reporter = reporter
        self.config = config or SuiteConfig()
        self.engine = engine or AssertionEngine()

    def suspect(self, hint: str | None = None) -> str:
        """Suspect-file hint pointing into the server source."""
        source = self.config.suspect_source
        return f"{source}:{hint}" if hint else source

    async def create_order(self, test_name: str = "create_order") -> HttpResponse:
        """
        POST a fixed order and expect 200/201 with a non-empty body.

        Raises:
            AssertionFailure: If the status or body is unexpected
            Transport errors when the request cannot be sent
        """
        request = self.transport.build_post_json(ORDERS_PATH, ORDER_PAYLOAD)
        response = await self._send(test_name, request)

        try:
            expect(
                self.engine.status_in(response.status, OK_STATUSES),
                f"Expected 200/201 from POST {ORDERS_PATH} but got "
                f"{response.status} with body: {response.body}",
            )
            expect(self.engine.not_empty(response.body))
        except AssertionFailure as e:
            details = FailureDetails(
                assertion="status in [200,201] and body not empty",
                expected="HTTP 200/201 with non-empty body",
                actual=f"HTTP {response.status} with body: {response.body}",
                suspect_file=self.suspect("createOrder"),
                stack_top="AssertionFailure at create_order::assert_status_or_body",
            )
            self.reporter.log_failure(test_name, request, request.body, response, e, details)
            raise

        self.reporter.log(test_name, request, request.body, response, Outcome.SUCCESS)
        logger.info(f"{test_name}: order created (HTTP {response.status})")
        return response

    async def get_order_status(
        self,
        test_name: str = "get_order_status",
        order_id: str | None = None,
    ) -> Any:
        """
        GET the status of an order and check its fields.

        Returns:
            The parsed status body

        Raises:
            AssertionFailure: On the first field that does not match
            Other errors (e.g. invalid JSON) after they are reported
        """
        order_id = order_id or self.config.order_id
        request = self.transport.build_get(f"{ORDERS_PATH}/{order_id}/status")
        response = await self._send(test_name, request)

        try:
            self._check(
                test_name,
                request,
                response,
                self.engine.status_in(response.status, OK_STATUSES),
                FailureDetails(
                    assertion="status code in [200, 201]",
                    expected="200 or 201",
                    actual=str(response.status),
                    suspect_file=self.suspect("getOrderStatus"),
                    recent_change=status_recent_change(response.status),
                    stack_top="AssertionFailure at get_order_status::assert_status_code",
                ),
                f"Expected 200/201 from GET {ORDERS_PATH}/{{id}}/status but got "
                f"{response.status} with body: {response.body}",
            )

            data = response.json()

            for check in STATUS_FIELD_CHECKS:
                self._check_field(test_name, request, response, data, check)

        except (AssertionFailure, ReportWriteError):
            raise
        except Exception as e:
            details = FailureDetails(
                assertion="test execution",
                expected="successful test execution",
                actual=f"{type(e).__name__}: {e}",
                suspect_file=self.suspect("getOrderStatus"),
                stack_top=f"{type(e).__name__} at get_order_status",
            )
            self.reporter.log_failure(test_name, request, request.body, response, e, details)
            raise

        self.reporter.log(test_name, request, request.body, response, Outcome.SUCCESS)
        logger.info(f"{test_name}: order {order_id} status verified")
        return data

    def _check_field(
        self,
        test_name: str,
        request: HttpRequest,
        response: HttpResponse,
        data: Any,
        check: FieldCheck,
    ) -> None:
        if check.requires:
            self._check(
                test_name,
                request,
                response,
                self.engine.exists(data, f"$.{check.requires}"),
                FailureDetails(
                    assertion=f"{check.requires} object present",
                    expected=f"{check.requires} object",
                    actual="null",
                    suspect_file=self.suspect("getOrderStatus"),
                    stack_top=f"AssertionFailure at get_order_status::assert_{check.requires}_present",
                ),
                f"{check.requires} object should be present",
            )

        result = self.engine.equals(data, check.path, check.expected)
        self._check(
            test_name,
            request,
            response,
            result,
            FailureDetails(
                assertion=check.assertion,
                expected=literal(check.expected),
                actual=found_literal(result),
                suspect_file=self.suspect(check.handler_hint),
                stack_top=f"AssertionFailure at get_order_status::assert_{check.name.replace('.', '_')}",
            ),
            f"{check.name} should be {check.expected}",
        )

    def _check(
        self,
        test_name: str,
        request: HttpRequest,
        response: HttpResponse,
        result: AssertionResult,
        details: FailureDetails,
        message: str | None = None,
    ) -> None:
        """Require a result to pass; report it with its details if not."""
        try:
            expect(result, message)
        except AssertionFailure as e:
            logger.info(f"{test_name} assertion failed:\n{result}")
            self.reporter.log_failure(test_name, request, request.body, response, e, details)
            raise

    async def _send(self, test_name: str, request: HttpRequest) -> HttpResponse:
        """Send a request; a transport failure is reported without a response."""
        try:
            return await self.transport.send(request)
        except Exception as e:
            self.reporter.log_failure(test_name, request, request.body, None, e, None)
            raise
