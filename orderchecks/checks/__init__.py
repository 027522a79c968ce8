"""
Order API Checks

Sequential checks against the order API. Every failure is written to
the curl report before it is re-raised.

Checks:
    - create_order: POST /api/orders expects 200/201 and a non-empty body
    - get_order_status: GET /api/orders/{id}/status expects
      overallStatus ACTIVE, stage PACKING, progressPercent 50 and
      payment.status CLEARED
"""

from .orders import (
    OK_STATUSES,
    ORDER_PAYLOAD,
    ORDERS_PATH,
    STATUS_FIELD_CHECKS,
    FieldCheck,
    OrderChecks,
    found_literal,
    literal,
    status_recent_change,
)
from .runner import CheckOutcome, RunSummary, run_order_checks

__all__ = [
    "OK_STATUSES",
    "ORDER_PAYLOAD",
    "ORDERS_PATH",
    "STATUS_FIELD_CHECKS",
    "FieldCheck",
    "OrderChecks",
    "found_literal",
    "literal",
    "status_recent_change",
    "CheckOutcome",
    "RunSummary",
    "run_order_checks",
]
