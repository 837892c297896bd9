"""Response helpers for the mock accrual endpoint.

The real accrual service reports order status and accrued points. The mock
always reports a processed order with a fixed accrual.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse


JsonObject = dict[str, Any]

STATUS_PROCESSED = "PROCESSED"
FIXED_ACCRUAL = 1000


@dataclass(frozen=True, slots=True)
class OrderAccrualResult:
    """Accrual result for a single order, built per request."""

    order: str
    status: str = STATUS_PROCESSED
    accrual: int = FIXED_ACCRUAL

    def to_dict(self) -> JsonObject:
        return {
            "order": self.order,
            "status": self.status,
            "accrual": self.accrual,
        }


def accrual_result(order: str) -> JSONResponse:
    """Build the 200 response for a matched order.

    Starlette renders JSON compactly, so identical orders give identical bytes.
    """

    return JSONResponse(OrderAccrualResult(order=order).to_dict(), status_code=200)


def no_content() -> Response:
    """Empty 204 used for every unmatched request."""

    return Response(status_code=204)
