"""HTTP server for the mock accrual service.

Routing:
  - GET /api/orders/<digits>: wait the configured delay, then return the
    canned accrual result.
  - anything else (other methods, other paths, non-digit order numbers):
    empty 204, no delay.

No request results in an unhandled exception: failures collapse into the
same empty 204 as an unmatched route.
"""

from __future__ import annotations

import asyncio
import logging
import re

from fastapi import FastAPI, Request, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from .responses import accrual_result, no_content
from .settings import Settings, load_settings


log = logging.getLogger("accrual_mock.server")

# Raw request path bytes; ASCII digits only.
ORDER_PATH = re.compile(rb"/api/orders/[0-9]+")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings if settings is not None else load_settings()

    app = FastAPI(
        title="Accrual Mock",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
        # "/api/orders/1/" is not an order path; do not redirect it to one.
        redirect_slashes=False,
    )
    app.state.settings = settings  # type: ignore[attr-defined]

    @app.middleware("http")
    async def _exception_guard(request: Request, call_next):
        """Ensure unexpected exceptions never escape as framework 500s."""

        try:
            response: Response = await call_next(request)
            return response
        except Exception:  # noqa: BLE001
            log.exception("unhandled error for %s %s", request.method, request.url.path)
            return no_content()

    # Unknown paths (404) and wrong methods (405) both fall through to 204.
    @app.exception_handler(StarletteHTTPException)
    async def _no_route(request: Request, exc: StarletteHTTPException):
        return no_content()

    @app.get("/api/orders/{order}")
    async def get_order_accrual(order: str, request: Request):
        # Match the request target as sent: no percent-escapes, no query string.
        raw_path = request.scope.get("raw_path") or request.scope["path"].encode("ascii", "replace")
        if request.scope.get("query_string") or not ORDER_PATH.fullmatch(raw_path):
            return no_content()

        current: Settings = request.app.state.settings
        log.debug("order %s matched; delaying %d ms", order, current.delay_ms)
        await asyncio.sleep(current.delay_seconds)
        return accrual_result(order)

    return app


app = create_app()
