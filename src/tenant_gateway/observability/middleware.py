"""
tenant_gateway.observability.middleware

Per-request log context and access logging.

Responsibilities:
- Tag every log line of a request with its request id, path and method.
- Emit one `request_completed` event per request (uvicorn access logs are off).
"""

from __future__ import annotations

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from tenant_gateway.observability.logging import get_logger

REQUEST_ID_HEADER = "x-request-id"

log = get_logger(__name__)


class RequestContextMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        started = time.perf_counter()
        with structlog.contextvars.bound_contextvars(
            request_id=request_id,
            path=request.url.path,
            method=request.method,
        ):
            response: Response = await call_next(request)
            log.info(
                "request_completed",
                status=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 1),
            )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
