"""Correlation ID middleware for request tracing.

Callers of the quote and refund preview endpoints (the booking form, the
cancellation flow) pass X-Correlation-ID so engine log lines can be joined
with their own. Header values that are not a short token are replaced,
since the ID is copied into every log record.
"""

import re
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from petfoster.utils.logging import clear_correlation_id, get_logger, set_correlation_id

logger = get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"
CORRELATION_ID_PATTERN = re.compile(r"[A-Za-z0-9._:-]{1,64}")


def accepted_correlation_id(value: str | None) -> str | None:
    """Return the incoming ID if it is safe to log, otherwise None."""
    if value and CORRELATION_ID_PATTERN.fullmatch(value):
        return value
    return None


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Tags each request with a correlation ID and logs its outcome."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        incoming_id = request.headers.get(CORRELATION_ID_HEADER)
        correlation_id = set_correlation_id(accepted_correlation_id(incoming_id))
        started = time.perf_counter()

        try:
            response = await call_next(request)
            duration_ms = round((time.perf_counter() - started) * 1000, 1)
            logger.info(
                "%s %s -> %d (%.1f ms)",
                request.method,
                request.url.path,
                response.status_code,
                duration_ms,
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status_code": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            return response
        finally:
            clear_correlation_id()
