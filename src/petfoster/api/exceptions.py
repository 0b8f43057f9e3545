"""FastAPI exception handlers for converting PricingError to HTTP responses.

Input errors map to 400 Bad Request and an exhausted order number
registry to 503. Bodies are ErrorResponse-shaped JSON.

Usage:
    from petfoster.api.exceptions import register_exception_handlers
    register_exception_handlers(app)
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_503_SERVICE_UNAVAILABLE

from petfoster.models.errors import ErrorCode, PricingError
from petfoster.utils.logging import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_HTTP_STATUS: dict[ErrorCode, int] = {
    ErrorCode.INVALID_ARGUMENT: HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_DATE: HTTP_400_BAD_REQUEST,
    ErrorCode.ORDER_NUMBER_EXHAUSTED: HTTP_503_SERVICE_UNAVAILABLE,
}


def get_http_status_for_error(code: ErrorCode) -> int:
    """Get HTTP status code for an ErrorCode, defaulting to 400."""
    return ERROR_CODE_TO_HTTP_STATUS.get(code, HTTP_400_BAD_REQUEST)


async def pricing_error_handler(request: Request, exc: PricingError) -> JSONResponse:
    """Handle PricingError exceptions and convert to JSON response.

    Args:
        request: The incoming request
        exc: The PricingError exception

    Returns:
        JSONResponse with error details and appropriate status code.
    """
    logger.info(
        "Rejected %s %s: %s", request.method, request.url.path, exc.message
    )
    return JSONResponse(
        status_code=get_http_status_for_error(exc.code),
        content=exc.to_error_response().model_dump(mode="json"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers with the FastAPI app."""
    app.add_exception_handler(PricingError, pricing_error_handler)  # type: ignore[arg-type]
