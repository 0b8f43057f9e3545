"""FastAPI application for booking quotes and refund previews.

Exposes the pricing engine read-only to the quote UI and the
cancellation flow. Nothing is persisted.
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from petfoster import __version__
from petfoster.api.exceptions import register_exception_handlers
from petfoster.api.middleware.correlation import CorrelationIdMiddleware
from petfoster.api.routes import pricing_router, refunds_router
from petfoster.config import get_settings
from petfoster.utils.logging import configure_logging

configure_logging(get_settings().log_level)

app = FastAPI(
    title="Pet Foster Pricing API",
    description="Booking quotes and cancellation refund previews",
    version=__version__,
)

# Configure CORS for local development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:5173", "http://127.0.0.1:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(CorrelationIdMiddleware)

register_exception_handlers(app)

app.include_router(pricing_router, prefix="/api")
app.include_router(refunds_router, prefix="/api")


@app.get("/api/ping")
async def ping() -> dict[str, Any]:
    """Health check endpoint."""
    return {
        "status": "ok",
        "timestamp": datetime.now(UTC).isoformat(),
        "service": "petfoster-pricing",
        "environment": get_settings().environment,
    }


def run_server(host: str = "0.0.0.0", port: int = 8080, reload: bool = True) -> None:
    """Run the API server.

    Args:
        host: Host to bind to (default: 0.0.0.0)
        port: Port to listen on (default: 8080)
        reload: Enable hot reload for development (default: True)
    """
    import uvicorn

    if reload:
        # Use string reference for reload mode (uvicorn requirement)
        uvicorn.run("petfoster.api.main:app", host=host, port=port, reload=True)
    else:
        uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_server()
