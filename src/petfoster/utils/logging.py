"""Structured logging utilities with correlation ID support.

Provides:
- Correlation ID context management for request tracing
- Structured logging formatter for consistent log output
- Helper functions for pricing and refund logging

Usage:
    from petfoster.utils.logging import get_logger, set_correlation_id

    # In middleware/request handler:
    set_correlation_id(request.headers.get("X-Correlation-ID"))

    # In service code:
    logger = get_logger(__name__)
    logger.info("Quoted booking", extra={"total_price": 95000})
"""

import logging
import uuid
from contextvars import ContextVar
from typing import Any

# Thread-safe and async-safe
_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def generate_correlation_id() -> str:
    """Generate a new correlation ID.

    Returns:
        UUID-based correlation ID string
    """
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: str | None = None) -> str:
    """Set the correlation ID for the current request context.

    Args:
        correlation_id: Optional existing correlation ID. If None, generates new one.

    Returns:
        The correlation ID that was set
    """
    cid = correlation_id or generate_correlation_id()
    _correlation_id.set(cid)
    return cid


def get_correlation_id() -> str | None:
    """Get the current correlation ID."""
    return _correlation_id.get()


def clear_correlation_id() -> None:
    """Clear the correlation ID context."""
    _correlation_id.set(None)


class CorrelationIdFilter(logging.Filter):
    """Logging filter that adds correlation_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = get_correlation_id() or "no-correlation-id"
        return True


class StructuredFormatter(logging.Formatter):
    """Formatter that prefixes every line with the correlation ID."""

    def format(self, record: logging.LogRecord) -> str:
        if not hasattr(record, "correlation_id"):
            record.correlation_id = get_correlation_id() or "no-correlation-id"

        base = super().format(record)
        return f"[{record.correlation_id}] {base}"


def configure_logging(level: str = "INFO") -> None:
    """Install a structured handler on the root logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        level: Root log level name
    """
    root = logging.getLogger()
    root.setLevel(level)
    if not any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(StructuredFormatter(LOG_FORMAT))
        root.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger with correlation ID support.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not any(isinstance(f, CorrelationIdFilter) for f in logger.filters):
        logger.addFilter(CorrelationIdFilter())

    return logger


def log_pricing_operation(
    logger: logging.Logger,
    operation: str,
    *,
    price_per_day: int | None = None,
    days: int | None = None,
    total_price: int | None = None,
    error: str | None = None,
    **extra: Any,
) -> None:
    """Log a pricing calculation with structured context.

    Breakdowns are frequent and cheap, so successes go to DEBUG.

    Args:
        logger: Logger instance
        operation: Operation name (e.g., "price_breakdown")
        price_per_day: Daily price in minor units
        days: Number of days priced
        total_price: Resulting total in minor units
        error: Error message if the calculation was rejected
        **extra: Additional context fields
    """
    context: dict[str, Any] = {"operation": operation}

    if price_per_day is not None:
        context["price_per_day"] = price_per_day
    if days is not None:
        context["days"] = days
    if total_price is not None:
        context["total_price"] = total_price
    if error:
        context["error"] = error

    context.update(extra)

    msg_parts = [f"Pricing operation: {operation}"]
    for key, value in context.items():
        if key != "operation":
            msg_parts.append(f"{key}={value}")

    message = " | ".join(msg_parts)

    if error:
        logger.warning(message, extra=context)
    else:
        logger.debug(message, extra=context)


def log_refund_operation(
    logger: logging.Logger,
    classification: str,
    *,
    total_price: int,
    refund_amount: int,
    cancellation_fee: int,
    hours_until_start: float,
    **extra: Any,
) -> None:
    """Log a refund decision with structured context.

    Args:
        logger: Logger instance
        classification: Refund type (full, partial, none)
        total_price: Stored booking total in minor units
        refund_amount: Refund in minor units
        cancellation_fee: Retained fee in minor units
        hours_until_start: Hours between cancellation and start
        **extra: Additional context fields
    """
    context: dict[str, Any] = {
        "classification": classification,
        "total_price": total_price,
        "refund_amount": refund_amount,
        "cancellation_fee": cancellation_fee,
        "hours_until_start": round(hours_until_start, 2),
    }
    context.update(extra)

    message = (
        f"Refund calculated: {classification} | total={total_price} "
        f"refund={refund_amount} fee={cancellation_fee} "
        f"hours_until_start={context['hours_until_start']}"
    )
    logger.info(message, extra=context)
