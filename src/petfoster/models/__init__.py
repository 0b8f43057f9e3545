"""Pydantic models for booking pricing and refunds."""

from .enums import BookingStatus, PaymentStatus, RefundReason, RefundType
from .errors import (
    ERROR_MESSAGES,
    ERROR_RECOVERY,
    ErrorCode,
    ErrorResponse,
    InvalidArgumentError,
    InvalidDateError,
    OrderNumberExhaustedError,
    PricingError,
)
from .pricing import BookingPriceSnapshot, DiscountTier, PriceBreakdown
from .refund import CancellationCheck, RefundCalculation

__all__ = [
    # Enums
    "BookingStatus",
    "PaymentStatus",
    "RefundReason",
    "RefundType",
    # Pricing
    "BookingPriceSnapshot",
    "DiscountTier",
    "PriceBreakdown",
    # Refund
    "CancellationCheck",
    "RefundCalculation",
    # Errors
    "ErrorCode",
    "ErrorResponse",
    "ERROR_MESSAGES",
    "ERROR_RECOVERY",
    "InvalidArgumentError",
    "InvalidDateError",
    "OrderNumberExhaustedError",
    "PricingError",
]
