"""Enumeration types for pricing and refund models."""

from enum import Enum


class BookingStatus(str, Enum):
    """Status of a fostering booking."""

    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    """Payment status for a booking."""

    PENDING = "pending"
    PAID = "paid"
    REFUNDED = "refunded"
    PARTIAL_REFUND = "partial_refund"


class RefundType(str, Enum):
    """Classification of a cancellation refund."""

    FULL = "full"
    PARTIAL = "partial"
    NONE = "none"


class RefundReason(str, Enum):
    """Which cancellation policy branch produced a refund."""

    CANCELLED_EARLY = "cancelled_early"  # more than 48h before start
    CANCELLED_LATE = "cancelled_late"  # within 48h of start
    PRORATED_AFTER_START = "prorated_after_start"
    SERVICE_USED = "service_used"
