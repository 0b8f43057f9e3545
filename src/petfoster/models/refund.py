"""Refund models returned by the cancellation policy."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import PaymentStatus, RefundReason, RefundType


class RefundCalculation(BaseModel):
    """Result of a cancellation refund calculation.

    Amounts are in minor currency units. ``refund_amount`` and
    ``cancellation_fee`` always add up to ``total_price``.
    """

    model_config = ConfigDict(frozen=True)

    total_price: int = Field(..., ge=0, description="Stored booking total")
    refund_amount: int = Field(..., ge=0, description="Amount returned to the payer")
    cancellation_fee: int = Field(..., ge=0, description="Amount retained")
    refund_rate: Decimal = Field(..., ge=0, le=1)
    reason_code: RefundReason
    classification: RefundType
    estimated_settlement_days: int = Field(..., ge=0, description="Working days to settle")
    hours_until_start: float = Field(..., description="Negative once the stay has begun")
    remaining_days: int | None = Field(
        default=None, ge=0, description="Unused days, only set after the stay began"
    )
    description: str

    @model_validator(mode="after")
    def _check_reconciles(self) -> "RefundCalculation":
        if self.refund_amount + self.cancellation_fee != self.total_price:
            raise ValueError("refund_amount + cancellation_fee must equal total_price")
        return self

    @property
    def payment_status_after_refund(self) -> PaymentStatus:
        """Payment status a booking moves to once this refund is issued."""
        if self.classification == RefundType.FULL:
            return PaymentStatus.REFUNDED
        if self.classification == RefundType.PARTIAL:
            return PaymentStatus.PARTIAL_REFUND
        return PaymentStatus.PAID


class CancellationCheck(BaseModel):
    """Whether a booking may be cancelled in its current state."""

    model_config = ConfigDict(frozen=True)

    allowed: bool
    note: str
    prorated: bool = Field(
        default=False, description="Refund will be prorated on remaining days"
    )
