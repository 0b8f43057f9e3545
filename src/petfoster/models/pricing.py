"""Pricing models for booking quotes and stored price snapshots.

All amounts are integers in minor currency units (fen/cents).
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class DiscountTier(BaseModel):
    """A duration threshold and the discount it unlocks."""

    model_config = ConfigDict(frozen=True)

    min_days: int = Field(..., ge=0, description="Minimum stay length in days")
    rate: Decimal = Field(..., ge=0, le=1, description="Discount fraction")


class PriceBreakdown(BaseModel):
    """Computed price for a stay of ``total_units`` days.

    Computed on demand and never persisted as-is; only its fields are
    copied into a BookingPriceSnapshot.
    """

    model_config = ConfigDict(frozen=True)

    base_price_per_unit: int = Field(..., ge=0, description="Daily price in minor units")
    total_units: int = Field(..., ge=0, description="Number of days")
    subtotal: int = Field(..., ge=0, description="Price before discount")
    discount_rate: Decimal = Field(..., ge=0, le=1, description="Applied discount fraction")
    discount_amount: int = Field(..., ge=0, description="Discount in minor units")
    total_price: int = Field(..., ge=0, description="Price after discount")

    @model_validator(mode="after")
    def _check_totals(self) -> "PriceBreakdown":
        if self.subtotal != self.base_price_per_unit * self.total_units:
            raise ValueError("subtotal must equal base_price_per_unit * total_units")
        if self.total_price != self.subtotal - self.discount_amount:
            raise ValueError("total_price must equal subtotal - discount_amount")
        return self


class BookingPriceSnapshot(BaseModel):
    """Price fields frozen onto a booking at creation time.

    Later changes to the service package price never reach a snapshot;
    refunds are computed from ``total_price`` here.
    """

    model_config = ConfigDict(frozen=True)

    base_price_per_unit: int = Field(..., ge=0)
    total_units: int = Field(..., ge=0)
    subtotal: int = Field(..., ge=0)
    discount_amount: int = Field(..., ge=0)
    total_price: int = Field(..., ge=0)
    captured_at: datetime = Field(..., description="When the snapshot was taken")

    @classmethod
    def from_breakdown(
        cls, breakdown: PriceBreakdown, captured_at: datetime
    ) -> "BookingPriceSnapshot":
        """Copy the stored fields out of a breakdown.

        Args:
            breakdown: Breakdown computed at booking creation
            captured_at: Creation timestamp

        Returns:
            Snapshot holding copies of the breakdown's price fields.
        """
        return cls(
            base_price_per_unit=breakdown.base_price_per_unit,
            total_units=breakdown.total_units,
            subtotal=breakdown.subtotal,
            discount_amount=breakdown.discount_amount,
            total_price=breakdown.total_price,
            captured_at=captured_at,
        )
