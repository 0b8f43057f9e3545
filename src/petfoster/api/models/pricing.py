"""API models for pricing endpoints."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from petfoster.models.pricing import DiscountTier
from petfoster.utils.formatting import format_discount


class DiscountTierView(BaseModel):
    """A discount tier with its display label."""

    min_days: int = Field(..., description="Minimum stay length in days")
    rate: Decimal = Field(..., description="Discount fraction")
    label: str = Field(..., description="Display text, e.g. '5% off'")

    @classmethod
    def from_tier(cls, tier: DiscountTier) -> "DiscountTierView":
        return cls(min_days=tier.min_days, rate=tier.rate, label=format_discount(tier.rate))


class DiscountTiersResponse(BaseModel):
    """Duration discount tiers, longest stay first."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "tiers": [
                        {"min_days": 30, "rate": "0.15", "label": "15% off"},
                        {"min_days": 14, "rate": "0.10", "label": "10% off"},
                        {"min_days": 7, "rate": "0.05", "label": "5% off"},
                    ]
                }
            ]
        },
    )

    tiers: list[DiscountTierView] = Field(..., description="Discount tiers")
