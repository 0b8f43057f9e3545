"""Pricing endpoints for booking quotes.

Provides REST endpoints for:
- Duration discount tiers
- Price quote for a number of days
- Price quote for a date range

Quotes are speculative: nothing is stored. All amounts are in minor
currency units (e.g., 9500 = ¥95.00).
"""

from fastapi import APIRouter, Depends, Query

from petfoster.api.dependencies import get_pricing_service
from petfoster.api.models.pricing import DiscountTierView, DiscountTiersResponse
from petfoster.models.pricing import PriceBreakdown
from petfoster.services.pricing import PricingService

router = APIRouter(tags=["pricing"])

QUOTE_EXAMPLE = {
    "base_price_per_unit": 10000,
    "total_units": 10,
    "subtotal": 100000,
    "discount_rate": "0.05",
    "discount_amount": 5000,
    "total_price": 95000,
}


@router.get(
    "/pricing/discount-tiers",
    summary="Get duration discount tiers",
    response_model=DiscountTiersResponse,
)
async def get_discount_tiers(
    service: PricingService = Depends(get_pricing_service),
) -> DiscountTiersResponse:
    """List discount tiers from the longest stay down."""
    return DiscountTiersResponse(
        tiers=[DiscountTierView.from_tier(tier) for tier in service.discount_tiers()]
    )


@router.get(
    "/pricing/quote",
    summary="Quote a stay by number of days",
    description="""
Calculate the price breakdown for a stay of `days` days.

**Notes:**
- Amounts are in minor currency units
- `discount_rate` replaces the duration discount when given
""",
    response_model=PriceBreakdown,
    responses={
        200: {
            "description": "Price calculated successfully",
            "content": {"application/json": {"example": QUOTE_EXAMPLE}},
        },
        400: {"description": "Negative price or days, or rate outside [0, 1]"},
    },
)
async def quote_by_days(
    price_per_day: int = Query(..., description="Daily price in minor units", examples=[10000]),
    days: int = Query(..., description="Number of days", examples=[10]),
    discount_rate: str | None = Query(
        default=None, description="Override discount fraction", examples=["0.2"]
    ),
    service: PricingService = Depends(get_pricing_service),
) -> PriceBreakdown:
    """Quote a stay by its length in days."""
    return service.price_breakdown(price_per_day, days, discount_rate)


@router.get(
    "/pricing/quote/dates",
    summary="Quote a stay by date range",
    description="""
Calculate the price breakdown for a stay from `start_date` to `end_date`.

**Notes:**
- Both days are included (2026-07-15 to 2026-07-24 is 10 days)
- Amounts are in minor currency units
""",
    response_model=PriceBreakdown,
    responses={
        200: {
            "description": "Price calculated successfully",
            "content": {"application/json": {"example": QUOTE_EXAMPLE}},
        },
        400: {"description": "Invalid price, rate or date"},
    },
)
async def quote_by_dates(
    price_per_day: int = Query(..., description="Daily price in minor units", examples=[10000]),
    start_date: str = Query(..., description="First day (YYYY-MM-DD)", examples=["2026-07-15"]),
    end_date: str = Query(..., description="Last day (YYYY-MM-DD)", examples=["2026-07-24"]),
    discount_rate: str | None = Query(default=None, description="Override discount fraction"),
    service: PricingService = Depends(get_pricing_service),
) -> PriceBreakdown:
    """Quote a stay by its first and last day."""
    return service.price_breakdown_for_dates(price_per_day, start_date, end_date, discount_rate)
