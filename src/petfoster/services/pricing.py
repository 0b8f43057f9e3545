"""Pricing service for booking quotes.

Computes inclusive day counts, duration discounts and price breakdowns.
All amounts are integers in minor currency units (fen/cents).

Discount tiers (highest qualifying tier wins):
- 30+ days: 15%
- 14+ days: 10%
- 7+ days: 5%
"""

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Callable
from zoneinfo import ZoneInfo

from petfoster.models import (
    BookingPriceSnapshot,
    DiscountTier,
    InvalidArgumentError,
    PriceBreakdown,
)
from petfoster.utils.dates import DateInput, days_between, local_now
from petfoster.utils.logging import get_logger, log_pricing_operation
from petfoster.utils.money import apply_rate

logger = get_logger(__name__)

RateInput = Decimal | int | float | str


def _require_non_negative_int(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be an integer", details={name: repr(value)}
        )
    if value < 0:
        raise InvalidArgumentError(
            f"{name} must be non-negative", details={name: str(value)}
        )


def coerce_rate(value: RateInput) -> Decimal:
    """Convert a rate input to Decimal and check it lies in [0, 1].

    Floats go through ``str`` so 0.1 becomes Decimal("0.1").

    Raises:
        InvalidArgumentError: If the value is not a number in [0, 1]
    """
    if isinstance(value, bool):
        raise InvalidArgumentError("Rate must be a number", details={"rate": repr(value)})
    try:
        rate = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation as e:
        raise InvalidArgumentError(
            "Rate must be a number", details={"rate": repr(value)}
        ) from e
    if not rate.is_finite() or rate < 0 or rate > 1:
        raise InvalidArgumentError(
            "Rate must be between 0 and 1", details={"rate": str(value)}
        )
    return rate


class PricingService:
    """Service for booking price calculations.

    Stateless apart from the injected timezone and clock, so one instance
    can be shared freely.
    """

    # Checked in order; first match wins
    DISCOUNT_TIERS: tuple[DiscountTier, ...] = (
        DiscountTier(min_days=30, rate=Decimal("0.15")),
        DiscountTier(min_days=14, rate=Decimal("0.10")),
        DiscountTier(min_days=7, rate=Decimal("0.05")),
    )
    NO_DISCOUNT = Decimal("0")

    def __init__(
        self,
        tz: ZoneInfo | None = None,
        clock: Callable[[], dt.datetime] | None = None,
    ) -> None:
        """Initialize pricing service.

        Args:
            tz: Local timezone for aware date inputs, defaults to settings
            clock: Returns the current local time, used for snapshots
        """
        self.tz = tz
        self._clock = clock or (lambda: local_now(self.tz))

    def days_between(self, start: DateInput, end: DateInput) -> int:
        """Inclusive day count between two dates, see ``utils.dates.days_between``."""
        return days_between(start, end, self.tz)

    def discount_rate_for_duration(self, days: int) -> Decimal:
        """Get the discount rate for a stay length.

        Args:
            days: Number of days booked

        Returns:
            Discount fraction (0, 0.05, 0.10 or 0.15)

        Raises:
            InvalidArgumentError: If days is negative
        """
        _require_non_negative_int("days", days)
        for tier in self.DISCOUNT_TIERS:
            if days >= tier.min_days:
                return tier.rate
        return self.NO_DISCOUNT

    def price_breakdown(
        self,
        price_per_day: int,
        days: int,
        override_discount_rate: RateInput | None = None,
    ) -> PriceBreakdown:
        """Calculate the price for a stay.

        The subtotal is exact. The discount is rounded half-up to a whole
        minor unit and the total is the subtotal minus that discount.

        Args:
            price_per_day: Daily package price in minor units
            days: Number of days
            override_discount_rate: Replaces the tier discount when given

        Returns:
            PriceBreakdown with subtotal, discount and total

        Raises:
            InvalidArgumentError: On negative inputs or an out-of-range rate
        """
        try:
            _require_non_negative_int("price_per_day", price_per_day)
            _require_non_negative_int("days", days)
            if override_discount_rate is None:
                rate = self.discount_rate_for_duration(days)
            else:
                rate = coerce_rate(override_discount_rate)
        except InvalidArgumentError as e:
            log_pricing_operation(
                logger,
                "price_breakdown",
                price_per_day=price_per_day if isinstance(price_per_day, int) else None,
                days=days if isinstance(days, int) else None,
                error=e.message,
            )
            raise

        subtotal = price_per_day * days
        discount_amount = apply_rate(subtotal, rate)
        total_price = subtotal - discount_amount

        log_pricing_operation(
            logger,
            "price_breakdown",
            price_per_day=price_per_day,
            days=days,
            total_price=total_price,
            discount_rate=str(rate),
        )

        return PriceBreakdown(
            base_price_per_unit=price_per_day,
            total_units=days,
            subtotal=subtotal,
            discount_rate=rate,
            discount_amount=discount_amount,
            total_price=total_price,
        )

    def price_breakdown_for_dates(
        self,
        price_per_day: int,
        start_date: DateInput,
        end_date: DateInput,
        override_discount_rate: RateInput | None = None,
    ) -> PriceBreakdown:
        """Calculate the price for a stay given its first and last day.

        Args:
            price_per_day: Daily package price in minor units
            start_date: First day of the stay
            end_date: Last day of the stay (inclusive)
            override_discount_rate: Replaces the tier discount when given

        Returns:
            PriceBreakdown for the inclusive number of days
        """
        days = self.days_between(start_date, end_date)
        return self.price_breakdown(price_per_day, days, override_discount_rate)

    def snapshot(
        self,
        breakdown: PriceBreakdown,
        captured_at: dt.datetime | None = None,
    ) -> BookingPriceSnapshot:
        """Freeze a breakdown's price fields for storage on a booking.

        Args:
            breakdown: Breakdown computed at booking creation
            captured_at: Creation time, defaults to the service clock

        Returns:
            BookingPriceSnapshot independent of any later price change
        """
        return BookingPriceSnapshot.from_breakdown(
            breakdown, captured_at or self._clock()
        )

    def discount_tiers(self) -> list[DiscountTier]:
        """Discount tiers from the longest stay down."""
        return list(self.DISCOUNT_TIERS)
