"""Refund policy service for calculating cancellation refunds.

Implements the cancellation refund policy:
- Full refund (100%): cancel more than 48 hours before the start
- Partial refund (70%): cancel within 48 hours of the start
- Prorated refund: cancel after the start, 70% of the unused days' share
- No refund: nothing left of the stay

All amounts are in minor currency units. Refunds are always computed from
the total stored on the booking, never from the current package price.
"""

import datetime as dt
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable
from zoneinfo import ZoneInfo

from petfoster.models import (
    BookingPriceSnapshot,
    BookingStatus,
    CancellationCheck,
    InvalidArgumentError,
    RefundCalculation,
    RefundReason,
    RefundType,
)
from petfoster.utils.dates import (
    DateInput,
    days_between,
    hours_until_start,
    local_now,
    to_local_datetime,
)
from petfoster.utils.formatting import format_price, refund_type_label
from petfoster.utils.logging import get_logger, log_refund_operation
from petfoster.utils.money import apply_rate

logger = get_logger(__name__)


class RefundPolicyService:
    """Service for calculating refunds based on cancellation timing.

    Policy tiers:
    - FULL: more than 48 hours before the start
    - PARTIAL: 48 hours or less before the start
    - PRORATED: after the start, remaining days / total days * 70%
    - NONE: no remaining days
    """

    # Hours before start; strictly more than this gets a full refund
    FULL_REFUND_HOURS = 48

    FULL_REFUND_RATE = Decimal("1")
    LATE_REFUND_RATE = Decimal("0.7")
    # Applied on top of the unused-days share once the stay has begun
    PRORATION_RATE = Decimal("0.7")
    NO_REFUND_RATE = Decimal("0")
    PRORATION_PRECISION = Decimal("0.0001")

    # Working days until the money reaches the payer
    STANDARD_SETTLEMENT_DAYS = 5
    PRORATED_SETTLEMENT_DAYS = 7

    CLOSED_STATUSES = frozenset(
        {BookingStatus.COMPLETED.value, BookingStatus.CANCELLED.value}
    )

    def __init__(
        self,
        tz: ZoneInfo | None = None,
        clock: Callable[[], dt.datetime] | None = None,
    ) -> None:
        """Initialize refund policy service.

        Args:
            tz: Local timezone for aware date inputs, defaults to settings
            clock: Returns the current local time; used when no
                cancellation time is passed
        """
        self.tz = tz
        self._clock = clock or (lambda: local_now(self.tz))

    def calculate_refund(
        self,
        total_price: int,
        start_date: DateInput,
        end_date: DateInput,
        cancel_at: DateInput | None = None,
    ) -> RefundCalculation:
        """Calculate the refund for cancelling a booking.

        Args:
            total_price: Total stored on the booking, in minor units
            start_date: First day of the stay
            end_date: Last day of the stay (inclusive)
            cancel_at: Cancellation time, defaults to the service clock

        Returns:
            RefundCalculation whose refund and fee add up to total_price

        Raises:
            InvalidArgumentError: If total_price is negative or end < start
            InvalidDateError: If a date cannot be parsed
        """
        if isinstance(total_price, bool) or not isinstance(total_price, int):
            raise InvalidArgumentError(
                "total_price must be an integer", details={"total_price": repr(total_price)}
            )
        if total_price < 0:
            raise InvalidArgumentError(
                "total_price must be non-negative", details={"total_price": str(total_price)}
            )

        start = to_local_datetime(start_date, self.tz)
        end = to_local_datetime(end_date, self.tz)
        if end.date() < start.date():
            raise InvalidArgumentError(
                "end_date must not be before start_date",
                details={"start_date": start.isoformat(), "end_date": end.isoformat()},
            )
        cancelled = self._clock() if cancel_at is None else to_local_datetime(cancel_at, self.tz)

        hours = hours_until_start(start, cancelled)

        if hours > self.FULL_REFUND_HOURS:
            result = RefundCalculation(
                total_price=total_price,
                refund_amount=total_price,
                cancellation_fee=0,
                refund_rate=self.FULL_REFUND_RATE,
                reason_code=RefundReason.CANCELLED_EARLY,
                classification=RefundType.FULL,
                estimated_settlement_days=self.STANDARD_SETTLEMENT_DAYS,
                hours_until_start=hours,
                description=(
                    f"{refund_type_label(RefundType.FULL)} of {format_price(total_price)}: "
                    f"cancelled more than {self.FULL_REFUND_HOURS} hours before the start"
                ),
            )
        elif hours > 0:
            refund_amount = apply_rate(total_price, self.LATE_REFUND_RATE)
            result = RefundCalculation(
                total_price=total_price,
                refund_amount=refund_amount,
                cancellation_fee=total_price - refund_amount,
                refund_rate=self.LATE_REFUND_RATE,
                reason_code=RefundReason.CANCELLED_LATE,
                classification=RefundType.PARTIAL,
                estimated_settlement_days=self.STANDARD_SETTLEMENT_DAYS,
                hours_until_start=hours,
                description=(
                    f"{refund_type_label(RefundType.PARTIAL)} of {format_price(refund_amount)} "
                    f"(70%): cancelled within {self.FULL_REFUND_HOURS} hours of the start, "
                    f"{format_price(total_price - refund_amount)} cancellation fee"
                ),
            )
        else:
            result = self._refund_after_start(total_price, start, end, cancelled, hours)

        log_refund_operation(
            logger,
            result.classification.value,
            total_price=result.total_price,
            refund_amount=result.refund_amount,
            cancellation_fee=result.cancellation_fee,
            hours_until_start=hours,
        )
        return result

    def _refund_after_start(
        self,
        total_price: int,
        start: dt.datetime,
        end: dt.datetime,
        cancelled: dt.datetime,
        hours: float,
    ) -> RefundCalculation:
        total_days = days_between(start, end)
        # Counts the cancellation day itself as used
        used_days = days_between(start, cancelled)
        remaining_days = max(0, total_days - used_days)

        if remaining_days > 0:
            share = (Decimal(remaining_days) / Decimal(total_days)).quantize(
                self.PRORATION_PRECISION, rounding=ROUND_HALF_UP
            )
            refund_rate = share * self.PRORATION_RATE
            refund_amount = apply_rate(total_price, refund_rate)
            return RefundCalculation(
                total_price=total_price,
                refund_amount=refund_amount,
                cancellation_fee=total_price - refund_amount,
                refund_rate=refund_rate,
                reason_code=RefundReason.PRORATED_AFTER_START,
                classification=RefundType.PARTIAL,
                estimated_settlement_days=self.PRORATED_SETTLEMENT_DAYS,
                hours_until_start=hours,
                remaining_days=remaining_days,
                description=(
                    f"{refund_type_label(RefundType.PARTIAL)} of {format_price(refund_amount)}: "
                    f"cancelled after the start, 70% of the {remaining_days} remaining "
                    f"of {total_days} days"
                ),
            )

        return RefundCalculation(
            total_price=total_price,
            refund_amount=0,
            cancellation_fee=total_price,
            refund_rate=self.NO_REFUND_RATE,
            reason_code=RefundReason.SERVICE_USED,
            classification=RefundType.NONE,
            estimated_settlement_days=0,
            hours_until_start=hours,
            remaining_days=0,
            description=f"{refund_type_label(RefundType.NONE)}: the stay has been fully used",
        )

    def calculate_refund_for_snapshot(
        self,
        snapshot: BookingPriceSnapshot,
        start_date: DateInput,
        end_date: DateInput,
        cancel_at: DateInput | None = None,
    ) -> RefundCalculation:
        """Calculate the refund for a booking from its stored price snapshot."""
        return self.calculate_refund(snapshot.total_price, start_date, end_date, cancel_at)

    def can_cancel(
        self,
        start_date: DateInput,
        current_status: BookingStatus | str,
        now: DateInput | None = None,
    ) -> CancellationCheck:
        """Check whether a booking in ``current_status`` may be cancelled.

        Only completed and cancelled bookings are rejected. Any other status,
        including ones this service does not know, is allowed. ``prorated``
        tells the caller the stay has already begun.

        Args:
            start_date: First day of the stay
            current_status: Booking status value
            now: Current time, defaults to the service clock

        Returns:
            CancellationCheck with a note for the user
        """
        status = (
            current_status.value
            if isinstance(current_status, BookingStatus)
            else str(current_status)
        )
        if status in self.CLOSED_STATUSES:
            return CancellationCheck(
                allowed=False,
                note="Booking is already completed or cancelled and cannot be cancelled again",
            )

        current = self._clock() if now is None else to_local_datetime(now, self.tz)
        if hours_until_start(to_local_datetime(start_date, self.tz), current) <= 0:
            return CancellationCheck(
                allowed=True,
                note="The stay has begun; the refund will be prorated on remaining days",
                prorated=True,
            )

        return CancellationCheck(allowed=True, note="Booking can be cancelled")

    def get_policy_description(self) -> list[str]:
        """Human-readable refund policy lines."""
        return [
            f"Cancel more than {self.FULL_REFUND_HOURS} hours before the start: full refund",
            f"Cancel within {self.FULL_REFUND_HOURS} hours of the start: "
            "30% cancellation fee, 70% refunded",
            "Cancel after the start: 70% of the remaining days' share refunded",
            f"Refunds settle in {self.STANDARD_SETTLEMENT_DAYS}-"
            f"{self.PRORATED_SETTLEMENT_DAYS} working days",
        ]
