"""Minor-unit money arithmetic.

Amounts are unbounded Python ints, so every Decimal operation here runs in
a local context wide enough to hold the exact result.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

WHOLE_UNIT = Decimal("1")
# Spare digits beyond the integer part for the fraction being rounded
GUARD_DIGITS = 2


def round_half_up(amount: Decimal) -> int:
    """Round a fractional minor-unit amount to a whole unit, halves away from zero.

    One minor unit is 0.01 of the major currency, so this is the usual
    two-decimal half-up rounding.
    """
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + GUARD_DIGITS)
        return int(amount.quantize(WHOLE_UNIT, rounding=ROUND_HALF_UP))


def apply_rate(amount: int, rate: Decimal) -> int:
    """Exact ``amount * rate`` rounded half-up to a whole minor unit.

    Args:
        amount: Minor-unit amount, any size
        rate: Fraction to apply, e.g. a discount or refund rate

    Returns:
        Rounded product in minor units
    """
    digits = len(str(abs(amount))) + len(rate.as_tuple().digits) + GUARD_DIGITS
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, digits)
        return round_half_up(amount * rate)
