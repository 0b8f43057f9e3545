"""Display helpers for prices, discounts and refund types."""

from decimal import ROUND_HALF_UP, Decimal

from petfoster.config import get_settings
from petfoster.models.enums import RefundType

REFUND_TYPE_LABELS: dict[RefundType, str] = {
    RefundType.FULL: "Full refund",
    RefundType.PARTIAL: "Partial refund",
    RefundType.NONE: "No refund",
}


def format_price(amount: int, symbol: str | None = None) -> str:
    """Format a minor-unit amount for display, e.g. 12345 -> "¥123.45"."""
    symbol = get_settings().currency_symbol if symbol is None else symbol
    sign = "-" if amount < 0 else ""
    major, minor = divmod(abs(amount), 100)
    return f"{sign}{symbol}{major}.{minor:02d}"


def format_discount(rate: Decimal) -> str:
    """Format a discount fraction, e.g. Decimal("0.05") -> "5% off"."""
    if rate == 0:
        return "No discount"
    percent = (rate * 100).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return f"{percent}% off"


def refund_type_label(classification: RefundType) -> str:
    return REFUND_TYPE_LABELS.get(classification, "Unknown")
