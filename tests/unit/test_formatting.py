"""Unit tests for display helpers."""

from decimal import Decimal

import pytest

from petfoster.models import RefundType
from petfoster.utils.formatting import format_discount, format_price, refund_type_label


class TestFormatPrice:
    @pytest.mark.parametrize(
        ("amount", "expected"),
        [(0, "¥0.00"), (5, "¥0.05"), (95000, "¥950.00"), (12345, "¥123.45"), (-150, "-¥1.50")],
    )
    def test_default_symbol(self, amount: int, expected: str) -> None:
        assert format_price(amount) == expected

    def test_custom_symbol(self) -> None:
        assert format_price(112500, symbol="€") == "€1125.00"

    def test_symbol_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from petfoster.config import get_settings

        monkeypatch.setenv("PETFOSTER_CURRENCY_SYMBOL", "$")
        get_settings.cache_clear()

        assert format_price(199) == "$1.99"


class TestFormatDiscount:
    @pytest.mark.parametrize(
        ("rate", "expected"),
        [
            (Decimal("0"), "No discount"),
            (Decimal("0.05"), "5% off"),
            (Decimal("0.10"), "10% off"),
            (Decimal("0.15"), "15% off"),
        ],
    )
    def test_labels(self, rate: Decimal, expected: str) -> None:
        assert format_discount(rate) == expected


class TestRefundTypeLabel:
    def test_labels(self) -> None:
        assert refund_type_label(RefundType.FULL) == "Full refund"
        assert refund_type_label(RefundType.PARTIAL) == "Partial refund"
        assert refund_type_label(RefundType.NONE) == "No refund"
