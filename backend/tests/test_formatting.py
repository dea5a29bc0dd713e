"""Tests for quote formatting helpers."""

from __future__ import annotations

from greenquote.data.pricing_defaults import DEFAULT_PRICING_TIERS
from greenquote.formatting import format_currency, format_price_breakdown, format_rate, format_sq_ft
from greenquote.pricing import calculate_flat_price, calculate_tiered_price


class TestFormatCurrency:
    def test_small_amount_has_cents(self) -> None:
        assert format_currency(205.0) == "$205.00"

    def test_thousands_separator(self) -> None:
        assert format_currency(1_234.5) == "$1,234.50"

    def test_large_amount_drops_cents(self) -> None:
        assert format_currency(12_500.75) == "$12,501"

    def test_zero(self) -> None:
        assert format_currency(0.0) == "$0.00"


class TestFormatArea:
    def test_sq_ft(self) -> None:
        assert format_sq_ft(25_000) == "25,000 sq ft"

    def test_sq_ft_rounds(self) -> None:
        assert format_sq_ft(1_234.6) == "1,235 sq ft"

    def test_rate_four_decimals(self) -> None:
        assert format_rate(0.012) == "$0.0120"
        assert format_rate(0.005) == "$0.0050"


class TestFormatPriceBreakdown:
    def test_one_line_per_tier(self) -> None:
        result = calculate_tiered_price(25_000, list(DEFAULT_PRICING_TIERS))
        assert format_price_breakdown(result) == [
            "5,000 sq ft @ $0.0120 = $60.00",
            "15,000 sq ft @ $0.0080 = $120.00",
            "5,000 sq ft @ $0.0050 = $25.00",
        ]

    def test_flat_result_has_no_lines(self) -> None:
        assert format_price_breakdown(calculate_flat_price(10_000, 0.01)) == []
