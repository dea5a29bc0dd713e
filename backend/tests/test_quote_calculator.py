"""Tests for QuoteCalculator: per-visit and monthly quote pricing."""

from __future__ import annotations

import pytest

from greenquote.config import PricingSettings
from greenquote.exceptions import InvalidPricingTiersError
from greenquote.models.enums import PricingMode, ServiceFrequency
from greenquote.models.pricing import PricingTier
from greenquote.models.quote import Addon
from greenquote.services.quote_calculator import QuoteCalculator


@pytest.fixture()
def calculator() -> QuoteCalculator:
    return QuoteCalculator()


_FLAT = PricingSettings(use_tiered_sqft_pricing=False, price_per_sq_ft=0.01)


# ---------------------------------------------------------------------------
# Tiered
# ---------------------------------------------------------------------------


class TestTieredQuote:
    def test_bi_weekly_default(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(25_000, PricingSettings())
        assert pricing.frequency == ServiceFrequency.BI_WEEKLY
        assert pricing.area_price.total_price == pytest.approx(205.00)
        assert pricing.base_price == pytest.approx(205.00)
        assert pricing.per_visit == 205.0
        assert pricing.monthly == 410.0
        assert pricing.minimum_applied is False
        assert pricing.pricing_mode == PricingMode.TIERED

    def test_weekly_discount(self, calculator: QuoteCalculator) -> None:
        # 205 x 0.85 = 174.25 -> 174; four visits a month
        pricing = calculator.calculate(25_000, PricingSettings(), frequency=ServiceFrequency.WEEKLY)
        assert pricing.per_visit == 174.0
        assert pricing.monthly == 696.0

    def test_one_time_premium(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(10_000, PricingSettings(), frequency=ServiceFrequency.ONE_TIME)
        assert pricing.per_visit == 120.0
        assert pricing.monthly == 120.0

    def test_tier_line_items(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(25_000, PricingSettings())
        assert [item.label for item in pricing.line_items] == [
            "5,000 sq ft @ $0.0120/sq ft",
            "15,000 sq ft @ $0.0080/sq ft",
            "5,000 sq ft @ $0.0050/sq ft",
        ]
        assert [item.amount for item in pricing.line_items] == pytest.approx([60.0, 120.0, 25.0])

    def test_snapshot_records_tiers(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(25_000, PricingSettings())
        assert pricing.snapshot.mode == PricingMode.TIERED
        assert pricing.snapshot.tiers_snapshot is not None
        assert pricing.snapshot.flat_rate_snapshot is None

    def test_invalid_tiers_raise(self, calculator: QuoteCalculator) -> None:
        settings = PricingSettings(
            sqft_pricing_tiers=[PricingTier(up_to_sq_ft=5_000, rate_per_sq_ft=0.012)],
        )
        with pytest.raises(InvalidPricingTiersError) as exc_info:
            calculator.calculate(25_000, settings)
        assert exc_info.value.errors == [
            'Last tier should have "No limit" for upper bound to cover all lawn sizes'
        ]

    def test_invalid_tiers_ignored_in_flat_mode(self, calculator: QuoteCalculator) -> None:
        settings = PricingSettings(
            use_tiered_sqft_pricing=False,
            sqft_pricing_tiers=[PricingTier(up_to_sq_ft=5_000, rate_per_sq_ft=-1.0)],
        )
        assert calculator.calculate(10_000, settings).per_visit == 100.0


# ---------------------------------------------------------------------------
# Flat
# ---------------------------------------------------------------------------


class TestFlatQuote:
    def test_flat_rate(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(10_000, _FLAT)
        assert pricing.pricing_mode == PricingMode.FLAT
        assert pricing.per_visit == 100.0
        assert pricing.monthly == 200.0
        assert pricing.snapshot.flat_rate_snapshot == 0.01

    def test_flat_line_item(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(10_000, _FLAT)
        assert [item.label for item in pricing.line_items] == [
            "Base service (10,000 sq ft x $0.0100)"
        ]


# ---------------------------------------------------------------------------
# Minimum and add-ons
# ---------------------------------------------------------------------------


class TestMinimumAndAddons:
    def test_minimum_lifts_small_lawn(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(2_500, PricingSettings())
        assert pricing.area_price.total_price == pytest.approx(30.00)
        assert pricing.base_price == 50.0
        assert pricing.per_visit == 50.0
        assert pricing.minimum_applied is True
        minimum = pricing.line_items[-1]
        assert minimum.label == "Minimum price applied"
        assert minimum.amount == pytest.approx(20.0)
        assert minimum.note == "(min $50.00)"

    def test_custom_minimum(self, calculator: QuoteCalculator) -> None:
        pricing = calculator.calculate(2_500, PricingSettings(min_price_per_visit=0))
        assert pricing.per_visit == 30.0
        assert pricing.minimum_applied is False

    def test_addons_added_per_visit(self, calculator: QuoteCalculator) -> None:
        addons = [
            Addon(id="edge", name="Edging", price_per_visit=15.0),
            Addon(id="blow", name="Leaf blowing", price_per_visit=10.0),
        ]
        pricing = calculator.calculate(25_000, PricingSettings(), addons=addons)
        assert pricing.addons_total == 25.0
        assert pricing.per_visit == 230.0
        assert pricing.monthly == 460.0
        assert [item.label for item in pricing.line_items][-2:] == ["Edging", "Leaf blowing"]

    def test_addons_after_minimum(self, calculator: QuoteCalculator) -> None:
        addons = [Addon(id="edge", name="Edging", price_per_visit=15.0)]
        pricing = calculator.calculate(0, PricingSettings(), addons=addons)
        assert pricing.per_visit == 65.0

    def test_per_visit_rounds_half_up(self, calculator: QuoteCalculator) -> None:
        addons = [Addon(id="x", name="Extra", price_per_visit=0.5)]
        pricing = calculator.calculate(0, PricingSettings(), addons=addons)
        assert pricing.per_visit == 51.0
