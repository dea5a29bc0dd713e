"""Square-footage pricing: tiered (marginal-rate) and flat.

Tiered pricing works like tax brackets. Each tier covers the range from the
previous tier's bound up to its own; only the square footage inside that
range is charged at the tier's rate. For 25,000 sq ft with the default tiers:

- First 5,000 sq ft x $0.012 = $60
- Next 15,000 sq ft x $0.008 = $120
- Final 5,000 sq ft x $0.005 = $25
- Total: $205

Totals are rounded to the cent once, at the end.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from greenquote.models.enums import PricingMode
from greenquote.models.pricing import (
    PriceComparison,
    PriceResult,
    PricingTier,
    TierBreakdown,
    TierValidationResult,
)

if TYPE_CHECKING:
    from collections.abc import Sequence


def round_cents(amount: float) -> float:
    """Round half-up to the nearest cent."""
    return math.floor(amount * 100.0 + 0.5) / 100.0


def round_dollars(amount: float) -> float:
    """Round half-up to whole dollars."""
    return float(math.floor(amount + 0.5))


def sort_tiers(tiers: Sequence[PricingTier]) -> list[PricingTier]:
    """Ascending by upper bound; unlimited tiers sort last."""
    return sorted(
        tiers,
        key=lambda t: (t.up_to_sq_ft is None, t.up_to_sq_ft or 0.0),
    )


def format_tier_label(range_start: float, range_end: float | None) -> str:
    if range_end is None:
        return f"{range_start:,.0f}+ sq ft"
    return f"{range_start:,.0f}-{range_end:,.0f} sq ft"


def calculate_tiered_price(
    total_sq_ft: float, tiers: Sequence[PricingTier]
) -> PriceResult:
    """Price ``total_sq_ft`` against a marginal-rate tier table.

    Assumes ``tiers`` already passed ``validate_pricing_tiers``. A table
    without an unlimited tier simply leaves any excess unpriced.
    """
    if total_sq_ft <= 0:
        return PriceResult(mode=PricingMode.TIERED, total_sq_ft=max(total_sq_ft, 0.0), total_price=0.0)

    remaining = total_sq_ft
    range_start = 0.0
    total_price = 0.0
    breakdown: list[TierBreakdown] = []

    for tier in sort_tiers(tiers):
        if tier.up_to_sq_ft is None:
            tier_size = remaining
        else:
            tier_size = tier.up_to_sq_ft - range_start
        sq_ft_in_tier = min(remaining, tier_size)

        if sq_ft_in_tier > 0:
            tier_price = sq_ft_in_tier * tier.rate_per_sq_ft
            total_price += tier_price
            breakdown.append(
                TierBreakdown(
                    range_start=range_start,
                    range_end=tier.up_to_sq_ft,
                    sq_ft_in_tier=sq_ft_in_tier,
                    rate=tier.rate_per_sq_ft,
                    price=tier_price,
                    label=format_tier_label(range_start, tier.up_to_sq_ft),
                )
            )
            remaining -= sq_ft_in_tier

        if tier.up_to_sq_ft is not None:
            range_start = tier.up_to_sq_ft
        if remaining <= 0:
            break

    return PriceResult(
        mode=PricingMode.TIERED,
        total_sq_ft=total_sq_ft,
        total_price=round_cents(total_price),
        breakdown=breakdown,
    )


def calculate_flat_price(total_sq_ft: float, rate_per_sq_ft: float) -> PriceResult:
    """Price ``total_sq_ft`` at a single rate."""
    if total_sq_ft <= 0 or rate_per_sq_ft <= 0:
        return PriceResult(mode=PricingMode.FLAT, total_sq_ft=max(total_sq_ft, 0.0), total_price=0.0)
    return PriceResult(
        mode=PricingMode.FLAT,
        total_sq_ft=total_sq_ft,
        total_price=round_cents(total_sq_ft * rate_per_sq_ft),
    )


def price_for(
    total_sq_ft: float, rates: Sequence[PricingTier] | float
) -> PriceResult:
    """Tiered price for a tier table, flat price for a single rate."""
    if isinstance(rates, (int, float)):
        return calculate_flat_price(total_sq_ft, float(rates))
    return calculate_tiered_price(total_sq_ft, rates)


def validate_pricing_tiers(tiers: Sequence[PricingTier]) -> TierValidationResult:
    """Check a tier table and report every problem found.

    Rules: at least one tier; every rate finite and strictly positive; every
    bound finite, positive and strictly greater than the previous one after
    sorting; exactly one unlimited tier. NaN and infinity count as "not a
    positive number".
    """
    errors: list[str] = []

    if not tiers:
        errors.append("At least one pricing tier is required")
        return TierValidationResult(valid=False, errors=errors)

    previous_max = 0.0
    unlimited_count = 0

    for i, tier in enumerate(sort_tiers(tiers), start=1):
        rate = tier.rate_per_sq_ft
        if not (math.isfinite(rate) and rate > 0):
            errors.append(f"Tier {i}: Rate must be a positive number")

        if tier.up_to_sq_ft is None:
            unlimited_count += 1
            if unlimited_count == 2:
                errors.append("Only one tier can have no upper limit")
            continue

        bound = tier.up_to_sq_ft
        if not (math.isfinite(bound) and bound > 0):
            errors.append(f'Tier {i}: Upper limit must be a positive number or "No limit"')
            continue
        if bound <= previous_max:
            errors.append(
                f"Tier {i}: Upper limit must be greater than previous tier ({previous_max:,.0f})"
            )
        previous_max = bound

    if unlimited_count == 0:
        errors.append('Last tier should have "No limit" for upper bound to cover all lawn sizes')

    return TierValidationResult(valid=not errors, errors=errors)


def effective_rate(total_price: float, total_sq_ft: float) -> float:
    if total_sq_ft <= 0:
        return 0.0
    return total_price / total_sq_ft


def compare_pricing(
    total_sq_ft: float, tiers: Sequence[PricingTier], flat_rate: float
) -> PriceComparison:
    """How much a tiered table saves over a flat rate for the same lawn."""
    tiered_price = calculate_tiered_price(total_sq_ft, tiers).total_price
    flat_price = calculate_flat_price(total_sq_ft, flat_rate).total_price
    savings = flat_price - tiered_price
    savings_percent = savings / flat_price * 100.0 if flat_price > 0 else 0.0
    return PriceComparison(
        tiered_price=tiered_price,
        flat_price=flat_price,
        savings=round_cents(savings),
        savings_percent=math.floor(savings_percent * 10.0 + 0.5) / 10.0,
    )
