"""Per-visit and monthly quote pricing on top of square-footage pricing.

1. **Area price**: tiered or flat, per the account's settings. Tiers are
   validated first; an invalid table is an error, never a silent misprice.
2. **Minimum**: the base price is lifted to the account's minimum per visit.
3. **Add-ons**: flat per-visit charges.
4. **Frequency**: ``per_visit`` is ``(base + add-ons) * multiplier`` rounded
   half-up to whole dollars; ``monthly = per_visit * visits_per_month``.
5. **Snapshot**: the rates used are frozen into the result.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from greenquote.data.pricing_defaults import FREQUENCY_OPTIONS
from greenquote.exceptions import InvalidPricingTiersError
from greenquote.formatting import format_currency, format_rate, format_sq_ft
from greenquote.models.enums import PricingMode, ServiceFrequency
from greenquote.models.pricing import PricingSnapshot
from greenquote.models.quote import QuoteLineItem, QuotePricing
from greenquote.pricing import round_dollars, validate_pricing_tiers

if TYPE_CHECKING:
    from collections.abc import Sequence

    from greenquote.config import PricingSettings
    from greenquote.models.quote import Addon


class QuoteCalculator:
    """Converts a total lawn area and account settings into quote pricing."""

    def calculate(
        self,
        total_sq_ft: float,
        settings: PricingSettings,
        frequency: ServiceFrequency = ServiceFrequency.BI_WEEKLY,
        addons: Sequence[Addon] = (),
    ) -> QuotePricing:
        """Price a lawn of ``total_sq_ft``.

        Raises:
            InvalidPricingTiersError: If tiered pricing is on and the account's
                tier table fails validation.
        """
        if settings.pricing_mode == PricingMode.TIERED:
            validation = validate_pricing_tiers(settings.sqft_pricing_tiers)
            if not validation.valid:
                raise InvalidPricingTiersError(validation.errors)

        snapshot = PricingSnapshot.from_settings(settings)
        area_price = snapshot.price_for(total_sq_ft)

        line_items: list[QuoteLineItem] = []
        if area_price.mode == PricingMode.TIERED:
            for tier in area_price.breakdown:
                line_items.append(QuoteLineItem(
                    label=(
                        f"{format_sq_ft(tier.sq_ft_in_tier)} @ "
                        f"{format_rate(tier.rate)}/sq ft"
                    ),
                    amount=tier.price,
                ))
        else:
            line_items.append(QuoteLineItem(
                label=(
                    f"Base service ({format_sq_ft(total_sq_ft)} x "
                    f"{format_rate(settings.price_per_sq_ft)})"
                ),
                amount=area_price.total_price,
            ))

        min_price = settings.min_price_per_visit
        base_price = max(area_price.total_price, min_price)
        minimum_applied = area_price.total_price < min_price
        if minimum_applied:
            line_items.append(QuoteLineItem(
                label="Minimum price applied",
                amount=min_price - area_price.total_price,
                note=f"(min {format_currency(min_price)})",
            ))

        addons_total = 0.0
        for addon in addons:
            addons_total += addon.price_per_visit
            line_items.append(QuoteLineItem(label=addon.name, amount=addon.price_per_visit))

        option = FREQUENCY_OPTIONS[frequency]
        per_visit = round_dollars((base_price + addons_total) * option.multiplier)
        monthly = per_visit * option.visits_per_month

        return QuotePricing(
            area_price=area_price,
            base_price=base_price,
            addons_total=addons_total,
            per_visit=per_visit,
            monthly=monthly,
            frequency=frequency,
            line_items=line_items,
            snapshot=snapshot,
            minimum_applied=minimum_applied,
        )
