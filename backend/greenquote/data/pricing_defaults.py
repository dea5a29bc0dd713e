"""Default rate tables for new accounts.

Tier defaults match the ``sqft_pricing_tiers`` column default applied to
every account when tiered pricing was introduced; frequency multipliers are
the ones offered on the quote form.
"""

from __future__ import annotations

from pydantic import BaseModel

from greenquote.models.enums import ServiceFrequency
from greenquote.models.pricing import PricingTier


class FrequencyOption(BaseModel):
    """Price multiplier and visit count for a service cadence."""

    frequency: ServiceFrequency
    label: str
    multiplier: float
    visits_per_month: int


DEFAULT_PRICING_TIERS: tuple[PricingTier, ...] = (
    PricingTier(up_to_sq_ft=5_000, rate_per_sq_ft=0.012),
    PricingTier(up_to_sq_ft=20_000, rate_per_sq_ft=0.008),
    PricingTier(up_to_sq_ft=None, rate_per_sq_ft=0.005),
)

DEFAULT_FLAT_RATE_PER_SQ_FT = 0.01

DEFAULT_MIN_PRICE_PER_VISIT = 50.0

FREQUENCY_OPTIONS: dict[ServiceFrequency, FrequencyOption] = {
    ServiceFrequency.ONE_TIME: FrequencyOption(
        frequency=ServiceFrequency.ONE_TIME,
        label="One-Time",
        multiplier=1.2,
        visits_per_month=1,
    ),
    ServiceFrequency.WEEKLY: FrequencyOption(
        frequency=ServiceFrequency.WEEKLY,
        label="Weekly",
        multiplier=0.85,
        visits_per_month=4,
    ),
    ServiceFrequency.BI_WEEKLY: FrequencyOption(
        frequency=ServiceFrequency.BI_WEEKLY,
        label="Bi-Weekly",
        multiplier=1.0,
        visits_per_month=2,
    ),
    ServiceFrequency.MONTHLY: FrequencyOption(
        frequency=ServiceFrequency.MONTHLY,
        label="Monthly",
        multiplier=1.1,
        visits_per_month=1,
    ),
}
