"""Default data tables for the GreenQuote engine."""

from greenquote.data.pricing_defaults import (
    DEFAULT_FLAT_RATE_PER_SQ_FT,
    DEFAULT_MIN_PRICE_PER_VISIT,
    DEFAULT_PRICING_TIERS,
    FREQUENCY_OPTIONS,
    FrequencyOption,
)

__all__ = [
    "DEFAULT_FLAT_RATE_PER_SQ_FT",
    "DEFAULT_MIN_PRICE_PER_VISIT",
    "DEFAULT_PRICING_TIERS",
    "FREQUENCY_OPTIONS",
    "FrequencyOption",
]
