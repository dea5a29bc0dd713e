"""Domain models for the GreenQuote engine."""

from greenquote.models.enums import (
    AreaSource,
    Confidence,
    DrawingState,
    Guardrail,
    PricingMode,
    PropertyType,
    ServiceFrequency,
)
from greenquote.models.estimate import Estimate
from greenquote.models.geo import AddressComponent, LatLng, LatLngBounds, Place
from greenquote.models.polygon import AreaSummary, Polygon, PolygonArea
from greenquote.models.pricing import (
    PriceComparison,
    PriceResult,
    PricingSnapshot,
    PricingTier,
    TierBreakdown,
    TierValidationResult,
)
from greenquote.models.quote import Addon, QuoteLineItem, QuotePricing, QuoteRecord

__all__ = [
    "Addon",
    "AddressComponent",
    "AreaSource",
    "AreaSummary",
    "Confidence",
    "DrawingState",
    "Estimate",
    "Guardrail",
    "LatLng",
    "LatLngBounds",
    "Place",
    "Polygon",
    "PolygonArea",
    "PriceComparison",
    "PriceResult",
    "PricingMode",
    "PricingSnapshot",
    "PricingTier",
    "PropertyType",
    "QuoteLineItem",
    "QuotePricing",
    "QuoteRecord",
    "ServiceFrequency",
    "TierBreakdown",
    "TierValidationResult",
]
