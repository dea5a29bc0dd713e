"""GreenQuote lawn area estimation and pricing engine.

Usage::

    from greenquote import (
        PricingSettings,
        PropertyType,
        ServiceAreaSession,
        create_default_engine,
    )

    engine = create_default_engine()
    session = ServiceAreaSession()
    engine.auto_estimate(session, place, PropertyType.RESIDENTIAL)
    pricing = engine.price(session, PricingSettings())
"""

from greenquote.config import EngineConfig, EstimatorConfig, GeneratorConfig, PricingSettings
from greenquote.engine import AutoEstimateResult, LawnQuoteEngine
from greenquote.factory import create_default_engine
from greenquote.geometry.area import polygon_area_sq_ft
from greenquote.geometry.projection import (
    build_rectangle,
    meters_to_lat_offset,
    meters_to_lng_offset,
)
from greenquote.models.enums import (
    AreaSource,
    Confidence,
    DrawingState,
    PricingMode,
    PropertyType,
    ServiceFrequency,
)
from greenquote.models.estimate import Estimate
from greenquote.models.geo import AddressComponent, LatLng, LatLngBounds, Place
from greenquote.models.polygon import AreaSummary, Polygon
from greenquote.models.pricing import (
    PriceResult,
    PricingSnapshot,
    PricingTier,
    TierValidationResult,
)
from greenquote.models.quote import Addon, QuotePricing, QuoteRecord
from greenquote.pricing import (
    calculate_flat_price,
    calculate_tiered_price,
    price_for,
    validate_pricing_tiers,
)
from greenquote.services.polygon_generator import PolygonGenerator
from greenquote.services.quote_calculator import QuoteCalculator
from greenquote.services.session import ServiceAreaSession
from greenquote.services.viewport_estimator import ViewportEstimator

__all__ = [
    "Addon",
    "AddressComponent",
    "AreaSource",
    "AreaSummary",
    "AutoEstimateResult",
    "Confidence",
    "DrawingState",
    "EngineConfig",
    "Estimate",
    "EstimatorConfig",
    "GeneratorConfig",
    "LatLng",
    "LatLngBounds",
    "LawnQuoteEngine",
    "Place",
    "Polygon",
    "PolygonGenerator",
    "PriceResult",
    "PricingMode",
    "PricingSettings",
    "PricingSnapshot",
    "PricingTier",
    "PropertyType",
    "QuoteCalculator",
    "QuotePricing",
    "QuoteRecord",
    "ServiceAreaSession",
    "ServiceFrequency",
    "TierValidationResult",
    "ViewportEstimator",
    "build_rectangle",
    "calculate_flat_price",
    "calculate_tiered_price",
    "create_default_engine",
    "meters_to_lat_offset",
    "meters_to_lng_offset",
    "polygon_area_sq_ft",
    "price_for",
    "validate_pricing_tiers",
]
