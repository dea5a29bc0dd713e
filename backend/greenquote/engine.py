"""Lawn quote engine: estimate, generate, measure, price.

``LawnQuoteEngine`` ties the components together for one editing session:

1. **Estimate**: ``ViewportEstimator`` turns a geocoded place into a lawn
   area and advisory confidence.
2. **Generate**: ``PolygonGenerator`` lays out yard polygons for that area,
   oriented toward the road when the route name gives it away.
3. **Measure**: the session replaces its polygons and recomputes every area
   from vertices.
4. **Price**: ``QuoteCalculator`` prices the session's total area and freezes
   the account's rates into a snapshot.
5. **Record**: ``build_quote_record`` hands everything to quote storage; the
   engine never saves it itself.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from greenquote.models.enums import AreaSource, ServiceFrequency
from greenquote.models.quote import QuoteRecord
from greenquote.pricing import round_dollars
from greenquote.services.polygon_generator import detect_road_heading

if TYPE_CHECKING:
    from collections.abc import Sequence

    from greenquote.config import PricingSettings
    from greenquote.models.enums import PropertyType
    from greenquote.models.estimate import Estimate
    from greenquote.models.geo import Place
    from greenquote.models.polygon import AreaSummary, Polygon
    from greenquote.models.quote import Addon, QuotePricing
    from greenquote.services.polygon_generator import PolygonGenerator
    from greenquote.services.quote_calculator import QuoteCalculator
    from greenquote.services.session import ServiceAreaSession
    from greenquote.services.viewport_estimator import ViewportEstimator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AutoEstimateResult:
    """Outcome of auto-estimating a place into a session."""

    estimate: Estimate
    polygons: list[Polygon]
    summary: AreaSummary


class LawnQuoteEngine:
    """Coordinates estimation, polygon generation and pricing.

    Args:
        estimator: Viewport-based lawn area estimator.
        generator: Yard polygon generator.
        quote_calculator: Per-visit/monthly price calculator.

    Example::

        engine = create_default_engine()
        session = ServiceAreaSession()
        result = engine.auto_estimate(session, place, PropertyType.RESIDENTIAL)
        pricing = engine.price(session, PricingSettings())
    """

    def __init__(
        self,
        estimator: ViewportEstimator,
        generator: PolygonGenerator,
        quote_calculator: QuoteCalculator,
    ) -> None:
        self._estimator = estimator
        self._generator = generator
        self._quote_calculator = quote_calculator

    def estimate_polygons(
        self, place: Place, property_type: PropertyType
    ) -> tuple[Estimate, list[Polygon]]:
        """Estimate a place and generate its polygons without touching a session.

        Returns an empty polygon list when the place has neither a location
        nor a viewport to centre the shapes on.
        """
        estimate = self._estimator.estimate(place, property_type)
        center = place.center
        if center is None:
            return estimate, []
        polygons = self._generator.generate(
            center,
            estimate.estimated_area_sq_ft,
            property_type,
            road_heading=detect_road_heading(place),
        )
        for polygon in polygons:
            polygon.recompute_area()
        return estimate, polygons

    def auto_estimate(
        self,
        session: ServiceAreaSession,
        place: Place,
        property_type: PropertyType,
    ) -> AutoEstimateResult:
        """Replace the session's polygons with a fresh estimate for ``place``."""
        estimate, polygons = self.estimate_polygons(place, property_type)
        summary = session.replace_polygons(polygons)
        return AutoEstimateResult(estimate=estimate, polygons=polygons, summary=summary)

    def price(
        self,
        session: ServiceAreaSession,
        settings: PricingSettings,
        frequency: ServiceFrequency = ServiceFrequency.BI_WEEKLY,
        addons: Sequence[Addon] = (),
    ) -> QuotePricing:
        """Price the session's current total area."""
        summary = session.recalculate_total()
        return self._quote_calculator.calculate(
            summary.total_sq_ft, settings, frequency=frequency, addons=addons,
        )

    def build_quote_record(
        self,
        session: ServiceAreaSession,
        property_type: PropertyType,
        pricing: QuotePricing,
        area_source: AreaSource = AreaSource.MEASURED,
        property_address: str | None = None,
        addons: Sequence[Addon] = (),
    ) -> QuoteRecord:
        """Assemble the immutable record handed to quote storage."""
        return QuoteRecord(
            property_type=property_type,
            property_address=property_address,
            area_source=area_source,
            area_sq_ft=session.summary.rounded_sq_ft,
            polygons=session.coordinates_snapshot(),
            frequency=pricing.frequency,
            addons=list(addons),
            base_price_per_visit=round_dollars(pricing.base_price),
            total_price_per_visit=pricing.per_visit,
            monthly_estimate=pricing.monthly,
            pricing=pricing.snapshot,
        )

    def quote(
        self,
        session: ServiceAreaSession,
        settings: PricingSettings,
        property_type: PropertyType,
        frequency: ServiceFrequency = ServiceFrequency.BI_WEEKLY,
        addons: Sequence[Addon] = (),
        area_source: AreaSource = AreaSource.MEASURED,
        property_address: str | None = None,
    ) -> QuoteRecord:
        """Price the session and build its quote record in one step.

        Raises:
            InvalidPricingTiersError: If tiered pricing is on and the tiers
                fail validation.
        """
        pricing = self.price(session, settings, frequency=frequency, addons=addons)
        logger.info(
            "Quoted %.0f sq ft at $%.0f per visit (%s, %s)",
            session.total_area_sq_ft,
            pricing.per_visit,
            pricing.pricing_mode.value,
            frequency.value,
        )
        return self.build_quote_record(
            session,
            property_type,
            pricing,
            area_source=area_source,
            property_address=property_address,
            addons=addons,
        )
