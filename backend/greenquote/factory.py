"""Factory functions for creating pre-configured LawnQuoteEngine instances."""

from __future__ import annotations

from typing import TYPE_CHECKING

from greenquote.engine import LawnQuoteEngine
from greenquote.services.polygon_generator import PolygonGenerator
from greenquote.services.quote_calculator import QuoteCalculator
from greenquote.services.viewport_estimator import ViewportEstimator

if TYPE_CHECKING:
    from greenquote.config import EngineConfig


def create_default_engine(config: EngineConfig | None = None) -> LawnQuoteEngine:
    """Create a LawnQuoteEngine wired up with default (or given) configuration.

    This is the recommended way to create an engine for typical usage. It
    builds the estimator and generator from ``config`` (defaults when None)
    so callers don't need to understand the internal wiring.

    Example::

        from greenquote import create_default_engine

        engine = create_default_engine()
        estimate, polygons = engine.estimate_polygons(place, PropertyType.RESIDENTIAL)
    """
    if config is None:
        return LawnQuoteEngine(
            estimator=ViewportEstimator(),
            generator=PolygonGenerator(),
            quote_calculator=QuoteCalculator(),
        )
    return LawnQuoteEngine(
        estimator=ViewportEstimator(config.estimator),
        generator=PolygonGenerator(config.generator),
        quote_calculator=QuoteCalculator(),
    )
