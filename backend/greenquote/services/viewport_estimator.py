"""Lawn area estimation from a geocoded place's viewport.

The estimator treats the geocoder's viewport (or bounds) as a rough proxy for
the lot size:

1. **Fallback**: with no viewport or bounds, assume a circle of the
   configured radius of which a fixed fraction is lawn; confidence is low.
2. **Bounding-box area**: planar area of the viewport from its lat/lng spans,
   cosine-corrected for longitude.
3. **Precision**: a street number plus a route means a precise street address
   (high confidence); anything else is area-level (medium). Each precision
   selects its own lawn ratio.
4. **Large-viewport guardrail**: a viewport covering a block or more is
   dominated by unrelated parcels: shrink the ratio sharply, force low
   confidence.
5. **Small-viewport guardrail**: a very tight viewport under-counts the lot:
   inflate the ratio by a multiplier, capped at a ceiling.
6. **Clamp and round**: clamp to the configured lawn bounds, then round to
   the configured granularity.

No network calls happen here; ``place`` is already resolved.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from greenquote.config import EstimatorConfig
from greenquote.geometry.area import sq_m_to_sq_ft
from greenquote.geometry.projection import lat_offset_to_meters, lng_offset_to_meters
from greenquote.models.enums import Confidence, Guardrail, PropertyType
from greenquote.models.estimate import Estimate

if TYPE_CHECKING:
    from greenquote.models.geo import LatLngBounds, Place

logger = logging.getLogger(__name__)


def bounding_box_area_sq_ft(bounds: LatLngBounds) -> float:
    """Planar area of a lat/lng rectangle in square feet."""
    mid_lat = (bounds.north + bounds.south) / 2.0
    height_m = lat_offset_to_meters(bounds.lat_span)
    width_m = lng_offset_to_meters(bounds.lng_span, mid_lat)
    return sq_m_to_sq_ft(abs(height_m * width_m))


class ViewportEstimator:
    """Derives a lawn-area ``Estimate`` from a place's viewport.

    Args:
        config: Ratios, bounds and guardrail thresholds. Defaults are used
            when omitted.

    Example::

        estimator = ViewportEstimator()
        estimate = estimator.estimate(place, PropertyType.RESIDENTIAL)
    """

    def __init__(self, config: EstimatorConfig | None = None) -> None:
        self._config = config or EstimatorConfig()

    @property
    def config(self) -> EstimatorConfig:
        return self._config

    def estimate(self, place: Place, property_type: PropertyType) -> Estimate:
        """Estimate the lawn area for ``place``. Never raises."""
        cfg = self._config
        extent = place.extent

        if extent is None:
            circle_sq_ft = sq_m_to_sq_ft(math.pi * cfg.fallback_radius_m ** 2)
            raw = circle_sq_ft * cfg.fallback_lawn_fraction
            logger.debug(
                "No viewport for place; fallback circle %.0f sq ft -> %.0f sq ft lawn",
                circle_sq_ft,
                raw,
            )
            return Estimate(
                estimated_area_sq_ft=self._clamp_and_round(raw),
                confidence=Confidence.LOW,
                property_type=property_type,
                area_ratio=cfg.fallback_lawn_fraction,
                viewport_area_sq_ft=circle_sq_ft,
                guardrail=Guardrail.FALLBACK,
            )

        viewport_sq_ft = bounding_box_area_sq_ft(extent)

        if place.is_street_address:
            confidence = Confidence.HIGH
            ratio = cfg.street_address_ratio
        else:
            confidence = Confidence.MEDIUM
            ratio = cfg.area_level_ratio

        guardrail = Guardrail.NONE
        if viewport_sq_ft > cfg.large_viewport_threshold_sq_ft:
            ratio *= cfg.large_viewport_ratio_factor
            confidence = Confidence.LOW
            guardrail = Guardrail.LARGE_VIEWPORT
        elif viewport_sq_ft < cfg.small_viewport_threshold_sq_ft:
            ratio = min(ratio * cfg.small_viewport_multiplier, cfg.small_viewport_ratio_ceiling)
            guardrail = Guardrail.SMALL_VIEWPORT

        raw = viewport_sq_ft * ratio
        estimated = self._clamp_and_round(raw)
        logger.debug(
            "Viewport %.0f sq ft, ratio %.3f (%s), raw %.0f -> %.0f sq ft, confidence %s",
            viewport_sq_ft,
            ratio,
            guardrail.value,
            raw,
            estimated,
            confidence.value,
        )

        return Estimate(
            estimated_area_sq_ft=estimated,
            confidence=confidence,
            property_type=property_type,
            area_ratio=ratio,
            viewport_area_sq_ft=viewport_sq_ft,
            guardrail=guardrail,
        )

    def _clamp_and_round(self, sq_ft: float) -> float:
        cfg = self._config
        clamped = min(max(sq_ft, cfg.min_lawn_sq_ft), cfg.max_lawn_sq_ft)
        step = cfg.rounding_sq_ft
        return float(math.floor(clamped / step + 0.5) * step)
