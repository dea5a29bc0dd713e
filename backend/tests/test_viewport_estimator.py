"""Tests for the ViewportEstimator: viewport-to-lawn-area heuristics."""

from __future__ import annotations

import math

import pytest

from greenquote.config import EstimatorConfig
from greenquote.geometry.area import SQ_FT_PER_SQ_M
from greenquote.geometry.projection import meters_to_lat_offset, meters_to_lng_offset
from greenquote.models.enums import Confidence, Guardrail, PropertyType
from greenquote.models.geo import AddressComponent, LatLng, LatLngBounds, Place
from greenquote.services.viewport_estimator import ViewportEstimator, bounding_box_area_sq_ft

# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------

_STREET_COMPONENTS = [
    AddressComponent(long_name="1600", types=["street_number"]),
    AddressComponent(long_name="Maple Avenue", types=["route"]),
    AddressComponent(long_name="Springfield", types=["locality", "political"]),
]

_LOCALITY_COMPONENTS = [
    AddressComponent(long_name="Springfield", types=["locality", "political"]),
]


def _bounds_for_area(sq_ft: float, lat: float = 40.0, lng: float = -75.0) -> LatLngBounds:
    """Square viewport centred on (lat, lng) covering ``sq_ft``."""
    side_m = math.sqrt(sq_ft / SQ_FT_PER_SQ_M)
    half_lat = meters_to_lat_offset(side_m) / 2.0
    half_lng = meters_to_lng_offset(side_m, lat) / 2.0
    return LatLngBounds(
        south=lat - half_lat,
        west=lng - half_lng,
        north=lat + half_lat,
        east=lng + half_lng,
    )


def _street_place(viewport_sq_ft: float) -> Place:
    return Place(
        location=LatLng(lat=40.0, lng=-75.0),
        viewport=_bounds_for_area(viewport_sq_ft),
        address_components=_STREET_COMPONENTS,
    )


def _locality_place(viewport_sq_ft: float) -> Place:
    return Place(
        location=LatLng(lat=40.0, lng=-75.0),
        viewport=_bounds_for_area(viewport_sq_ft),
        address_components=_LOCALITY_COMPONENTS,
    )


@pytest.fixture()
def estimator() -> ViewportEstimator:
    return ViewportEstimator()


# ---------------------------------------------------------------------------
# Bounding-box area
# ---------------------------------------------------------------------------


class TestBoundingBoxArea:
    def test_helper_viewport_has_requested_area(self) -> None:
        assert bounding_box_area_sq_ft(_bounds_for_area(50_000.0)) == pytest.approx(50_000.0, rel=1e-6)

    def test_cosine_correction_halves_area_at_sixty_degrees(self) -> None:
        equator = LatLngBounds(south=-0.001, west=10.0, north=0.001, east=10.002)
        sixty = LatLngBounds(south=59.999, west=10.0, north=60.001, east=10.002)
        assert bounding_box_area_sq_ft(sixty) == pytest.approx(
            bounding_box_area_sq_ft(equator) * 0.5, rel=1e-4
        )

    def test_zero_span_is_zero(self) -> None:
        point = LatLngBounds(south=40.0, west=-75.0, north=40.0, east=-75.0)
        assert bounding_box_area_sq_ft(point) == 0.0


# ---------------------------------------------------------------------------
# Precision and ratios
# ---------------------------------------------------------------------------


class TestPrecision:
    def test_street_address_is_high_confidence(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_street_place(100_000.0), PropertyType.RESIDENTIAL)
        assert est.confidence == Confidence.HIGH
        assert est.guardrail == Guardrail.NONE
        assert est.area_ratio == pytest.approx(0.35)
        # 100,000 * 0.35 = 35,000
        assert est.estimated_area_sq_ft == 35_000.0

    def test_area_level_is_medium_confidence(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_locality_place(100_000.0), PropertyType.RESIDENTIAL)
        assert est.confidence == Confidence.MEDIUM
        assert est.area_ratio == pytest.approx(0.20)
        assert est.estimated_area_sq_ft == 20_000.0

    def test_route_without_street_number_is_area_level(self, estimator: ViewportEstimator) -> None:
        place = Place(
            location=LatLng(lat=40.0, lng=-75.0),
            viewport=_bounds_for_area(100_000.0),
            address_components=[AddressComponent(long_name="Maple Avenue", types=["route"])],
        )
        assert estimator.estimate(place, PropertyType.RESIDENTIAL).confidence == Confidence.MEDIUM

    def test_bounds_used_when_viewport_missing(self, estimator: ViewportEstimator) -> None:
        place = Place(bounds=_bounds_for_area(100_000.0), address_components=_STREET_COMPONENTS)
        est = estimator.estimate(place, PropertyType.RESIDENTIAL)
        assert est.guardrail == Guardrail.NONE
        assert est.estimated_area_sq_ft == 35_000.0

    def test_property_type_is_carried_through(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_street_place(100_000.0), PropertyType.COMMERCIAL)
        assert est.property_type == PropertyType.COMMERCIAL


# ---------------------------------------------------------------------------
# Guardrails
# ---------------------------------------------------------------------------


class TestLargeViewportGuardrail:
    def test_two_million_sq_ft_is_low_confidence(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_street_place(2_000_000.0), PropertyType.RESIDENTIAL)
        assert est.confidence == Confidence.LOW
        assert est.guardrail == Guardrail.LARGE_VIEWPORT
        assert est.area_ratio < estimator.config.street_address_ratio
        assert est.area_ratio == pytest.approx(0.35 * 0.20)

    def test_large_viewport_result_still_clamped(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_street_place(2_000_000.0), PropertyType.RESIDENTIAL)
        # 2,000,000 * 0.07 = 140,000 -> clamped to the max
        assert est.estimated_area_sq_ft == estimator.config.max_lawn_sq_ft


class TestSmallViewportGuardrail:
    def test_five_thousand_sq_ft_inflates_ratio(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_street_place(5_000.0), PropertyType.RESIDENTIAL)
        cfg = estimator.config
        assert est.guardrail == Guardrail.SMALL_VIEWPORT
        assert est.area_ratio == pytest.approx(
            min(cfg.street_address_ratio * cfg.small_viewport_multiplier, cfg.small_viewport_ratio_ceiling)
        )
        assert est.area_ratio > cfg.street_address_ratio
        # 5,000 * 0.525 = 2,625 -> 2,600
        assert est.estimated_area_sq_ft == 2_600.0

    def test_small_viewport_keeps_confidence(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(_street_place(5_000.0), PropertyType.RESIDENTIAL)
        assert est.confidence == Confidence.HIGH

    def test_inflated_ratio_capped_at_ceiling(self) -> None:
        estimator = ViewportEstimator(EstimatorConfig(small_viewport_multiplier=3.0))
        est = estimator.estimate(_street_place(5_000.0), PropertyType.RESIDENTIAL)
        assert est.area_ratio == pytest.approx(0.60)


class TestFallback:
    def test_no_viewport_uses_circle(self, estimator: ViewportEstimator) -> None:
        place = Place(location=LatLng(lat=40.0, lng=-75.0))
        est = estimator.estimate(place, PropertyType.RESIDENTIAL)
        assert est.confidence == Confidence.LOW
        assert est.guardrail == Guardrail.FALLBACK
        assert est.area_ratio == pytest.approx(0.40)
        # pi * 30^2 m^2 = 30,434 sq ft; 40% = 12,174 -> 12,200
        assert est.estimated_area_sq_ft == 12_200.0

    def test_empty_place_does_not_raise(self, estimator: ViewportEstimator) -> None:
        est = estimator.estimate(Place(), PropertyType.COMMERCIAL)
        assert est.confidence == Confidence.LOW
        assert est.estimated_area_sq_ft > 0


# ---------------------------------------------------------------------------
# Clamping and rounding
# ---------------------------------------------------------------------------


class TestClampAndRound:
    def test_zero_span_viewport_clamped_to_minimum(self, estimator: ViewportEstimator) -> None:
        place = Place(
            viewport=LatLngBounds(south=40.0, west=-75.0, north=40.0, east=-75.0),
            address_components=_STREET_COMPONENTS,
        )
        est = estimator.estimate(place, PropertyType.RESIDENTIAL)
        assert est.viewport_area_sq_ft == 0.0
        assert est.estimated_area_sq_ft == estimator.config.min_lawn_sq_ft

    def test_clamped_to_maximum(self, estimator: ViewportEstimator) -> None:
        # Just under the large-viewport threshold: 900,000 * 0.35 = 315,000
        est = estimator.estimate(_street_place(900_000.0), PropertyType.RESIDENTIAL)
        assert est.guardrail == Guardrail.NONE
        assert est.estimated_area_sq_ft == estimator.config.max_lawn_sq_ft

    @pytest.mark.parametrize("viewport_sq_ft", [12_345.0, 27_777.0, 61_010.0, 98_765.0])
    def test_rounded_to_nearest_hundred(
        self, estimator: ViewportEstimator, viewport_sq_ft: float
    ) -> None:
        est = estimator.estimate(_street_place(viewport_sq_ft), PropertyType.RESIDENTIAL)
        assert est.estimated_area_sq_ft % 100 == 0
        assert est.estimated_area_sq_ft == pytest.approx(viewport_sq_ft * 0.35, abs=50.0001)


# ---------------------------------------------------------------------------
# Config validation
# ---------------------------------------------------------------------------


class TestEstimatorConfig:
    def test_min_above_max_rejected(self) -> None:
        with pytest.raises(ValueError, match="min_lawn_sq_ft"):
            EstimatorConfig(min_lawn_sq_ft=50_000.0, max_lawn_sq_ft=10_000.0)

    def test_thresholds_must_be_ordered(self) -> None:
        with pytest.raises(ValueError, match="small_viewport_threshold_sq_ft"):
            EstimatorConfig(small_viewport_threshold_sq_ft=2_000_000.0)

    def test_ratio_out_of_range_rejected(self) -> None:
        with pytest.raises(ValueError):
            EstimatorConfig(street_address_ratio=1.5)
