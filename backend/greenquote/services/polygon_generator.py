"""Synthesizes plausible yard polygons from an area estimate.

Residential lots get a front yard (toward the road) and a back yard (away
from it); commercial lots get a single wide rectangle. The generator only
builds *shape*: every polygon comes back with ``area_sq_ft == 0`` and must be
recomputed from its vertices before it is shown or summed.
"""

from __future__ import annotations

import re
import time
from collections.abc import Callable
from typing import TYPE_CHECKING

from greenquote.config import GeneratorConfig
from greenquote.geometry.area import sq_ft_to_sq_m
from greenquote.geometry.projection import build_rectangle
from greenquote.models.enums import PropertyType
from greenquote.models.polygon import Polygon

if TYPE_CHECKING:
    from greenquote.models.geo import LatLng, Place

# Compass heading implied by a directional word in a road name. The word must
# stand alone between whitespace (an abbreviation may end in "."), so
# "Northwood Dr" and "Mary's Ln" carry no direction.
_ROAD_HEADINGS: tuple[tuple[re.Pattern[str], float], ...] = (
    (re.compile(r"(?<!\S)(?:north|n\.?)(?!\S)"), 0.0),
    (re.compile(r"(?<!\S)(?:south|s\.?)(?!\S)"), 180.0),
    (re.compile(r"(?<!\S)(?:east|e\.?)(?!\S)"), 90.0),
    (re.compile(r"(?<!\S)(?:west|w\.?)(?!\S)"), 270.0),
)


def detect_road_heading(place: Place) -> float | None:
    """Guess which side of the lot faces the road from the route name.

    Returns a compass heading (0 = north, 90 = east, ...) or None when the
    route name carries no direction.
    """
    route = place.component("route")
    if route is None:
        return None
    name = route.long_name.lower()
    for pattern, heading in _ROAD_HEADINGS:
        if pattern.search(name):
            return heading
    return None


class PolygonGenerator:
    """Turns an estimated lawn area into one or more boundary polygons.

    Args:
        config: Yard split, aspect ratios and lot offsets.
        clock: Returns the current time in seconds; used for polygon ids.
    """

    def __init__(
        self,
        config: GeneratorConfig | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config = config or GeneratorConfig()
        self._clock = clock

    @property
    def config(self) -> GeneratorConfig:
        return self._config

    def generate(
        self,
        center: LatLng,
        estimated_area_sq_ft: float,
        property_type: PropertyType,
        road_heading: float | None = None,
    ) -> list[Polygon]:
        """Build the polygons for ``property_type`` around ``center``.

        Args:
            center: Lot centre (usually the geocoded location).
            estimated_area_sq_ft: Total lawn area to distribute.
            property_type: Residential (2 polygons) or commercial (1).
            road_heading: Compass heading from the lot centre toward the
                road; the configured default (south) when unknown.
        """
        heading = self._config.default_road_heading if road_heading is None else road_heading
        stamp = int(self._clock() * 1000)

        if property_type == PropertyType.COMMERCIAL:
            return [self._commercial_lot(center, estimated_area_sq_ft, heading, stamp)]
        return self._front_and_back_yards(center, estimated_area_sq_ft, heading, stamp)

    def _front_and_back_yards(
        self,
        center: LatLng,
        total_sq_ft: float,
        heading: float,
        stamp: int,
    ) -> list[Polygon]:
        cfg = self._config
        front_sq_m = sq_ft_to_sq_m(total_sq_ft * cfg.front_yard_ratio)
        back_sq_m = sq_ft_to_sq_m(total_sq_ft * cfg.back_yard_ratio)

        front = build_rectangle(
            center,
            front_sq_m,
            cfg.front_yard_aspect_ratio,
            rotation_degrees=heading,
            vertical_offset_meters=cfg.lot_depth_m * cfg.front_offset_fraction,
        )
        back = build_rectangle(
            center,
            back_sq_m,
            cfg.back_yard_aspect_ratio,
            rotation_degrees=heading,
            vertical_offset_meters=-cfg.lot_depth_m * cfg.back_offset_fraction,
        )
        return [
            Polygon(id=f"front-yard-{stamp}", vertices=front),
            Polygon(id=f"back-yard-{stamp}", vertices=back),
        ]

    def _commercial_lot(
        self,
        center: LatLng,
        total_sq_ft: float,
        heading: float,
        stamp: int,
    ) -> Polygon:
        vertices = build_rectangle(
            center,
            sq_ft_to_sq_m(total_sq_ft),
            self._config.commercial_aspect_ratio,
            rotation_degrees=heading,
        )
        return Polygon(id=f"commercial-{stamp}", vertices=vertices)
