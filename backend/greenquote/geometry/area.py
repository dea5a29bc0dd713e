"""Spherical polygon area for lat/lng service-area boundaries.

Area is computed with the spherical-excess formulation used by the Google
Maps geometry library (``google.maps.geometry.spherical.computeArea``), so
numbers match what a user sees on the map:

  1. Each edge contributes the signed area of the polar triangle formed
     with the north pole.
  2. Contributions are summed around the closed ring (last vertex joins
     the first).
  3. The absolute sum times R^2 is the enclosed area in square metres.

Self-intersecting rings are not rejected; the formula is applied as-is.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from greenquote.models.geo import LatLng

EARTH_RADIUS_M = 6_378_137.0
SQ_FT_PER_SQ_M = 10.7639


def sq_m_to_sq_ft(sq_m: float) -> float:
    return sq_m * SQ_FT_PER_SQ_M


def sq_ft_to_sq_m(sq_ft: float) -> float:
    return sq_ft / SQ_FT_PER_SQ_M


def as_lat_lng_pairs(
    vertices: Sequence[LatLng | tuple[float, float]],
) -> list[tuple[float, float]]:
    """Normalize LatLng models or ``(lat, lng)`` tuples to plain tuples."""
    pairs: list[tuple[float, float]] = []
    for v in vertices:
        if isinstance(v, tuple):
            pairs.append((float(v[0]), float(v[1])))
        else:
            pairs.append((v.lat, v.lng))
    return pairs


def _polar_triangle_area(
    tan1: float, lng1: float, tan2: float, lng2: float
) -> float:
    delta_lng = lng1 - lng2
    t = tan1 * tan2
    return 2.0 * math.atan2(t * math.sin(delta_lng), 1.0 + t * math.cos(delta_lng))


def signed_area_sq_m(
    vertices: Sequence[LatLng | tuple[float, float]],
    radius: float = EARTH_RADIUS_M,
) -> float:
    """Signed spherical area in square metres (sign follows winding order)."""
    pairs = as_lat_lng_pairs(vertices)
    if len(pairs) < 3:
        return 0.0

    prev_lat, prev_lng = pairs[-1]
    prev_tan = math.tan((math.pi / 2.0 - math.radians(prev_lat)) / 2.0)
    prev_lng_rad = math.radians(prev_lng)

    total = 0.0
    for lat, lng in pairs:
        tan_lat = math.tan((math.pi / 2.0 - math.radians(lat)) / 2.0)
        lng_rad = math.radians(lng)
        total += _polar_triangle_area(tan_lat, lng_rad, prev_tan, prev_lng_rad)
        prev_tan = tan_lat
        prev_lng_rad = lng_rad

    return total * radius * radius


def polygon_area_sq_m(vertices: Sequence[LatLng | tuple[float, float]]) -> float:
    return abs(signed_area_sq_m(vertices))


def polygon_area_sq_ft(vertices: Sequence[LatLng | tuple[float, float]]) -> float:
    """Area enclosed by an ordered lat/lng ring, in square feet.

    Fewer than 3 vertices yields 0. Never raises on degenerate input.
    """
    return sq_m_to_sq_ft(polygon_area_sq_m(vertices))


def is_simple_ring(vertices: Sequence[LatLng | tuple[float, float]]) -> bool:
    """Return False if the ring's edges cross or overlap each other.

    Uses a planar shapely ring in (lng, lat) space, which is adequate at
    lot scale. Rings with fewer than 3 vertices are trivially simple.
    """
    from shapely.geometry import LinearRing

    pairs = as_lat_lng_pairs(vertices)
    if len(pairs) < 3:
        return True
    ring = LinearRing([(lng, lat) for lat, lng in pairs])
    return bool(ring.is_simple)
