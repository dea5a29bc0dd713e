"""Service-area polygon model shared by generated estimates and manual zones."""

from __future__ import annotations

from pydantic import BaseModel, Field

from greenquote.geometry.area import is_simple_ring, polygon_area_sq_ft
from greenquote.models.geo import LatLng

MIN_POLYGON_VERTICES = 3


class Polygon(BaseModel):
    """A drawn or generated lawn boundary.

    ``vertices`` is an open ring: the last vertex implicitly joins the first.
    ``area_sq_ft`` is a cache only; it is recomputed from ``vertices`` by
    ``recompute_area`` and by every vertex mutation below.
    """

    id: str
    vertices: list[LatLng] = Field(default_factory=list)
    area_sq_ft: float = 0.0

    @property
    def is_valid(self) -> bool:
        return len(self.vertices) >= MIN_POLYGON_VERTICES

    @property
    def is_simple(self) -> bool:
        """False when edges cross; such polygons are still accepted and priced."""
        return is_simple_ring(self.vertices)

    def recompute_area(self) -> float:
        self.area_sq_ft = polygon_area_sq_ft(self.vertices)
        return self.area_sq_ft

    def move_vertex(self, index: int, point: LatLng) -> None:
        self.vertices[index] = point
        self.recompute_area()

    def insert_vertex(self, index: int, point: LatLng) -> None:
        self.vertices.insert(index, point)
        self.recompute_area()

    def remove_vertex(self, index: int) -> LatLng:
        removed = self.vertices.pop(index)
        self.recompute_area()
        return removed

    def coordinates(self) -> list[dict[str, float]]:
        """Plain ``[{lat, lng}, ...]`` list for storage."""
        return [{"lat": v.lat, "lng": v.lng} for v in self.vertices]


class PolygonArea(BaseModel):
    """Per-polygon line of an area summary."""

    polygon_id: str
    sq_ft: float


class AreaSummary(BaseModel):
    """Total service area and the per-polygon areas it was summed from."""

    total_sq_ft: float = 0.0
    breakdown: list[PolygonArea] = Field(default_factory=list)

    @property
    def polygon_count(self) -> int:
        return len(self.breakdown)

    @property
    def rounded_sq_ft(self) -> int:
        return round(self.total_sq_ft)
