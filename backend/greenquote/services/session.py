"""Service-area editing session: polygon collection plus manual drawing.

One ``ServiceAreaSession`` belongs to one quote being edited. It owns every
committed polygon ("zone") and the drawing state machine::

    IDLE --start_drawing()--> DRAWING --finish_drawing() [>=3 pts]--> IDLE

Every structural change (commit, delete, clear, vertex edit, replacing the
polygons with a fresh auto-estimate) re-walks the whole collection through
``recalculate_total`` so the total always equals the sum of areas recomputed
from current vertices.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Callable
from typing import TYPE_CHECKING

from greenquote.exceptions import PolygonNotFoundError
from greenquote.models.enums import DrawingState
from greenquote.models.polygon import MIN_POLYGON_VERTICES, AreaSummary, Polygon, PolygonArea

if TYPE_CHECKING:
    from collections.abc import Iterable

    from greenquote.models.geo import LatLng

logger = logging.getLogger(__name__)

AreaChangeCallback = Callable[[AreaSummary], None]


def _new_zone_id() -> str:
    return f"zone-{uuid.uuid4().hex[:12]}"


class ServiceAreaSession:
    """Polygons and drawing state for a single quote-editing session.

    Args:
        on_area_change: Called with the new ``AreaSummary`` after every
            recalculation.
    """

    def __init__(self, on_area_change: AreaChangeCallback | None = None) -> None:
        self._polygons: list[Polygon] = []
        self._state = DrawingState.IDLE
        self._in_progress: list[LatLng] = []
        self._on_area_change = on_area_change
        self._summary = AreaSummary()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def state(self) -> DrawingState:
        return self._state

    @property
    def is_drawing(self) -> bool:
        return self._state == DrawingState.DRAWING

    @property
    def in_progress_vertices(self) -> list[LatLng]:
        return list(self._in_progress)

    @property
    def can_finish(self) -> bool:
        return self.is_drawing and len(self._in_progress) >= MIN_POLYGON_VERTICES

    @property
    def polygons(self) -> list[Polygon]:
        return list(self._polygons)

    @property
    def polygon_count(self) -> int:
        return len(self._polygons)

    @property
    def summary(self) -> AreaSummary:
        """Result of the most recent recalculation."""
        return self._summary

    @property
    def total_area_sq_ft(self) -> float:
        return self._summary.total_sq_ft

    def get_polygon(self, polygon_id: str) -> Polygon:
        for polygon in self._polygons:
            if polygon.id == polygon_id:
                return polygon
        raise PolygonNotFoundError(polygon_id)

    # ------------------------------------------------------------------
    # Drawing state machine
    # ------------------------------------------------------------------

    def start_drawing(self) -> None:
        self._state = DrawingState.DRAWING
        self._in_progress = []

    def on_map_click(self, point: LatLng) -> None:
        """Append a vertex to the shape being drawn; ignored while idle."""
        if not self.is_drawing:
            return
        self._in_progress.append(point)

    def undo_last_point(self) -> LatLng | None:
        if not self.is_drawing or not self._in_progress:
            return None
        return self._in_progress.pop()

    def cancel_drawing(self) -> None:
        """Discard the shape being drawn without committing it."""
        self._state = DrawingState.IDLE
        self._in_progress = []

    def finish_drawing(self) -> Polygon | None:
        """Commit the in-progress shape as a new zone.

        With fewer than 3 vertices nothing happens: the session stays in
        ``DRAWING`` and None is returned. Collinear vertices are committed
        as-is (area 0).
        """
        if not self.can_finish:
            return None

        polygon = Polygon(id=_new_zone_id(), vertices=list(self._in_progress))
        self._polygons.append(polygon)
        self._state = DrawingState.IDLE
        self._in_progress = []
        logger.debug("Committed drawn polygon %s", polygon.id)
        if not polygon.is_simple:
            logger.warning("Polygon %s has crossing or overlapping edges", polygon.id)
        self.recalculate_total()
        return polygon

    def add_new_zone(self) -> Polygon | None:
        """Start a fresh zone, committing the current one first if it is complete.

        Returns the polygon committed on the way, if any. An incomplete
        in-progress shape (fewer than 3 vertices) is discarded.
        """
        committed = self.finish_drawing() if self.can_finish else None
        self.start_drawing()
        return committed

    # ------------------------------------------------------------------
    # Committed polygon collection
    # ------------------------------------------------------------------

    def add_polygon(self, polygon: Polygon) -> Polygon:
        self._polygons.append(polygon)
        logger.debug("Added polygon %s, total: %d", polygon.id, len(self._polygons))
        self.recalculate_total()
        return polygon

    def replace_polygons(self, polygons: Iterable[Polygon]) -> AreaSummary:
        """Drop every committed polygon and adopt ``polygons`` instead."""
        self._polygons = list(polygons)
        logger.debug("Replaced polygons, total: %d", len(self._polygons))
        return self.recalculate_total()

    def delete_polygon(self, polygon_id: str) -> bool:
        """Remove one polygon. Returns False if the id is unknown."""
        for index, polygon in enumerate(self._polygons):
            if polygon.id == polygon_id:
                del self._polygons[index]
                logger.debug("Removed polygon %s, remaining: %d", polygon_id, len(self._polygons))
                self.recalculate_total()
                return True
        return False

    def clear_all(self) -> None:
        self._polygons = []
        logger.debug("Cleared all polygons")
        self.recalculate_total()

    # ------------------------------------------------------------------
    # Vertex edits on committed polygons
    # ------------------------------------------------------------------

    def move_vertex(self, polygon_id: str, index: int, point: LatLng) -> AreaSummary:
        self.get_polygon(polygon_id).move_vertex(index, point)
        return self.recalculate_total()

    def insert_vertex(self, polygon_id: str, index: int, point: LatLng) -> AreaSummary:
        self.get_polygon(polygon_id).insert_vertex(index, point)
        return self.recalculate_total()

    def remove_vertex(self, polygon_id: str, index: int) -> AreaSummary:
        self.get_polygon(polygon_id).remove_vertex(index)
        return self.recalculate_total()

    # ------------------------------------------------------------------
    # Area
    # ------------------------------------------------------------------

    def recalculate_total(self) -> AreaSummary:
        """Recompute every polygon's area from its vertices and sum them."""
        breakdown: list[PolygonArea] = []
        total = 0.0
        for polygon in self._polygons:
            sq_ft = polygon.recompute_area()
            total += sq_ft
            breakdown.append(PolygonArea(polygon_id=polygon.id, sq_ft=sq_ft))

        self._summary = AreaSummary(total_sq_ft=total, breakdown=breakdown)
        logger.debug(
            "Total area: %.0f sq ft from %d polygons", total, len(self._polygons)
        )
        if self._on_area_change is not None:
            self._on_area_change(self._summary)
        return self._summary

    def coordinates_snapshot(self) -> list[list[dict[str, float]]]:
        """Vertex lists of every committed polygon, for storage."""
        return [polygon.coordinates() for polygon in self._polygons]
