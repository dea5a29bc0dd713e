"""Geographic input models: coordinates, bounds, and geocoded places."""

from __future__ import annotations

from pydantic import BaseModel, Field


class LatLng(BaseModel):
    """A WGS84 coordinate in decimal degrees."""

    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)

    def as_tuple(self) -> tuple[float, float]:
        return (self.lat, self.lng)


class LatLngBounds(BaseModel):
    """Axis-aligned lat/lng rectangle (a geocoder viewport or bounds)."""

    south: float = Field(ge=-90.0, le=90.0)
    west: float = Field(ge=-180.0, le=180.0)
    north: float = Field(ge=-90.0, le=90.0)
    east: float = Field(ge=-180.0, le=180.0)

    @property
    def lat_span(self) -> float:
        return abs(self.north - self.south)

    @property
    def lng_span(self) -> float:
        """Longitude span in degrees, handling viewports that cross the antimeridian."""
        span = self.east - self.west
        if span < 0:
            span += 360.0
        return span

    @property
    def center(self) -> LatLng:
        lng = self.west + self.lng_span / 2.0
        if lng > 180.0:
            lng -= 360.0
        return LatLng(lat=(self.north + self.south) / 2.0, lng=lng)


class AddressComponent(BaseModel):
    """One typed part of a geocoded address (street number, route, locality...)."""

    long_name: str
    short_name: str = ""
    types: list[str] = Field(default_factory=list)


class Place(BaseModel):
    """A geocoding result that has already been resolved by the caller.

    Only the fields the estimator needs are modelled. ``viewport`` is
    preferred over ``bounds`` when both are present.
    """

    location: LatLng | None = None
    viewport: LatLngBounds | None = None
    bounds: LatLngBounds | None = None
    address_components: list[AddressComponent] = Field(default_factory=list)
    formatted_address: str | None = None

    @property
    def extent(self) -> LatLngBounds | None:
        return self.viewport or self.bounds

    @property
    def center(self) -> LatLng | None:
        if self.location is not None:
            return self.location
        extent = self.extent
        return extent.center if extent is not None else None

    def has_component(self, component_type: str) -> bool:
        return any(component_type in c.types for c in self.address_components)

    def component(self, component_type: str) -> AddressComponent | None:
        for c in self.address_components:
            if component_type in c.types:
                return c
        return None

    @property
    def is_street_address(self) -> bool:
        """True when both a street number and a route were geocoded."""
        return self.has_component("street_number") and self.has_component("route")
