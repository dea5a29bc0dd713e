"""Local metre <-> degree conversions and synthetic rectangle construction."""

from __future__ import annotations

import math

from greenquote.models.geo import LatLng

# Length of one degree of latitude (and of longitude at the equator).
METERS_PER_DEGREE = 111_320.0


def meters_to_lat_offset(meters: float) -> float:
    return meters / METERS_PER_DEGREE


def meters_to_lng_offset(meters: float, at_latitude: float) -> float:
    """Degrees of longitude spanning ``meters`` at the given latitude.

    Meridians converge toward the poles, so the divisor shrinks with
    cos(latitude). At the poles themselves the offset is returned as 0.
    """
    cos_lat = math.cos(math.radians(at_latitude))
    if abs(cos_lat) < 1e-12:
        return 0.0
    return meters / (METERS_PER_DEGREE * cos_lat)


def lat_offset_to_meters(degrees: float) -> float:
    return degrees * METERS_PER_DEGREE


def lng_offset_to_meters(degrees: float, at_latitude: float) -> float:
    return degrees * METERS_PER_DEGREE * math.cos(math.radians(at_latitude))


def rotate_heading(x: float, y: float, heading_degrees: float) -> tuple[float, float]:
    """Rotate a local (east, north) offset clockwise by a compass heading.

    A point due north of the origin ends up pointing along ``heading_degrees``
    (0 = north, 90 = east, 180 = south, 270 = west).
    """
    theta = math.radians(heading_degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return (x * cos_t + y * sin_t, -x * sin_t + y * cos_t)


def offset_point(center: LatLng, east_m: float, north_m: float) -> LatLng:
    lat = center.lat + meters_to_lat_offset(north_m)
    lng = center.lng + meters_to_lng_offset(east_m, center.lat)
    # Wrap across the antimeridian; clamp at the poles.
    if lng > 180.0:
        lng -= 360.0
    elif lng < -180.0:
        lng += 360.0
    return LatLng(lat=max(-90.0, min(90.0, lat)), lng=lng)


def build_rectangle(
    center: LatLng,
    area_sq_m: float,
    aspect_ratio: float,
    rotation_degrees: float = 0.0,
    vertical_offset_meters: float = 0.0,
) -> list[LatLng]:
    """Build a 4-vertex rectangle of the given area and width/depth ratio.

    ``width = sqrt(area * aspect_ratio)`` runs east-west and
    ``depth = area / width`` runs north-south before rotation. The rectangle
    is centred ``vertical_offset_meters`` north of ``center`` and the whole
    figure, offset included, is then rotated about ``center`` by
    ``rotation_degrees`` (compass heading, clockwise). Geometry is laid out in
    local metres and converted to degrees last.
    """
    if area_sq_m <= 0 or aspect_ratio <= 0:
        return [center.model_copy() for _ in range(4)]

    width = math.sqrt(area_sq_m * aspect_ratio)
    depth = area_sq_m / width
    half_w = width / 2.0
    half_d = depth / 2.0
    off = vertical_offset_meters

    corners = [
        (-half_w, off - half_d),
        (half_w, off - half_d),
        (half_w, off + half_d),
        (-half_w, off + half_d),
    ]

    vertices: list[LatLng] = []
    for x, y in corners:
        rx, ry = rotate_heading(x, y, rotation_degrees)
        vertices.append(offset_point(center, rx, ry))
    return vertices
