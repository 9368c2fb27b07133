from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from pyproj import Transformer
from pyproj.enums import TransformDirection
from shapely.geometry import LineString, Point

from src.domain.models import GeoPoint

EARTH_RADIUS_M = 6371000.0


def haversine_distance_m(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in meters."""

    r = EARTH_RADIUS_M
    lat1 = math.radians(a.lat)
    lon1 = math.radians(a.lon)
    lat2 = math.radians(b.lat)
    lon2 = math.radians(b.lon)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2.0) ** 2
    )
    return 2.0 * r * math.asin(math.sqrt(s))


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    return haversine_distance_m(a, b) / 1000.0


def midpoint(a: GeoPoint, b: GeoPoint) -> GeoPoint:
    return GeoPoint(lat=(a.lat + b.lat) / 2.0, lon=(a.lon + b.lon) / 2.0)


def midpoint_distance_km(
    point: GeoPoint, line_start: GeoPoint, line_end: GeoPoint
) -> float:
    """Distance from point to the midpoint of the segment.

    Coarse on purpose: a point near either end of a long segment reads as far
    away. Only the road estimator uses it.
    """

    return haversine_distance_km(point, midpoint(line_start, line_end))


def _metric_transformer(origin: GeoPoint) -> Transformer:
    # Azimuthal equidistant frame on the same sphere as the haversine helpers.
    return Transformer.from_crs(
        f"+proj=longlat +R={EARTH_RADIUS_M} +no_defs",
        f"+proj=aeqd +lat_0={origin.lat} +lon_0={origin.lon} "
        f"+R={EARTH_RADIUS_M} +units=m +no_defs",
        always_xy=True,
    )


@dataclass(frozen=True, slots=True)
class PolylineProjection:
    nearest: GeoPoint
    distance_km: float
    along_km: float  # arc length from the first vertex to `nearest`


class MetricPolyline:
    """A line held in meters, in a local frame centred on its first vertex.

    Build one per line and project every station onto it.
    """

    __slots__ = ("points", "_to_m", "_line")

    def __init__(self, points: Sequence[GeoPoint]) -> None:
        if len(points) < 2:
            raise ValueError("Polyline needs at least 2 vertices")

        self.points = tuple(points)
        self._to_m = _metric_transformer(self.points[0])
        xs, ys = self._to_m.transform(
            [p.lon for p in self.points], [p.lat for p in self.points]
        )
        self._line = LineString(list(zip(xs, ys)))

    @property
    def length_km(self) -> float:
        return self._line.length / 1000.0

    def project(self, point: GeoPoint) -> PolylineProjection:
        x, y = self._to_m.transform(point.lon, point.lat)
        pt = Point(x, y)

        along_m = self._line.project(pt)
        snapped = self._line.interpolate(along_m)
        lon, lat = self._to_m.transform(
            snapped.x, snapped.y, direction=TransformDirection.INVERSE
        )
        return PolylineProjection(
            nearest=GeoPoint(lat=lat, lon=lon),
            distance_km=self._line.distance(pt) / 1000.0,
            along_km=along_m / 1000.0,
        )


def project_onto_polyline(
    point: GeoPoint, polyline: Sequence[GeoPoint]
) -> PolylineProjection:
    """Snap a point onto a multi-vertex line."""

    return MetricPolyline(polyline).project(point)


def point_to_segment_distance_km(
    point: GeoPoint, line_start: GeoPoint, line_end: GeoPoint
) -> float:
    """Minimum distance from point to the segment line_start-line_end."""

    return project_onto_polyline(point, (line_start, line_end)).distance_km


def polyline_length_km(points: Sequence[GeoPoint]) -> float:
    if len(points) < 2:
        return 0.0
    return float(sum(haversine_distance_km(a, b) for a, b in zip(points, points[1:])))
