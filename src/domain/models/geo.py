from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lon: float

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise ValueError(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise ValueError(f"Invalid longitude: {self.lon}")

    @classmethod
    def from_lon_lat(cls, coords: Sequence[float]) -> GeoPoint:
        """Build a point from GeoJSON (lon, lat[, alt]) order."""

        if isinstance(coords, (str, bytes)) or not isinstance(coords, Sequence):
            raise ValueError(f"Expected [lon, lat], got {coords!r}")
        if len(coords) < 2:
            raise ValueError(f"Expected [lon, lat], got {list(coords)!r}")

        lon, lat = coords[0], coords[1]
        for value in (lon, lat):
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Coordinate is not a number: {value!r}")
        return cls(lat=float(lat), lon=float(lon))

    def to_lon_lat(self) -> tuple[float, float]:
        return (self.lon, self.lat)
