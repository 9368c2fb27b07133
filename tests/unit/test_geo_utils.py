from __future__ import annotations

import pytest

from src.domain.algorithms.geo_utils import (
    MetricPolyline,
    haversine_distance_km,
    haversine_distance_m,
    midpoint_distance_km,
    point_to_segment_distance_km,
    polyline_length_km,
    project_onto_polyline,
)
from src.domain.models.geo import GeoPoint


def test_haversine_zero_for_identical_points() -> None:
    p = GeoPoint(lat=12.97, lon=77.59)
    assert haversine_distance_m(p, p) == 0.0


def test_haversine_is_symmetric_and_reasonable_scale() -> None:
    # Rough sanity check: 1 degree of latitude is about 111km.
    a = GeoPoint(lat=0.0, lon=0.0)
    b = GeoPoint(lat=1.0, lon=0.0)

    d1 = haversine_distance_m(a, b)
    d2 = haversine_distance_m(b, a)

    assert abs(d1 - d2) < 1e-6
    assert 100_000.0 < d1 < 120_000.0
    assert haversine_distance_km(a, b) == pytest.approx(d1 / 1000.0)


def test_point_to_segment_uses_perpendicular_distance() -> None:
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=0.02)
    above_middle = GeoPoint(lat=0.001, lon=0.01)

    d = point_to_segment_distance_km(above_middle, start, end)

    # 0.001 deg of latitude ~ 111 m
    assert d == pytest.approx(0.1112, abs=0.001)


def test_point_to_segment_clamps_to_nearest_endpoint() -> None:
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=0.01)
    beyond = GeoPoint(lat=0.0, lon=0.03)

    d = point_to_segment_distance_km(beyond, start, end)

    assert d == pytest.approx(haversine_distance_km(beyond, end))


def test_midpoint_distance_is_coarser_than_segment_distance() -> None:
    start = GeoPoint(lat=0.0, lon=0.0)
    end = GeoPoint(lat=0.0, lon=0.1)

    # Sitting on the line at its start: true distance is zero, midpoint is ~5.5 km away.
    assert point_to_segment_distance_km(start, start, end) == pytest.approx(0.0)
    assert midpoint_distance_km(start, start, end) == pytest.approx(5.56, abs=0.01)


def test_project_onto_polyline_reports_distance_along_line() -> None:
    line = (
        GeoPoint(lat=0.0, lon=0.0),
        GeoPoint(lat=0.0, lon=0.01),
        GeoPoint(lat=0.01, lon=0.01),
    )
    p = GeoPoint(lat=0.005, lon=0.0105)

    proj = project_onto_polyline(p, line)

    first_leg = haversine_distance_km(line[0], line[1])
    assert proj.along_km == pytest.approx(first_leg + 0.556, abs=0.002)
    assert proj.distance_km == pytest.approx(0.0556, abs=0.001)
    assert polyline_length_km(line) == pytest.approx(2 * first_leg, rel=1e-3)


def test_project_onto_polyline_rejects_single_vertex() -> None:
    with pytest.raises(ValueError):
        project_onto_polyline(GeoPoint(lat=0.0, lon=0.0), (GeoPoint(lat=0.0, lon=0.0),))


def test_metric_polyline_snaps_onto_the_line() -> None:
    line = MetricPolyline(
        (
            GeoPoint(lat=12.97, lon=77.50),
            GeoPoint(lat=12.97, lon=77.60),
            GeoPoint(lat=13.00, lon=77.60),
        )
    )
    off_line = GeoPoint(lat=12.9705, lon=77.55)

    proj = line.project(off_line)

    assert proj.nearest.lat == pytest.approx(12.97, abs=1e-4)
    assert proj.nearest.lon == pytest.approx(77.55, abs=1e-5)
    assert proj.distance_km == pytest.approx(
        haversine_distance_km(off_line, proj.nearest), rel=1e-3
    )
    assert proj.along_km == pytest.approx(
        haversine_distance_km(line.points[0], proj.nearest), rel=1e-3
    )
    assert line.length_km == pytest.approx(polyline_length_km(line.points), rel=1e-3)


def test_metric_polyline_orders_stations_along_the_line() -> None:
    line = MetricPolyline((GeoPoint(lat=0.0, lon=0.0), GeoPoint(lat=0.0, lon=0.05)))
    lons = (0.04, 0.01, 0.03, 0.02)

    along = {lon: line.project(GeoPoint(lat=0.0003, lon=lon)).along_km for lon in lons}

    assert sorted(lons, key=along.__getitem__) == sorted(lons)
    assert along[0.01] == pytest.approx(1.112, abs=0.002)
