from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import pytest

from src.app.services.transit_comparison_service import TransitComparisonService
from src.domain.exceptions import UnknownStationError
from src.domain.models import GeoPoint, RoadMode


@dataclass(slots=True)
class FakeNetworkRepository:
    features: list[Mapping[str, Any]]
    calls: list[int] = field(default_factory=list)

    def load_features(self) -> list[Mapping[str, Any]]:
        self.calls.append(1)
        return self.features


def test_network_is_built_once_and_reused(sample_features) -> None:
    repo = FakeNetworkRepository(sample_features)
    service = TransitComparisonService(network_repository=repo)

    first = service.network()
    service.list_stations()
    service.find_metro_path("0", "2")

    assert service.network() is first
    assert len(repo.calls) == 1


def test_build_logs_skipped_features(sample_features, caplog) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    with caplog.at_level("WARNING"):
        service.network()

    assert "fewer than 2 vertices" in caplog.text
    assert "unsupported geometry type 'Polygon'" in caplog.text


def test_list_stations_sorted_by_name(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    names = [s.name for s in service.list_stations()]

    assert names == sorted(names)
    assert names.count("KR Puram") == 2


def test_get_station_unknown_raises(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    assert service.get_station("1").name == "Majestic"
    with pytest.raises(UnknownStationError):
        service.get_station("999")


def test_list_lines(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    lines = service.list_lines()

    assert [line.name for line in lines] == [
        "Green Line",
        "Line-5: KR Puram - KIAL",
        "Purple Line",
    ]
    assert lines[0].hex_color == "2ecc71"


def test_compare_uses_station_coordinates_for_road(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    result = service.compare(
        origin_id="0", destination_id="3", mode=RoadMode.CAR, is_peak_morning=True
    )

    expected_road = service.estimate_road_time(
        origin=GeoPoint(lat=12.97, lon=77.52),
        destination=GeoPoint(lat=12.97, lon=77.64),
        mode="car",
        is_peak_morning=True,
    )
    assert result.road == expected_road
    assert result.metro is not None
    assert result.metro.station_ids == ("0", "1", "2", "3")
    assert result.faster_mode == "metro"
    assert result.time_saved_s == pytest.approx(
        expected_road.time_s - result.metro.total_time_s
    )


def test_compare_without_metro_route_still_estimates_road(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    result = service.compare(origin_id="0", destination_id="11", mode="bike")

    assert result.metro is None
    assert result.time_saved_s is None
    assert result.faster_mode is None
    assert result.road.distance_km > 0


def test_compare_unknown_station_raises(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    with pytest.raises(UnknownStationError):
        service.compare(origin_id="0", destination_id="nope")


def test_tuning_knobs_flow_into_pathfinding(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features),
        initial_wait_s=0.0,
    )

    path = service.find_metro_path("1", "1")

    assert path is not None
    assert path.total_time_s == 0.0


def test_summary(sample_features) -> None:
    service = TransitComparisonService(
        network_repository=FakeNetworkRepository(sample_features)
    )

    summary = service.summary()

    assert summary.station_count == 12
    assert summary.line_count == 3
    assert summary.interchange_count == 3
    assert summary.isolated_station_ids == ("11",)
    assert summary.component_count == 2
    assert summary.largest_component_size == 11
    assert summary.skipped_feature_count == 3
