from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
from typing import Any, Iterable, Mapping

from src.domain.algorithms.feature_parsing import (
    LineFeature,
    StationFeature,
    parse_line_feature,
    parse_station_feature,
    partition_features,
    station_name_key,
)
from src.domain.algorithms.geo_utils import MetricPolyline, haversine_distance_m
from src.domain.models import (
    TRANSFER_LINE,
    Edge,
    MetroLine,
    NetworkBuild,
    SkippedFeature,
    Station,
    TransitGraph,
)

SPEED_NORMAL_MPS = (34 * 1000) / 3600  # ~9.44 m/s
SPEED_EXPRESS_MPS = (60 * 1000) / 3600  # ~16.67 m/s
WALKING_SPEED_MPS = 1.0
TRANSFER_PENALTY_S = 450.0

STATION_LINE_BUFFER_KM = 0.1
MAX_TRANSFER_WALK_M = 500.0


@dataclass(frozen=True, slots=True)
class _Assignment:
    station_id: str
    line: MetroLine
    along_km: float


def _parse_all(
    line_features: Iterable[Mapping[str, Any]],
    station_features: Iterable[Mapping[str, Any]],
) -> tuple[list[LineFeature], list[StationFeature], list[SkippedFeature]]:
    skipped: list[SkippedFeature] = []

    lines: list[LineFeature] = []
    for i, feature in enumerate(line_features):
        try:
            lines.append(parse_line_feature(feature, index=i))
        except ValueError as exc:
            skipped.append(SkippedFeature(kind="line", index=i, reason=str(exc)))

    stations: list[StationFeature] = []
    seen: set[str] = set()
    for i, feature in enumerate(station_features):
        try:
            st = parse_station_feature(feature, index=i)
        except ValueError as exc:
            skipped.append(SkippedFeature(kind="station", index=i, reason=str(exc)))
            continue
        if st.id in seen:
            skipped.append(
                SkippedFeature(
                    kind="station", index=i, reason=f"duplicate station id {st.id!r}"
                )
            )
            continue
        seen.add(st.id)
        stations.append(st)

    return lines, stations, skipped


def _assign_stations_to_lines(
    lines: list[LineFeature], stations: list[StationFeature]
) -> dict[str, list[_Assignment]]:
    assignments: dict[str, list[_Assignment]] = {st.id: [] for st in stations}
    for lf in lines:
        polyline = MetricPolyline(lf.points)
        for st in stations:
            proj = polyline.project(st.location)
            # Strict: a station exactly on the buffer edge is not on the line.
            if proj.distance_km < STATION_LINE_BUFFER_KM:
                assignments[st.id].append(
                    _Assignment(station_id=st.id, line=lf.line, along_km=proj.along_km)
                )
    return assignments


def _transfer_pairs(
    stations: list[StationFeature],
) -> list[tuple[StationFeature, StationFeature, float]]:
    by_name: dict[str, list[StationFeature]] = {}
    for st in stations:
        by_name.setdefault(station_name_key(st.name), []).append(st)

    pairs: list[tuple[StationFeature, StationFeature, float]] = []
    for group in by_name.values():
        if len(group) < 2:
            continue
        for u, v in combinations(group, 2):
            dist_m = haversine_distance_m(u.location, v.location)
            if dist_m < MAX_TRANSFER_WALK_M:
                pairs.append((u, v, dist_m))
    return pairs


def _add_edge_pair(
    edges: dict[str, list[Edge]],
    u: str,
    v: str,
    *,
    weight_s: float,
    distance_m: float,
    line: str,
    color: str | None,
) -> None:
    edges.setdefault(u, []).append(
        Edge(
            from_id=u,
            to_id=v,
            weight_s=weight_s,
            distance_m=distance_m,
            line=line,
            color=color,
        )
    )
    edges.setdefault(v, []).append(
        Edge(
            from_id=v,
            to_id=u,
            weight_s=weight_s,
            distance_m=distance_m,
            line=line,
            color=color,
        )
    )


def build_network(
    line_features: Iterable[Mapping[str, Any]],
    station_features: Iterable[Mapping[str, Any]],
) -> NetworkBuild:
    """Build the metro graph from raw GeoJSON LineString and Point features.

    Two independent passes connect the network:
      - proximity: stations within the buffer of a line are chained along it
        in order of distance along the line;
      - name matching: same-named stations close to each other get a walking
        TRANSFER edge.

    Malformed features are skipped and reported, never fatal.
    """

    lines, stations, skipped = _parse_all(line_features, station_features)
    assignments = _assign_stations_to_lines(lines, stations)
    pairs = _transfer_pairs(stations)

    colors_by_station: dict[str, frozenset[str]] = {
        st_id: frozenset(a.line.color for a in items)
        for st_id, items in assignments.items()
    }

    reachable: dict[str, set[str]] = {
        st_id: set(colors) for st_id, colors in colors_by_station.items()
    }
    for u, v, _ in pairs:
        reachable[u.id] |= colors_by_station[v.id]
        reachable[v.id] |= colors_by_station[u.id]

    station_map: dict[str, Station] = {
        st.id: Station(
            id=st.id,
            name=st.name,
            location=st.location,
            lines=colors_by_station[st.id],
            is_interchange=len(reachable[st.id]) > 1,
        )
        for st in stations
    }

    line_map: dict[str, MetroLine] = {}
    for lf in lines:
        line_map.setdefault(lf.line.name, lf.line)

    # Group by line name, not color: two branches sharing a color stay separate chains.
    by_line: dict[str, list[_Assignment]] = {}
    for items in assignments.values():
        for a in items:
            by_line.setdefault(a.line.name, []).append(a)

    edges: dict[str, list[Edge]] = {}
    for line_name, group in by_line.items():
        group.sort(key=lambda a: a.along_km)
        for u, v in zip(group, group[1:]):
            distance_m = abs(v.along_km - u.along_km) * 1000.0
            speed = (
                SPEED_EXPRESS_MPS
                if (u.line.is_express or v.line.is_express)
                else SPEED_NORMAL_MPS
            )
            _add_edge_pair(
                edges,
                u.station_id,
                v.station_id,
                weight_s=distance_m / speed,
                distance_m=distance_m,
                line=line_name,
                color=u.line.color,
            )

    for u, v, dist_m in pairs:
        _add_edge_pair(
            edges,
            u.id,
            v.id,
            weight_s=dist_m / WALKING_SPEED_MPS + TRANSFER_PENALTY_S,
            distance_m=dist_m,
            line=TRANSFER_LINE,
            color=None,
        )

    graph = TransitGraph(
        stations=station_map,
        edges_by_station={k: tuple(v) for k, v in edges.items()},
        lines=line_map,
    )
    return NetworkBuild(graph=graph, skipped=tuple(skipped))


def build_graph(
    line_features: Iterable[Mapping[str, Any]],
    station_features: Iterable[Mapping[str, Any]],
) -> TransitGraph:
    return build_network(line_features, station_features).graph


def build_network_from_features(features: Iterable[Mapping[str, Any]]) -> NetworkBuild:
    """Convenience for a whole FeatureCollection's `features` list."""

    parts = partition_features(features)
    build = build_network(parts.lines, parts.stations)
    return NetworkBuild(graph=build.graph, skipped=parts.skipped + build.skipped)
