from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import networkx as nx

from src.domain.models import SkippedFeature, TransitGraph


@dataclass(frozen=True, slots=True)
class NetworkSummary:
    station_count: int
    edge_count: int
    line_count: int
    interchange_count: int
    isolated_station_ids: tuple[str, ...]
    component_count: int
    largest_component_size: int
    skipped_feature_count: int = 0


def to_networkx(graph: TransitGraph) -> nx.MultiDiGraph:
    """Export the metro graph; nodes carry x=lon / y=lat like OSMnx graphs."""

    g = nx.MultiDiGraph()
    for station in graph.stations.values():
        g.add_node(
            station.id,
            name=station.name,
            lines=sorted(station.lines),
            is_interchange=station.is_interchange,
            x=station.location.lon,
            y=station.location.lat,
        )
    for edge in graph.edges():
        g.add_edge(
            edge.from_id,
            edge.to_id,
            weight=edge.weight_s,
            distance=edge.distance_m,
            line=edge.line,
        )
    return g


def network_summary(
    graph: TransitGraph, skipped: Iterable[SkippedFeature] = ()
) -> NetworkSummary:
    g = to_networkx(graph)
    components = list(nx.weakly_connected_components(g)) if len(g) else []

    return NetworkSummary(
        station_count=len(graph),
        edge_count=graph.edge_count,
        line_count=len(graph.lines),
        interchange_count=sum(1 for s in graph.stations.values() if s.is_interchange),
        isolated_station_ids=tuple(
            s.id for s in graph.stations.values() if g.degree(s.id) == 0
        ),
        component_count=len(components),
        largest_component_size=max((len(c) for c in components), default=0),
        skipped_feature_count=sum(1 for _ in skipped),
    )
