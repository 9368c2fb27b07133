from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterator

from .line import TRANSFER_LINE, MetroLine
from .station import Station


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed connection between two stations.

    weight_s is the traversal cost in seconds. For TRANSFER edges it already
    includes the walking time plus the fixed transfer penalty.
    """

    from_id: str
    to_id: str
    weight_s: float
    distance_m: float
    line: str
    color: str | None = None

    @property
    def is_transfer(self) -> bool:
        return self.line == TRANSFER_LINE


@dataclass(frozen=True, slots=True)
class TransitGraph:
    """Read-only metro network: stations plus outgoing edges per station."""

    stations: dict[str, Station]
    edges_by_station: dict[str, tuple[Edge, ...]]
    lines: dict[str, MetroLine] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for station_id, station in self.stations.items():
            if station.id != station_id:
                raise ValueError(
                    f"Station keyed as {station_id!r} has id {station.id!r}"
                )
        for source_id, edges in self.edges_by_station.items():
            for edge in edges:
                if edge.from_id != source_id:
                    raise ValueError(
                        f"Edge {edge.from_id}->{edge.to_id} listed under {source_id!r}"
                    )
                if edge.from_id not in self.stations or edge.to_id not in self.stations:
                    raise ValueError(
                        f"Edge {edge.from_id}->{edge.to_id} references an unknown station"
                    )
                if not math.isfinite(edge.weight_s) or edge.weight_s < 0:
                    raise ValueError(
                        f"Edge {edge.from_id}->{edge.to_id} has invalid weight {edge.weight_s}"
                    )

    def __contains__(self, station_id: object) -> bool:
        return station_id in self.stations

    def __len__(self) -> int:
        return len(self.stations)

    def station(self, station_id: str) -> Station | None:
        return self.stations.get(station_id)

    def neighbors(self, station_id: str) -> tuple[Edge, ...]:
        return self.edges_by_station.get(station_id, ())

    def edges(self) -> Iterator[Edge]:
        for edges in self.edges_by_station.values():
            yield from edges

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self.edges_by_station.values())

    def sorted_stations(self) -> list[Station]:
        return sorted(self.stations.values(), key=lambda s: (s.name, s.id))


@dataclass(frozen=True, slots=True)
class SkippedFeature:
    """An input feature the builder ignored, kept for diagnostics."""

    kind: str  # "line" | "station" | "feature"
    index: int
    reason: str


@dataclass(frozen=True, slots=True)
class NetworkBuild:
    graph: TransitGraph
    skipped: tuple[SkippedFeature, ...] = ()
