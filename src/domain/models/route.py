from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .geo import GeoPoint
from .line import TRANSFER_LINE
from .network import Edge
from .station import Station


class RoadMode(str, Enum):
    CAR = "car"
    BIKE = "bike"


@dataclass(frozen=True, slots=True)
class MetroLeg:
    """Consecutive hops ridden on one line (or one walking transfer)."""

    line: str
    color: str | None
    station_ids: tuple[str, ...]
    duration_s: float
    distance_m: float


@dataclass(frozen=True, slots=True)
class MetroPath:
    """Result of a metro shortest-path query.

    total_time_s includes the initial wait and every line-change penalty, so it
    is generally larger than the sum of edge weights.
    """

    total_time_s: float
    station_ids: tuple[str, ...]
    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def distance_m(self) -> float:
        return float(sum(e.distance_m for e in self.edges))

    @property
    def legs(self) -> tuple[MetroLeg, ...]:
        groups: list[list[Edge]] = []
        for edge in self.edges:
            if groups and groups[-1][-1].line == edge.line and not edge.is_transfer:
                groups[-1].append(edge)
            else:
                groups.append([edge])

        return tuple(
            MetroLeg(
                line=g[0].line,
                color=g[0].color,
                station_ids=(g[0].from_id, *(e.to_id for e in g)),
                duration_s=float(sum(e.weight_s for e in g)),
                distance_m=float(sum(e.distance_m for e in g)),
            )
            for g in groups
        )

    @property
    def transfer_count(self) -> int:
        # Every boarding after the first one is a transfer; walking legs are not boardings.
        rides = sum(1 for leg in self.legs if leg.line != TRANSFER_LINE)
        return max(0, rides - 1)


@dataclass(frozen=True, slots=True)
class Bottleneck:
    name: str
    location: GeoPoint


@dataclass(frozen=True, slots=True)
class RoadEstimate:
    time_s: float
    distance_km: float
    bottlenecks_hit: bool
    travel_time_s: float = 0.0
    delay_s: float = 0.0
    bottlenecks: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TravelComparison:
    origin: Station
    destination: Station
    road: RoadEstimate
    metro: MetroPath | None = None

    @property
    def time_saved_s(self) -> float | None:
        """Seconds the metro saves over the road (0 when the road is faster)."""

        if self.metro is None:
            return None
        return float(max(0.0, self.road.time_s - self.metro.total_time_s))

    @property
    def faster_mode(self) -> str | None:
        if self.metro is None:
            return None
        return "metro" if self.metro.total_time_s < self.road.time_s else "road"
