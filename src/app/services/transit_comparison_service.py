from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field

from src.app.ports.output import INetworkRepository
from src.domain.algorithms.graph_builder import build_network_from_features
from src.domain.algorithms.metro_pathfinder import (
    INITIAL_WAIT_S,
    PEAK_HEADWAY_S,
    TRANSFER_PENALTY_S,
    find_metro_path,
)
from src.domain.algorithms.road_time import DEFAULT_ROAD_MODEL, RoadTimeModel
from src.domain.exceptions import UnknownStationError
from src.domain.models import (
    GeoPoint,
    MetroLine,
    MetroPath,
    NetworkBuild,
    RoadEstimate,
    RoadMode,
    Station,
    TransitGraph,
    TravelComparison,
)

from .network_helpers import NetworkSummary, network_summary

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class TransitComparisonService:
    """Metro vs road comparison use cases over a network built once per process.

    The network is built lazily on first use and shared read-only afterwards.
    """

    network_repository: INetworkRepository
    road_model: RoadTimeModel = DEFAULT_ROAD_MODEL

    # Tuning knobs
    initial_wait_s: float = INITIAL_WAIT_S
    transfer_penalty_s: float = TRANSFER_PENALTY_S
    peak_headway_s: float = PEAK_HEADWAY_S

    _build: NetworkBuild | None = None
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    def network(self) -> NetworkBuild:
        if self._build is not None:
            return self._build

        with self._lock:
            if self._build is None:
                features = self.network_repository.load_features()
                build = build_network_from_features(features)
                for skipped in build.skipped:
                    logger.warning(
                        "Skipped %s feature #%d: %s",
                        skipped.kind,
                        skipped.index,
                        skipped.reason,
                    )
                logger.info(
                    "Built metro network: %d stations, %d edges, %d lines (%d features skipped)",
                    len(build.graph),
                    build.graph.edge_count,
                    len(build.graph.lines),
                    len(build.skipped),
                )
                self._build = build
        return self._build

    @property
    def graph(self) -> TransitGraph:
        return self.network().graph

    def list_stations(self) -> list[Station]:
        return self.graph.sorted_stations()

    def get_station(self, station_id: str) -> Station:
        station = self.graph.station(station_id)
        if station is None:
            raise UnknownStationError(station_id)
        return station

    def list_lines(self) -> list[MetroLine]:
        return sorted(self.graph.lines.values(), key=lambda line: line.name)

    def find_metro_path(self, origin_id: str, destination_id: str) -> MetroPath | None:
        return find_metro_path(
            self.graph,
            origin_id,
            destination_id,
            initial_wait_s=self.initial_wait_s,
            transfer_penalty_s=self.transfer_penalty_s,
            peak_headway_s=self.peak_headway_s,
        )

    def estimate_road_time(
        self,
        *,
        origin: GeoPoint,
        destination: GeoPoint,
        mode: RoadMode | str,
        is_peak_morning: bool,
    ) -> RoadEstimate:
        return self.road_model.estimate(origin, destination, mode, is_peak_morning)

    def compare(
        self,
        *,
        origin_id: str,
        destination_id: str,
        mode: RoadMode | str = RoadMode.CAR,
        is_peak_morning: bool = True,
    ) -> TravelComparison:
        origin = self.get_station(origin_id)
        destination = self.get_station(destination_id)

        metro = self.find_metro_path(origin.id, destination.id)
        if metro is None:
            logger.info("No metro route between %s and %s", origin.id, destination.id)

        road = self.estimate_road_time(
            origin=origin.location,
            destination=destination.location,
            mode=mode,
            is_peak_morning=is_peak_morning,
        )
        return TravelComparison(
            origin=origin, destination=destination, road=road, metro=metro
        )

    def summary(self) -> NetworkSummary:
        build = self.network()
        return network_summary(build.graph, build.skipped)
