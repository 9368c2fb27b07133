from __future__ import annotations

from dataclasses import dataclass, field

from src.domain.algorithms.geo_utils import haversine_distance_km, midpoint_distance_km
from src.domain.models import Bottleneck, GeoPoint, RoadEstimate, RoadMode

DEFAULT_BOTTLENECKS: tuple[Bottleneck, ...] = (
    Bottleneck(name="Silk Board", location=GeoPoint(lat=12.9176, lon=77.6245)),
    Bottleneck(name="Hebbal", location=GeoPoint(lat=13.033, lon=77.589)),
    Bottleneck(name="Tin Factory", location=GeoPoint(lat=12.996, lon=77.661)),
)

# km/h keyed by (mode, is_peak_morning).
DEFAULT_SPEEDS_KMH: dict[tuple[RoadMode, bool], float] = {
    (RoadMode.CAR, True): 12.0,
    (RoadMode.CAR, False): 10.0,
    (RoadMode.BIKE, True): 20.0,
    (RoadMode.BIKE, False): 18.0,
}


@dataclass(frozen=True, slots=True)
class RoadTimeModel:
    """Heuristic road travel time: straight line x tortuosity + bottleneck delays."""

    speeds_kmh: dict[tuple[RoadMode, bool], float] = field(
        default_factory=lambda: dict(DEFAULT_SPEEDS_KMH)
    )
    tortuosity: float = 1.4
    bottleneck_radius_km: float = 1.0
    bottleneck_delay_s: float = 600.0
    bottlenecks: tuple[Bottleneck, ...] = DEFAULT_BOTTLENECKS

    def speed_kmh(self, mode: RoadMode | str, is_peak_morning: bool) -> float:
        return self.speeds_kmh[(RoadMode(mode), bool(is_peak_morning))]

    def estimate(
        self,
        start: GeoPoint,
        end: GeoPoint,
        mode: RoadMode | str,
        is_peak_morning: bool,
    ) -> RoadEstimate:
        speed = self.speed_kmh(mode, is_peak_morning)

        road_km = haversine_distance_km(start, end) * self.tortuosity
        travel_s = road_km / speed * 3600.0

        # Only the route midpoint is checked against each bottleneck.
        hit = tuple(
            bn.name
            for bn in self.bottlenecks
            if midpoint_distance_km(bn.location, start, end) < self.bottleneck_radius_km
        )
        delay_s = self.bottleneck_delay_s * len(hit)

        return RoadEstimate(
            time_s=travel_s + delay_s,
            distance_km=road_km,
            bottlenecks_hit=bool(hit),
            travel_time_s=travel_s,
            delay_s=delay_s,
            bottlenecks=hit,
        )


DEFAULT_ROAD_MODEL = RoadTimeModel()


def calculate_road_time(
    start: GeoPoint,
    end: GeoPoint,
    mode: RoadMode | str,
    is_peak_morning: bool,
    *,
    model: RoadTimeModel = DEFAULT_ROAD_MODEL,
) -> RoadEstimate:
    return model.estimate(start, end, mode, is_peak_morning)
