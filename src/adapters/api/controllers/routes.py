from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_comparison_service
from src.adapters.api.schemas.routes import (
    ComparisonSchema,
    CompareRequestSchema,
    MetroLegSchema,
    MetroPathSchema,
    MetroRouteRequestSchema,
    MetroRouteResponseSchema,
    RoadEstimateSchema,
    RoadTimeRequestSchema,
)
from src.app.services.transit_comparison_service import TransitComparisonService
from src.domain.models import GeoPoint, MetroPath, RoadEstimate

router = APIRouter(prefix="/routes", tags=["routes"])


def _path_to_schema(path: MetroPath) -> MetroPathSchema:
    return MetroPathSchema(
        total_time_s=path.total_time_s,
        station_ids=list(path.station_ids),
        legs=[
            MetroLegSchema(
                line=leg.line,
                color=leg.color,
                station_ids=list(leg.station_ids),
                duration_s=leg.duration_s,
                distance_m=leg.distance_m,
            )
            for leg in path.legs
        ],
        transfer_count=path.transfer_count,
        distance_m=path.distance_m,
    )


def _road_to_schema(road: RoadEstimate) -> RoadEstimateSchema:
    return RoadEstimateSchema(
        time_s=road.time_s,
        distance_km=road.distance_km,
        bottlenecks_hit=road.bottlenecks_hit,
        travel_time_s=road.travel_time_s,
        delay_s=road.delay_s,
        bottlenecks=list(road.bottlenecks),
    )


@router.post("/metro", response_model=MetroRouteResponseSchema)
def metro_route(
    req: MetroRouteRequestSchema,
    service: TransitComparisonService = Depends(get_comparison_service),
) -> MetroRouteResponseSchema:
    path = service.find_metro_path(req.origin_id, req.destination_id)
    if path is None:
        return MetroRouteResponseSchema(found=False)
    return MetroRouteResponseSchema(found=True, path=_path_to_schema(path))


@router.post("/road", response_model=RoadEstimateSchema)
def road_time(
    req: RoadTimeRequestSchema,
    service: TransitComparisonService = Depends(get_comparison_service),
) -> RoadEstimateSchema:
    road = service.estimate_road_time(
        origin=GeoPoint(lat=req.origin.lat, lon=req.origin.lon),
        destination=GeoPoint(lat=req.destination.lat, lon=req.destination.lon),
        mode=req.mode,
        is_peak_morning=req.is_peak_morning,
    )
    return _road_to_schema(road)


@router.post("/compare", response_model=ComparisonSchema)
def compare(
    req: CompareRequestSchema,
    service: TransitComparisonService = Depends(get_comparison_service),
) -> ComparisonSchema:
    result = service.compare(
        origin_id=req.origin_id,
        destination_id=req.destination_id,
        mode=req.mode,
        is_peak_morning=req.is_peak_morning,
    )
    return ComparisonSchema(
        origin_id=result.origin.id,
        origin_name=result.origin.name,
        destination_id=result.destination.id,
        destination_name=result.destination.name,
        metro=_path_to_schema(result.metro) if result.metro else None,
        road=_road_to_schema(result.road),
        time_saved_s=result.time_saved_s,
        faster_mode=result.faster_mode,
    )
