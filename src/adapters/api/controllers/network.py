from __future__ import annotations

from fastapi import APIRouter, Depends

from src.adapters.api.dependencies import get_comparison_service
from src.adapters.api.schemas.network import (
    MetroLineSchema,
    NetworkSummarySchema,
    StationSchema,
)
from src.adapters.api.schemas.routes import GeoPointSchema
from src.app.services.transit_comparison_service import TransitComparisonService
from src.domain.models import Station

router = APIRouter(tags=["network"])


def _station_to_schema(station: Station) -> StationSchema:
    return StationSchema(
        id=station.id,
        name=station.name,
        location=GeoPointSchema(lat=station.location.lat, lon=station.location.lon),
        lines=sorted(station.lines),
        is_interchange=station.is_interchange,
    )


@router.get("/stations", response_model=list[StationSchema])
def list_stations(
    service: TransitComparisonService = Depends(get_comparison_service),
) -> list[StationSchema]:
    return [_station_to_schema(s) for s in service.list_stations()]


@router.get("/stations/{station_id}", response_model=StationSchema)
def get_station(
    station_id: str,
    service: TransitComparisonService = Depends(get_comparison_service),
) -> StationSchema:
    return _station_to_schema(service.get_station(station_id))


@router.get("/lines", response_model=list[MetroLineSchema])
def list_lines(
    service: TransitComparisonService = Depends(get_comparison_service),
) -> list[MetroLineSchema]:
    return [
        MetroLineSchema(
            name=line.name,
            color=line.color,
            hex_color=line.hex_color,
            is_express=line.is_express,
        )
        for line in service.list_lines()
    ]


@router.get("/network/summary", response_model=NetworkSummarySchema)
def network_summary(
    service: TransitComparisonService = Depends(get_comparison_service),
) -> NetworkSummarySchema:
    summary = service.summary()
    return NetworkSummarySchema(
        station_count=summary.station_count,
        edge_count=summary.edge_count,
        line_count=summary.line_count,
        interchange_count=summary.interchange_count,
        isolated_station_ids=list(summary.isolated_station_ids),
        component_count=summary.component_count,
        largest_component_size=summary.largest_component_size,
        skipped_feature_count=summary.skipped_feature_count,
    )
