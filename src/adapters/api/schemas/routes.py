from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


class GeoPointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)


class MetroLegSchema(BaseModel):
    line: str
    color: str | None = None
    station_ids: list[str]
    duration_s: float
    distance_m: float


class MetroPathSchema(BaseModel):
    total_time_s: float
    station_ids: list[str]
    legs: list[MetroLegSchema] = []
    transfer_count: int = 0
    distance_m: float = 0.0


class MetroRouteRequestSchema(BaseModel):
    origin_id: str
    destination_id: str


class MetroRouteResponseSchema(BaseModel):
    found: bool
    path: MetroPathSchema | None = None


class RoadTimeRequestSchema(BaseModel):
    origin: GeoPointSchema
    destination: GeoPointSchema
    mode: Literal["car", "bike"] = "car"
    is_peak_morning: bool = True


class RoadEstimateSchema(BaseModel):
    time_s: float
    distance_km: float
    bottlenecks_hit: bool
    travel_time_s: float
    delay_s: float
    bottlenecks: list[str] = []


class CompareRequestSchema(BaseModel):
    origin_id: str
    destination_id: str
    mode: Literal["car", "bike"] = "car"
    is_peak_morning: bool = True


class ComparisonSchema(BaseModel):
    origin_id: str
    origin_name: str
    destination_id: str
    destination_name: str
    metro: MetroPathSchema | None = None
    road: RoadEstimateSchema
    time_saved_s: float | None = None
    faster_mode: Literal["metro", "road"] | None = None
