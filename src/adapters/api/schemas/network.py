from __future__ import annotations

from pydantic import BaseModel

from src.adapters.api.schemas.routes import GeoPointSchema


class StationSchema(BaseModel):
    id: str
    name: str
    location: GeoPointSchema
    lines: list[str] = []
    is_interchange: bool = False


class MetroLineSchema(BaseModel):
    name: str
    color: str
    hex_color: str  # hex without '#'
    is_express: bool = False


class NetworkSummarySchema(BaseModel):
    station_count: int
    edge_count: int
    line_count: int
    interchange_count: int
    isolated_station_ids: list[str] = []
    component_count: int
    largest_component_size: int
    skipped_feature_count: int = 0
