from __future__ import annotations

import os
from functools import lru_cache

from src.adapters.persistence.local_geojson_repository import (
    LocalGeoJsonNetworkRepository,
)
from src.adapters.persistence.s3_geojson_repository import S3GeoJsonNetworkRepository
from src.app.ports.output import INetworkRepository
from src.app.services.transit_comparison_service import TransitComparisonService


@lru_cache(maxsize=1)
def get_comparison_service() -> TransitComparisonService:
    # One instance per process: the graph is built once and shared read-only.
    repository: INetworkRepository
    if os.getenv("NETWORK_S3_BUCKET"):
        repository = S3GeoJsonNetworkRepository()
    else:
        repository = LocalGeoJsonNetworkRepository()

    service = TransitComparisonService(network_repository=repository)

    # Allow tuning via env without changing code.
    if os.getenv("METRO_INITIAL_WAIT_S"):
        service.initial_wait_s = float(os.environ["METRO_INITIAL_WAIT_S"])
    if os.getenv("METRO_TRANSFER_PENALTY_S"):
        service.transfer_penalty_s = float(os.environ["METRO_TRANSFER_PENALTY_S"])
    if os.getenv("METRO_PEAK_HEADWAY_S"):
        service.peak_headway_s = float(os.environ["METRO_PEAK_HEADWAY_S"])

    return service
