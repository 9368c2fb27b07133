from .local_geojson_repository import LocalGeoJsonNetworkRepository
from .s3_geojson_repository import S3GeoJsonNetworkRepository

__all__ = [
    "LocalGeoJsonNetworkRepository",
    "S3GeoJsonNetworkRepository",
]
