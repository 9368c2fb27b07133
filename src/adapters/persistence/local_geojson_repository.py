from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from src.app.ports.output import INetworkRepository
from src.domain.exceptions import NetworkDataError

from .geojson_document import decode_features

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LocalGeoJsonNetworkRepository(INetworkRepository):
    """Loads the metro network from a GeoJSON file on disk.

    Env vars:
      - NETWORK_GEOJSON_PATH: path to the FeatureCollection (default: data/network.geojson)
    """

    path: str | Path | None = None

    def _path(self) -> Path:
        value = self.path or os.getenv("NETWORK_GEOJSON_PATH") or "data/network.geojson"
        return Path(value)

    def load_features(self) -> list[Mapping[str, Any]]:
        path = self._path()
        if not path.exists():
            raise NetworkDataError(f"Network dataset not found: {path}")

        features = decode_features(path.read_bytes(), source=str(path))
        logger.info("Loaded %d features from %s", len(features), path)
        return features
