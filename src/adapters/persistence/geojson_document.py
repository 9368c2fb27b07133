from __future__ import annotations

import json
from typing import Any, Mapping

from src.domain.exceptions import NetworkDataError


def decode_features(raw: bytes | str, *, source: str) -> list[Mapping[str, Any]]:
    """Decode a GeoJSON FeatureCollection (or bare feature list) into features.

    Individual malformed features are left for the graph builder to skip; only
    a document that is not a feature collection at all is an error here.
    """

    try:
        doc = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise NetworkDataError(f"Invalid GeoJSON in {source}: {exc}") from exc

    if isinstance(doc, Mapping):
        features = doc.get("features")
    else:
        features = doc

    if not isinstance(features, list):
        raise NetworkDataError(f"{source} has no 'features' list")

    return [f for f in features if isinstance(f, Mapping)]
