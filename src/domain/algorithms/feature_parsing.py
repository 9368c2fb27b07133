from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from src.domain.models import GeoPoint, MetroLine, SkippedFeature
from src.domain.models.line import DEFAULT_LINE_COLOR, KNOWN_LINE_COLORS

EXPRESS_MARKERS: tuple[str, ...] = ("KIAL", "Airport")


@dataclass(frozen=True, slots=True)
class LineFeature:
    line: MetroLine
    points: tuple[GeoPoint, ...]


@dataclass(frozen=True, slots=True)
class StationFeature:
    id: str
    name: str
    location: GeoPoint


@dataclass(frozen=True, slots=True)
class FeatureSets:
    lines: tuple[Mapping[str, Any], ...]
    stations: tuple[Mapping[str, Any], ...]
    skipped: tuple[SkippedFeature, ...] = ()


def _properties(feature: Mapping[str, Any]) -> Mapping[str, Any]:
    props = feature.get("properties")
    return props if isinstance(props, Mapping) else {}


def _geometry(feature: Mapping[str, Any]) -> Mapping[str, Any]:
    if not isinstance(feature, Mapping):
        raise ValueError(f"feature is not an object: {type(feature).__name__}")
    geom = feature.get("geometry")
    if not isinstance(geom, Mapping):
        raise ValueError("missing geometry")
    return geom


def _truthy(value: Any) -> bool:
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes", "y", "on"}
    return bool(value)


def normalize_station_name(name: str) -> str:
    """Strip whitespace, embedded newlines and trailing '*' markers."""

    return name.replace("\n", "").strip().rstrip("*").strip()


def station_name_key(name: str) -> str:
    return normalize_station_name(name).lower()


def classify_line(properties: Mapping[str, Any]) -> tuple[str, bool]:
    """Derive (color, is_express) from a LineString's properties."""

    name = str(properties.get("Name") or properties.get("name") or "")

    explicit = properties.get("color")
    if isinstance(explicit, str) and explicit.strip():
        color = explicit.strip().lower()
    else:
        desc = str(properties.get("description") or "").lower()
        color = next((c for c in KNOWN_LINE_COLORS if c in desc), DEFAULT_LINE_COLOR)

    is_express = any(marker in name for marker in EXPRESS_MARKERS) or _truthy(
        properties.get("express", False)
    )
    return color, is_express


def parse_line_feature(feature: Mapping[str, Any], *, index: int) -> LineFeature:
    geom = _geometry(feature)
    if geom.get("type") != "LineString":
        raise ValueError(f"expected LineString, got {geom.get('type')!r}")

    raw = geom.get("coordinates")
    if not isinstance(raw, (list, tuple)):
        raise ValueError("missing coordinates")

    try:
        points = tuple(GeoPoint.from_lon_lat(c) for c in raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid coordinate: {exc}") from exc
    if len(points) < 2:
        raise ValueError("line has fewer than 2 vertices")

    props = _properties(feature)
    name = str(props.get("Name") or props.get("name") or "").strip()
    color, is_express = classify_line(props)
    # Unnamed segments must not collapse into one chain.
    line = MetroLine(
        name=name or f"line-{index}", color=color, is_express=is_express
    )
    return LineFeature(line=line, points=points)


def parse_station_feature(
    feature: Mapping[str, Any], *, index: int
) -> StationFeature:
    geom = _geometry(feature)
    if geom.get("type") != "Point":
        raise ValueError(f"expected Point, got {geom.get('type')!r}")

    raw = geom.get("coordinates")
    if not isinstance(raw, (list, tuple)):
        raise ValueError("missing coordinates")
    try:
        location = GeoPoint.from_lon_lat(raw)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"invalid coordinate: {exc}") from exc

    raw_id = feature.get("id")
    station_id = str(raw_id) if raw_id is not None else str(index)

    props = _properties(feature)
    name = normalize_station_name(str(props.get("Name") or props.get("name") or ""))
    return StationFeature(
        id=station_id, name=name or f"Station {station_id}", location=location
    )


def partition_features(features: Iterable[Mapping[str, Any]]) -> FeatureSets:
    """Split a FeatureCollection into line and station features."""

    lines: list[Mapping[str, Any]] = []
    stations: list[Mapping[str, Any]] = []
    skipped: list[SkippedFeature] = []

    for i, feature in enumerate(features):
        geom = feature.get("geometry") if isinstance(feature, Mapping) else None
        geom_type = geom.get("type") if isinstance(geom, Mapping) else None
        if geom_type == "LineString":
            lines.append(feature)
        elif geom_type == "Point":
            stations.append(feature)
        elif geom_type is None:
            skipped.append(
                SkippedFeature(kind="feature", index=i, reason="missing geometry")
            )
        else:
            skipped.append(
                SkippedFeature(
                    kind="feature",
                    index=i,
                    reason=f"unsupported geometry type {geom_type!r}",
                )
            )

    return FeatureSets(
        lines=tuple(lines), stations=tuple(stations), skipped=tuple(skipped)
    )
