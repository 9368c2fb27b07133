from .geo import GeoPoint
from .line import TRANSFER_LINE, MetroLine
from .network import Edge, NetworkBuild, SkippedFeature, TransitGraph
from .route import (
    Bottleneck,
    MetroLeg,
    MetroPath,
    RoadEstimate,
    RoadMode,
    TravelComparison,
)
from .station import Station

__all__ = [
    "Bottleneck",
    "Edge",
    "GeoPoint",
    "MetroLeg",
    "MetroLine",
    "MetroPath",
    "NetworkBuild",
    "RoadEstimate",
    "RoadMode",
    "SkippedFeature",
    "Station",
    "TRANSFER_LINE",
    "TransitGraph",
    "TravelComparison",
]
