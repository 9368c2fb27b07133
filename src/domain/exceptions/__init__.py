from .routing import NetworkDataError, RoutingError, UnknownStationError

__all__ = [
    "NetworkDataError",
    "RoutingError",
    "UnknownStationError",
]
