class RoutingError(Exception):
    """Base exception for route calculation failures."""


class UnknownStationError(RoutingError, KeyError):
    """Raised when a station id does not exist in the loaded network."""

    def __init__(self, station_id: str) -> None:
        super().__init__(station_id)
        self.station_id = station_id

    def __str__(self) -> str:
        return f"Unknown station id: {self.station_id!r}"


class NetworkDataError(RoutingError):
    """Raised when the raw network dataset cannot be read or decoded."""
