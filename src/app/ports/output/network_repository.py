from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping


class INetworkRepository(ABC):
    """Port for loading the raw metro dataset (GeoJSON features)."""

    @abstractmethod
    def load_features(self) -> list[Mapping[str, Any]]:
        """Return the LineString and Point features describing the network."""
