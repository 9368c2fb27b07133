from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Station:
    id: str
    name: str
    location: GeoPoint
    lines: frozenset[str] = field(default_factory=frozenset)  # line colors
    is_interchange: bool = False

    @property
    def is_orphan(self) -> bool:
        return not self.lines
