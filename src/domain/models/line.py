from __future__ import annotations

from dataclasses import dataclass

TRANSFER_LINE = "TRANSFER"
DEFAULT_LINE_COLOR = "gray"

# Substring match order matters: the first color found in a description wins.
KNOWN_LINE_COLORS: tuple[str, ...] = (
    "purple",
    "green",
    "yellow",
    "pink",
    "blue",
    "orange",
    "red",
)

LINE_HEX_COLORS: dict[str, str] = {
    "purple": "9b59b6",
    "green": "2ecc71",
    "yellow": "f1c40f",
    "blue": "3498db",
    "pink": "e91e63",
    "orange": "e67e22",
    "red": "e74c3c",
    "gray": "95a5a6",
}


@dataclass(frozen=True, slots=True)
class MetroLine:
    """A physical line segment as drawn in the source data.

    Several segments may share a color (e.g. two branches of the blue line);
    they stay distinct lines keyed by name.
    """

    name: str
    color: str = DEFAULT_LINE_COLOR
    is_express: bool = False

    @property
    def hex_color(self) -> str:
        # hex without '#', like GTFS route_color
        return LINE_HEX_COLORS.get(self.color, LINE_HEX_COLORS[DEFAULT_LINE_COLOR])
