from __future__ import annotations

from typing import Any

import pytest


def line_feature(
    name: str, coords: list[list[float]], *, description: str = ""
) -> dict[str, Any]:
    return {
        "type": "Feature",
        "properties": {"Name": name, "description": description},
        "geometry": {"type": "LineString", "coordinates": coords},
    }


def point_feature(name: str, lon: float, lat: float) -> dict[str, Any]:
    return {
        "type": "Feature",
        "properties": {"Name": name},
        "geometry": {"type": "Point", "coordinates": [lon, lat]},
    }


@pytest.fixture
def sample_features() -> list[dict[str, Any]]:
    """Toy three-line network.

    Station ids follow Point order:
      0 Kengeri, 1 Majestic (purple+green), 2 MG Road, 3 Indiranagar,
      4 KR Puram (purple), 5 Yeshwanthpur, 6 Lalbagh, 7 JP Nagar,
      8 KR Puram* (blue, ~350 m from #4), 9 Hebbal, 10 KIAL Terminal,
      11 Depot (isolated), 12 broken point (skipped).
    """

    return [
        line_feature(
            "Purple Line", [[77.50, 12.97], [77.70, 12.97]], description="Purple line"
        ),
        line_feature(
            "Green Line", [[77.57, 13.05], [77.57, 12.88]], description="green"
        ),
        line_feature(
            "Line-5: KR Puram - KIAL",
            [[77.681, 12.973], [77.681, 13.20]],
            description="Blue line phase 2B",
        ),
        line_feature("Stub", [[77.0, 12.0]], description="pink"),
        point_feature("Kengeri", 77.52, 12.97),
        point_feature("Majestic", 77.57, 12.97),
        point_feature("MG Road", 77.60, 12.97),
        point_feature("Indiranagar", 77.64, 12.97),
        point_feature("KR Puram", 77.68, 12.97),
        point_feature("Yeshwanthpur", 77.57, 13.03),
        point_feature("Lalbagh", 77.57, 12.95),
        point_feature("JP Nagar", 77.57, 12.90),
        point_feature("KR Puram*", 77.681, 12.973),
        point_feature("Hebbal", 77.681, 13.05),
        point_feature("KIAL Terminal", 77.681, 13.19),
        point_feature("Depot", 77.80, 12.80),
        {"type": "Feature", "properties": {"Name": "Broken"}, "geometry": {"type": "Point"}},
        {
            "type": "Feature",
            "properties": {"Name": "Lake"},
            "geometry": {"type": "Polygon", "coordinates": []},
        },
    ]
