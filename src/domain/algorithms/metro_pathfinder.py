from __future__ import annotations

import heapq
import itertools
import math

from src.domain.exceptions import UnknownStationError
from src.domain.models import TRANSFER_LINE, Edge, MetroPath, TransitGraph

INITIAL_WAIT_S = 90.0  # wait for the first train
TRANSFER_PENALTY_S = 450.0
PEAK_HEADWAY_S = 180.0


def find_metro_path(
    graph: TransitGraph,
    start_id: str,
    end_id: str,
    *,
    initial_wait_s: float = INITIAL_WAIT_S,
    transfer_penalty_s: float = TRANSFER_PENALTY_S,
    peak_headway_s: float = PEAK_HEADWAY_S,
) -> MetroPath | None:
    """Cheapest metro path from start_id to end_id, or None when unreachable.

    Dijkstra over stations with the line of the arriving edge carried in the
    frontier entry. Switching lines costs transfer_penalty_s + peak_headway_s,
    except around walking TRANSFER edges whose weight already embeds the
    penalty.

    A station is settled by the first entry that reaches it at lowest cost,
    whatever line it arrived on. This is an approximation of a search over
    (station, line) states and may miss a cheaper line-aware path in some
    topologies.
    """

    if start_id not in graph:
        raise UnknownStationError(start_id)
    if end_id not in graph:
        raise UnknownStationError(end_id)

    best: dict[str, float] = {station_id: math.inf for station_id in graph.stations}
    prev: dict[str, Edge] = {}

    best[start_id] = initial_wait_s
    # (cost, seq, station_id, last_line); seq keeps equal costs FIFO.
    seq = itertools.count()
    frontier: list[tuple[float, int, str, str | None]] = [
        (initial_wait_s, next(seq), start_id, None)
    ]

    while frontier:
        cost, _, station_id, last_line = heapq.heappop(frontier)

        if cost > best[station_id]:
            continue
        if station_id == end_id:
            break

        for edge in graph.neighbors(station_id):
            extra = 0.0
            if (
                last_line is not None
                and last_line != TRANSFER_LINE
                and edge.line != TRANSFER_LINE
                and last_line != edge.line
            ):
                extra = transfer_penalty_s + peak_headway_s

            new_cost = cost + edge.weight_s + extra
            if new_cost < best[edge.to_id]:
                best[edge.to_id] = new_cost
                prev[edge.to_id] = edge
                heapq.heappush(frontier, (new_cost, next(seq), edge.to_id, edge.line))

    if math.isinf(best[end_id]):
        return None

    used: list[Edge] = []
    cur = end_id
    while cur != start_id:
        edge = prev[cur]
        used.append(edge)
        cur = edge.from_id
    used.reverse()

    station_ids = (start_id, *(e.to_id for e in used))
    return MetroPath(total_time_s=best[end_id], station_ids=station_ids, edges=tuple(used))
