"""Shortest-path computation using Dijkstra's algorithm.

All edge weights are positive, so a best-first relaxation with a
binary heap gives exact distances. Unreachable pairs are reported as
``None`` rather than an infinite float so that distances stay integers.
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Optional, Tuple

from .weighted_graph import WeightedGraph


def _relax(
    graph: WeightedGraph, source: str, stop_at: Optional[str] = None
) -> Tuple[Dict[str, int], Dict[str, str]]:
    distances: Dict[str, int] = {source: 0}
    previous: Dict[str, str] = {}
    heap: List[Tuple[int, str]] = [(0, source)]

    while heap:
        current_distance, u = heapq.heappop(heap)

        # Stale entry, u was settled with a shorter distance
        if current_distance > distances[u]:
            continue

        if u == stop_at:
            break

        for v, weight in graph.neighbors(u):
            new_distance = current_distance + weight
            if new_distance < distances.get(v, float("inf")):
                distances[v] = new_distance
                previous[v] = u
                heapq.heappush(heap, (new_distance, v))

    return distances, previous


def dijkstra(graph: WeightedGraph, source: str) -> Dict[str, int]:
    """Compute shortest distances from ``source`` to every reachable island.

    Parameters
    ----------
    graph:
        Island graph.
    source:
        Identifier of the departure island.

    Returns
    -------
    dict[str, int]
        Distance in miles for each reachable island, ``source`` included.
        Unreachable islands are absent. Empty if ``source`` is unknown.
    """
    if source not in graph:
        return {}
    distances, _ = _relax(graph, source)
    return distances


def shortest_distance(graph: WeightedGraph, source: str, target: str) -> Optional[int]:
    """Return the shortest distance between two islands.

    Stops as soon as ``target`` is settled. Returns ``None`` when either
    island is unknown or no walk connects them, and 0 when they are equal.
    """
    if source not in graph or target not in graph:
        return None
    if source == target:
        return 0
    distances, _ = _relax(graph, source, stop_at=target)
    return distances.get(target)


def shortest_path(
    graph: WeightedGraph, source: str, target: str
) -> Tuple[List[str], Optional[int]]:
    """Compute the shortest walk between two islands.

    Returns
    -------
    list[str], int | None
        The sequence of islands from ``source`` to ``target`` (inclusive)
        and its distance. If no walk exists, returns ``([], None)``.
    """
    if source not in graph or target not in graph:
        return [], None

    distances, previous = _relax(graph, source, stop_at=target)
    if target not in distances:
        return [], None

    path: List[str] = [target]
    while path[-1] != source:
        path.append(previous[path[-1]])
    path.reverse()
    return path, distances[target]
