"""Dijkstra distance oracle adapter.

Binds a graph to the Dijkstra primitives and memoizes their results.
The graph is undirected, so (u, v) and (v, u) share a cache entry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from ...graph.dijkstra import shortest_distance, shortest_path
from ...graph.weighted_graph import WeightedGraph
from ..cache.memory_cache import InMemoryCache


def _pair_key(kind: str, source: str, target: str) -> Tuple[str, str, str]:
    low, high = sorted((source, target))
    return kind, low, high


@dataclass
class DijkstraDistanceOracle:
    """Distance oracle using memoized Dijkstra runs.

    This adapter implements DistanceOraclePort.

    Attributes:
        graph: The island graph, read-only once handed over.
        cache: Memo cache for distances and walks.
    """

    graph: WeightedGraph
    cache: InMemoryCache[Any] = field(
        default_factory=lambda: InMemoryCache(name="distances")
    )
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def shortest_distance(self, source: str, target: str) -> Optional[int]:
        """Return the shortest distance in miles, or None if unreachable."""
        return self.cache.get_or_compute(
            _pair_key("distance", source, target),
            lambda: self._compute_distance(source, target),
        )

    def _compute_distance(self, source: str, target: str) -> Optional[int]:
        distance = shortest_distance(self.graph, source, target)
        if distance is None:
            self._logger.debug(
                "Islands not connected",
                extra={"source": source, "target": target},
            )
        return distance

    def shortest_path(self, source: str, target: str) -> Tuple[List[str], Optional[int]]:
        """Return the shortest walk from ``source`` to ``target``.

        Walks are cached in canonical direction and reversed on demand.
        """
        low, high = sorted((source, target))
        walk, distance = self.cache.get_or_compute(
            _pair_key("path", source, target),
            lambda: shortest_path(self.graph, low, high),
        )
        if source != low:
            walk = list(reversed(walk))
        else:
            walk = list(walk)
        return walk, distance
