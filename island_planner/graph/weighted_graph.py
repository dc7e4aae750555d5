"""In-memory store for the island network.

This module defines the WeightedGraph type used throughout the
project: an undirected weighted multigraph whose nodes carry a dwell
time. The graph is append-only while it is being populated and is
only read once queries start.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Tuple

from ..domain.models import Island, Route

HalfEdge = Tuple[str, int]


class WeightedGraph:
    """Undirected weighted graph of islands.

    Every edge is stored as two half-edges, one on each endpoint's
    adjacency list, so traversal from either side sees it exactly once.
    """

    def __init__(self) -> None:
        self._islands: Dict[str, Island] = {}
        self._adjacency: Dict[str, List[HalfEdge]] = {}

    @classmethod
    def from_records(
        cls, islands: Iterable[Island], routes: Iterable[Route]
    ) -> WeightedGraph:
        """Build a graph from domain records.

        Routes referencing unknown islands are ignored, like add_edge.
        """
        graph = cls()
        for island in islands:
            graph.add_node(island.key, island.dwell_hours)
        for route in routes:
            graph.add_edge(route.source, route.target, route.distance_miles)
        return graph

    def add_node(self, key: str, dwell_hours: int) -> None:
        """Add an island; a second call with the same key is a no-op."""
        if key in self._islands:
            return
        self._islands[key] = Island(key=key, dwell_hours=dwell_hours)
        self._adjacency[key] = []

    def add_edge(self, source: str, target: str, distance_miles: int) -> None:
        """Link two islands in both directions.

        Nothing happens when either endpoint is missing.
        """
        if source not in self._islands or target not in self._islands:
            return
        route = Route(source=source, target=target, distance_miles=distance_miles)
        self._adjacency[source].append((target, route.distance_miles))
        self._adjacency[target].append((source, route.distance_miles))

    def neighbors(self, key: str) -> Iterator[HalfEdge]:
        """Yield ``(neighbor, distance_miles)`` pairs in insertion order."""
        yield from self._adjacency.get(key, ())

    def dwell(self, key: str) -> int:
        """Return the dwell hours of an island.

        Raises:
            KeyError: If the island is not in the graph.
        """
        return self._islands[key].dwell_hours

    def islands(self) -> List[Island]:
        """Return every island in insertion order."""
        return list(self._islands.values())

    def edge_count(self) -> int:
        """Return the number of undirected edges."""
        return sum(len(edges) for edges in self._adjacency.values()) // 2

    def __contains__(self, key: object) -> bool:
        return key in self._islands

    def __iter__(self) -> Iterator[str]:
        return iter(self._islands)

    def __len__(self) -> int:
        return len(self._islands)

    def __repr__(self) -> str:
        return f"WeightedGraph(islands={len(self)}, edges={self.edge_count()})"
