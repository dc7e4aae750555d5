"""Graph ports - Abstractions for graph loading and distance lookups.

These protocols define the contracts the route planner service relies
on, so that the CSV loader and the Dijkstra oracle can be swapped in
tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, Tuple

if TYPE_CHECKING:
    from ..graph.weighted_graph import WeightedGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> WeightedGraph:
        """Load the island graph.

        Returns:
            The populated graph.
        """
        ...


class DistanceOraclePort(Protocol):
    """Port for pairwise shortest distances.

    Implementation: adapters/graph/dijkstra_oracle.py
    """

    def shortest_distance(self, source: str, target: str) -> Optional[int]:
        """Return the shortest distance in miles, or None if unreachable."""
        ...

    def shortest_path(self, source: str, target: str) -> Tuple[List[str], Optional[int]]:
        """Return the shortest walk and its distance, or ([], None)."""
        ...
