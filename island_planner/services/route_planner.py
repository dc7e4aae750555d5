"""Route planner service - Query facade.

Validates query arguments against the loaded graph, runs the search
kernels and formats their results as report lines.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from ..adapters.cache.memory_cache import InMemoryCache
from ..adapters.graph.dijkstra_oracle import DijkstraDistanceOracle
from ..config import SearchConfig, get_config
from ..domain.errors import InvalidQueryError, NoTourFoundError, UnknownIslandError
from ..domain.models import ReachResult, TourResult
from ..graph import reach, tour
from ..graph.weighted_graph import WeightedGraph
from ..ports.graph import DistanceOraclePort, GraphRepositoryPort


def format_path(path: Sequence[str]) -> str:
    """Render a path as ``[A, B, C]``."""
    return "[" + ", ".join(path) + "]"


@dataclass
class RoutePlannerService:
    """Main service answering tour and reach queries.

    Attributes:
        graph_repository: Loads the island graph
        search_config: Cruise speed and cache tuning
        oracle: Distance oracle. An injected oracle stays bound to the graph
            it was built with; when omitted, one is built over the loaded
            graph and rebuilt whenever the repository returns a new graph
    """

    graph_repository: GraphRepositoryPort
    search_config: SearchConfig = field(default_factory=lambda: get_config().search)
    oracle: Optional[DistanceOraclePort] = None

    _oracle_graph: Optional[WeightedGraph] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    @property
    def graph(self) -> WeightedGraph:
        return self.graph_repository.load()

    def _distance_oracle(self) -> DistanceOraclePort:
        graph = self.graph
        if self.oracle is None or (
            self._oracle_graph is not None and self._oracle_graph is not graph
        ):
            self.oracle = DijkstraDistanceOracle(
                graph,
                InMemoryCache(
                    max_size=self.search_config.distance_cache_size,
                    name="distances",
                ),
            )
            self._oracle_graph = graph
        return self.oracle

    def _require_island(self, key: str, parameter: str) -> None:
        if key not in self.graph:
            raise UnknownIslandError(
                f"Unknown island: {key}",
                parameter=parameter,
                island_key=key,
            )

    def find_fastest_tour(
        self, start: str, targets: Iterable[str], expand_walk: bool = False
    ) -> TourResult:
        """Find the shortest tour from ``start`` visiting every target.

        Args:
            start: Island the tour starts at.
            targets: Islands to visit at least once.
            expand_walk: Also spell out the islands crossed on every leg.

        Returns:
            TourResult with the visit order and total distance.

        Raises:
            UnknownIslandError: If start or a target is not in the graph.
            NoTourFoundError: If no ordering connects every target.
        """
        targets = list(targets)
        self._require_island(start, "start")
        for target in targets:
            self._require_island(target, "targets")

        oracle = self._distance_oracle()
        self._logger.info(
            "Searching fastest tour",
            extra={"start": start, "targets": len(targets)},
        )
        path, distance = tour.find_fastest_tour(
            start, targets, oracle.shortest_distance
        )

        walk: List[str] = []
        if expand_walk:
            walk = [start]
            for here, there in zip(path, path[1:]):
                leg, _ = oracle.shortest_path(here, there)
                walk.extend(leg[1:])

        self._logger.info(
            "Tour found",
            extra={"stops": len(path), "distance_miles": distance},
        )
        return TourResult(
            path=tuple(path), total_distance_miles=distance, walk=tuple(walk)
        )

    def max_reach(self, start: str, hour_budget: int) -> ReachResult:
        """Find the longest island chain from ``start`` within the budget.

        Raises:
            UnknownIslandError: If start is not in the graph.
            InvalidQueryError: If the budget is negative or not an integer.
        """
        self._require_island(start, "start")
        if isinstance(hour_budget, bool) or not isinstance(hour_budget, int):
            raise InvalidQueryError(
                f"Hour budget must be an integer, got {hour_budget!r}",
                parameter="hour_budget",
            )
        if hour_budget < 0:
            raise InvalidQueryError(
                f"Hour budget must be non-negative, got {hour_budget}",
                parameter="hour_budget",
            )

        path, hours = reach.max_reach(
            self.graph, start, hour_budget, self.search_config.cruise_speed_mph
        )
        self._logger.info(
            "Chain found",
            extra={"islands": len(path), "hours_used": hours},
        )
        return ReachResult(path=tuple(path), hours_used=hours)

    def format_tour(self, result: TourResult) -> str:
        return (
            f"Fastest path visiting all islands: {format_path(result.path)}"
            f" with total distance: {result.total_distance_miles} miles"
        )

    def format_reach(self, result: ReachResult) -> str:
        return (
            f"Maximum islands visited in chain: {format_path(result.path)}"
            f" with total hours spent: {result.hours_used}"
        )

    def report(self, start: str, targets: Iterable[str], hour_budget: int) -> List[str]:
        """Run both queries and return their report lines.

        A tour that cannot be built yields an error line instead of
        aborting the report; unknown islands still raise.
        """
        lines: List[str] = []
        try:
            lines.append(self.format_tour(self.find_fastest_tour(start, targets)))
        except NoTourFoundError as e:
            self._logger.warning("No feasible tour", extra={"start": e.start})
            lines.append(
                f"No feasible tour from {e.start} visiting all islands: "
                f"{format_path(e.targets)}"
            )
        lines.append(self.format_reach(self.max_reach(start, hour_budget)))
        return lines
