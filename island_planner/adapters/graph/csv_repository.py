"""CSV Graph Repository adapter.

Loads the island graph from two CSV files:

- ``islands.csv`` with columns ``island,dwell_hours``
- ``routes.csv`` with columns ``from_island,to_island,distance_miles``

The loaded graph is cached until clear_cache() is called.
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError
from ...domain.models import Island, Route
from ...graph.weighted_graph import WeightedGraph


@dataclass
class CSVGraphRepository:
    """Graph repository that loads from CSV files.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _graph: Optional[WeightedGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> WeightedGraph:
        """Load the island graph from CSV files.

        Returns:
            The populated graph.

        Raises:
            GraphError: If the files are missing or malformed.
        """
        if self._graph is not None:
            return self._graph

        self._logger.debug(
            "Loading graph",
            extra={
                "islands_path": str(self.config.islands_path),
                "routes_path": str(self.config.routes_path),
            },
        )

        islands = self._read_islands()
        routes = self._read_routes()

        known = {island.key for island in islands}
        dangling = [r for r in routes if r.source not in known or r.target not in known]
        if dangling:
            self._logger.warning(
                "Ignoring routes with unknown islands",
                extra={"count": len(dangling)},
            )

        graph = WeightedGraph.from_records(islands, routes)
        self._graph = graph
        self._logger.info(
            "Graph loaded",
            extra={"islands": len(graph), "routes": graph.edge_count()},
        )
        return graph

    def _read_islands(self) -> List[Island]:
        path = self.config.islands_path
        islands: List[Island] = []
        try:
            with path.open(encoding="utf-8", newline="") as f:
                for row in csv.DictReader(f):
                    key = (row.get("island") or "").strip()
                    if not key:
                        continue
                    dwell = int(row["dwell_hours"].strip())
                    islands.append(Island(key=key, dwell_hours=dwell))
        except (OSError, KeyError, ValueError, AttributeError) as e:
            raise GraphError(
                f"Failed to load islands from {path}",
                file_path=str(path),
                cause=e,
            ) from e
        return islands

    def _read_routes(self) -> List[Route]:
        path = self.config.routes_path
        routes: List[Route] = []
        try:
            with path.open(encoding="utf-8", newline="") as f:
                for row in csv.DictReader(f):
                    source = (row.get("from_island") or "").strip()
                    target = (row.get("to_island") or "").strip()
                    distance_str = (row.get("distance_miles") or "").strip()

                    if not source or not target or not distance_str:
                        continue

                    routes.append(
                        Route(
                            source=source,
                            target=target,
                            distance_miles=int(distance_str),
                        )
                    )
        except (OSError, ValueError) as e:
            raise GraphError(
                f"Failed to load routes from {path}",
                file_path=str(path),
                cause=e,
            ) from e
        return routes

    def clear_cache(self) -> None:
        """Forget the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
