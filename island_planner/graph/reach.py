"""Longest island chain that fits into an hour budget.

A depth-first search over simple paths from the start island. Each
island costs its dwell time and each leg costs ``distance // speed``
hours. The longest path by island count wins; among equally long
paths the first one discovered is kept.
"""

from __future__ import annotations

from typing import List, Set, Tuple

from .weighted_graph import WeightedGraph

DEFAULT_CRUISE_SPEED_MPH = 500


def travel_hours(distance_miles: int, cruise_speed_mph: int = DEFAULT_CRUISE_SPEED_MPH) -> int:
    """Return whole flight hours for a leg, truncated."""
    return distance_miles // cruise_speed_mph


class _ChainSearch:
    def __init__(
        self, graph: WeightedGraph, hour_budget: int, cruise_speed_mph: int
    ) -> None:
        self.graph = graph
        self.hour_budget = hour_budget
        self.cruise_speed_mph = cruise_speed_mph
        self.path: List[str] = []
        self.visited: Set[str] = set()
        self.best_path: List[str] = []
        self.best_hours = 0

    def visit(self, island: str, hours: int) -> None:
        hours += self.graph.dwell(island)
        if hours > self.hour_budget:
            return

        self.path.append(island)
        self.visited.add(island)
        try:
            if len(self.path) > len(self.best_path):
                self.best_path = list(self.path)
                self.best_hours = hours

            for neighbor, distance in self.graph.neighbors(island):
                if neighbor in self.visited:
                    continue
                # Only the flight is checked here, the neighbor's dwell is
                # checked when it is entered.
                arrival = hours + travel_hours(distance, self.cruise_speed_mph)
                if arrival <= self.hour_budget:
                    self.visit(neighbor, arrival)
        finally:
            self.path.pop()
            self.visited.discard(island)


def max_reach(
    graph: WeightedGraph,
    start: str,
    hour_budget: int,
    cruise_speed_mph: int = DEFAULT_CRUISE_SPEED_MPH,
) -> Tuple[List[str], int]:
    """Find the longest simple path from ``start`` within ``hour_budget``.

    Args:
        graph: Island graph; ``start`` must be one of its islands.
        hour_budget: Total hours available, non-negative.
        cruise_speed_mph: Speed used to turn miles into flight hours.

    Returns:
        The path and the hours it uses. When the start island alone
        exceeds the budget the path is empty and the hours are 0.
    """
    search = _ChainSearch(graph, hour_budget, cruise_speed_mph)
    search.visit(start, 0)
    return search.best_path, search.best_hours
