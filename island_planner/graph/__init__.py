"""Graph-related utilities for the island network.

This subpackage contains the graph store and the search algorithms
that run on top of it: Dijkstra distances, the fastest visiting tour
and the budgeted island chain. Nothing here logs or raises for
ordinary "not found" outcomes; that is left to the services layer.
"""

from .dijkstra import dijkstra, shortest_distance, shortest_path
from .reach import max_reach, travel_hours
from .tour import find_fastest_tour
from .weighted_graph import WeightedGraph

__all__ = [
    "WeightedGraph",
    "dijkstra",
    "shortest_distance",
    "shortest_path",
    "find_fastest_tour",
    "max_reach",
    "travel_hours",
]
