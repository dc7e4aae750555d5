"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- CSVGraphRepository: Loads the island graph from CSV files
- DijkstraDistanceOracle: Memoized shortest distances using Dijkstra
"""

from .csv_repository import CSVGraphRepository
from .dijkstra_oracle import DijkstraDistanceOracle

__all__ = ["CSVGraphRepository", "DijkstraDistanceOracle"]
