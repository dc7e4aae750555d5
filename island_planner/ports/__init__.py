"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and the
adapters that load graphs and answer distance queries.
"""

from .cache import CachePort
from .graph import DistanceOraclePort, GraphRepositoryPort

__all__ = [
    # Graph
    "GraphRepositoryPort",
    "DistanceOraclePort",
    # Cache
    "CachePort",
]
