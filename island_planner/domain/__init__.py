"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    GraphError,
    InvalidQueryError,
    NoTourFoundError,
    RoutePlannerError,
    UnknownIslandError,
)
from .models import Island, ReachResult, Route, TourResult

__all__ = [
    # Models
    "Island",
    "Route",
    "TourResult",
    "ReachResult",
    # Errors
    "RoutePlannerError",
    "InvalidQueryError",
    "UnknownIslandError",
    "NoTourFoundError",
    "GraphError",
]
