"""Typed domain errors for the Island Route Planner.

All errors inherit from RoutePlannerError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RoutePlannerError(Exception):
    """Base error for the route planner domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidQueryError(RoutePlannerError):
    """A query argument is malformed.

    Attributes:
        parameter: Name of the offending argument
    """

    parameter: str = ""


@dataclass
class UnknownIslandError(InvalidQueryError):
    """A query references an island that is not in the graph.

    Attributes:
        island_key: The key that was not found
    """

    island_key: str = ""


@dataclass
class NoTourFoundError(RoutePlannerError):
    """Every ordering of the targets contains an unreachable leg.

    Attributes:
        start: Island the tour was meant to start from
        targets: Islands the tour was meant to cover
    """

    start: str = ""
    targets: tuple[str, ...] = ()


@dataclass
class GraphError(RoutePlannerError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None
