"""Immutable domain models for the Island Route Planner.

All models are frozen dataclasses with slots. They carry no
behaviour beyond validation and a few convenience properties.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Island:
    """A destination in the graph.

    Attributes:
        key: Unique island identifier (e.g., 'Bora Bora')
        dwell_hours: Hours spent sightseeing once the island is reached
    """

    key: str
    dwell_hours: int

    def __post_init__(self) -> None:
        """Validate dwell time."""
        if self.dwell_hours < 0:
            raise ValueError(
                f"Dwell hours must be non-negative, got {self.dwell_hours}"
            )


@dataclass(frozen=True, slots=True)
class Route:
    """An undirected travel link between two islands.

    Attributes:
        source: One endpoint key
        target: The other endpoint key
        distance_miles: Length of the link, strictly positive
    """

    source: str
    target: str
    distance_miles: int

    def __post_init__(self) -> None:
        """Validate distance."""
        if self.distance_miles <= 0:
            raise ValueError(
                f"Distance must be strictly positive, got {self.distance_miles}"
            )


@dataclass(frozen=True, slots=True)
class TourResult:
    """Result of the fastest visiting tour query.

    Attributes:
        path: Start island followed by the targets in visit order
        total_distance_miles: Sum of shortest distances between consecutive stops
        walk: The path expanded with the intermediate islands of every leg,
            empty unless expansion was requested
    """

    path: tuple[str, ...]
    total_distance_miles: int
    walk: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True, slots=True)
class ReachResult:
    """Result of the max-reach query.

    Attributes:
        path: Simple path of islands, starting at the start island
        hours_used: Dwell plus travel hours spent along the path
    """

    path: tuple[str, ...]
    hours_used: int

    @property
    def is_empty(self) -> bool:
        """Check if not even the start island fits the budget."""
        return len(self.path) == 0
