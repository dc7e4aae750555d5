"""Fastest tour visiting a set of islands.

Every ordering of the targets is tried and costed with a pairwise
shortest-distance oracle, so legs may pass through islands that are
not targets. The target sets this is used with are small (about ten
islands), which keeps the factorial enumeration affordable.
"""

from __future__ import annotations

import itertools
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from ..domain.errors import NoTourFoundError

DistanceFn = Callable[[str, str], Optional[int]]


def unique_targets(start: str, targets: Iterable[str]) -> List[str]:
    """Drop duplicates and the start island, keeping first occurrences."""
    seen = {start}
    ordered: List[str] = []
    for target in targets:
        if target not in seen:
            seen.add(target)
            ordered.append(target)
    return ordered


def tour_distance(stops: Sequence[str], distance: DistanceFn) -> Optional[int]:
    """Sum the oracle distance over consecutive stops.

    Returns ``None`` as soon as one leg is unreachable.
    """
    total = 0
    for here, there in zip(stops, stops[1:]):
        leg = distance(here, there)
        if leg is None:
            return None
        total += leg
    return total


def find_fastest_tour(
    start: str, targets: Iterable[str], distance: DistanceFn
) -> Tuple[List[str], int]:
    """Find the shortest tour from ``start`` covering every target.

    Args:
        start: Island the tour begins at.
        targets: Islands to visit; duplicates and ``start`` are ignored.
        distance: Pairwise shortest-distance oracle.

    Returns:
        The start followed by the targets in the best order, and the
        total distance. The first minimal ordering found is kept.

    Raises:
        NoTourFoundError: If every ordering has an unreachable leg.
    """
    remaining = unique_targets(start, targets)

    best_path: Optional[List[str]] = None
    best_distance = 0

    for ordering in itertools.permutations(remaining):
        candidate = [start, *ordering]
        total = tour_distance(candidate, distance)
        if total is None:
            continue
        if best_path is None or total < best_distance:
            best_path = candidate
            best_distance = total

    if best_path is None:
        raise NoTourFoundError(
            f"No feasible tour from {start}",
            start=start,
            targets=tuple(remaining),
        )

    return best_path, best_distance
