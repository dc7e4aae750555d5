from __future__ import annotations

import itertools
from typing import Dict, Tuple

import pytest

from island_planner.config import reset_config
from island_planner.graph.weighted_graph import WeightedGraph

PACIFIC_ISLANDS = [
    ("Hawaii", 240),
    ("New Zealand", 72),
    ("Easter Island", 72),
    ("Tahiti", 336),
    ("Samoa", 192),
    ("Fiji", 168),
    ("Guam", 144),
    ("Palau", 120),
    ("Bora Bora", 336),
    ("Solomon Islands", 144),
]

PACIFIC_ROUTES = [
    ("Hawaii", "Tahiti", 2734),
    ("Hawaii", "Samoa", 2609),
    ("Hawaii", "Fiji", 3178),
    ("Hawaii", "Bora Bora", 2610),
    ("New Zealand", "Tahiti", 2485),
    ("New Zealand", "Samoa", 1802),
    ("New Zealand", "Fiji", 1600),
    ("New Zealand", "Guam", 3385),
    ("New Zealand", "Bora Bora", 2570),
    ("New Zealand", "Solomon Islands", 2925),
    ("Easter Island", "Tahiti", 2609),
    ("Easter Island", "Samoa", 2920),
    ("Easter Island", "Bora Bora", 2580),
    ("Tahiti", "Samoa", 1616),
    ("Tahiti", "Fiji", 2027),
    ("Tahiti", "Bora Bora", 257),
    ("Tahiti", "Solomon Islands", 3531),
    ("Samoa", "Fiji", 737),
    ("Samoa", "Guam", 2985),
    ("Samoa", "Palau", 3477),
    ("Samoa", "Bora Bora", 1742),
    ("Samoa", "Solomon Islands", 1795),
    ("Fiji", "Guam", 3053),
    ("Fiji", "Palau", 3558),
    ("Fiji", "Bora Bora", 1981),
    ("Fiji", "Solomon Islands", 1198),
    ("Guam", "Palau", 807),
    ("Guam", "Solomon Islands", 2365),
    ("Palau", "Solomon Islands", 2064),
]


@pytest.fixture(autouse=True)
def fresh_config():
    """Make sure no cached configuration leaks between tests."""
    reset_config()
    yield
    reset_config()


@pytest.fixture
def pacific_graph() -> WeightedGraph:
    graph = WeightedGraph()
    for key, dwell in PACIFIC_ISLANDS:
        graph.add_node(key, dwell)
    for source, target, miles in PACIFIC_ROUTES:
        graph.add_edge(source, target, miles)
    return graph


@pytest.fixture
def pacific_distances(pacific_graph) -> Dict[Tuple[str, str], float]:
    """All-pairs shortest distances computed with Floyd-Warshall."""
    keys = list(pacific_graph)
    dist: Dict[Tuple[str, str], float] = {
        (u, v): (0 if u == v else float("inf")) for u in keys for v in keys
    }
    for source, target, miles in PACIFIC_ROUTES:
        dist[source, target] = min(dist[source, target], miles)
        dist[target, source] = min(dist[target, source], miles)
    for k, i, j in itertools.product(keys, repeat=3):
        if dist[i, k] + dist[k, j] < dist[i, j]:
            dist[i, j] = dist[i, k] + dist[k, j]
    return dist
