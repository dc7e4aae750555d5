import itertools

import pytest

from island_planner.graph.dijkstra import dijkstra, shortest_distance, shortest_path
from island_planner.graph.weighted_graph import WeightedGraph


def test_add_edge_is_stored_on_both_endpoints(pacific_graph):
    for u in pacific_graph:
        for v, miles in pacific_graph.neighbors(u):
            assert (u, miles) in list(pacific_graph.neighbors(v))


def test_add_node_is_idempotent():
    graph = WeightedGraph()
    graph.add_node("Fiji", 168)
    graph.add_node("Fiji", 999)

    assert len(graph) == 1
    assert graph.dwell("Fiji") == 168


def test_add_edge_with_missing_endpoint_is_ignored():
    graph = WeightedGraph()
    graph.add_node("Fiji", 168)

    graph.add_edge("Fiji", "Atlantis", 100)
    graph.add_edge("Atlantis", "Fiji", 100)

    assert list(graph.neighbors("Fiji")) == []
    assert "Atlantis" not in graph
    assert graph.edge_count() == 0


def test_neighbors_follow_insertion_order():
    graph = WeightedGraph()
    for key in ("A", "B", "C", "D"):
        graph.add_node(key, 1)
    graph.add_edge("A", "C", 3)
    graph.add_edge("A", "B", 2)
    graph.add_edge("D", "A", 4)

    assert list(graph.neighbors("A")) == [("C", 3), ("B", 2), ("D", 4)]


def test_parallel_edges_are_both_kept():
    graph = WeightedGraph()
    graph.add_node("A", 1)
    graph.add_node("B", 1)
    graph.add_edge("A", "B", 10)
    graph.add_edge("A", "B", 4)

    assert list(graph.neighbors("A")) == [("B", 10), ("B", 4)]
    assert list(graph.neighbors("B")) == [("A", 10), ("A", 4)]
    assert graph.edge_count() == 2
    assert shortest_distance(graph, "A", "B") == 4


def test_invalid_records_are_rejected():
    graph = WeightedGraph()
    with pytest.raises(ValueError):
        graph.add_node("A", -1)

    graph.add_node("A", 1)
    graph.add_node("B", 1)
    with pytest.raises(ValueError):
        graph.add_edge("A", "B", 0)
    assert list(graph.neighbors("A")) == []


def test_dwell_unknown_island_raises():
    with pytest.raises(KeyError):
        WeightedGraph().dwell("Nowhere")


def test_dijkstra_samoa_hawaii_round_trip(pacific_graph):
    assert dijkstra(pacific_graph, "Samoa")["Hawaii"] == 2609
    assert dijkstra(pacific_graph, "Hawaii")["Samoa"] == 2609


def test_dijkstra_chooses_shortest_walk():
    # A can reach C directly, but A->B->C is shorter
    graph = WeightedGraph()
    for key in ("A", "B", "C"):
        graph.add_node(key, 0)
    graph.add_edge("A", "B", 3)
    graph.add_edge("A", "C", 10)
    graph.add_edge("B", "C", 4)

    path, distance = shortest_path(graph, "A", "C")

    assert path == ["A", "B", "C"]
    assert distance == 7
    assert shortest_distance(graph, "C", "A") == 7


def test_unreachable_and_unknown_islands():
    graph = WeightedGraph()
    graph.add_node("A", 0)
    graph.add_node("B", 0)

    assert shortest_distance(graph, "A", "B") is None
    assert shortest_distance(graph, "A", "Z") is None
    assert shortest_distance(graph, "Z", "Z") is None
    assert shortest_path(graph, "A", "B") == ([], None)
    assert dijkstra(graph, "A") == {"A": 0}
    assert dijkstra(graph, "Z") == {}


def test_same_source_and_target_is_zero(pacific_graph):
    assert shortest_distance(pacific_graph, "Guam", "Guam") == 0
    assert shortest_path(pacific_graph, "Guam", "Guam") == (["Guam"], 0)


def test_oracle_matches_floyd_warshall(pacific_graph, pacific_distances):
    for u, v in itertools.product(pacific_graph, repeat=2):
        expected = pacific_distances[u, v]
        assert shortest_distance(pacific_graph, u, v) == expected
        assert shortest_distance(pacific_graph, u, v) == shortest_distance(
            pacific_graph, v, u
        )


def test_oracle_triangle_inequality(pacific_graph):
    table = {u: dijkstra(pacific_graph, u) for u in pacific_graph}
    for u, v, x in itertools.product(pacific_graph, repeat=3):
        assert table[u][v] <= table[u][x] + table[x][v]


def test_shortest_path_sums_to_distance(pacific_graph):
    for u, v in itertools.combinations(pacific_graph, 2):
        path, distance = shortest_path(pacific_graph, u, v)
        assert path[0] == u and path[-1] == v
        total = 0
        for here, there in zip(path, path[1:]):
            total += min(m for n, m in pacific_graph.neighbors(here) if n == there)
        assert total == distance
