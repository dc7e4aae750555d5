import pytest

from island_planner.graph.reach import max_reach, travel_hours
from island_planner.graph.weighted_graph import WeightedGraph


def _chain_hours(graph, path, speed=500):
    hours = sum(graph.dwell(island) for island in path)
    for here, there in zip(path, path[1:]):
        miles = min(m for n, m in graph.neighbors(here) if n == there)
        hours += travel_hours(miles, speed)
    return hours


def _longest_feasible_chain(graph, start, budget):
    """Enumerate every simple path from start within budget."""
    if graph.dwell(start) > budget:
        return 0
    longest = 1
    stack = [([start], graph.dwell(start))]
    while stack:
        path, hours = stack.pop()
        longest = max(longest, len(path))
        for neighbor, miles in graph.neighbors(path[-1]):
            if neighbor in path:
                continue
            total = hours + miles // 500 + graph.dwell(neighbor)
            if total <= budget:
                stack.append((path + [neighbor], total))
    return longest


def test_zero_budget_visits_nothing(pacific_graph):
    assert max_reach(pacific_graph, "Hawaii", 0) == ([], 0)


def test_budget_below_start_dwell_visits_nothing(pacific_graph):
    assert max_reach(pacific_graph, "Hawaii", 239) == ([], 0)


def test_budget_just_fits_start(pacific_graph):
    assert max_reach(pacific_graph, "Hawaii", 240) == (["Hawaii"], 240)


def test_neighbor_dwell_over_budget_is_not_taken():
    graph = WeightedGraph()
    graph.add_node("Hawaii", 240)
    graph.add_node("Bora Bora", 336)
    graph.add_edge("Hawaii", "Bora Bora", 2610)

    # 240 + 5 fits, 240 + 5 + 336 does not
    assert max_reach(graph, "Hawaii", 240 + 5 + 257) == (["Hawaii"], 240)


def test_flight_over_budget_is_not_taken():
    graph = WeightedGraph()
    graph.add_node("A", 0)
    graph.add_node("B", 0)
    graph.add_edge("A", "B", 1000)

    assert max_reach(graph, "A", 1) == (["A"], 0)
    assert max_reach(graph, "A", 2) == (["A", "B"], 2)


def test_travel_hours_truncate():
    assert travel_hours(499) == 0
    assert travel_hours(500) == 1
    assert travel_hours(2734) == 5
    assert travel_hours(2734, cruise_speed_mph=250) == 10


def test_ties_keep_first_discovered_chain():
    graph = WeightedGraph()
    graph.add_node("A", 0)
    graph.add_node("B", 5)
    graph.add_node("C", 1)
    graph.add_edge("A", "B", 1)
    graph.add_edge("A", "C", 1)

    # [A, C] is cheaper but not longer, so [A, B] stays
    assert max_reach(graph, "A", 10) == (["A", "B"], 5)


def test_already_visited_islands_are_not_revisited():
    graph = WeightedGraph()
    for key in ("A", "B", "C"):
        graph.add_node(key, 1)
    graph.add_edge("A", "B", 500)
    graph.add_edge("A", "C", 500)

    # A star: going A->B->A->C would need to revisit A
    path, hours = max_reach(graph, "A", 100)

    assert path == ["A", "B"]
    assert hours == 3


def test_cruise_speed_changes_flight_hours():
    graph = WeightedGraph()
    graph.add_node("A", 0)
    graph.add_node("B", 0)
    graph.add_edge("A", "B", 1000)

    assert max_reach(graph, "A", 2, cruise_speed_mph=1000) == (["A", "B"], 1)
    assert max_reach(graph, "A", 2, cruise_speed_mph=250) == (["A"], 0)


@pytest.mark.parametrize("budget", [240, 600, 800, 1000])
def test_chain_is_simple_within_budget_and_maximal(pacific_graph, budget):
    path, hours = max_reach(pacific_graph, "Hawaii", budget)

    assert len(path) == len(set(path))
    assert hours <= budget
    assert hours == _chain_hours(pacific_graph, path)
    assert len(path) == _longest_feasible_chain(pacific_graph, "Hawaii", budget)
