"""
Unit tests for SimpleDijkstraEngine and per-source link-state routing.
"""

import pytest

from cost_matrix_graph import CostMatrixGraph
from dijkstra_engine import SimpleDijkstraEngine, compute_lsr
from graph import INF
from routing import RouteEntry


def _three_node_graph():
    # 0-1 (1), 1-2 (1), 0-2 (5)
    return CostMatrixGraph(
        [
            [0, 1, 5],
            [1, 0, 1],
            [5, 1, 0],
        ]
    )


def test_dijkstra_basic_paths():
    engine = SimpleDijkstraEngine()
    result = engine.shortest_paths(_three_node_graph(), 0)

    assert result.dist == (0, 1, 2)
    assert result.prev == (None, 0, 1)
    assert result.settled == frozenset({0, 1, 2})
    # Shortest 0->2 is 0->1->2 with cost 2
    assert result.next_hop(2) == 1
    assert result.path_to(2) == [0, 1, 2]


def test_routing_table_omits_source():
    result = SimpleDijkstraEngine().shortest_paths(_three_node_graph(), 1)

    assert result.routing_table() == [RouteEntry(0, 1, 0), RouteEntry(2, 1, 2)]
    assert result.routing_table(include_self=True)[1] == RouteEntry(1, 0, None)


def test_self_entry_has_no_next_hop():
    result = SimpleDijkstraEngine().shortest_paths(_three_node_graph(), 2)

    assert result.cost(2) == 0
    assert result.next_hop(2) is None


def test_dijkstra_unreachable_node():
    g = CostMatrixGraph(
        [
            [0, 2, INF],
            [2, 0, INF],
            [INF, INF, 0],
        ]
    )

    result = SimpleDijkstraEngine().shortest_paths(g, 0)

    assert result.cost(1) == 2
    # Unreachable node keeps the sentinel and has no next hop
    assert result.cost(2) == INF
    assert result.next_hop(2) is None
    assert not result.is_reachable(2)
    assert result.path_to(2) == []
    assert 2 not in result.settled


def test_next_hop_walks_long_chain():
    # 0 - 1 - 2 - 3 - 4, each link cost 1, plus an expensive 0-4 shortcut
    matrix = [[INF] * 5 for _ in range(5)]
    for i in range(5):
        matrix[i][i] = 0
    for u in range(4):
        matrix[u][u + 1] = matrix[u + 1][u] = 1
    matrix[0][4] = matrix[4][0] = 10
    g = CostMatrixGraph(matrix)

    result = SimpleDijkstraEngine().shortest_paths(g, 0)

    assert result.cost(4) == 4
    assert [result.next_hop(d) for d in range(1, 5)] == [1, 1, 1, 1]
    assert result.path_to(4) == [0, 1, 2, 3, 4]


def test_directed_links_respected():
    # Only 0 -> 1 exists
    g = CostMatrixGraph([[0, 3], [INF, 0]])

    results = compute_lsr(g)

    assert results[0].cost(1) == 3
    assert results[1].cost(0) == INF
    assert results[1].next_hop(0) is None


def test_ties_break_on_lower_node_id():
    """Equal-cost routes 0-1-3 and 0-2-3: node 1 is settled first."""
    g = CostMatrixGraph(
        [
            [0, 1, 1, INF],
            [1, 0, INF, 1],
            [1, INF, 0, 1],
            [INF, 1, 1, 0],
        ]
    )

    first = compute_lsr(g)
    second = compute_lsr(g)

    assert first == second
    assert first[0].next_hop(3) == 1


def test_compute_lsr_one_result_per_source():
    results = compute_lsr(_three_node_graph())

    assert [r.source for r in results] == [0, 1, 2]
    assert results[2].dist == (2, 1, 0)
    assert results[2].next_hop(0) == 1


def test_process_pool_matches_sequential():
    g = _three_node_graph()

    assert compute_lsr(g, max_workers=2, use_processes=True) == compute_lsr(g)


def test_source_out_of_range():
    with pytest.raises(IndexError):
        SimpleDijkstraEngine().shortest_paths(_three_node_graph(), 3)
