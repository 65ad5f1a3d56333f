"""
Unit tests for CostMatrixGraph.
"""

import numpy as np
import pytest

from cost_matrix_graph import CostMatrixGraph
from graph import INF, InvalidInputError


def test_links_and_outgoing():
    g = CostMatrixGraph(
        [
            [0, 1, 5],
            [1, 0, INF],
            [5, INF, 0],
        ]
    )

    assert g.node_count() == 3
    assert list(g.nodes()) == [0, 1, 2]
    assert g.cost(0, 2) == 5
    assert g.is_direct_link(0, 1)
    assert not g.is_direct_link(1, 2)
    assert not g.is_direct_link(0, 0)

    assert g.outgoing(0) == {1: 1, 2: 5}
    assert g.outgoing(1) == {0: 1}


def test_outgoing_returns_copy():
    g = CostMatrixGraph([[0, 3], [3, 0]])

    out = g.outgoing(0)
    out.clear()

    # internal structure must remain intact
    assert g.outgoing(0) == {1: 3}


def test_matrix_is_read_only():
    source = np.array([[0, 2], [2, 0]])
    g = CostMatrixGraph(source)

    source[0, 1] = 50
    assert g.cost(0, 1) == 2

    copy = g.as_array()
    copy[0, 1] = 99
    assert g.cost(0, 1) == 2


def test_diagonal_is_never_a_self_loop():
    """A non-zero diagonal entry must not show up as a link."""
    g = CostMatrixGraph([[4, 1], [1, 7]])

    assert not g.is_direct_link(0, 0)
    assert not g.is_direct_link(1, 1)
    assert g.outgoing(0) == {1: 1}


def test_zero_off_diagonal_is_absent_by_default():
    g = CostMatrixGraph([[0, 0], [2, 0]])

    assert not g.is_direct_link(0, 1)
    assert g.is_direct_link(1, 0)
    assert g.outgoing(0) == {}


def test_zero_off_diagonal_rejected_when_configured():
    with pytest.raises(InvalidInputError):
        CostMatrixGraph([[0, 0], [2, 0]], zero_links="reject")


def test_custom_sentinel():
    g = CostMatrixGraph([[0, 100], [100, 0]], inf=100)

    assert g.inf == 100
    assert not g.is_direct_link(0, 1)


@pytest.mark.parametrize(
    "matrix",
    [
        [],
        [[]],
        [[0, 1, 2], [1, 0, 2]],
        [[0, 1], [1]],
        [1, 2, 3],
        [[0, -1], [1, 0]],
        [[0, INF + 1], [1, 0]],
        [[0, 1.5], [1, 0]],
        [["a", "b"], ["c", "d"]],
    ],
)
def test_invalid_matrices_rejected(matrix):
    with pytest.raises(InvalidInputError):
        CostMatrixGraph(matrix)


def test_unknown_zero_link_policy_rejected():
    with pytest.raises(InvalidInputError):
        CostMatrixGraph([[0]], zero_links="ignore")


def test_node_out_of_range():
    g = CostMatrixGraph([[0]])

    with pytest.raises(IndexError):
        g.cost(0, 1)
    with pytest.raises(IndexError):
        g.outgoing(-1)
