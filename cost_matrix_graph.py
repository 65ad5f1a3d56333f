"""
Concrete graph implementation backed by an N x N link-cost matrix.

The matrix is validated once and stored as a read-only numpy array.
"""

from typing import Dict, Iterable, Mapping, Sequence, Union

import numpy as np

from graph import INF, Graph, InvalidInputError


ZERO_LINK_POLICIES = ("absent", "reject")

MatrixLike = Union[np.ndarray, Sequence[Sequence[int]]]


class CostMatrixGraph(Graph):
    """
    Immutable graph over nodes 0..N-1 with integer link costs.

    Diagonal entries are ignored. An off-diagonal entry equal to ``inf`` is
    an absent link. Off-diagonal zeros are absent links too unless
    ``zero_links="reject"``, in which case they fail validation.
    """

    def __init__(self, matrix: MatrixLike, inf: int = INF, zero_links: str = "absent") -> None:
        if zero_links not in ZERO_LINK_POLICIES:
            raise InvalidInputError(
                f"zero_links must be one of {ZERO_LINK_POLICIES}, got {zero_links!r}"
            )
        self._inf = int(inf)
        self._costs = _validate(matrix, self._inf, zero_links)
        self._costs.flags.writeable = False
        self._adj: Dict[int, Dict[int, int]] = {
            u: {
                v: int(self._costs[u, v])
                for v in range(self.node_count())
                if self.is_direct_link(u, v)
            }
            for u in range(self.node_count())
        }

    # --- Matrix accessors ----------------------------------------------------

    def node_count(self) -> int:
        return int(self._costs.shape[0])

    def cost(self, i: int, j: int) -> int:
        self._check_node(i)
        self._check_node(j)
        return int(self._costs[i, j])

    def is_direct_link(self, i: int, j: int) -> bool:
        c = self.cost(i, j)
        return i != j and c != 0 and c != self._inf

    def as_array(self) -> np.ndarray:
        """Return a writable copy of the underlying cost matrix."""
        return self._costs.copy()

    # --- Graph interface -----------------------------------------------------

    @property
    def inf(self) -> int:
        return self._inf

    def nodes(self) -> Iterable[int]:
        return range(self.node_count())

    def outgoing(self, node: int) -> Mapping[int, int]:
        self._check_node(node)
        return dict(self._adj[node])  # defensive copy

    # --- Internal helpers ----------------------------------------------------

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.node_count():
            raise IndexError(f"node {node} out of range [0, {self.node_count()})")

    def __repr__(self) -> str:
        return f"CostMatrixGraph(n={self.node_count()}, inf={self._inf})"


def _validate(matrix: MatrixLike, inf: int, zero_links: str) -> np.ndarray:
    try:
        raw = np.array(matrix)
    except ValueError as exc:
        # Ragged nested sequences.
        raise InvalidInputError(f"cost matrix is not rectangular: {exc}") from exc

    if raw.ndim != 2:
        raise InvalidInputError(f"cost matrix must be 2-D, got {raw.ndim} dimension(s)")
    rows, cols = raw.shape
    if rows != cols:
        raise InvalidInputError(f"cost matrix must be square, got {rows}x{cols}")
    if rows <= 0:
        raise InvalidInputError("cost matrix must have at least one node")

    if raw.dtype.kind == "f":
        if not np.all(np.isfinite(raw)) or not np.all(raw == np.round(raw)):
            raise InvalidInputError("cost matrix entries must be integers")
    elif raw.dtype.kind not in "iu":
        raise InvalidInputError(f"cost matrix entries must be integers, got dtype {raw.dtype}")
    costs = raw.astype(np.int64)

    off_diag = ~np.eye(rows, dtype=bool)
    if np.any(costs[off_diag] < 0):
        raise InvalidInputError("cost matrix contains negative link costs")
    if np.any(costs[off_diag] > inf):
        raise InvalidInputError(f"cost matrix contains costs above the sentinel {inf}")
    if zero_links == "reject" and np.any(costs[off_diag] == 0):
        i, j = np.argwhere((costs == 0) & off_diag)[0]
        raise InvalidInputError(f"zero-cost link between {i} and {j}")
    return costs
