"""
Topology file reader.

A topology file holds the node count N followed by N*N whitespace-separated
integer link costs in row-major order.
"""

from pathlib import Path
from typing import List, Optional

from config import SimulationConfig
from cost_matrix_graph import CostMatrixGraph
from graph import InvalidInputError


def parse_cost_matrix(text: str) -> List[List[int]]:
    tokens = text.split()
    if not tokens:
        raise InvalidInputError("topology is empty")

    values: List[int] = []
    for pos, token in enumerate(tokens):
        try:
            values.append(int(token))
        except ValueError:
            raise InvalidInputError(f"token {pos + 1} is not an integer: {token!r}") from None

    n, costs = values[0], values[1:]
    if n <= 0:
        raise InvalidInputError(f"node count must be positive, got {n}")
    if len(costs) != n * n:
        raise InvalidInputError(
            f"expected {n * n} link costs for {n} node(s), found {len(costs)}"
        )
    return [costs[row * n:(row + 1) * n] for row in range(n)]


def read_cost_matrix(path: Path) -> List[List[int]]:
    """Read and parse a topology file; OSError propagates if it can't be opened."""
    return parse_cost_matrix(Path(path).read_text())


def load_graph(path: Path, config: Optional[SimulationConfig] = None) -> CostMatrixGraph:
    config = config or SimulationConfig()
    return CostMatrixGraph(
        read_cost_matrix(path),
        inf=config.sentinel,
        zero_links=config.zero_links,
    )
