"""
Simple Bellman–Ford-style distance-vector engine.

Runs centrally over the whole topology: every node combines its own
distance estimates with those of every intermediate node until a full pass
produces no change.
"""

from typing import List, Optional, Tuple
import logging
import warnings

from algorithms import DistanceVectorEngine
from graph import Graph
from routing import (
    UNKNOWN,
    UNREACHABLE,
    DistanceCell,
    DistanceVectorResult,
    DistanceVectorSnapshot,
    RouteState,
)

logger = logging.getLogger(__name__)


class NonConvergenceWarning(RuntimeWarning):
    """The DV pass limit was reached while distances were still changing."""


class DistanceTable:
    """
    Mutable working state for one DV run: distances plus next hops.

    Owned by a single compute() call and never shared.
    """

    def __init__(self, graph: Graph) -> None:
        self.n = len(list(graph.nodes()))
        self.dist: List[List[DistanceCell]] = [[UNKNOWN] * self.n for _ in range(self.n)]
        self.next_hop: List[List[Optional[int]]] = [[None] * self.n for _ in range(self.n)]
        for i in range(self.n):
            self.dist[i][i] = DistanceCell.known(0)
            for j, cost in graph.outgoing(i).items():
                self.dist[i][j] = DistanceCell.known(cost)
                self.next_hop[i][j] = j

    def relax_pass(self) -> int:
        """
        Try every ordered triple (i, j, k) once, updating in place.

        Returns the number of cells that changed.
        """
        n = self.n
        dist = self.dist
        next_hop = self.next_hop
        changes = 0
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                for k in range(n):
                    if k == i or k == j:
                        continue
                    via_first = dist[i][k]
                    via_second = dist[k][j]
                    if not (via_first.is_known and via_second.is_known):
                        continue
                    candidate = via_first.cost + via_second.cost
                    current = dist[i][j]
                    if not current.is_known or candidate < current.cost:
                        dist[i][j] = DistanceCell.known(candidate)
                        next_hop[i][j] = next_hop[i][k]
                        changes += 1
        return changes

    def mark_unreachable(self) -> None:
        for row in self.dist:
            for j, cell in enumerate(row):
                if cell.state is RouteState.UNKNOWN:
                    row[j] = UNREACHABLE

    def frozen(self) -> Tuple[tuple, tuple]:
        return (
            tuple(tuple(row) for row in self.dist),
            tuple(tuple(row) for row in self.next_hop),
        )

    def snapshot(self, iteration: int) -> DistanceVectorSnapshot:
        dist, next_hop = self.frozen()
        return DistanceVectorSnapshot(iteration, dist, next_hop)


class SimpleDistanceVectorEngine(DistanceVectorEngine):
    """
    Iterative all-pairs relaxation with next-hop bookkeeping.

    Complexity:
        O(N^3) per pass, at most N passes.
    """

    def compute(
        self,
        graph: Graph,
        max_passes: Optional[int] = None,
        record_trace: bool = True,
    ) -> DistanceVectorResult:
        """
        Converge the distance and next-hop tables for every node.

        A route through intermediate k is taken when both halves are known
        and either no route to the destination is known yet or the new cost
        is strictly lower. Ties keep the first route found, so the output
        only depends on node numbering. Pairs with no route after
        convergence are reported as unreachable.
        """
        table = DistanceTable(graph)
        limit = table.n if max_passes is None else max_passes
        if limit < 1:
            raise ValueError(f"max_passes must be positive, got {limit}")

        trace: List[DistanceVectorSnapshot] = []
        passes = 0
        converged = False
        while passes < limit:
            passes += 1
            changes = table.relax_pass()
            logger.debug("DV pass %d changed %d cell(s)", passes, changes)
            if not changes:
                converged = True
                break
            if record_trace:
                trace.append(table.snapshot(passes))

        if not converged:
            warnings.warn(
                f"distance-vector tables still changing after {passes} pass(es)",
                NonConvergenceWarning,
                stacklevel=2,
            )
        else:
            logger.info("DV converged on %d node(s) after %d pass(es)", table.n, passes)

        table.mark_unreachable()
        dist, next_hop = table.frozen()
        return DistanceVectorResult(
            inf=graph.inf,
            dist=dist,
            next_hops=next_hop,
            trace=tuple(trace),
            passes=passes,
            converged=converged,
        )


def compute_dvr(
    graph: Graph,
    max_passes: Optional[int] = None,
    record_trace: bool = True,
) -> DistanceVectorResult:
    """Convenience wrapper around SimpleDistanceVectorEngine."""
    return SimpleDistanceVectorEngine().compute(graph, max_passes=max_passes, record_trace=record_trace)
