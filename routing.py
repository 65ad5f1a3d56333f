"""
Routing-table data structures shared by both engines.

Defines the per-destination RouteEntry emitted by every engine, the
tri-state distance cell used during distance-vector convergence, and the
immutable result objects returned by the DV and link-state engines.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

import numpy as np


@dataclass(frozen=True)
class RouteEntry:
    """
    Single entry in a node's routing table.

    An unreachable destination carries the graph sentinel as cost and no
    next hop.
    """
    dest: int
    cost: int
    next_hop: Optional[int]

    @property
    def reachable(self) -> bool:
        return self.next_hop is not None or self.cost == 0


class RouteState(Enum):
    """
    Knowledge state of one (source, dest) cell in a distance table.

    UNKNOWN: no route learned yet (only seen while converging).
    KNOWN: a route with a finite cost is known.
    UNREACHABLE: convergence finished without finding a route.
    """

    UNKNOWN = "unknown"
    KNOWN = "known"
    UNREACHABLE = "unreachable"


@dataclass(frozen=True)
class DistanceCell:
    state: RouteState
    cost: Optional[int] = None

    @classmethod
    def known(cls, cost: int) -> "DistanceCell":
        return cls(RouteState.KNOWN, cost)

    @property
    def is_known(self) -> bool:
        return self.state is RouteState.KNOWN

    def reported_cost(self, inf: int) -> int:
        """Cost as printed in a routing table: the sentinel unless known."""
        return self.cost if self.state is RouteState.KNOWN else inf


UNKNOWN = DistanceCell(RouteState.UNKNOWN)
UNREACHABLE = DistanceCell(RouteState.UNREACHABLE)


@dataclass(frozen=True)
class DistanceVectorSnapshot:
    """
    Immutable copy of the DV distance and next-hop tables after one pass.

    iteration is the 1-based pass number that produced the change.
    """
    iteration: int
    dist: Tuple[Tuple[DistanceCell, ...], ...]
    next_hop: Tuple[Tuple[Optional[int], ...], ...]

    def routing_table(self, node: int, inf: int) -> List[RouteEntry]:
        return [
            RouteEntry(dest, cell.reported_cost(inf), self.next_hop[node][dest])
            for dest, cell in enumerate(self.dist[node])
        ]


@dataclass(frozen=True)
class DistanceVectorResult:
    """
    Converged distance-vector state for every node.

    trace holds one snapshot per pass that changed at least one cell.
    """
    inf: int
    dist: Tuple[Tuple[DistanceCell, ...], ...]
    next_hops: Tuple[Tuple[Optional[int], ...], ...]
    trace: Tuple[DistanceVectorSnapshot, ...]
    passes: int
    converged: bool

    def node_count(self) -> int:
        return len(self.dist)

    def cost(self, src: int, dest: int) -> int:
        return self.dist[src][dest].reported_cost(self.inf)

    def next_hop(self, src: int, dest: int) -> Optional[int]:
        return self.next_hops[src][dest]

    def routing_table(self, node: int) -> List[RouteEntry]:
        """Entries for every destination, the node itself included."""
        return [
            RouteEntry(dest, self.cost(node, dest), self.next_hop(node, dest))
            for dest in range(self.node_count())
        ]

    def routing_tables(self) -> List[List[RouteEntry]]:
        return [self.routing_table(node) for node in range(self.node_count())]

    def cost_matrix(self) -> np.ndarray:
        """Final costs as an N x N array with the sentinel for unreachable pairs."""
        return np.array(
            [[cell.reported_cost(self.inf) for cell in row] for row in self.dist],
            dtype=np.int64,
        ).reshape(self.node_count(), self.node_count())


@dataclass(frozen=True)
class ShortestPathResult:
    """
    Shortest-path tree rooted at one source, as produced by Dijkstra.

    dist holds the sentinel for unreachable nodes; prev holds the parent of
    each node on its shortest path (None for the source and unreachable
    nodes). First hops are derived by walking prev back toward the source.
    """
    source: int
    inf: int
    dist: Tuple[int, ...]
    prev: Tuple[Optional[int], ...]
    settled: frozenset
    _first_hops: Dict[int, Optional[int]] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )

    def is_reachable(self, dest: int) -> bool:
        return dest == self.source or self.prev[dest] is not None

    def cost(self, dest: int) -> int:
        return self.dist[dest]

    def next_hop(self, dest: int) -> Optional[int]:
        """
        Neighbour of the source on the shortest path toward dest.

        Returns None for the source itself and for unreachable nodes.
        """
        if dest not in self._first_hops:
            self._first_hops[dest] = self._walk_to_first_hop(dest)
        return self._first_hops[dest]

    def routing_table(self, include_self: bool = False) -> List[RouteEntry]:
        return [
            RouteEntry(dest, self.dist[dest], self.next_hop(dest))
            for dest in range(len(self.dist))
            if include_self or dest != self.source
        ]

    def path_to(self, dest: int) -> List[int]:
        """Node sequence source -> dest, or [] when dest is unreachable."""
        if not self.is_reachable(dest):
            return []
        path = [dest]
        while path[-1] != self.source:
            path.append(self.prev[path[-1]])
        path.reverse()
        return path

    def _walk_to_first_hop(self, dest: int) -> Optional[int]:
        if dest == self.source or not self.is_reachable(dest):
            return None
        hop = dest
        while self.prev[hop] is not None and self.prev[hop] != self.source:
            hop = self.prev[hop]
        return hop if self.prev[hop] is not None else None
