"""
Heap-based DijkstraEngine implementation for link-state routing.

Uses Python's heapq to compute single-source shortest paths over any Graph
implementation that satisfies the Graph interface, and runs it once per
source to build every node's link-state routing table.
"""

from concurrent.futures import ProcessPoolExecutor
from typing import List, Optional, Set
import heapq
import logging
import math

from algorithms import DijkstraEngine
from graph import Graph
from routing import ShortestPathResult

logger = logging.getLogger(__name__)


class SimpleDijkstraEngine(DijkstraEngine):
    """
    Single-source Dijkstra using a binary heap and a settled set.

    Complexity:
        O(E log V) over the nodes reachable from the source.
    """

    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathResult:
        """
        Dijkstra variant that also records predecessors for path reconstruction.

        Every node starts at infinity except the source; nodes still at
        infinity are reported with the graph sentinel. A popped
        node that is already settled is a stale heap entry and is skipped.
        Heap entries are (cost, node) so equal costs settle the lower node
        id first, which keeps next hops deterministic.
        """
        n = len(list(graph.nodes()))
        if not 0 <= source < n:
            raise IndexError(f"source {source} out of range [0, {n})")

        dist: List[float] = [math.inf] * n
        prev: List[Optional[int]] = [None] * n
        settled: Set[int] = set()
        dist[source] = 0
        pq = [(0, source)]  # priority queue of (distance, node)

        while pq:
            d_u, u = heapq.heappop(pq)
            if u in settled:
                continue
            settled.add(u)

            for v, w in graph.outgoing(u).items():
                if v in settled:
                    continue
                alt = d_u + w
                if alt < dist[v]:
                    dist[v] = alt
                    prev[v] = u
                    heapq.heappush(pq, (alt, v))

        logger.debug("Dijkstra from %d settled %d of %d node(s)", source, len(settled), n)
        return ShortestPathResult(
            source=source,
            inf=graph.inf,
            dist=tuple(graph.inf if d == math.inf else int(d) for d in dist),
            prev=tuple(prev),
            settled=frozenset(settled),
        )


def _shortest_paths_task(graph: Graph, source: int) -> ShortestPathResult:
    return SimpleDijkstraEngine().shortest_paths(graph, source)


def compute_lsr(
    graph: Graph,
    max_workers: Optional[int] = None,
    use_processes: bool = False,
) -> List[ShortestPathResult]:
    """
    Run Dijkstra from every node and return the results in source order.

    Each source gets its own working state, so sources can be farmed out to
    a process pool. If the pool cannot be created the sources are computed
    sequentially instead.
    """
    sources = list(graph.nodes())

    if use_processes and len(sources) > 1:
        try:
            with ProcessPoolExecutor(max_workers=max_workers) as executor:
                results = list(
                    executor.map(_shortest_paths_task, [graph] * len(sources), sources)
                )
            logger.info("LSR computed %d source(s) on a process pool", len(results))
            return results
        except (PermissionError, NotImplementedError, OSError) as exc:
            logger.warning("process pool unavailable (%s), falling back to sequential execution", exc)

    engine = SimpleDijkstraEngine()
    results = [engine.shortest_paths(graph, src) for src in sources]
    logger.info("LSR computed %d source(s)", len(results))
    return results
