"""
Algorithm interfaces for routing-table computation.

Keeps graph algorithms separate from file parsing, formatting and the CLI.
"""

from abc import ABC, abstractmethod
from typing import Optional

from graph import Graph
from routing import DistanceVectorResult, ShortestPathResult


class DijkstraEngine(ABC):
    """
    Interface for single-source shortest-path computation.
    """

    @abstractmethod
    def shortest_paths(self, graph: Graph, source: int) -> ShortestPathResult:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            ShortestPathResult rooted at source; unreachable nodes carry
            graph.inf as cost and no predecessor.
        """
        raise NotImplementedError


class DistanceVectorEngine(ABC):
    """
    Interface for a Bellman–Ford-style distance-vector computation.
    """

    @abstractmethod
    def compute(
        self,
        graph: Graph,
        max_passes: Optional[int] = None,
        record_trace: bool = True,
    ) -> DistanceVectorResult:
        """
        Relax all node triples until no distance changes.

        Args:
            graph: topology to route over.
            max_passes: upper bound on relaxation passes (defaults to N).
            record_trace: keep a snapshot of the tables after each changing pass.

        Returns:
            Final distance and next-hop tables for every node.
        """
        raise NotImplementedError
