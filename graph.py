"""
Directed, weighted graph abstraction for the routing simulator.

Nodes are integer ids in [0, N).
Edges are directed: u -> v with a strictly positive integer cost.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Mapping


# Reserved cost meaning "no link" / "destination unreachable".
INF = 9999


class InvalidInputError(ValueError):
    """Raised when a cost matrix or topology description cannot be used."""


class Graph(ABC):
    """Read-only directed, weighted graph over integer node ids."""

    @property
    @abstractmethod
    def inf(self) -> int:
        """Sentinel cost used for absent links and unreachable destinations."""
        raise NotImplementedError

    @abstractmethod
    def nodes(self) -> Iterable[int]:
        """Return all node ids in ascending order."""
        raise NotImplementedError

    @abstractmethod
    def outgoing(self, node: int) -> Mapping[int, int]:
        """
        Direct neighbours and link costs for a given node.

        Self-loops and absent links are never included.

        Returns: dict[int, int]
        """
        raise NotImplementedError
