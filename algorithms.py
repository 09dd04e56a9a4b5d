"""
Algorithm interfaces for shortest paths.

Keeps path-finding separate from graph storage: engines only talk to the
abstract Graph surface.
"""

from abc import ABC, abstractmethod
from typing import Dict, List

from graph import Graph


class ShortestPathEngine(ABC):
    """
    Interface for shortest-path computation over a Graph.
    """

    @abstractmethod
    def shortest_path(self, graph: Graph, source: int, dest: int) -> List[int]:
        """
        Compute the cheapest path from source to dest.

        Returns:
            Node ids from source to dest inclusive, or [] if dest is
            unreachable. When source == dest the path must be a cycle of
            positive weight.
        """
        raise NotImplementedError

    @abstractmethod
    def shortest_paths(
        self, graph: Graph, source: int
    ) -> tuple[Dict[int, int], Dict[int, int]]:
        """
        Compute shortest-path costs plus the predecessor chain for each dest.

        Returns:
            (dist, prev) where dist is the cost map and prev records parents.
        """
        raise NotImplementedError
