"""
Dense adjacency-matrix graph.

Stores a V x V numpy matrix of weights where 0 means "no edge". Edge
queries and updates are O(1); adding a node reallocates the matrix.
"""

from typing import Iterator, Set

import numpy as np

from graph import Edge, Graph


class AdjacencyMatrixGraph(Graph):
    """
    Directed, weighted graph backed by an int64 weight matrix.
    """

    def __init__(self) -> None:
        self._matrix = np.zeros((0, 0), dtype=np.int64)
        self._edge_count = 0

    # --- Growth --------------------------------------------------------------

    def _grow(self, extra: int) -> None:
        n = self._matrix.shape[0]
        grown = np.zeros((n + extra, n + extra), dtype=np.int64)
        grown[:n, :n] = self._matrix
        self._matrix = grown

    def add_node(self) -> int:
        node = self._matrix.shape[0]
        self._grow(1)
        return node

    def add_nodes(self, count: int) -> None:
        # One reallocation instead of one per node.
        if count > 0:
            self._grow(count)

    # --- Graph interface -----------------------------------------------------

    def _store_edge(self, source: int, dest: int, weight: int) -> None:
        if self._matrix[source, dest] == 0:
            self._edge_count += 1
        self._matrix[source, dest] = weight

    def delete_edge(self, source: int, dest: int) -> None:
        if not (self.has_node(source) and self.has_node(dest)):
            return
        if self._matrix[source, dest] > 0:
            self._matrix[source, dest] = 0
            self._edge_count -= 1

    def edge_between(self, source: int, dest: int) -> bool:
        return self.edge_weight(source, dest) > 0

    def edge_weight(self, source: int, dest: int) -> int:
        if not (self.has_node(source) and self.has_node(dest)):
            return 0
        return int(self._matrix[source, dest])

    def neighbors(self, node: int) -> Set[int]:
        if not self.has_node(node):
            return set()
        return {int(j) for j in np.flatnonzero(self._matrix[node] > 0)}

    def node_count(self) -> int:
        return int(self._matrix.shape[0])

    def edge_count(self) -> int:
        return self._edge_count

    def clear(self) -> None:
        self._matrix = np.zeros((0, 0), dtype=np.int64)
        self._edge_count = 0

    def edges(self) -> Iterator[Edge]:
        """Edges in row-major order (source ascending, then dest ascending)."""
        rows, cols = np.nonzero(self._matrix)
        weights = self._matrix[rows, cols]
        for i, j, w in zip(rows.tolist(), cols.tolist(), weights.tolist()):
            yield i, j, w
