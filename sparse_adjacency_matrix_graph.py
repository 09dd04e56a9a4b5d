"""
Sparse (coordinate-list) graph.

Edges are kept as a sequence of (source, dest, weight) triples next to a
plain node counter. Space is O(E) and adding a node is O(1); every edge
query is a linear scan.
"""

from collections import deque
from dataclasses import dataclass
from typing import Deque, Iterator, Optional, Set

from graph import Edge, Graph, validate_weight


@dataclass
class EdgeEntry:
    """
    One stored edge. Mutable so weight updates happen in place.
    """

    source: int
    dest: int
    weight: int

    def as_tuple(self) -> Edge:
        return self.source, self.dest, self.weight


class SparseAdjacencyMatrixGraph(Graph):
    """
    Directed, weighted graph backed by a coordinate list.

    At most one entry exists per (source, dest). add_edge pushes new entries
    at the front; append_edge pushes them at the back.
    """

    def __init__(self) -> None:
        self._entries: Deque[EdgeEntry] = deque()
        self._node_count = 0

    def _find(self, source: int, dest: int) -> Optional[EdgeEntry]:
        for entry in self._entries:
            if entry.source == source and entry.dest == dest:
                return entry
        return None

    # --- Graph interface -----------------------------------------------------

    def add_node(self) -> int:
        self._node_count += 1
        return self._node_count - 1

    def add_nodes(self, count: int) -> None:
        if count > 0:
            self._node_count += count

    def _store_edge(self, source: int, dest: int, weight: int) -> None:
        entry = self._find(source, dest)
        if entry is not None:
            entry.weight = weight
        else:
            self._entries.appendleft(EdgeEntry(source, dest, weight))

    def _append_new_edge(self, source: int, dest: int, weight: int) -> None:
        self._entries.append(EdgeEntry(source, dest, weight))

    def append_edge(self, source: int, dest: int, weight: int) -> None:
        """
        Same contract as add_edge, but a new entry is placed at the back.
        """
        weight = validate_weight(weight)
        if weight == 0:
            self.delete_edge(source, dest)
            return
        self._check_endpoints(source, dest)
        entry = self._find(source, dest)
        if entry is not None:
            entry.weight = weight
        else:
            self._append_new_edge(source, dest, weight)

    def delete_edge(self, source: int, dest: int) -> None:
        if self._find(source, dest) is None:
            return
        self._entries = deque(
            e for e in self._entries if not (e.source == source and e.dest == dest)
        )

    def edge_between(self, source: int, dest: int) -> bool:
        return self.edge_weight(source, dest) > 0

    def edge_weight(self, source: int, dest: int) -> int:
        entry = self._find(source, dest)
        return entry.weight if entry is not None else 0

    def neighbors(self, node: int) -> Set[int]:
        return {e.dest for e in self._entries if e.source == node and e.weight > 0}

    def node_count(self) -> int:
        return self._node_count

    def edge_count(self) -> int:
        return len(self._entries)

    def clear(self) -> None:
        self._entries = deque()
        self._node_count = 0

    def edges(self) -> Iterator[Edge]:
        """Edges in coordinate-list order."""
        for entry in list(self._entries):
            yield entry.as_tuple()
