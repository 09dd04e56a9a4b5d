"""
Concrete directed, weighted graph implementation.

Implements the Graph interface using one linked NeighborList per node.
"""

from typing import Iterator, List, Set

from graph import Edge, Graph
from neighbor_list import NeighborList, NeighborListIterator


class AdjacencyListGraph(Graph):
    """
    Directed, weighted graph backed by a list of neighbour lists.

    New edges go to the front of the source's list; re-adding an existing
    edge rewrites its weight in place.
    """

    def __init__(self) -> None:
        self._lists: List[NeighborList] = []
        self._edge_count = 0

    # --- Graph interface -----------------------------------------------------

    def add_node(self) -> int:
        self._lists.append(NeighborList())
        return len(self._lists) - 1

    def _store_edge(self, source: int, dest: int, weight: int) -> None:
        # Update in place rather than keep a second entry for the same pair.
        if not self._lists[source].set_weight(dest, weight):
            self._append_new_edge(source, dest, weight)

    def _append_new_edge(self, source: int, dest: int, weight: int) -> None:
        self._lists[source].add_front(dest, weight)
        self._edge_count += 1

    def delete_edge(self, source: int, dest: int) -> None:
        if not self.has_node(source):
            return
        if self._lists[source].remove(dest):
            self._edge_count -= 1

    def edge_between(self, source: int, dest: int) -> bool:
        if not (self.has_node(source) and self.has_node(dest)):
            return False
        return self._lists[source].contains(dest)

    def edge_weight(self, source: int, dest: int) -> int:
        if not (self.has_node(source) and self.has_node(dest)):
            return 0
        return self._lists[source].weight_of(dest)

    def neighbors(self, node: int) -> Set[int]:
        if not self.has_node(node):
            return set()
        return {n.node for n in self._lists[node] if n.weight > 0}

    def node_count(self) -> int:
        return len(self._lists)

    def edge_count(self) -> int:
        return self._edge_count

    def clear(self) -> None:
        self._lists = []
        self._edge_count = 0

    def edges(self) -> Iterator[Edge]:
        """Edges grouped by source, each group in neighbour-list order."""
        for source, neighbor_list in enumerate(self._lists):
            for n in neighbor_list:
                yield source, n.node, n.weight

    # --- Representation-specific ---------------------------------------------

    def neighbor_entries(self, node: int) -> NeighborListIterator:
        """
        Fail-fast iterator over node's list in storage order.

        Adding or deleting an edge of node while iterating raises
        ConcurrentModificationError; reweighting an existing edge does not.
        """
        if not self.has_node(node):
            return iter(NeighborList())
        return iter(self._lists[node])
