"""
Directed, weighted graph abstraction.

Nodes are dense integer ids 0..V-1 handed out in insertion order and never
removed or renumbered. Edges are directed: u -> v with an integer weight in
(0, INFINITY]. A weight of 0 means "no edge".
"""

from abc import ABC, abstractmethod
from numbers import Integral
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Sequence, Set, Tuple

from graph_errors import InvalidEndpointError, InvalidWeightError

if TYPE_CHECKING:
    from algorithms import ShortestPathEngine


# Largest signed 32-bit integer; upper bound on admissible edge weights.
INFINITY = 2**31 - 1

Edge = Tuple[int, int, int]


class Graph(ABC):
    """
    Directed, weighted graph over integer node ids.

    Concrete representations supply storage; edge validation, path weights
    and shortest paths are shared here.
    """

    # --- Representation API --------------------------------------------------

    @abstractmethod
    def add_node(self) -> int:
        """Append a node and return its id (the previous node count)."""
        raise NotImplementedError

    @abstractmethod
    def _store_edge(self, source: int, dest: int, weight: int) -> None:
        """
        Insert or update source -> dest.

        Called with validated endpoints and a weight in (0, INFINITY].
        """
        raise NotImplementedError

    @abstractmethod
    def delete_edge(self, source: int, dest: int) -> None:
        """Remove source -> dest. Missing edges and unknown nodes are a no-op."""
        raise NotImplementedError

    @abstractmethod
    def edge_between(self, source: int, dest: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def edge_weight(self, source: int, dest: int) -> int:
        """Weight of source -> dest, or 0 when absent or out of range."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, node: int) -> Set[int]:
        """Destinations reachable from node over one positive-weight edge."""
        raise NotImplementedError

    @abstractmethod
    def node_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def edge_count(self) -> int:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Drop every node and edge."""
        raise NotImplementedError

    @abstractmethod
    def edges(self) -> Iterator[Edge]:
        """
        Enumerate stored edges as (source, dest, weight) in storage order.
        """
        raise NotImplementedError

    # --- Shared behaviour ----------------------------------------------------

    def add_nodes(self, count: int) -> None:
        """Append count nodes."""
        for _ in range(count):
            self.add_node()

    def has_node(self, node: int) -> bool:
        return 0 <= node < self.node_count()

    def add_edge(self, source: int, dest: int, weight: int) -> None:
        """
        Add source -> dest with weight, or update the weight if present.

        Raises:
            InvalidWeightError: weight is not an integer in [0, INFINITY].
            InvalidEndpointError: an endpoint is not a node (weight > 0 only).

        A weight of 0 is the same as delete_edge(source, dest).
        """
        weight = validate_weight(weight)
        if weight == 0:
            self.delete_edge(source, dest)
            return
        self._check_endpoints(source, dest)
        self._store_edge(source, dest, weight)

    def load_edges(self, edges: Iterable[Edge]) -> None:
        """
        Bulk add_edge over (source, dest, weight) triples.

        On a graph with no edges yet, pairs are tracked in a set instead of
        being looked up in storage, so loading another graph's edges() costs
        O(1) per edge. Once edges exist every insert goes through the regular
        update-or-insert path. Repeated pairs keep the last weight.
        """
        seen: Optional[Set[Tuple[int, int]]] = set() if self.edge_count() == 0 else None
        for source, dest, weight in edges:
            weight = validate_weight(weight)
            if weight == 0:
                self.delete_edge(source, dest)
                if seen is not None:
                    seen.discard((source, dest))
                continue
            self._check_endpoints(source, dest)
            if seen is None or (source, dest) in seen:
                self._store_edge(source, dest, weight)
            else:
                seen.add((source, dest))
                self._append_new_edge(source, dest, weight)

    def _append_new_edge(self, source: int, dest: int, weight: int) -> None:
        self._store_edge(source, dest, weight)

    def _check_endpoints(self, source: int, dest: int) -> None:
        if not (self.has_node(source) and self.has_node(dest)):
            raise InvalidEndpointError(
                f"Edge {source} -> {dest} references a missing node "
                f"(graph has {self.node_count()} nodes)."
            )

    def path_weight(self, path: Sequence[int]) -> int:
        """
        Sum of edge weights along consecutive nodes of path.

        Raises InvalidEndpointError if some hop is not an edge.
        """
        total = 0
        for u, v in zip(path, path[1:]):
            w = self.edge_weight(u, v)
            if w == 0:
                raise InvalidEndpointError(f"No edge {u} -> {v} on path {list(path)}.")
            total += w
        return total

    def shortest_path(
        self, source: int, dest: int, engine: Optional["ShortestPathEngine"] = None
    ) -> List[int]:
        """
        Cheapest path from source to dest as a list of node ids.

        The list starts at source and ends at dest; it is empty when dest
        cannot be reached. For source == dest a positive-weight cycle is
        required.
        """
        if engine is None:
            from dijkstra_engine import SimpleDijkstraEngine

            engine = SimpleDijkstraEngine()
        return engine.shortest_path(self, source, dest)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.node_count()}, edges={self.edge_count()})"


def validate_weight(weight: int) -> int:
    """Return weight as int, or raise InvalidWeightError if inadmissible."""
    if isinstance(weight, bool) or not isinstance(weight, Integral):
        raise InvalidWeightError(f"Edge weight must be an integer, got {weight!r}.")
    if weight < 0 or weight > INFINITY:
        raise InvalidWeightError(f"Edge weight {weight} outside [0, {INFINITY}].")
    return int(weight)


def edge_list(graph: Graph) -> List[Edge]:
    """Edges of graph sorted by (source, dest); handy for comparing representations."""
    return sorted(graph.edges())
