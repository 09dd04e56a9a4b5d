"""
Conversions between the three graph representations.

Every converter reads the source's own storage and writes straight into a
fresh target: it never goes through the third representation and never
mutates the source. Targets are seeded with the source's node count before
any edge is copied, so each conversion is linear in V + E on top of the
target's allocation cost.
"""

from enum import Enum
from typing import Callable, Dict, Tuple, Type, TypeVar

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph
from graph import Graph
from sparse_adjacency_matrix_graph import SparseAdjacencyMatrixGraph

GraphT = TypeVar("GraphT", bound=Graph)


class Representation(Enum):
    """
    Storage layouts a graph can be converted to.

    ADJACENCY_MATRIX: dense V x V weight matrix.
    ADJACENCY_LIST: one linked neighbour list per node.
    SPARSE: coordinate list of (source, dest, weight) triples.
    """

    ADJACENCY_MATRIX = "adjacency_matrix"
    ADJACENCY_LIST = "adjacency_list"
    SPARSE = "sparse"

    @property
    def graph_class(self) -> Type[Graph]:
        return _GRAPH_CLASSES[self]

    @classmethod
    def of(cls, graph: Graph) -> "Representation":
        for representation, graph_class in _GRAPH_CLASSES.items():
            if isinstance(graph, graph_class):
                return representation
        raise TypeError(f"Unsupported graph type: {type(graph).__name__}")


_GRAPH_CLASSES: Dict[Representation, Type[Graph]] = {
    Representation.ADJACENCY_MATRIX: AdjacencyMatrixGraph,
    Representation.ADJACENCY_LIST: AdjacencyListGraph,
    Representation.SPARSE: SparseAdjacencyMatrixGraph,
}


def _convert_into(target_class: Type[GraphT], graph: Graph) -> GraphT:
    """
    Seed a fresh target_class with graph's nodes, then load its edges.

    Edges arrive in the source's storage order and each new pair goes through
    the target's fast insert, so the result's layout depends on both.
    """
    target = target_class()
    target.add_nodes(graph.node_count())
    target.load_edges(graph.edges())
    return target


# --- Adjacency list -> * -----------------------------------------------------


def adjacency_list_to_adjacency_matrix(graph: AdjacencyListGraph) -> AdjacencyMatrixGraph:
    """Each node's list is walked front to back and written into its row."""
    return _convert_into(AdjacencyMatrixGraph, graph)


def adjacency_list_to_sparse(graph: AdjacencyListGraph) -> SparseAdjacencyMatrixGraph:
    """
    Lists are read source by source and entries are appended at the back,
    so the coordinate list is grouped by ascending source.
    """
    return _convert_into(SparseAdjacencyMatrixGraph, graph)


# --- Adjacency matrix -> * ---------------------------------------------------


def adjacency_matrix_to_adjacency_list(graph: AdjacencyMatrixGraph) -> AdjacencyListGraph:
    """
    Rows are read in ascending column order and each entry goes to the front
    of its source's list, so every list ends up in descending dest order.
    """
    return _convert_into(AdjacencyListGraph, graph)


def adjacency_matrix_to_sparse(graph: AdjacencyMatrixGraph) -> SparseAdjacencyMatrixGraph:
    """
    Matrix -> coordinate list.

    The matrix is read row-major and entries are appended at the back, so
    the resulting list reads row-major too.
    """
    return _convert_into(SparseAdjacencyMatrixGraph, graph)


# --- Sparse -> * -------------------------------------------------------------


def sparse_to_adjacency_matrix(graph: SparseAdjacencyMatrixGraph) -> AdjacencyMatrixGraph:
    """One pass over the coordinate list, one cell write per entry."""
    return _convert_into(AdjacencyMatrixGraph, graph)


def sparse_to_adjacency_list(graph: SparseAdjacencyMatrixGraph) -> AdjacencyListGraph:
    """Coordinate entries are read front to back and prepended to their source's list."""
    return _convert_into(AdjacencyListGraph, graph)


_CONVERTERS: Dict[Tuple[Representation, Representation], Callable[[Graph], Graph]] = {
    (Representation.ADJACENCY_LIST, Representation.ADJACENCY_MATRIX): adjacency_list_to_adjacency_matrix,
    (Representation.ADJACENCY_LIST, Representation.SPARSE): adjacency_list_to_sparse,
    (Representation.ADJACENCY_MATRIX, Representation.ADJACENCY_LIST): adjacency_matrix_to_adjacency_list,
    (Representation.ADJACENCY_MATRIX, Representation.SPARSE): adjacency_matrix_to_sparse,
    (Representation.SPARSE, Representation.ADJACENCY_MATRIX): sparse_to_adjacency_matrix,
    (Representation.SPARSE, Representation.ADJACENCY_LIST): sparse_to_adjacency_list,
}  # type: ignore[dict-item]


def copy_graph(graph: Graph) -> Graph:
    """Independent copy of graph in its own representation."""
    return _convert_into(type(graph), graph)


def convert(graph: Graph, representation: Representation) -> Graph:
    """
    Return a fresh graph in the requested representation.

    Converting to the graph's own representation returns a copy.
    """
    source = Representation.of(graph)
    if source is representation:
        return copy_graph(graph)
    return _CONVERTERS[(source, representation)](graph)
