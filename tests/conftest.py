"""
Shared fixtures: the three graph representations and the seven-node graph
used throughout the tests.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph
from sparse_adjacency_matrix_graph import SparseAdjacencyMatrixGraph


GRAPH_CLASSES = [AdjacencyMatrixGraph, AdjacencyListGraph, SparseAdjacencyMatrixGraph]

# (0, 2) appears twice; the second call only updates the weight.
SEVEN_NODE_EDGES = [
    (0, 2, 2),
    (0, 2, 3),
    (0, 1, 5),
    (0, 5, 2),
    (1, 2, 3),
    (1, 6, 4),
    (2, 4, 5),
    (3, 2, 8),
    (3, 6, 6),
    (4, 0, 4),
    (4, 3, 4),
    (5, 1, 2),
    (5, 3, 1),
    (6, 4, 1),
    (6, 5, 3),
]


def build_seven_node_graph(graph_class):
    g = graph_class()
    for _ in range(7):
        g.add_node()
    for source, dest, weight in SEVEN_NODE_EDGES:
        g.add_edge(source, dest, weight)
    return g


@pytest.fixture(params=GRAPH_CLASSES, ids=lambda cls: cls.__name__)
def graph_class(request):
    return request.param


@pytest.fixture
def seven_node_graph(graph_class):
    return build_seven_node_graph(graph_class)
