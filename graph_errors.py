"""
Exception types raised by the graph representations.

Each error also derives from the closest builtin so callers can catch
either the graph-specific type or the generic one.
"""


class GraphError(Exception):
    """Base class for all graph errors."""


class InvalidWeightError(GraphError, ValueError):
    """Edge weight outside [0, INFINITY] or not an integer."""


class InvalidEndpointError(GraphError, IndexError):
    """Edge endpoint is not a node of the graph."""


class ConcurrentModificationError(GraphError, RuntimeError):
    """A NeighborList was structurally modified while being iterated."""
