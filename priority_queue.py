"""
Min-priority queue of (node, distance, order) records for Dijkstra.

Records are ordered by distance, then by insertion order, so equal
distances come out first-in first-out. Two records compare equal when they
refer to the same node, which lets stale duplicates coexist in the heap.
"""

from dataclasses import dataclass
from typing import List
import heapq
import itertools


@dataclass(eq=False)
class QueueEntry:
    node: int
    distance: int
    order: int

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, QueueEntry):
            return NotImplemented
        return self.node == other.node

    def __hash__(self) -> int:
        return hash(self.node)

    def __lt__(self, other: "QueueEntry") -> bool:
        return (self.distance, self.order) < (other.distance, other.order)


class MinPriorityQueue:
    """
    Binary heap (heapq) with lazy decrease-key.

    Re-prioritising a node means pushing a fresh entry; the caller discards
    outdated ones when they are popped.
    """

    def __init__(self) -> None:
        self._heap: List[QueueEntry] = []
        self._order = itertools.count()

    def push(self, node: int, distance: int) -> QueueEntry:
        entry = QueueEntry(node, distance, next(self._order))
        heapq.heappush(self._heap, entry)
        return entry

    def pop(self) -> QueueEntry:
        """Remove and return the smallest entry. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from an empty priority queue")
        return heapq.heappop(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)

    def __contains__(self, node: object) -> bool:
        return any(entry.node == node for entry in self._heap)
