"""
Singly linked neighbour list used by AdjacencyListGraph.

Each link stores a (node, weight) pair. The list keeps head and tail
references plus a cached count, so both ends accept O(1) inserts.
Iteration is fail-fast: structural changes made after an iterator was
created make its next step raise ConcurrentModificationError.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from graph_errors import ConcurrentModificationError


@dataclass(frozen=True)
class Neighbor:
    """
    Snapshot of one list entry as yielded during iteration.
    """

    node: int
    weight: int


class _Link:
    def __init__(self, node: int, weight: int, next_link: Optional["_Link"] = None) -> None:
        self.node = node
        self.weight = weight
        self.next = next_link


class NeighborList:
    """
    Linked list of (neighbour, weight) entries.

    Inserts do not deduplicate; lookups and updates act on the first
    matching entry.
    """

    def __init__(self) -> None:
        self._head: Optional[_Link] = None
        self._tail: Optional[_Link] = None
        self._count = 0
        # Set by every structural mutation, cleared when an iterator is built.
        self._modified = False

    # --- Structural mutation -------------------------------------------------

    def add_front(self, node: int, weight: int) -> None:
        """Insert an entry before the current head."""
        link = _Link(node, weight, self._head)
        if self._head is None:
            self._tail = link
        self._head = link
        self._count += 1
        self._modified = True

    def add_back(self, node: int, weight: int) -> None:
        """Insert an entry after the current tail."""
        link = _Link(node, weight)
        if self._tail is None:
            self._head = link
        else:
            self._tail.next = link
        self._tail = link
        self._count += 1
        self._modified = True

    def remove(self, node: int) -> bool:
        """
        Remove the first entry for node.

        Returns True if an entry was removed. The modification flag is set
        either way.
        """
        self._modified = True
        previous: Optional[_Link] = None
        current = self._head
        while current is not None:
            if current.node == node:
                if previous is None:
                    self._head = current.next
                else:
                    previous.next = current.next
                if current is self._tail:
                    self._tail = previous
                self._count -= 1
                return True
            previous = current
            current = current.next
        return False

    # --- Queries and in-place updates ---------------------------------------

    def _find(self, node: int) -> Optional[_Link]:
        current = self._head
        while current is not None:
            if current.node == node:
                return current
            current = current.next
        return None

    def contains(self, node: int) -> bool:
        return self._find(node) is not None

    def weight_of(self, node: int) -> int:
        """Weight of the first entry for node, or 0 if there is none."""
        link = self._find(node)
        return link.weight if link is not None else 0

    def set_weight(self, node: int, weight: int) -> bool:
        """
        Overwrite the weight of the first entry for node.

        Not a structural change: live iterators stay valid, so callers may
        rewrite weights while walking the list.
        """
        link = self._find(node)
        if link is None:
            return False
        link.weight = weight
        return True

    def __contains__(self, node: object) -> bool:
        return isinstance(node, int) and self.contains(node)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> "NeighborListIterator":
        return NeighborListIterator(self)

    def __repr__(self) -> str:
        # Walk the links directly; building an iterator would reset _modified.
        parts = []
        current = self._head
        while current is not None:
            parts.append(f"{current.node}:{current.weight}")
            current = current.next
        return f"NeighborList([{', '.join(parts)}])"


class NeighborListIterator(Iterator[Neighbor]):
    """
    Fail-fast iterator over a NeighborList.

    Building the iterator clears the list's modification flag; every later
    structural mutation invalidates it.
    """

    def __init__(self, owner: NeighborList) -> None:
        self._owner = owner
        owner._modified = False
        self._current = owner._head

    def __iter__(self) -> "NeighborListIterator":
        return self

    def __next__(self) -> Neighbor:
        if self._owner._modified:
            raise ConcurrentModificationError(
                "NeighborList was modified after this iterator was created."
            )
        if self._current is None:
            raise StopIteration
        link = self._current
        self._current = link.next
        return Neighbor(link.node, link.weight)
