"""
Unit tests for NeighborList and its fail-fast iterator.
"""

import pytest

from graph_errors import ConcurrentModificationError
from neighbor_list import Neighbor, NeighborList


def _entries(lst):
    return [(n.node, n.weight) for n in lst]


def test_front_and_back_inserts_keep_order():
    lst = NeighborList()
    lst.add_back(2, 20)
    lst.add_front(1, 10)
    lst.add_back(3, 30)

    assert _entries(lst) == [(1, 10), (2, 20), (3, 30)]
    assert len(lst) == 3


def test_inserts_do_not_deduplicate():
    lst = NeighborList()
    lst.add_front(4, 1)
    lst.add_front(4, 2)

    assert len(lst) == 2
    # Lookups see the first match only.
    assert lst.weight_of(4) == 2


def test_lookup_and_weight_update():
    lst = NeighborList()
    lst.add_back(5, 7)

    assert lst.contains(5)
    assert 5 in lst
    assert not lst.contains(6)
    assert lst.weight_of(6) == 0

    assert lst.set_weight(5, 9) is True
    assert lst.weight_of(5) == 9
    assert lst.set_weight(6, 1) is False


def test_remove_head_middle_and_tail():
    lst = NeighborList()
    for node in (1, 2, 3, 4):
        lst.add_back(node, node * 10)

    assert lst.remove(1) is True  # head
    assert lst.remove(3) is True  # middle
    assert lst.remove(4) is True  # tail
    assert _entries(lst) == [(2, 20)]

    # Tail was fixed up, so appending still lands at the end.
    lst.add_back(5, 50)
    assert _entries(lst) == [(2, 20), (5, 50)]
    assert len(lst) == 2


def test_remove_missing_is_noop():
    lst = NeighborList()
    lst.add_back(1, 1)

    assert lst.remove(7) is False
    assert _entries(lst) == [(1, 1)]


def test_remove_last_entry_empties_list():
    lst = NeighborList()
    lst.add_front(1, 1)
    lst.remove(1)

    assert len(lst) == 0
    assert _entries(lst) == []
    lst.add_front(2, 2)
    assert _entries(lst) == [(2, 2)]


def test_iteration_yields_neighbor_snapshots():
    lst = NeighborList()
    lst.add_back(8, 3)

    assert list(lst) == [Neighbor(8, 3)]


def test_structural_change_during_iteration_fails_fast():
    lst = NeighborList()
    lst.add_back(1, 1)
    lst.add_back(2, 2)

    it = iter(lst)
    assert next(it) == Neighbor(1, 1)
    lst.add_front(0, 5)
    with pytest.raises(ConcurrentModificationError):
        next(it)


def test_remove_during_iteration_fails_fast():
    lst = NeighborList()
    lst.add_back(1, 1)
    lst.add_back(2, 2)

    it = iter(lst)
    lst.remove(2)
    with pytest.raises(ConcurrentModificationError):
        next(it)


def test_weight_updates_during_iteration_are_allowed():
    """Rewriting weights while walking the list is not a structural change."""
    lst = NeighborList()
    for node in (1, 2, 3):
        lst.add_back(node, 1)

    for n in lst:
        lst.set_weight(n.node, n.weight + n.node)

    assert _entries(lst) == [(1, 2), (2, 3), (3, 4)]


def test_new_iterator_clears_earlier_modifications():
    lst = NeighborList()
    it = iter(lst)
    lst.add_back(1, 1)
    with pytest.raises(ConcurrentModificationError):
        next(it)

    # A fresh iterator only cares about changes made after it was created.
    assert list(lst) == [Neighbor(1, 1)]


def test_concurrent_modification_is_a_runtime_error():
    lst = NeighborList()
    lst.add_back(1, 1)
    it = iter(lst)
    lst.add_back(2, 2)
    with pytest.raises(RuntimeError):
        next(it)


def test_repr_does_not_reset_pending_modification():
    lst = NeighborList()
    lst.add_back(1, 1)
    it = iter(lst)
    lst.add_back(2, 2)

    assert repr(lst) == "NeighborList([1:1, 2:2])"
    with pytest.raises(ConcurrentModificationError):
        next(it)
