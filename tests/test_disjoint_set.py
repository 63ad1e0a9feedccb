"""
Unit tests for ArrayDisjointSet.
"""

import random

import pytest

from graphcore.disjoint_set import ArrayDisjointSet
from graphcore.errors import DuplicateItemError, SameComponentError, UnknownItemError


def test_make_set_creates_singletons():
    ds = ArrayDisjointSet()
    for item in "abc":
        ds.make_set(item)

    assert len(ds) == 3
    assert len({ds.find_set(item) for item in "abc"}) == 3
    assert "a" in ds
    assert "z" not in ds


def test_duplicate_make_set_raises():
    ds = ArrayDisjointSet()
    ds.make_set("a")

    with pytest.raises(DuplicateItemError):
        ds.make_set("a")
    assert len(ds) == 1


def test_unknown_item_raises():
    ds = ArrayDisjointSet()
    ds.make_set("a")

    with pytest.raises(UnknownItemError):
        ds.find_set("b")
    with pytest.raises(UnknownItemError):
        ds.union("a", "b")


def test_union_joins_components():
    ds = ArrayDisjointSet()
    for item in range(4):
        ds.make_set(item)

    ds.union(0, 1)
    assert ds.find_set(0) == ds.find_set(1)
    assert ds.find_set(2) != ds.find_set(0)

    ds.union(2, 3)
    ds.union(1, 3)
    assert len({ds.find_set(i) for i in range(4)}) == 1


def test_find_set_is_idempotent():
    ds = ArrayDisjointSet()
    for item in range(6):
        ds.make_set(item)
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(0, 3)

    first = [ds.find_set(i) for i in range(6)]
    second = [ds.find_set(i) for i in range(6)]
    assert first == second


def test_union_of_joined_items_raises():
    ds = ArrayDisjointSet()
    for item in "abc":
        ds.make_set(item)
    ds.union("a", "b")
    ds.union("b", "c")

    with pytest.raises(SameComponentError):
        ds.union("a", "c")
    with pytest.raises(SameComponentError):
        ds.union("a", "a")


def test_union_by_rank():
    """Equal ranks grow the first root; a lower rank hangs under a higher one."""
    ds = ArrayDisjointSet()
    for item in "abcd":
        ds.make_set(item)

    ds.union("a", "b")
    assert ds.rank_of("a") == 1
    assert ds.find_set("b") == ds.find_set("a")

    ds.union("c", "a")
    # c has rank 0, so it joins under a's root without raising the rank
    assert ds.find_set("c") == ds.find_set("a")
    assert ds.rank_of("c") == 1

    ds.union("d", "a")
    assert ds.rank_of("d") == 1


def test_path_compression_flattens_chain():
    ds = ArrayDisjointSet()
    for item in range(8):
        ds.make_set(item)
    # Build a tree of height 3 via balanced unions.
    ds.union(0, 1)
    ds.union(2, 3)
    ds.union(4, 5)
    ds.union(6, 7)
    ds.union(0, 2)
    ds.union(4, 6)
    ds.union(0, 4)

    # 7 -> 6 -> 4 -> 0 before the lookup
    assert int(ds._parent[7]) == 6
    root = ds.find_set(7)
    assert root == 0
    assert int(ds._parent[7]) == root
    assert int(ds._parent[6]) == root
    assert {ds.find_set(i) for i in range(8)} == {root}


def test_capacity_grows_by_doubling():
    ds = ArrayDisjointSet(capacity=2)
    for item in range(5):
        ds.make_set(item)

    assert ds.capacity == 8
    assert len(ds) == 5
    assert len({ds.find_set(i) for i in range(5)}) == 5


def test_components_match_random_unions():
    """Random unions partition items the same way a naive labelling does."""
    rng = random.Random(3)
    n = 60
    ds = ArrayDisjointSet()
    labels = list(range(n))
    for item in range(n):
        ds.make_set(item)

    for _ in range(40):
        a, b = rng.randrange(n), rng.randrange(n)
        if ds.connected(a, b):
            assert labels[a] == labels[b]
            continue
        ds.union(a, b)
        old, new = labels[b], labels[a]
        labels = [new if label == old else label for label in labels]

    for a in range(n):
        for b in range(n):
            assert ds.connected(a, b) == (labels[a] == labels[b])

    groups = ds.components()
    assert sum(len(members) for members in groups.values()) == n
    assert len(groups) == len(set(labels))
