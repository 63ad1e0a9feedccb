"""
Union-find over arbitrary hashable items.

Items are mapped to dense integer ids on registration; the forest itself
lives in two parallel numpy arrays indexed by those ids:

- ``parent[i]`` is ``ROOT`` when i is a tree root, otherwise i's parent id.
- ``rank[i]`` is an upper bound on the height of i's tree, read only while i
  is a root.

find_set compresses paths fully and union attaches by rank, which keeps both
operations amortized near O(1).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Generic, Hashable, Set, TypeVar

import numpy as np

from .errors import DuplicateItemError, SameComponentError, UnknownItemError

T = TypeVar("T", bound=Hashable)

ROOT = -1
DEFAULT_CAPACITY = 10


class DisjointSet(ABC, Generic[T]):
    """
    Interface for a partition of registered items into disjoint components.
    """

    @abstractmethod
    def make_set(self, item: T) -> None:
        """
        Register item as a new singleton component.

        Raises:
            DuplicateItemError: if item is already registered.
        """
        raise NotImplementedError

    @abstractmethod
    def find_set(self, item: T) -> int:
        """
        Return the representative id of item's component.

        Raises:
            UnknownItemError: if item was never registered.
        """
        raise NotImplementedError

    @abstractmethod
    def union(self, item1: T, item2: T) -> None:
        """
        Merge the components containing item1 and item2.

        Raises:
            UnknownItemError: if either item was never registered.
            SameComponentError: if both items already share a component.
        """
        raise NotImplementedError

    def connected(self, item1: T, item2: T) -> bool:
        """True if both items are in the same component."""
        return self.find_set(item1) == self.find_set(item2)


class ArrayDisjointSet(DisjointSet[T]):
    """Array-backed union-find with full path compression and union by rank."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._ids: Dict[T, int] = {}
        self._parent = np.full(capacity, ROOT, dtype=np.int64)
        self._rank = np.zeros(capacity, dtype=np.int64)
        self._next_id = 0

    # --- DisjointSet interface -----------------------------------------------

    def make_set(self, item: T) -> None:
        if item in self._ids:
            raise DuplicateItemError(f"item already registered: {item!r}")
        index = self._next_id
        if index >= len(self._parent):
            self._grow()
        self._ids[item] = index
        self._parent[index] = ROOT
        self._rank[index] = 0
        self._next_id += 1

    def find_set(self, item: T) -> int:
        return self._find_root(self._id_of(item))

    def union(self, item1: T, item2: T) -> None:
        root1 = self.find_set(item1)
        root2 = self.find_set(item2)
        if root1 == root2:
            raise SameComponentError(
                f"{item1!r} and {item2!r} are already in component {root1}"
            )

        rank1 = self._rank[root1]
        rank2 = self._rank[root2]
        if rank1 < rank2:
            self._parent[root1] = root2
        elif rank1 > rank2:
            self._parent[root2] = root1
        else:
            self._parent[root2] = root1
            self._rank[root1] = rank1 + 1

    # --- Introspection -------------------------------------------------------

    def __contains__(self, item: object) -> bool:
        return item in self._ids

    def __len__(self) -> int:
        return self._next_id

    @property
    def capacity(self) -> int:
        """Length of the backing arrays."""
        return len(self._parent)

    def rank_of(self, item: T) -> int:
        """Rank of the root of item's component."""
        return int(self._rank[self.find_set(item)])

    def components(self) -> Dict[int, Set[T]]:
        """
        Group every registered item by its representative id.

        Returns:
            Mapping from each root id to the items in that component.
        """
        groups: Dict[int, Set[T]] = {}
        for item, index in self._ids.items():
            groups.setdefault(self._find_root(index), set()).add(item)
        return groups

    # --- Internals -----------------------------------------------------------

    def _id_of(self, item: T) -> int:
        try:
            return self._ids[item]
        except KeyError:
            raise UnknownItemError(item) from None

    def _find_root(self, index: int) -> int:
        parent = self._parent
        root = index
        while parent[root] != ROOT:
            root = int(parent[root])

        # Point every node on the walked chain directly at the root.
        current = index
        while current != root:
            next_index = int(parent[current])
            if next_index != root:
                parent[current] = root
            current = next_index
        return root

    def _grow(self) -> None:
        size = len(self._parent)
        parent = np.full(2 * size, ROOT, dtype=np.int64)
        rank = np.zeros(2 * size, dtype=np.int64)
        parent[:size] = self._parent
        rank[:size] = self._rank
        self._parent = parent
        self._rank = rank
