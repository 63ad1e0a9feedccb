"""
Array-backed binary min-heap.

Backs the edge selection in Kruskal's algorithm and the optional heap
frontier of the shortest-path search.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, Iterable, List, Optional, TypeVar

from .errors import EmptyQueueError

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class PriorityQueue(ABC, Generic[T]):
    """
    Interface for a min-priority queue over totally ordered items.
    """

    @abstractmethod
    def insert(self, item: T) -> None:
        """Add item to the queue."""
        raise NotImplementedError

    @abstractmethod
    def peek_min(self) -> T:
        """
        Return the smallest item without removing it.

        Raises:
            EmptyQueueError: if the queue holds no items.
        """
        raise NotImplementedError

    @abstractmethod
    def remove_min(self) -> T:
        """
        Remove and return the smallest item.

        Raises:
            EmptyQueueError: if the queue holds no items.
        """
        raise NotImplementedError

    @abstractmethod
    def size(self) -> int:
        raise NotImplementedError

    def is_empty(self) -> bool:
        return self.size() == 0

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.is_empty()


class ArrayHeap(PriorityQueue[T]):
    """
    Binary min-heap stored in a list used as a fixed-capacity array.

    The children of slot i live at 2i + 1 and 2i + 2. Slots at or past
    ``size()`` are unused and always hold None. When every slot is in use the
    array doubles in length. Items compare with ``<`` unless a ``key``
    callable is given, in which case ``key(a) < key(b)`` is used.

    No stability is promised between items that compare equal.
    """

    def __init__(
        self,
        items: Optional[Iterable[T]] = None,
        key: Optional[Callable[[T], Any]] = None,
        capacity: int = DEFAULT_CAPACITY,
    ) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self._key = key
        self._heap: List[Optional[T]] = [None] * capacity
        self._size = 0
        if items is not None:
            for item in items:
                self.insert(item)

    # --- PriorityQueue interface ---------------------------------------------

    def insert(self, item: T) -> None:
        if self._size == len(self._heap):
            self._grow()
        self._heap[self._size] = item
        self._size += 1
        self._sift_up(self._size - 1)

    def peek_min(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("peek_min on an empty heap")
        return self._heap[0]

    def remove_min(self) -> T:
        if self._size == 0:
            raise EmptyQueueError("remove_min on an empty heap")
        heap = self._heap
        root = heap[0]
        last = self._size - 1
        heap[0] = heap[last]
        heap[last] = None
        self._size = last
        if self._size > 1:
            self._sift_down(0)
        return root

    def size(self) -> int:
        return self._size

    # --- Introspection -------------------------------------------------------

    @property
    def capacity(self) -> int:
        """Length of the backing array, including unused slots."""
        return len(self._heap)

    # --- Internals -----------------------------------------------------------

    def _less(self, a: T, b: T) -> bool:
        if self._key is None:
            return a < b
        return self._key(a) < self._key(b)

    def _grow(self) -> None:
        grown: List[Optional[T]] = self._heap + [None] * len(self._heap)
        self._heap = grown

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        item = heap[index]
        while index > 0:
            parent = (index - 1) // 2
            if not self._less(item, heap[parent]):
                break
            heap[index] = heap[parent]
            index = parent
        heap[index] = item

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = self._size
        item = heap[index]
        while True:
            child = 2 * index + 1
            if child >= size:
                break
            right = child + 1
            if right < size and self._less(heap[right], heap[child]):
                child = right
            if not self._less(heap[child], item):
                break
            heap[index] = heap[child]
            index = child
        heap[index] = item
