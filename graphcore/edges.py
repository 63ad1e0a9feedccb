"""Edge contract and the default weighted edge implementation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Protocol, Tuple


class Edge(Protocol):
    """Capability set every edge passed to a Graph must provide.

    An edge connects ``vertex1`` and ``vertex2`` with a non-negative
    ``weight``. Edges must be totally ordered consistently with their weight
    so a priority queue can hand them out cheapest first; an implementation
    may break ties deterministically if reproducible spanning trees matter.
    """

    @property
    def vertex1(self) -> Hashable:
        ...

    @property
    def vertex2(self) -> Hashable:
        ...

    @property
    def weight(self) -> float:
        ...

    def __lt__(self, other: Any) -> bool:
        ...


@dataclass(frozen=True)
class WeightedEdge:
    """
    Undirected edge between two hashable vertices.

    Ordering compares weight only; equality and hashing cover all fields, so
    two parallel edges with the same weight are equal values.
    """

    vertex1: Hashable
    vertex2: Hashable
    weight: float = 1.0

    @property
    def endpoints(self) -> Tuple[Hashable, Hashable]:
        return self.vertex1, self.vertex2

    def is_self_loop(self) -> bool:
        return self.vertex1 == self.vertex2

    def __lt__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight < other.weight

    def __le__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight <= other.weight

    def __gt__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight > other.weight

    def __ge__(self, other: "WeightedEdge") -> bool:
        if not isinstance(other, WeightedEdge):
            return NotImplemented
        return self.weight >= other.weight
