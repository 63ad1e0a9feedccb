"""Graph algorithms over hand-rolled heap and union-find containers."""

from .disjoint_set import ArrayDisjointSet, DisjointSet
from .edges import Edge, WeightedEdge
from .errors import (
    ConfigError,
    DuplicateItemError,
    EmptyQueueError,
    GraphCoreError,
    InvalidEdgeError,
    KeyNotFoundError,
    NoPathExistsError,
    SameComponentError,
    UnknownItemError,
)
from .graph import AdjacencyEntry, FrontierPolicy, Graph, path_weight
from .heap import ArrayHeap, PriorityQueue

__all__ = [
    "Graph",
    "FrontierPolicy",
    "AdjacencyEntry",
    "path_weight",
    "Edge",
    "WeightedEdge",
    "PriorityQueue",
    "ArrayHeap",
    "DisjointSet",
    "ArrayDisjointSet",
    "GraphCoreError",
    "DuplicateItemError",
    "UnknownItemError",
    "SameComponentError",
    "EmptyQueueError",
    "InvalidEdgeError",
    "NoPathExistsError",
    "KeyNotFoundError",
    "ConfigError",
]
