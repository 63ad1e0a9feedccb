"""
Generators for randomly weighted graphs.

A grid with uniform random weights is the classic input for carving a maze
out of its minimum spanning tree.
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from .edges import WeightedEdge
from .graph import Graph

Cell = Tuple[int, int]


def grid_graph(rows: int, cols: int, seed: int | None = None) -> Graph[Cell, WeightedEdge]:
    """
    Build a rows x cols grid joining each cell to its right and lower neighbours.

    Args:
        rows: number of grid rows.
        cols: number of grid columns.
        seed: RNG seed for reproducible weights, drawn uniformly from [0, 1).
    """
    if rows < 0 or cols < 0:
        raise ValueError("grid dimensions must be non-negative")

    rng = np.random.default_rng(seed)
    vertices: List[Cell] = [(r, c) for r in range(rows) for c in range(cols)]
    edges: List[WeightedEdge] = []
    for r, c in vertices:
        if c + 1 < cols:
            edges.append(WeightedEdge((r, c), (r, c + 1), float(rng.random())))
        if r + 1 < rows:
            edges.append(WeightedEdge((r, c), (r + 1, c), float(rng.random())))
    return Graph(vertices, edges)


def complete_graph(n: int, seed: int | None = None) -> Graph[int, WeightedEdge]:
    """
    Build a complete graph on vertices 0..n-1 with uniform random weights.
    """
    if n < 0:
        raise ValueError("n must be non-negative")

    rng = np.random.default_rng(seed)
    weights = rng.random((n, n))
    edges = [
        WeightedEdge(i, j, float(weights[i, j]))
        for i in range(n)
        for j in range(i + 1, n)
    ]
    return Graph(list(range(n)), edges)
