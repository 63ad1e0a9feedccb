"""
Undirected, weighted graph over hashable vertices.

Each vertex is given a dense integer id at construction, and adjacency is
stored as id -> list of AdjacencyEntry. The graph is immutable once built and
answers two queries:

- minimum_spanning_tree: Kruskal's algorithm over an ArrayHeap of edges, with
  an ArrayDisjointSet rejecting cycle-closing edges.
- shortest_path: Dijkstra relaxation; the frontier is a linear scan by
  default, or an ArrayHeap with lazy deletion.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, Hashable, Iterable, List, Optional, Sequence, Set, TypeVar
import logging
import math

from .disjoint_set import ArrayDisjointSet
from .edges import Edge
from .errors import InvalidEdgeError, KeyNotFoundError, NoPathExistsError
from .heap import ArrayHeap

logger = logging.getLogger(__name__)

V = TypeVar("V", bound=Hashable)
E = TypeVar("E", bound=Edge)


class FrontierPolicy(Enum):
    """
    How shortest_path picks the next vertex to settle.

    LINEAR_SCAN: scan every frontier vertex, O(V) per pick and O(V^2) overall.
    BINARY_HEAP: pop from an ArrayHeap keyed on (distance, id), O(E log V).

    Both settle vertices in the same order, so paths are identical.
    """

    LINEAR_SCAN = "linear_scan"
    BINARY_HEAP = "binary_heap"


@dataclass(frozen=True)
class AdjacencyEntry(Generic[V, E]):
    """One neighbour of a vertex, reached through edge."""

    neighbor_id: int
    neighbor: V
    edge: E


@dataclass
class PathNode:
    """Working state for one vertex during a shortest-path search."""

    distance: float = math.inf
    predecessor: Optional[int] = None


class Graph(Generic[V, E]):
    """
    Undirected, weighted graph, possibly with self-loops, parallel edges and
    unconnected components.
    """

    def __init__(self, vertices: Sequence[V], edges: Sequence[E]) -> None:
        """
        Build the graph from vertex and edge sequences.

        Vertex ids follow the order of ``vertices``; a vertex repeated in the
        input keeps the id of its first occurrence.

        Raises:
            InvalidEdgeError: if an edge touches a vertex not in ``vertices``,
                or its weight is negative or not finite.
        """
        vertex_list: List[V] = []
        ids: Dict[V, int] = {}
        for vertex in vertices:
            if vertex not in ids:
                ids[vertex] = len(vertex_list)
                vertex_list.append(vertex)

        edge_list: List[E] = list(edges)
        adjacency: List[List[AdjacencyEntry[V, E]]] = [[] for _ in vertex_list]
        for edge in edge_list:
            u, v = edge.vertex1, edge.vertex2
            if u not in ids or v not in ids:
                raise InvalidEdgeError(f"edge {edge!r} references a vertex not in the graph")
            weight = edge.weight
            if not math.isfinite(weight) or weight < 0:
                raise InvalidEdgeError(f"edge {edge!r} has invalid weight {weight!r}")

            u_id, v_id = ids[u], ids[v]
            adjacency[u_id].append(AdjacencyEntry(v_id, v, edge))
            if u_id != v_id:
                adjacency[v_id].append(AdjacencyEntry(u_id, u, edge))

        self._vertices = vertex_list
        self._edges = edge_list
        self._ids = ids
        self._adjacency = adjacency
        logger.debug("built graph with %d vertices and %d edges", len(vertex_list), len(edge_list))

    @classmethod
    def from_sets(cls, vertices: Iterable[V], edges: Iterable[E]) -> "Graph[V, E]":
        """
        Build a graph from unordered collections.

        Ids then follow the collections' iteration order, which is only
        stable within one run.
        """
        return cls(list(vertices), list(edges))

    # --- Basic queries -------------------------------------------------------

    def num_vertices(self) -> int:
        return len(self._vertices)

    def num_edges(self) -> int:
        return len(self._edges)

    def vertices(self) -> List[V]:
        """Distinct vertices in id order."""
        return list(self._vertices)

    def edges(self) -> List[E]:
        """Edges in input order."""
        return list(self._edges)

    def vertex_id(self, vertex: V) -> int:
        """
        Dense id assigned to vertex.

        Raises:
            KeyNotFoundError: if vertex is not in the graph.
        """
        try:
            return self._ids[vertex]
        except KeyError:
            raise KeyNotFoundError(vertex) from None

    def adjacent(self, vertex: V) -> List[AdjacencyEntry[V, E]]:
        """Adjacency entries of vertex; a self-loop appears once."""
        return list(self._adjacency[self.vertex_id(vertex)])

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._ids

    # --- Minimum spanning tree -----------------------------------------------

    def minimum_spanning_tree(self) -> Set[E]:
        """
        Return the edges of a minimum spanning tree.

        If several spanning trees share the minimum weight, any one may be
        returned. On a graph with unconnected components the result is a
        minimum spanning forest with fewer than |V| - 1 edges.
        """
        forest: ArrayDisjointSet[V] = ArrayDisjointSet(capacity=max(len(self._vertices), 1))
        for vertex in self._vertices:
            forest.make_set(vertex)

        edge_heap: ArrayHeap[E] = ArrayHeap(capacity=max(len(self._edges), 1))
        for edge in self._edges:
            edge_heap.insert(edge)

        target = len(self._vertices) - 1
        result: Set[E] = set()
        accepted = 0
        while accepted < target and not edge_heap.is_empty():
            edge = edge_heap.remove_min()
            if forest.find_set(edge.vertex1) != forest.find_set(edge.vertex2):
                forest.union(edge.vertex1, edge.vertex2)
                result.add(edge)
                accepted += 1

        if accepted < target:
            logger.debug("graph is disconnected; spanning forest has %d of %d edges", accepted, target)
        else:
            logger.debug("spanning tree has %d edges", accepted)
        return result

    # --- Shortest paths ------------------------------------------------------

    def shortest_path(
        self,
        start: V,
        end: V,
        frontier: FrontierPolicy = FrontierPolicy.LINEAR_SCAN,
    ) -> List[E]:
        """
        Return the edges of a shortest path from start to end.

        The first edge leaves start and the last one reaches end. The result
        is empty when start == end.

        Raises:
            KeyNotFoundError: if start or end is not in the graph.
            NoPathExistsError: if end cannot be reached from start.
        """
        start_id = self.vertex_id(start)
        end_id = self.vertex_id(end)
        if start_id == end_id:
            return []

        nodes = self._search(start_id, frontier)
        if math.isinf(nodes[end_id].distance):
            raise NoPathExistsError(f"no path from {start!r} to {end!r}")

        path = self._trace(nodes, end_id)
        logger.debug(
            "shortest path %r -> %r: %d edges, distance %s",
            start, end, len(path), nodes[end_id].distance,
        )
        return path

    def shortest_distance(
        self,
        start: V,
        end: V,
        frontier: FrontierPolicy = FrontierPolicy.LINEAR_SCAN,
    ) -> float:
        """
        Total weight of a shortest path from start to end.

        Raises:
            KeyNotFoundError: if start or end is not in the graph.
            NoPathExistsError: if end cannot be reached from start.
        """
        start_id = self.vertex_id(start)
        end_id = self.vertex_id(end)
        if start_id == end_id:
            return 0.0
        distance = self._search(start_id, frontier)[end_id].distance
        if math.isinf(distance):
            raise NoPathExistsError(f"no path from {start!r} to {end!r}")
        return distance

    def _search(self, start_id: int, frontier: FrontierPolicy) -> List[PathNode]:
        nodes = [PathNode() for _ in self._vertices]
        nodes[start_id].distance = 0.0
        if frontier is FrontierPolicy.BINARY_HEAP:
            self._relax_with_heap(nodes, start_id)
        else:
            self._relax_with_scan(nodes, start_id)
        return nodes

    def _relax(self, nodes: List[PathNode], u_id: int, settled: List[bool]) -> List[int]:
        """Relax every edge out of u_id; return the ids whose distance dropped."""
        improved: List[int] = []
        d_u = nodes[u_id].distance
        for entry in self._adjacency[u_id]:
            v_id = entry.neighbor_id
            if settled[v_id]:
                continue
            alt = d_u + entry.edge.weight
            if alt < nodes[v_id].distance:
                nodes[v_id].distance = alt
                nodes[v_id].predecessor = u_id
                improved.append(v_id)
        return improved

    def _relax_with_scan(self, nodes: List[PathNode], start_id: int) -> None:
        settled = [False] * len(nodes)
        unprocessed: Set[int] = {start_id}
        while unprocessed:
            u_id = min(unprocessed, key=lambda i: (nodes[i].distance, i))
            unprocessed.remove(u_id)
            settled[u_id] = True
            unprocessed.update(self._relax(nodes, u_id, settled))

    def _relax_with_heap(self, nodes: List[PathNode], start_id: int) -> None:
        settled = [False] * len(nodes)
        pq: ArrayHeap[tuple[float, int]] = ArrayHeap([(0.0, start_id)])
        while not pq.is_empty():
            d_u, u_id = pq.remove_min()
            # Skip outdated entries
            if settled[u_id] or d_u != nodes[u_id].distance:
                continue
            settled[u_id] = True
            for v_id in self._relax(nodes, u_id, settled):
                pq.insert((nodes[v_id].distance, v_id))

    def _trace(self, nodes: List[PathNode], end_id: int) -> List[E]:
        path: List[E] = []
        current = end_id
        while nodes[current].predecessor is not None:
            previous = nodes[current].predecessor
            path.append(self._cheapest_edge(previous, current))
            current = previous
        path.reverse()
        return path

    def _cheapest_edge(self, from_id: int, to_id: int) -> E:
        best: Optional[E] = None
        for entry in self._adjacency[from_id]:
            if entry.neighbor_id == to_id and (best is None or entry.edge.weight < best.weight):
                best = entry.edge
        if best is None:
            raise KeyNotFoundError((from_id, to_id))
        return best


def path_weight(edges: Iterable[Edge]) -> float:
    """Sum of the weights of edges."""
    return float(sum(edge.weight for edge in edges))
