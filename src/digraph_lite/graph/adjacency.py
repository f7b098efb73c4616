"""Directed multigraph with dense integer ids, backed by adjacency lists.

Vertices are the integers 0..n-1.  Every call to add_edge allocates the
next edge id, so edge ids are dense and follow insertion order.  Edge
endpoints are stored in two parallel lists indexed by edge id, and each
vertex keeps the list of its outgoing edge ids.  That layout answers
source(e), target(e), and out_edges(v) in O(1) and is exactly the
GraphView capability set.

Parallel edges and self-loops are allowed.  There is deliberately no
removal API: edge ids must stay stable once handed to a weight map.
"""
from __future__ import annotations

from typing import Iterable, Iterator

from digraph_lite.graph.view import Edge, Vertex


class AdjacencyList:
    """Growable directed graph satisfying the GraphView protocol."""

    __slots__ = ("_out", "_src", "_dst")

    def __init__(self, num_vertices: int = 0) -> None:
        if num_vertices < 0:
            raise ValueError(f"num_vertices must be >= 0, got {num_vertices}")
        self._out: list[list[Edge]] = [[] for _ in range(num_vertices)]
        self._src: list[Vertex] = []
        self._dst: list[Vertex] = []

    @classmethod
    def from_edges(
        cls, num_vertices: int, edges: Iterable[tuple[Vertex, Vertex]]
    ) -> AdjacencyList:
        """Build a graph with *num_vertices* vertices and the given edges.

        Edge ids are assigned in iteration order of *edges*.
        """
        g = cls(num_vertices)
        for u, v in edges:
            g.add_edge(u, v)
        return g

    # ---- construction ----------------------------------------------------

    def add_vertex(self) -> Vertex:
        """Append a new isolated vertex and return its id."""
        self._out.append([])
        return len(self._out) - 1

    def add_edge(self, u: Vertex, v: Vertex) -> Edge:
        """Add a directed edge u -> v and return its edge id."""
        self._check_vertex(u)
        self._check_vertex(v)
        e = len(self._src)
        self._src.append(u)
        self._dst.append(v)
        self._out[u].append(e)
        return e

    def add_bidir_edge(self, u: Vertex, v: Vertex) -> tuple[Edge, Edge]:
        """Add u -> v and v -> u; return both edge ids in that order."""
        return self.add_edge(u, v), self.add_edge(v, u)

    def _check_vertex(self, v: Vertex) -> None:
        if not 0 <= v < len(self._out):
            raise ValueError(
                f"Vertex {v!r} not found (graph has {len(self._out)} vertices)"
            )

    # ---- GraphView -------------------------------------------------------

    @property
    def num_vertices(self) -> int:
        return len(self._out)

    @property
    def num_edges(self) -> int:
        return len(self._src)

    def out_edges(self, v: Vertex) -> list[Edge]:
        return self._out[v]

    def source(self, e: Edge) -> Vertex:
        return self._src[e]

    def target(self, e: Edge) -> Vertex:
        return self._dst[e]

    # ---- queries ---------------------------------------------------------

    def successors(self, v: Vertex) -> list[Vertex]:
        """Targets of v's outgoing edges, in edge-id order."""
        return [self._dst[e] for e in self._out[v]]

    def out_degree(self, v: Vertex) -> int:
        return len(self._out[v])

    def has_edge(self, u: Vertex, v: Vertex) -> bool:
        return any(self._dst[e] == v for e in self._out[u])

    def edges(self) -> Iterator[tuple[Vertex, Vertex]]:
        """(source, target) pairs in edge-id order."""
        return zip(self._src, self._dst)

    # ---- dunder ----------------------------------------------------------

    def __len__(self) -> int:
        return self.num_vertices

    def __repr__(self) -> str:
        return f"AdjacencyList(vertices={self.num_vertices}, edges={self.num_edges})"
