"""The read-only graph capability every algorithm in this package runs on.

A graph view exposes dense integer ids: vertices live in
[0, num_vertices) and edges in [0, num_edges).  Each edge knows its
endpoints, and each vertex can enumerate the ids of its outgoing edges.
That is the whole contract -- no labels, no mutation, no storage
format.  Anything that provides these five members can be handed to
dag_shortest_paths, floyd_warshall, or strong_components.

Invariant: every edge id yielded by out_edges(v) has source(e) == v.
The view must not change while an algorithm is running.
"""
from __future__ import annotations

from typing import Iterable, Protocol, TypeAlias, runtime_checkable

Vertex: TypeAlias = int
Edge: TypeAlias = int


@runtime_checkable
class GraphView(Protocol):
    """Structural type for a directed graph with dense vertex/edge ids."""

    @property
    def num_vertices(self) -> int: ...

    @property
    def num_edges(self) -> int: ...

    def out_edges(self, v: Vertex) -> Iterable[Edge]: ...

    def source(self, e: Edge) -> Vertex: ...

    def target(self, e: Edge) -> Vertex: ...
