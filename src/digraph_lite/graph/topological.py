"""Topological orderings over a GraphView.

Two flavours live here because they answer different questions:

reverse_postorder(g, source)
    DFS from a single source, emitting each vertex only after every
    vertex reachable from it has been emitted.  Reversed, the list is a
    topological order of the subgraph reachable from *source* -- which
    is all DAG shortest paths needs.  It does not look for cycles.

topological_sort(g)
    Kahn's algorithm over the whole graph (BFS with in-degree
    tracking).  Because it counts how many vertices it managed to
    release, it doubles as a cycle check, so callers who are not sure
    their graph is acyclic can validate it up front.

The DFS uses an explicit stack of (vertex, out-edge iterator) frames
instead of recursion.  A 100k-vertex chain would blow through Python's
default recursion limit (1000) long before it got interesting.
"""
from __future__ import annotations

from collections import deque
from typing import Iterator

from digraph_lite.graph.view import Edge, GraphView, Vertex


class NotADAGError(Exception):
    """Raised when topological_sort finds a cycle."""

    def __init__(self, remaining_vertices: list[Vertex]) -> None:
        self.remaining_vertices = remaining_vertices
        super().__init__(
            f"Cycle detected: {len(remaining_vertices)} vertex(es) could not "
            f"be ordered"
        )


def reverse_postorder(g: GraphView, source: Vertex) -> list[Vertex]:
    """Vertices reachable from *source* in DFS post-order.

    The name is about how the result is used: read it back to front to
    get a topological order.  Each vertex appears exactly once.  An
    empty graph has no source to start from and yields [].
    """
    if g.num_vertices == 0:
        return []
    visited = [False] * g.num_vertices
    order: list[Vertex] = []

    visited[source] = True
    stack: list[tuple[Vertex, Iterator[Edge]]] = [
        (source, iter(g.out_edges(source)))
    ]
    while stack:
        v, edges = stack[-1]
        for e in edges:
            w = g.target(e)
            if not visited[w]:
                visited[w] = True
                stack.append((w, iter(g.out_edges(w))))
                break
        else:
            # every child finished -> v is done
            stack.pop()
            order.append(v)
    return order


def topological_sort(g: GraphView) -> list[Vertex]:
    """Return every vertex in an order where all edges point forward.

    Raises NotADAGError if the graph contains a cycle (self-loops
    included).
    """
    n = g.num_vertices
    in_deg = [0] * n
    for e in range(g.num_edges):
        in_deg[g.target(e)] += 1

    q: deque[Vertex] = deque(v for v in range(n) if in_deg[v] == 0)

    result: list[Vertex] = []
    while q:
        v = q.popleft()
        result.append(v)
        for e in g.out_edges(v):
            w = g.target(e)
            in_deg[w] -= 1
            if in_deg[w] == 0:
                q.append(w)

    if len(result) != n:
        ordered = set(result)
        raise NotADAGError([v for v in range(n) if v not in ordered])

    return result
