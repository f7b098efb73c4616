"""Cycle detection in directed graphs using DFS three-color marking.

The three colors:
  WHITE  -- vertex not yet visited
  GRAY   -- vertex is on the current DFS path
  BLACK  -- vertex fully explored (all descendants visited)

An edge into a GRAY vertex is a back edge, and a back edge means the
graph has a cycle.  When we find one we walk the parent links back to
the GRAY vertex so the caller gets the actual loop, not just a yes/no.

dag_shortest_paths does not check for cycles; this is the tool for
callers who want to verify that precondition themselves.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from digraph_lite.graph.view import Edge, GraphView, Vertex

WHITE, GRAY, BLACK = 0, 1, 2


@dataclass(slots=True)
class CycleResult:
    """Result of cycle detection."""
    has_cycle: bool
    cycle_path: list[Vertex] | None = None


def find_cycle(g: GraphView) -> CycleResult:
    """Detect whether *g* contains a directed cycle.

    Returns a CycleResult with has_cycle=True and the cycle path if one
    exists.  The cycle path is a list [v0, v1, ..., vk, v0] where each
    consecutive pair is joined by an edge of *g*.
    """
    n = g.num_vertices
    color = [WHITE] * n
    parent: list[Vertex | None] = [None] * n

    for root in range(n):
        if color[root] != WHITE:
            continue
        color[root] = GRAY
        stack: list[tuple[Vertex, Iterator[Edge]]] = [
            (root, iter(g.out_edges(root)))
        ]
        while stack:
            v, edges = stack[-1]
            for e in edges:
                w = g.target(e)
                if color[w] == GRAY:
                    return CycleResult(True, _unwind(parent, v, w))
                if color[w] == WHITE:
                    color[w] = GRAY
                    parent[w] = v
                    stack.append((w, iter(g.out_edges(w))))
                    break
            else:
                color[v] = BLACK
                stack.pop()

    return CycleResult(has_cycle=False, cycle_path=None)


def _unwind(parent: list[Vertex | None], tail: Vertex, head: Vertex) -> list[Vertex]:
    """Rebuild the loop closed by back edge tail -> head."""
    path = [tail]
    cur = tail
    while cur != head:
        cur = parent[cur]  # type: ignore[assignment]
        path.append(cur)
    path.reverse()
    path.append(head)
    return path
