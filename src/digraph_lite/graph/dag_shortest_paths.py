"""Single-source shortest (and longest) paths on a weighted DAG.

Algorithm:
  1.  DFS from the source, recording vertices in post-order.  Reversed,
      that list is a topological order of everything reachable.
  2.  Set dist[source] = 0; every other vertex starts unreachable.
  3.  Walk the topological order.  For each vertex u, for each outgoing
      edge e = u -> v, relax: dist[v] = min(dist[v], dist[u] + weight[e]).

Because every predecessor of v is finalized before v is reached, one
pass is enough.  O(V + E), and unlike Dijkstra negative weights are
fine.

Swapping min for max gives the longest paths instead (the classic
critical-path computation).  That is the same routine with a different
comparison, exposed as dag_longest_paths.

Precondition: the subgraph reachable from *source* is acyclic.  This is
NOT checked -- a cycle yields meaningless distances.  Use
topological_sort or find_cycle first if you are not sure.

Unreachable vertices get None rather than a numeric "infinity", so the
routine works for int and float weights alike.
"""
from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from digraph_lite.graph.topological import reverse_postorder
from digraph_lite.graph.view import GraphView, Vertex

W = TypeVar("W", int, float)


def _relax_in_topological_order(
    g: GraphView,
    source: Vertex,
    weight: Sequence[W],
    better: Callable[[W, W], bool],
) -> list[W | None]:
    if g.num_vertices == 0:
        return []
    dist: list[W | None] = [None] * g.num_vertices
    dist[source] = 0  # type: ignore[assignment]

    for u in reversed(reverse_postorder(g, source)):
        du = dist[u]
        for e in g.out_edges(u):
            v = g.target(e)
            candidate = du + weight[e]  # type: ignore[operator]
            current = dist[v]
            if current is None or better(candidate, current):
                dist[v] = candidate
    return dist


def dag_shortest_paths(
    g: GraphView, source: Vertex, weight: Sequence[W]
) -> list[W | None]:
    """Shortest distance from *source* to every vertex of DAG *g*.

    *weight* is indexed by edge id.  Returns a new list indexed by vertex
    id; dist[source] == 0 and unreachable vertices hold None.  An empty
    graph gives [] whatever *source* is.
    """
    return _relax_in_topological_order(g, source, weight, lambda a, b: a < b)


def dag_longest_paths(
    g: GraphView, source: Vertex, weight: Sequence[W]
) -> list[W | None]:
    """Longest distance from *source* to every vertex of DAG *g*.

    Same contract as dag_shortest_paths with the relaxation flipped.
    """
    return _relax_in_topological_order(g, source, weight, lambda a, b: a > b)
