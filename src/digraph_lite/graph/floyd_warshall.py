"""All-pairs shortest paths via Floyd-Warshall, with path reconstruction.

Dense dynamic programming: after round k, dist[i][j] is the shortest
i -> j distance using only intermediate vertices from {0, ..., k}.
O(V^3) time and O(V^2) space, so this is the right tool for small or
dense graphs.  For big sparse graphs run a single-source algorithm per
vertex instead.

Alongside the distances we keep a next-hop table: next_hop[i][j] is the
vertex to step to when walking the shortest path from i toward j.  When
round k improves dist[i][j] we copy next_hop[i][k] -- the first step
towards k is also the first step of the new, longer-reaching path.
That keeps the table chainable, which is what reconstruct_path relies
on.

Both "no path" and "no next hop" are represented as None.  The inner
loops skip None entries entirely; that is what keeps an unreachable
pair from ever taking part in a sum.

Precondition: no negative-weight cycle.  Not detected.  The loops
always terminate, but the distances along such a cycle are garbage.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

from digraph_lite.graph.view import GraphView, Vertex

W = TypeVar("W", int, float)


@dataclass(slots=True)
class AllPairsShortestPaths(Generic[W]):
    """Distance and next-hop matrices produced by floyd_warshall."""
    dist: list[list[W | None]]
    next_hop: list[list[Vertex | None]]

    @property
    def num_vertices(self) -> int:
        return len(self.dist)

    def distance(self, u: Vertex, v: Vertex) -> W | None:
        """Shortest u -> v distance, or None when v is unreachable."""
        return self.dist[u][v]

    def path(self, u: Vertex, v: Vertex) -> list[Vertex]:
        """Vertices on the shortest u -> v path (see reconstruct_path)."""
        return reconstruct_path(u, v, self.next_hop)


def floyd_warshall(
    g: GraphView, weight: Sequence[W]
) -> AllPairsShortestPaths[W]:
    """Compute shortest distances between every ordered pair of vertices.

    *weight* is indexed by edge id and may contain negative values as
    long as no cycle has negative total weight.  Parallel edges keep the
    cheapest one.
    """
    n = g.num_vertices
    dist: list[list[W | None]] = [[None] * n for _ in range(n)]
    nxt: list[list[Vertex | None]] = [[None] * n for _ in range(n)]

    for v in range(n):
        dist[v][v] = 0  # type: ignore[assignment]

    for e in range(g.num_edges):
        u = g.source(e)
        v = g.target(e)
        w = weight[e]
        current = dist[u][v]
        if current is None or w < current:
            dist[u][v] = w
        nxt[u][v] = v

    for k in range(n):
        row_k = dist[k]
        for i in range(n):
            d_ik = dist[i][k]
            if d_ik is None:
                continue
            row_i = dist[i]
            nxt_i = nxt[i]
            hop = nxt_i[k]
            for j in range(n):
                d_kj = row_k[j]
                if d_kj is None:
                    continue
                through = d_ik + d_kj
                d_ij = row_i[j]
                if d_ij is None or through < d_ij:
                    row_i[j] = through
                    nxt_i[j] = hop

    return AllPairsShortestPaths(dist=dist, next_hop=nxt)


def reconstruct_path(
    u: Vertex, v: Vertex, next_hop: Sequence[Sequence[Vertex | None]]
) -> list[Vertex]:
    """Walk the next-hop table from *u* to *v*, endpoints included.

    Returns [] when v is unreachable from u, and [u] when u == v.
    *next_hop* must come straight from floyd_warshall; a hand-edited
    table can send this into a loop.
    """
    if u != v and next_hop[u][v] is None:
        return []
    path = [u]
    while u != v:
        u = next_hop[u][v]  # type: ignore[assignment]
        path.append(u)
    return path
