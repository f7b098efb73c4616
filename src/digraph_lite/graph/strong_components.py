"""Strongly connected components via Tarjan's algorithm.

Two vertices are in the same strongly connected component (SCC) when
each can reach the other.  Tarjan finds every SCC in a single DFS:

  * Each vertex gets a discovery time when first visited and a low-link,
    the smallest discovery time it can reach through tree edges plus
    edges back into vertices that are still on the Tarjan stack.
  * Visited vertices are pushed onto that stack and stay there until
    their component is complete.
  * When a vertex finishes with discovery == low-link it is the root of
    an SCC: pop the stack down to (and including) it and give every
    popped vertex the next component id.

The subtle part is the low-link fold-in.  For an edge v -> w we take
low[w] only while w's component is still open (w is on the stack).  If
w already has a component id, it belongs to an SCC that was closed off
earlier -- a sink relative to v -- and folding its low-link in would
glue two different components together.  "Visited" is not the same as
"on stack", and mixing them up is the classic Tarjan bug.

Component ids come out in reverse topological order of the condensation:
the first component closed is a sink.  The ids are dense in [0, count)
and deterministic for a given graph, but carry no other meaning.

The DFS runs on an explicit stack of (vertex, out-edge iterator) frames
so deep graphs do not hit Python's recursion limit.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from digraph_lite.graph.adjacency import AdjacencyList
from digraph_lite.graph.view import Edge, GraphView, Vertex


@dataclass(slots=True)
class Components:
    """Component id per vertex plus the number of components."""
    labels: list[int]
    count: int

    def groups(self) -> list[list[Vertex]]:
        """Vertices of each component, indexed by component id."""
        out: list[list[Vertex]] = [[] for _ in range(self.count)]
        for v, c in enumerate(self.labels):
            out[c].append(v)
        return out

    def same_component(self, u: Vertex, v: Vertex) -> bool:
        return self.labels[u] == self.labels[v]


def strong_components(g: GraphView) -> Components:
    """Label every vertex of *g* with its strongly connected component.

    O(V + E).  Returns Components(labels, count) where labels[v] is in
    [0, count).
    """
    n = g.num_vertices
    disc = [0] * n          # 0 means unvisited; times start at 1
    low = [0] * n
    comp: list[int | None] = [None] * n
    tarjan: list[Vertex] = []
    clock = 0
    count = 0

    for root in range(n):
        if disc[root]:
            continue
        clock += 1
        disc[root] = low[root] = clock
        tarjan.append(root)
        frames: list[tuple[Vertex, Iterator[Edge]]] = [
            (root, iter(g.out_edges(root)))
        ]
        while frames:
            v, edges = frames[-1]
            descended = False
            for e in edges:
                w = g.target(e)
                if not disc[w]:
                    clock += 1
                    disc[w] = low[w] = clock
                    tarjan.append(w)
                    frames.append((w, iter(g.out_edges(w))))
                    descended = True
                    break
                if comp[w] is None and low[w] < low[v]:
                    low[v] = low[w]
            if descended:
                continue

            # all edges of v handled
            frames.pop()
            if disc[v] == low[v]:
                while True:
                    w = tarjan.pop()
                    comp[w] = count
                    if w == v:
                        break
                count += 1
            if frames:
                parent = frames[-1][0]
                if comp[v] is None and low[v] < low[parent]:
                    low[parent] = low[v]

    return Components(labels=comp, count=count)  # type: ignore[arg-type]


def condensation(g: GraphView, components: Components) -> AdjacencyList:
    """Contract each component of *g* to a single vertex.

    Vertex c of the result is component c.  There is one edge c1 -> c2
    for every distinct pair of different components joined by at least
    one edge of *g*, added in order of first appearance.  The result is
    always acyclic.
    """
    labels = components.labels
    dag = AdjacencyList(components.count)
    seen: set[tuple[int, int]] = set()
    for e in range(g.num_edges):
        cu = labels[g.source(e)]
        cv = labels[g.target(e)]
        if cu != cv and (cu, cv) not in seen:
            seen.add((cu, cv))
            dag.add_edge(cu, cv)
    return dag
