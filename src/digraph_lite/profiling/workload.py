"""Seeded random graph workloads for benchmarks and property tests.

Graph shapes:
  - random_dag: edges only go from lower to higher vertex ids, so the
    result is acyclic by construction (vertex order is a topological
    order).  Each forward pair gets an edge with probability edge_prob.
  - random_digraph: every ordered pair (self-loops included) gets an
    edge with probability edge_prob.  Cycles are likely.
  - chain: 0 -> 1 -> ... -> n-1, optionally closed into a ring.  The
    worst case for recursive DFS.

Everything takes a seed so runs are reproducible.
"""
from __future__ import annotations

import random

from digraph_lite.graph.adjacency import AdjacencyList


def random_dag(
    num_vertices: int, edge_prob: float, seed: int = 42
) -> AdjacencyList:
    """Random DAG with forward edges only."""
    rng = random.Random(seed)
    g = AdjacencyList(num_vertices)
    for i in range(num_vertices):
        for j in range(i + 1, num_vertices):
            if rng.random() < edge_prob:
                g.add_edge(i, j)
    return g


def random_digraph(
    num_vertices: int, edge_prob: float, seed: int = 42
) -> AdjacencyList:
    """Random directed graph; any ordered pair may be an edge."""
    rng = random.Random(seed)
    g = AdjacencyList(num_vertices)
    for i in range(num_vertices):
        for j in range(num_vertices):
            if rng.random() < edge_prob:
                g.add_edge(i, j)
    return g


def chain(num_vertices: int, closed: bool = False) -> AdjacencyList:
    """Path graph 0 -> 1 -> ... -> n-1; with closed=True, also n-1 -> 0."""
    g = AdjacencyList(num_vertices)
    for i in range(num_vertices - 1):
        g.add_edge(i, i + 1)
    if closed and num_vertices > 0:
        g.add_edge(num_vertices - 1, 0)
    return g


def random_weights(
    num_edges: int,
    low: int = 1,
    high: int = 100,
    seed: int = 42,
) -> list[int]:
    """Integer edge weights drawn uniformly from [low, high]."""
    rng = random.Random(seed)
    return [rng.randint(low, high) for _ in range(num_edges)]
