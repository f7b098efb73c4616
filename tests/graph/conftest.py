"""Shared fixtures for graph algorithm tests."""
from __future__ import annotations

import pytest

from digraph_lite.graph.adjacency import AdjacencyList

SEED = 42


@pytest.fixture
def empty_graph() -> AdjacencyList:
    return AdjacencyList()


@pytest.fixture
def single_vertex() -> AdjacencyList:
    return AdjacencyList(1)


@pytest.fixture
def weighted_dag() -> tuple[AdjacencyList, list[int]]:
    """
    0 -3-> 1 -2-> 3
    0 -5-> 2 -1-> 3
    1 -1-> 2
    plus an isolated vertex 4.
    """
    g = AdjacencyList(5)
    weights: list[int] = []
    for u, v, w in [(0, 1, 3), (0, 2, 5), (1, 2, 1), (1, 3, 2), (2, 3, 1)]:
        g.add_edge(u, v)
        weights.append(w)
    return g, weights


@pytest.fixture
def linear_graph() -> AdjacencyList:
    """0 -> 1 -> 2 -> 3"""
    return AdjacencyList.from_edges(4, [(0, 1), (1, 2), (2, 3)])


@pytest.fixture
def diamond_graph() -> AdjacencyList:
    """
    0 -> 1 -> 3
    0 -> 2 -> 3
    """
    return AdjacencyList.from_edges(4, [(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture
def ring_plus_isolated() -> AdjacencyList:
    """0 -> 1 -> 2 -> 3 -> 0, and vertex 4 on its own."""
    return AdjacencyList.from_edges(5, [(0, 1), (1, 2), (2, 3), (3, 0)])
