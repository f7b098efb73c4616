"""Tests for Tarjan strongly connected components and condensation."""
from __future__ import annotations

import random

from digraph_lite.graph.adjacency import AdjacencyList
from digraph_lite.graph.cycle_detector import find_cycle
from digraph_lite.graph.strong_components import condensation, strong_components
from digraph_lite.graph.topological import topological_sort
from digraph_lite.profiling.workload import chain, random_dag, random_digraph


def _reachability(g: AdjacencyList) -> list[set[int]]:
    """reach[u] = every vertex reachable from u (u included)."""
    reach: list[set[int]] = []
    for s in range(g.num_vertices):
        seen = {s}
        stack = [s]
        while stack:
            v = stack.pop()
            for w in g.successors(v):
                if w not in seen:
                    seen.add(w)
                    stack.append(w)
        reach.append(seen)
    return reach


class TestStrongComponents:
    def test_empty_graph(self, empty_graph: AdjacencyList) -> None:
        result = strong_components(empty_graph)
        assert result.count == 0
        assert result.labels == []
        assert result.groups() == []

    def test_single_vertex(self, single_vertex: AdjacencyList) -> None:
        result = strong_components(single_vertex)
        assert result.count == 1
        assert result.labels == [0]

    def test_ring_plus_isolated(self, ring_plus_isolated: AdjacencyList) -> None:
        result = strong_components(ring_plus_isolated)
        assert result.count == 2
        groups = sorted(result.groups(), key=len)
        assert groups == [[4], [0, 1, 2, 3]]
        assert result.same_component(0, 3)
        assert not result.same_component(0, 4)

    def test_dag_has_singleton_components(self, diamond_graph: AdjacencyList) -> None:
        result = strong_components(diamond_graph)
        assert result.count == 4
        assert sorted(result.labels) == [0, 1, 2, 3]

    def test_first_component_is_a_sink(self, linear_graph: AdjacencyList) -> None:
        # 0 -> 1 -> 2 -> 3: 3 closes first, 0 last
        assert strong_components(linear_graph).labels == [3, 2, 1, 0]

    def test_self_loop(self) -> None:
        g = AdjacencyList.from_edges(2, [(0, 0), (0, 1)])
        result = strong_components(g)
        assert result.count == 2

    def test_finalized_component_not_merged(self) -> None:
        """
        0 -> 1 <-> 2   (component {1, 2} closes first)
        0 -> 3 -> 1    (3 reaches the closed component, not back to 0)

        Folding low[1] into 3 would leave 3 unrooted and glue it to 0.
        """
        g = AdjacencyList.from_edges(4, [(0, 1), (1, 2), (2, 1), (0, 3), (3, 1)])
        result = strong_components(g)
        assert result.count == 3
        assert result.same_component(1, 2)
        assert not result.same_component(0, 3)
        assert not result.same_component(3, 1)

    def test_cross_edge_into_later_root(self) -> None:
        """Two cycles joined by one edge stay separate."""
        g = AdjacencyList.from_edges(
            6, [(0, 1), (1, 2), (2, 0), (2, 3), (3, 4), (4, 5), (5, 3)]
        )
        result = strong_components(g)
        assert result.count == 2
        assert sorted(result.groups(), key=min) == [[0, 1, 2], [3, 4, 5]]
        # the downstream cycle closes first
        assert result.labels[3] == 0
        assert result.labels[0] == 1

    def test_labels_dense(self) -> None:
        g = random_digraph(40, 0.05, seed=2)
        result = strong_components(g)
        assert set(result.labels) == set(range(result.count))

    def test_mutual_reachability_random(self) -> None:
        rng = random.Random(42)
        for _ in range(40):
            n = rng.randint(1, 25)
            g = random_digraph(n, rng.choice([0.03, 0.08, 0.15]), seed=rng.randrange(1 << 30))
            labels = strong_components(g).labels
            reach = _reachability(g)
            for u in range(n):
                for v in range(n):
                    mutual = v in reach[u] and u in reach[v]
                    assert (labels[u] == labels[v]) == mutual, f"pair ({u}, {v})"

    def test_dag_every_vertex_alone(self) -> None:
        g = random_dag(60, 0.1, seed=4)
        assert strong_components(g).count == 60

    def test_idempotent(self) -> None:
        g = random_digraph(50, 0.05, seed=6)
        assert strong_components(g) == strong_components(g)

    def test_deep_ring(self) -> None:
        n = 100_000
        result = strong_components(chain(n, closed=True))
        assert result.count == 1
        assert set(result.labels) == {0}

    def test_deep_chain(self) -> None:
        n = 100_000
        result = strong_components(chain(n))
        assert result.count == n
        assert result.labels[0] == n - 1


class TestCondensation:
    def test_ring_plus_tail(self) -> None:
        g = AdjacencyList.from_edges(
            5, [(0, 1), (1, 2), (2, 0), (2, 3), (1, 3), (3, 4)]
        )
        comps = strong_components(g)
        dag = condensation(g, comps)
        assert dag.num_vertices == 3
        # duplicate edges {0,1,2} -> {3} collapse into one
        assert dag.num_edges == 2
        ring, mid, tail = comps.labels[0], comps.labels[3], comps.labels[4]
        assert dag.has_edge(ring, mid)
        assert dag.has_edge(mid, tail)

    def test_condensation_is_acyclic(self) -> None:
        rng = random.Random(5)
        for _ in range(20):
            g = random_digraph(rng.randint(1, 30), 0.08, seed=rng.randrange(1 << 30))
            dag = condensation(g, strong_components(g))
            assert not find_cycle(dag).has_cycle
            assert len(topological_sort(dag)) == dag.num_vertices

    def test_ids_are_reverse_topological(self) -> None:
        g = random_digraph(30, 0.06, seed=12)
        dag = condensation(g, strong_components(g))
        for u, v in dag.edges():
            assert u > v, f"component edge {u}->{v} points to a later id"
