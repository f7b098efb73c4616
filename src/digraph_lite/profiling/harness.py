"""Benchmark harness for the graph algorithms.

Generates seeded workloads and times each algorithm on them:

  1. DAG shortest paths on a random DAG, from vertex 0
  2. Floyd-Warshall on a (smaller) random digraph -- it is O(V^3)
  3. Tarjan SCC on the same random digraph
  4. Tarjan SCC on a long closed chain, which would overflow the
     interpreter stack if the DFS were recursive

Like any profiler target this is designed to be measured, not to be
fast.  With profile=True the whole run happens under cProfile and the
top functions by cumulative time are included in the result.
"""
from __future__ import annotations

import cProfile
import io
import logging
import pstats
import time
from dataclasses import dataclass

from digraph_lite.graph.dag_shortest_paths import dag_shortest_paths
from digraph_lite.graph.floyd_warshall import floyd_warshall
from digraph_lite.graph.strong_components import strong_components
from digraph_lite.profiling.workload import (
    chain,
    random_dag,
    random_digraph,
    random_weights,
)

log = logging.getLogger(__name__)


@dataclass(slots=True)
class BenchmarkResult:
    """Timing results from a single benchmark run."""
    dag_vertices: int
    dag_edges: int
    apsp_vertices: int
    apsp_edges: int
    chain_vertices: int
    dag_time_ms: float
    apsp_time_ms: float
    scc_time_ms: float
    deep_scc_time_ms: float
    total_time_ms: float
    scc_count: int
    reachable_from_source: int
    cprofile_stats: str | None = None


def run_benchmark(
    dag_vertices: int = 2_000,
    apsp_vertices: int = 120,
    chain_vertices: int = 100_000,
    edge_prob: float = 0.02,
    seed: int = 42,
    profile: bool = False,
) -> BenchmarkResult:
    """Run every algorithm on generated graphs and return timing data."""
    dag = random_dag(dag_vertices, edge_prob, seed=seed)
    dag_w = random_weights(dag.num_edges, seed=seed)
    dense = random_digraph(apsp_vertices, edge_prob * 2, seed=seed + 1)
    dense_w = random_weights(dense.num_edges, seed=seed + 1)
    ring = chain(chain_vertices, closed=True)
    log.debug(
        "workloads: dag=%r apsp=%r chain=%r", dag, dense, ring,
    )

    dag_ms = apsp_ms = scc_ms = deep_ms = 0.0
    scc_count = 0
    reachable = 0

    def _run() -> None:
        nonlocal dag_ms, apsp_ms, scc_ms, deep_ms, scc_count, reachable

        t0 = time.perf_counter()
        dist = dag_shortest_paths(dag, 0, dag_w)
        reachable = sum(1 for d in dist if d is not None)
        dag_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        floyd_warshall(dense, dense_w)
        apsp_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        scc_count = strong_components(dense).count
        scc_ms = (time.perf_counter() - t0) * 1000

        t0 = time.perf_counter()
        strong_components(ring)
        deep_ms = (time.perf_counter() - t0) * 1000

    cprofile_text = None
    t_total_start = time.perf_counter()
    if profile:
        pr = cProfile.Profile()
        pr.enable()
        _run()
        pr.disable()
        s = io.StringIO()
        ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
        ps.print_stats(30)
        cprofile_text = s.getvalue()
    else:
        _run()
    total_ms = (time.perf_counter() - t_total_start) * 1000
    log.debug("benchmark finished in %.1f ms", total_ms)

    return BenchmarkResult(
        dag_vertices=dag.num_vertices,
        dag_edges=dag.num_edges,
        apsp_vertices=dense.num_vertices,
        apsp_edges=dense.num_edges,
        chain_vertices=ring.num_vertices,
        dag_time_ms=dag_ms,
        apsp_time_ms=apsp_ms,
        scc_time_ms=scc_ms,
        deep_scc_time_ms=deep_ms,
        total_time_ms=total_ms,
        scc_count=scc_count,
        reachable_from_source=reachable,
        cprofile_stats=cprofile_text,
    )
