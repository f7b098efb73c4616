"""Benchmark harness and workload generation for digraph-lite."""

from digraph_lite.profiling.harness import BenchmarkResult, run_benchmark
from digraph_lite.profiling.report import format_report
from digraph_lite.profiling.workload import (
    chain,
    random_dag,
    random_digraph,
    random_weights,
)

__all__ = [
    "BenchmarkResult",
    "chain",
    "format_report",
    "random_dag",
    "random_digraph",
    "random_weights",
    "run_benchmark",
]
