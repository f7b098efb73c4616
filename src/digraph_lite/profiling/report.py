"""Report generation for benchmark results.

Formats BenchmarkResult data into a human-readable table for terminal
output.
"""
from __future__ import annotations

from digraph_lite.profiling.harness import BenchmarkResult


def _share(part: float, total: float) -> str:
    if total <= 0:
        return "n/a"
    return f"{part / total * 100:.1f}%"


def format_report(result: BenchmarkResult, label: str = "Benchmark") -> str:
    """Format a BenchmarkResult as a readable report string."""
    total = result.total_time_ms
    lines = [
        f"=== {label} ===",
        f"Total time:        {total:.1f} ms",
        "",
        "Breakdown:",
        f"  DAG shortest:    {result.dag_time_ms:.1f} ms "
        f"({_share(result.dag_time_ms, total)})  "
        f"V={result.dag_vertices:,} E={result.dag_edges:,} "
        f"reachable={result.reachable_from_source:,}",
        f"  Floyd-Warshall:  {result.apsp_time_ms:.1f} ms "
        f"({_share(result.apsp_time_ms, total)})  "
        f"V={result.apsp_vertices:,} E={result.apsp_edges:,}",
        f"  Tarjan SCC:      {result.scc_time_ms:.1f} ms "
        f"({_share(result.scc_time_ms, total)})  "
        f"components={result.scc_count:,}",
        f"  Tarjan (chain):  {result.deep_scc_time_ms:.1f} ms "
        f"({_share(result.deep_scc_time_ms, total)})  "
        f"V={result.chain_vertices:,}",
    ]
    return "\n".join(lines)
