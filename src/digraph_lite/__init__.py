"""digraph-lite: shortest paths and strongly connected components in pure Python."""

from digraph_lite.graph import (
    AdjacencyList,
    AllPairsShortestPaths,
    Components,
    GraphView,
    dag_longest_paths,
    dag_shortest_paths,
    floyd_warshall,
    reconstruct_path,
    strong_components,
)

__all__ = [
    "AdjacencyList",
    "AllPairsShortestPaths",
    "Components",
    "GraphView",
    "dag_longest_paths",
    "dag_shortest_paths",
    "floyd_warshall",
    "reconstruct_path",
    "strong_components",
]
