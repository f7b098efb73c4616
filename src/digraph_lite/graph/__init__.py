"""Graph algorithms over a read-only, integer-indexed graph view."""

from digraph_lite.graph.adjacency import AdjacencyList
from digraph_lite.graph.cycle_detector import CycleResult, find_cycle
from digraph_lite.graph.dag_shortest_paths import (
    dag_longest_paths,
    dag_shortest_paths,
)
from digraph_lite.graph.floyd_warshall import (
    AllPairsShortestPaths,
    floyd_warshall,
    reconstruct_path,
)
from digraph_lite.graph.strong_components import (
    Components,
    condensation,
    strong_components,
)
from digraph_lite.graph.topological import (
    NotADAGError,
    reverse_postorder,
    topological_sort,
)
from digraph_lite.graph.view import Edge, GraphView, Vertex

__all__ = [
    "AdjacencyList",
    "AllPairsShortestPaths",
    "Components",
    "CycleResult",
    "Edge",
    "GraphView",
    "NotADAGError",
    "Vertex",
    "condensation",
    "dag_longest_paths",
    "dag_shortest_paths",
    "find_cycle",
    "floyd_warshall",
    "reconstruct_path",
    "reverse_postorder",
    "strong_components",
    "topological_sort",
]
