"""One-dimensional numeric search."""

from digraph_lite.numeric.ternary_search import (
    IterationLimitExceeded,
    SearchResult,
    expected_iterations,
    maximize,
    ternary_search,
)

__all__ = [
    "IterationLimitExceeded",
    "SearchResult",
    "expected_iterations",
    "maximize",
    "ternary_search",
]
