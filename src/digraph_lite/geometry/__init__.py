"""Planar geometry helpers."""

from digraph_lite.geometry.convex_hull import (
    clockwise,
    convex_hull,
    convex_hull_partition,
    cross,
)

__all__ = [
    "clockwise",
    "convex_hull",
    "convex_hull_partition",
    "cross",
]
