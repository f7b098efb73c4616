"""Convex hull of a sorted point set (Andrew's monotone chain).

With the points sorted lexicographically the hull is built in two
linear sweeps:

  lower chain: walk the points left to right, and before appending a
               point pop the previous one while the last two points
               and the new one make a clockwise turn.
  upper chain: the same walk over the points right to left.

Each chain ends where the other starts, so dropping the last point of
both and concatenating gives the hull in counterclockwise order,
starting at the lexicographically smallest point.  O(n) for pre-sorted
input; the sort itself is the caller's job.

The turn test is a parameter.  clockwise() below treats collinear
triples as clockwise, which drops points lying in the middle of a hull
edge; pass a strict test to keep them.

Precondition: *points* sorted lexicographically.  Not checked.
"""
from __future__ import annotations

from typing import Callable, Iterable, MutableSequence, Sequence, TypeVar

P = TypeVar("P")

Point = tuple[float, float]


def cross(o: Point, a: Point, b: Point) -> float:
    """Z component of (a - o) x (b - o); positive for a left turn."""
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def clockwise(a: Point, b: Point, c: Point) -> bool:
    """True if a -> b -> c turns clockwise or is collinear."""
    return cross(a, b, c) <= 0


def _convex_chain(points: Iterable[P], cw: Callable[[P, P, P], bool]) -> list[P]:
    chain: list[P] = []
    for p in points:
        while len(chain) >= 2 and cw(chain[-2], chain[-1], p):
            chain.pop()
        chain.append(p)
    return chain


def convex_hull(
    points: Sequence[P], cw: Callable[[P, P, P], bool] = clockwise  # type: ignore[assignment]
) -> list[P]:
    """Hull vertices of sorted *points* in counterclockwise order.

    Fewer than two points are returned as-is: a single point is its own
    hull, not an empty one.  This matches convex_hull_partition, which
    reports split 0 (everything on the hull) for the same input.
    """
    pts = list(points)
    if len(pts) < 2:
        return pts
    lower = _convex_chain(pts, cw)
    upper = _convex_chain(reversed(pts), cw)
    return lower[:-1] + upper[:-1]


def _sorted_difference(a: Sequence[P], b: Sequence[P]) -> list[P]:
    """Multiset difference a - b of two sorted sequences, kept sorted."""
    out: list[P] = []
    j = 0
    for x in a:
        while j < len(b) and b[j] < x:  # type: ignore[operator]
            j += 1
        if j < len(b) and not x < b[j]:  # type: ignore[operator]
            # equal: consume one copy from b
            j += 1
            continue
        out.append(x)
    return out


def convex_hull_partition(
    points: MutableSequence[P],
    cw: Callable[[P, P, P], bool] = clockwise,  # type: ignore[assignment]
) -> int:
    """Reorder sorted *points* in place into interior + hull; return the split.

    Afterwards points[:k] holds the points strictly inside the hull (or
    dropped from its edges by *cw*), still sorted, and points[k:] holds
    the hull in counterclockwise order, where k is the return value.
    Duplicates are treated as a multiset: one copy can sit on the hull
    while the others count as interior.
    """
    if len(points) < 2:
        return 0
    lower = _convex_chain(points, cw)[:-1]
    upper = _convex_chain(reversed(points), cw)[:-1]

    interior = _sorted_difference(_sorted_difference(points, lower), upper[::-1])
    points[:] = interior + lower + upper
    return len(interior)
