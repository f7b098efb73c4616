"""Ternary search for the maximum of a unimodal function.

A unimodal function (here: strictly increasing, then strictly
decreasing) has exactly one peak in [a, b].  Split the bracket at its
two third-points m1 < m2 and compare f there:

  f(m1) < f(m2)   ->  the peak is not in [a, m1]; move a up to m1
  otherwise       ->  the peak is not in [m2, b]; move b down to m2

Every iteration keeps 2/3 of the bracket and costs two evaluations of f.
Once the bracket is no wider than 2 * tol its midpoint is within tol of
the peak.  Starting from width L that takes

    ceil( log(L / (2 * tol)) / log(3/2) )

iterations, and zero when L <= 2 * tol already.

Running out of iterations is not a precondition violation, it is a
normal outcome the caller may want to react to (bigger budget, looser
tolerance).  So ternary_search reports it in the result instead of
raising; unwrap() -- or the maximize() shorthand -- turns it into an
IterationLimitExceeded for callers who prefer exceptions.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable


class IterationLimitExceeded(Exception):
    """Raised when a search has not converged within its iteration budget."""

    def __init__(self, a: float, b: float, iterations: int) -> None:
        self.a = a
        self.b = b
        self.iterations = iterations
        super().__init__(
            f"Max number of iterations exceeded ({iterations}); "
            f"bracket still [{a!r}, {b!r}]"
        )


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Outcome of a ternary search.

    x is the midpoint of the final bracket [a, b].  When converged is
    False the bracket is still wider than 2 * tol and x is only the best
    guess so far.
    """
    converged: bool
    x: float
    a: float
    b: float
    iterations: int

    def unwrap(self) -> float:
        """Return x, or raise IterationLimitExceeded if not converged."""
        if not self.converged:
            raise IterationLimitExceeded(self.a, self.b, self.iterations)
        return self.x


def expected_iterations(a: float, b: float, tol: float) -> int:
    """Number of narrowing steps ternary_search takes on bracket [a, b].

    The convergence check itself occupies an iteration slot, so a
    max_iter of expected_iterations(...) + 1 is the tightest budget that
    succeeds.
    """
    width = b - a
    if width <= 2 * tol:
        return 0
    return math.ceil(math.log(width / (2 * tol)) / math.log(1.5))


def ternary_search(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float,
    max_iter: int,
) -> SearchResult:
    """Approximate the maximizer of unimodal *f* on [a, b].

    Requires a <= b and tol > 0 (ValueError otherwise).  f must be
    unimodal with a maximum on [a, b]; that is not checked.  If f is
    imprecise near the peak -- or the peak sits on an endpoint -- the
    error can exceed tol.
    """
    if a > b:
        raise ValueError(f"bracket must satisfy a <= b, got [{a!r}, {b!r}]")
    if not tol > 0:
        raise ValueError(f"tol must be positive, got {tol!r}")

    for it in range(max_iter):
        if b - a <= 2 * tol:
            return SearchResult(True, (a + b) / 2, a, b, it)

        left_third = (2 * a + b) / 3
        right_third = (a + 2 * b) / 3

        if f(left_third) < f(right_third):
            a = left_third
        else:
            b = right_third

    return SearchResult(False, (a + b) / 2, a, b, max(max_iter, 0))


def maximize(
    f: Callable[[float], float],
    a: float,
    b: float,
    tol: float = 1e-9,
    max_iter: int = 200,
) -> float:
    """Shorthand for ternary_search(...).unwrap()."""
    return ternary_search(f, a, b, tol, max_iter).unwrap()
