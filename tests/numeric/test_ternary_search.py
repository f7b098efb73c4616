"""Tests for the ternary-search unimodal maximizer."""
from __future__ import annotations

import math

import pytest

from digraph_lite.numeric.ternary_search import (
    IterationLimitExceeded,
    expected_iterations,
    maximize,
    ternary_search,
)


def _parabola(x: float) -> float:
    return -((x - 2) ** 2)


class TestTernarySearch:
    def test_converges_on_parabola(self) -> None:
        tol = 1e-9
        result = ternary_search(_parabola, 0.0, 5.0, tol, 200)
        assert result.converged
        assert result.x == pytest.approx(2.0, abs=tol)
        assert result.b - result.a <= 2 * tol

    def test_zero_budget_signals_failure(self) -> None:
        result = ternary_search(_parabola, 0.0, 5.0, 1e-6, 0)
        assert not result.converged
        assert result.iterations == 0
        with pytest.raises(IterationLimitExceeded) as exc_info:
            result.unwrap()
        assert exc_info.value.a == 0.0
        assert exc_info.value.b == 5.0

    def test_small_budget_signals_failure(self) -> None:
        result = ternary_search(_parabola, 0.0, 5.0, 1e-6, 5)
        assert not result.converged
        assert result.iterations == 5
        # the bracket still narrowed around the peak
        assert result.a <= 2.0 <= result.b
        assert result.b - result.a == pytest.approx(5.0 * (2 / 3) ** 5)

    def test_narrow_bracket_needs_no_narrowing(self) -> None:
        calls: list[float] = []

        def f(x: float) -> float:
            calls.append(x)
            return -x * x

        result = ternary_search(f, -0.1, 0.1, 0.1, 1)
        assert result.converged
        assert result.iterations == 0
        assert result.x == pytest.approx(0.0)
        assert calls == []

    def test_two_evaluations_per_iteration(self) -> None:
        calls = 0

        def f(x: float) -> float:
            nonlocal calls
            calls += 1
            return math.sin(x)

        result = ternary_search(f, 0.0, math.pi, 1e-6, 100)
        assert result.converged
        assert calls == 2 * result.iterations
        assert result.x == pytest.approx(math.pi / 2, abs=1e-6)

    def test_iteration_count_matches_formula(self) -> None:
        a, b, tol = 0.0, 10.0, 1e-4
        n = expected_iterations(a, b, tol)
        assert ternary_search(_parabola, a, b, tol, n + 1).iterations == n
        assert not ternary_search(_parabola, a, b, tol, n).converged

    def test_expected_iterations_zero_for_narrow_bracket(self) -> None:
        assert expected_iterations(1.0, 1.5, 0.5) == 0

    def test_peak_near_endpoint(self) -> None:
        result = ternary_search(lambda x: -abs(x - 0.999), 0.0, 1.0, 1e-7, 200)
        assert result.x == pytest.approx(0.999, abs=1e-6)

    def test_degenerate_bracket(self) -> None:
        result = ternary_search(_parabola, 3.0, 3.0, 1e-9, 1)
        assert result.converged
        assert result.x == 3.0

    def test_invalid_bracket(self) -> None:
        with pytest.raises(ValueError, match="a <= b"):
            ternary_search(_parabola, 5.0, 0.0, 1e-6, 10)

    def test_invalid_tolerance(self) -> None:
        with pytest.raises(ValueError, match="tol must be positive"):
            ternary_search(_parabola, 0.0, 5.0, 0.0, 10)


class TestMaximize:
    def test_returns_x(self) -> None:
        assert maximize(_parabola, 0.0, 5.0) == pytest.approx(2.0, abs=1e-9)

    def test_raises_when_budget_exhausted(self) -> None:
        with pytest.raises(IterationLimitExceeded, match="Max number of iterations"):
            maximize(_parabola, 0.0, 5.0, tol=1e-9, max_iter=3)
