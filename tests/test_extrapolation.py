"""Tests for per-axis linear extrapolation."""
from __future__ import annotations

import pytest

from orbprox.core.extrapolation import LinearFit, extrapolate, extrapolate_points, fit_line
from orbprox.core.synthetic import generate_synthetic
from orbprox.core.trajectory import Point, Trajectory


def _line(n: int, slope: float = 2.0, intercept: float = 1.0) -> tuple[Point, ...]:
    return tuple(
        Point(t=t, x=slope * t + intercept, y=-slope * t, z=5.0) for t in range(n)
    )


class TestFitLine:
    def test_exact_line(self) -> None:
        fit = fit_line([0, 1, 2, 3], [1.0, 3.0, 5.0, 7.0])
        assert fit.slope == pytest.approx(2.0)
        assert fit.intercept == pytest.approx(1.0)

    def test_least_squares(self) -> None:
        fit = fit_line([0, 1, 2], [0.0, 2.0, 1.0])
        assert fit.slope == pytest.approx(0.5)
        assert fit.intercept == pytest.approx(0.5)

    def test_constant_values(self) -> None:
        fit = fit_line([0, 1, 2, 3], [4.2, 4.2, 4.2, 4.2])
        assert fit.slope == pytest.approx(0.0)
        assert fit(10) == pytest.approx(4.2)

    def test_zero_denominator_single_sample(self) -> None:
        fit = fit_line([5], [3.0])
        assert fit == LinearFit(slope=0.0, intercept=3.0)

    def test_zero_denominator_repeated_t(self) -> None:
        fit = fit_line([2, 2, 2], [1.0, 2.0, 3.0])
        assert fit.slope == 0.0
        assert fit.intercept == pytest.approx(2.0)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            fit_line([], [])


class TestExtrapolatePoints:
    def test_length(self) -> None:
        assert len(extrapolate_points(_line(45), 18)) == 63

    def test_prefix_unchanged(self) -> None:
        original = _line(45)
        extended = extrapolate_points(original, 18)
        assert extended[:45] == original

    def test_timesteps_contiguous(self) -> None:
        extended = extrapolate_points(_line(45), 18)
        assert [p.t for p in extended] == list(range(63))

    def test_linear_data_continues(self) -> None:
        extended = extrapolate_points(_line(10), 3)
        for p in extended[10:]:
            assert p.x == pytest.approx(2.0 * p.t + 1.0)
            assert p.y == pytest.approx(-2.0 * p.t)

    def test_constant_axis_stays_constant(self) -> None:
        extended = extrapolate_points(_line(45), 18)
        for p in extended[45:]:
            assert p.z == pytest.approx(5.0)

    def test_single_point(self) -> None:
        extended = extrapolate_points((Point(t=0, x=1.0, y=2.0, z=3.0),), 2)
        assert extended[1:] == (Point(1, 1.0, 2.0, 3.0), Point(2, 1.0, 2.0, 3.0))

    def test_does_not_mutate_list_input(self) -> None:
        original = list(_line(5))
        extrapolate_points(original, 4)
        assert len(original) == 5

    def test_zero_horizon(self) -> None:
        original = _line(5)
        assert extrapolate_points(original, 0) == original

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            extrapolate_points((), 18)

    def test_negative_horizon_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            extrapolate_points(_line(3), -1)


def test_extrapolate_trajectory():
    traj = generate_synthetic(count=1, seed=3)[0]
    extended = extrapolate(traj)
    assert isinstance(extended, Trajectory)
    assert extended.name == traj.name
    assert len(traj) == 45
    assert len(extended) == 63
    assert extended.points[:45] == traj.points
