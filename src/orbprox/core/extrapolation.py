"""Short-horizon extrapolation by per-axis least squares."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np
from numpy.typing import ArrayLike

from orbprox.core.trajectory import Point, Trajectory, points_from_arrays
from orbprox.utils.constants import DEFAULT_FUTURE_STEPS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LinearFit:
    """Ordinary least-squares line ``value = slope * t + intercept``."""

    slope: float
    intercept: float

    def __call__(self, t: ArrayLike) -> np.ndarray:
        return self.slope * np.asarray(t, dtype=np.float64) + self.intercept


def fit_line(ts: ArrayLike, values: ArrayLike) -> LinearFit:
    """Fit a line through ``(t, value)`` pairs with the normal equations.

    A zero denominator (a single sample, or all samples at one ``t``) is
    replaced by 1, giving a flat line through the data instead of a
    division error.

    Args:
        ts: Sample times.
        values: Sample values, same length as ``ts``.

    Returns:
        The fitted line.
    """
    x = np.asarray(ts, dtype=np.float64)
    y = np.asarray(values, dtype=np.float64)
    n = x.size
    if n == 0:
        raise ValueError("Cannot fit a line through zero samples")
    sum_x = float(x.sum())
    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    sum_xx = float((x * x).sum())

    denominator = n * sum_xx - sum_x * sum_x
    if denominator == 0:
        denominator = 1.0
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = (sum_y - slope * sum_x) / n
    return LinearFit(slope=slope, intercept=intercept)


def extrapolate_points(
    points: Sequence[Point],
    future_steps: int = DEFAULT_FUTURE_STEPS,
) -> tuple[Point, ...]:
    """Append ``future_steps`` predicted points to a copy of ``points``.

    Each axis is fitted independently over all existing points. New
    timesteps continue sequentially after the existing ones.

    Args:
        points: Existing points, at least one.
        future_steps: Number of points to predict.

    Returns:
        The original points followed by the predictions.

    Raises:
        ValueError: If ``points`` is empty or ``future_steps`` is negative.
    """
    if not points:
        logger.error("Cannot extrapolate an empty point sequence")
        raise ValueError("Cannot extrapolate an empty point sequence")
    if future_steps < 0:
        logger.error("Negative extrapolation horizon: %d", future_steps)
        raise ValueError(f"future_steps must be non-negative, got {future_steps}")

    ts = np.array([p.t for p in points], dtype=np.float64)
    future_ts = np.arange(len(points), len(points) + future_steps)

    predicted = [
        fit_line(ts, [getattr(p, axis) for p in points])(future_ts)
        for axis in ("x", "y", "z")
    ]
    return tuple(points) + points_from_arrays(future_ts, *predicted)


def extrapolate(
    trajectory: Trajectory,
    future_steps: int = DEFAULT_FUTURE_STEPS,
) -> Trajectory:
    """Return a new trajectory extended ``future_steps`` into the future."""
    extended = extrapolate_points(trajectory.points, future_steps)
    logger.debug("Extrapolated %s from %d to %d points", trajectory.name, len(trajectory), len(extended))
    return Trajectory(name=trajectory.name, points=extended)
