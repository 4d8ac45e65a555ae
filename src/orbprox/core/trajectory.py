"""Trajectory data model shared by every pipeline stage."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Point:
    """A sampled position of one object.

    Attributes:
        t: Integer timestep index.
        x: X coordinate in km.
        y: Y coordinate in km.
        z: Z coordinate in km.
    """

    t: int
    x: float
    y: float
    z: float

    @property
    def position(self) -> NDArray[np.float64]:
        """Coordinates as a (3,) array in km."""
        return np.array((self.x, self.y, self.z), dtype=np.float64)


@dataclass(frozen=True)
class Trajectory:
    """A named, time-ordered sequence of points.

    Trajectories from one run are compared by array position, so every
    source emits the same number of points at the same nominal cadence.

    Attributes:
        name: Identifier, unique within a run.
        points: Points ordered by timestep.
    """

    name: str
    points: tuple[Point, ...]

    def __post_init__(self) -> None:
        # Accept any iterable but store an immutable tuple
        if not isinstance(self.points, tuple):
            object.__setattr__(self, "points", tuple(self.points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def positions(self) -> NDArray[np.float64]:
        """Positions as an (n, 3) array in km."""
        if not self.points:
            return np.empty((0, 3), dtype=np.float64)
        return np.array([(p.x, p.y, p.z) for p in self.points], dtype=np.float64)

    @property
    def timesteps(self) -> NDArray[np.int64]:
        """Timestep indices as an (n,) array."""
        return np.array([p.t for p in self.points], dtype=np.int64)


def points_from_arrays(
    ts: Iterable[int],
    xs: Iterable[float],
    ys: Iterable[float],
    zs: Iterable[float],
) -> tuple[Point, ...]:
    """Build points from parallel per-axis sequences."""
    return tuple(
        Point(t=int(t), x=float(x), y=float(y), z=float(z))
        for t, x, y, z in zip(ts, xs, ys, zs)
    )
