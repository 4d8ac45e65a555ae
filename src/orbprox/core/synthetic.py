"""Seeded synthetic trajectory generator.

Produces tilted circular orbits around Earth's centre. This is a visual
approximation for exercising the screening pipeline, not a propagator.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from orbprox.core.rng import Mulberry32
from orbprox.core.trajectory import Trajectory, points_from_arrays
from orbprox.utils.constants import (
    DEFAULT_OBJECT_COUNT,
    DEFAULT_SEED,
    SYNTHETIC_INCLINATION_SPAN_RAD,
    SYNTHETIC_RADIUS_MIN_KM,
    SYNTHETIC_RADIUS_SPAN_KM,
    SYNTHETIC_SPEED_MIN_RAD,
    SYNTHETIC_SPEED_SPAN_RAD,
    TRAJECTORY_STEPS,
    TWO_PI,
)

logger = logging.getLogger(__name__)


def tilted_circular_points(
    radius_km: float,
    inclination_rad: float,
    angles: NDArray[np.float64],
) -> tuple[NDArray[np.float64], NDArray[np.float64], NDArray[np.float64]]:
    """Evaluate a circular orbit tilted about the x axis.

    Args:
        radius_km: Orbit radius in km.
        inclination_rad: Tilt of the orbital plane in radians.
        angles: Orbital angle at each sample, in radians.

    Returns:
        Tuple of (x, y, z) arrays in km.
    """
    cos_a = np.cos(angles)
    sin_a = np.sin(angles)
    x = radius_km * cos_a
    y = radius_km * sin_a * np.cos(inclination_rad)
    z = radius_km * sin_a * np.sin(inclination_rad)
    return x, y, z


def generate_synthetic(
    count: int = DEFAULT_OBJECT_COUNT,
    seed: int = DEFAULT_SEED,
    steps: int = TRAJECTORY_STEPS,
) -> list[Trajectory]:
    """Generate ``count`` reproducible synthetic trajectories.

    Each object draws four values from a mulberry32 stream: radius in
    [6650, 7500) km, angular speed in [0.035, 0.065) rad/step, phase in
    [0, 2π) and inclination in [-0.175, 0.175) rad. The same ``seed`` always
    yields the same trajectory set.

    Args:
        count: Number of objects. Zero yields an empty list.
        seed: PRNG seed.
        steps: Points per trajectory.

    Returns:
        Trajectories named ``SIM-1``, ``SIM-2``, ...

    Raises:
        ValueError: If ``count`` or ``steps`` is negative.
    """
    if count < 0:
        logger.error("Negative object count: %d", count)
        raise ValueError(f"Object count must be non-negative, got {count}")
    if steps < 0:
        logger.error("Negative step count: %d", steps)
        raise ValueError(f"Step count must be non-negative, got {steps}")

    rng = Mulberry32(seed)
    ts = np.arange(steps)
    trajectories: list[Trajectory] = []

    for i in range(count):
        # Draw order is part of the reproducibility contract
        radius = SYNTHETIC_RADIUS_MIN_KM + rng.random() * SYNTHETIC_RADIUS_SPAN_KM
        speed = SYNTHETIC_SPEED_MIN_RAD + rng.random() * SYNTHETIC_SPEED_SPAN_RAD
        phase = rng.random() * TWO_PI
        inclination = (rng.random() - 0.5) * SYNTHETIC_INCLINATION_SPAN_RAD

        angles = phase + ts * speed
        x, y, z = tilted_circular_points(radius, inclination, angles)
        trajectories.append(
            Trajectory(name=f"SIM-{i + 1}", points=points_from_arrays(ts, x, y, z))
        )

    logger.debug("Generated %d synthetic trajectories (seed=%d, steps=%d)", count, rng.seed, steps)
    return trajectories
