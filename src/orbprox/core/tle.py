"""Simplified TLE parsing into approximate circular trajectories.

Only a handful of line 2 fields are read, by whitespace position, and
the orbit is modelled as a tilted circle at a coarse LEO radius. Malformed
fields fall back to defaults instead of raising, so arbitrary pasted text
always yields a (possibly empty) trajectory set.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import numpy as np

from orbprox.core.synthetic import tilted_circular_points
from orbprox.core.trajectory import Trajectory, points_from_arrays
from orbprox.utils.constants import (
    SECONDS_PER_DAY,
    TLE_BASE_RADIUS_KM,
    TLE_DEFAULT_INCLINATION_DEG,
    TLE_DEFAULT_MEAN_ANOMALY_DEG,
    TLE_DEFAULT_MEAN_MOTION_REV_DAY,
    TLE_HIGH_MOTION_OFFSET_KM,
    TLE_LOW_MOTION_OFFSET_KM,
    TLE_MOTION_SPLIT_REV_DAY,
    TRAJECTORY_STEPS,
    TWO_PI,
)

logger = logging.getLogger(__name__)

# Whitespace-separated field positions on TLE line 2
_INCLINATION_FIELD = 2
_MEAN_ANOMALY_FIELD = 5
_MEAN_MOTION_FIELD = 7


def _field(parts: list[str], index: int, default: float) -> float:
    """Read a numeric field, falling back to ``default``.

    Missing, non-numeric, zero and non-finite values all count as absent.
    """
    if index >= len(parts):
        logger.debug("TLE field %d missing, using %s", index, default)
        return default
    try:
        value = float(parts[index])
    except ValueError:
        logger.debug("TLE field %d non-numeric (%r), using %s", index, parts[index], default)
        return default
    if not math.isfinite(value) or value == 0:
        return default
    return value


@dataclass(frozen=True)
class TLEElements:
    """The subset of line 2 elements used for trajectory generation.

    Attributes:
        inclination_deg: Orbital inclination in degrees.
        mean_anomaly_deg: Mean anomaly in degrees, used as the initial phase.
        mean_motion_rev_per_day: Mean motion in revolutions per day.
    """

    inclination_deg: float = TLE_DEFAULT_INCLINATION_DEG
    mean_anomaly_deg: float = TLE_DEFAULT_MEAN_ANOMALY_DEG
    mean_motion_rev_per_day: float = TLE_DEFAULT_MEAN_MOTION_REV_DAY

    @property
    def inclination_rad(self) -> float:
        return math.radians(self.inclination_deg)

    @property
    def phase_rad(self) -> float:
        return math.radians(self.mean_anomaly_deg)

    @property
    def orbital_period_sec(self) -> float:
        return SECONDS_PER_DAY / self.mean_motion_rev_per_day

    @property
    def radius_km(self) -> float:
        """Coarse orbit radius: two fixed LEO shells split on mean motion."""
        if self.mean_motion_rev_per_day < TLE_MOTION_SPLIT_REV_DAY:
            return TLE_BASE_RADIUS_KM + TLE_LOW_MOTION_OFFSET_KM
        return TLE_BASE_RADIUS_KM + TLE_HIGH_MOTION_OFFSET_KM


def parse_tle_elements(line2: str) -> TLEElements:
    """Extract elements from TLE line 2 by whitespace field position.

    Args:
        line2: Raw TLE line 2.

    Returns:
        Parsed elements, with defaults for any unusable field.
    """
    parts = line2.split()
    return TLEElements(
        inclination_deg=_field(parts, _INCLINATION_FIELD, TLE_DEFAULT_INCLINATION_DEG),
        mean_anomaly_deg=_field(parts, _MEAN_ANOMALY_FIELD, TLE_DEFAULT_MEAN_ANOMALY_DEG),
        mean_motion_rev_per_day=_field(parts, _MEAN_MOTION_FIELD, TLE_DEFAULT_MEAN_MOTION_REV_DAY),
    )


def trajectory_from_elements(
    name: str,
    elements: TLEElements,
    steps: int = TRAJECTORY_STEPS,
) -> Trajectory:
    """Sample one orbital period of ``elements`` at ``steps`` points."""
    period = elements.orbital_period_sec
    step_sec = period / steps
    ts = np.arange(steps)
    angles = elements.phase_rad + (TWO_PI / period) * (ts * step_sec)
    x, y, z = tilted_circular_points(elements.radius_km, elements.inclination_rad, angles)
    return Trajectory(name=name, points=points_from_arrays(ts, x, y, z))


def parse_tle(text: str, steps: int = TRAJECTORY_STEPS) -> list[Trajectory]:
    """Parse 3-line TLE records into trajectories.

    Lines are trimmed and blank lines dropped, then consumed in groups of
    (name, line 1, line 2). Line 1 is not used. A trailing incomplete group
    is ignored.

    Args:
        text: Raw TLE text.
        steps: Points per trajectory.

    Returns:
        One trajectory per complete record, or an empty list when fewer than
        three usable lines are present.
    """
    lines = [line.strip() for line in text.split("\n") if line.strip()]
    if len(lines) < 3:
        logger.debug("TLE text has %d usable lines, nothing to parse", len(lines))
        return []

    trajectories: list[Trajectory] = []
    for i in range(0, len(lines) - 2, 3):
        name, line2 = lines[i], lines[i + 2]
        elements = parse_tle_elements(line2)
        trajectories.append(trajectory_from_elements(name, elements, steps))

    dropped = len(lines) % 3
    if dropped:
        logger.debug("Ignored %d trailing TLE line(s)", dropped)
    logger.debug("Parsed %d TLE records", len(trajectories))
    return trajectories
