"""Close-approach detection between trajectories.

Trajectories are compared point by point at matching array positions, so
both sides must be sampled on the same cadence. Two strategies are offered:

* ``pairwise``: every pair at every step. O(P² · S), ample for tens of
  objects.
* ``kdtree``: one ``cKDTree`` per step over all objects present at that
  step. Same results, for larger catalogs.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.spatial import cKDTree

from orbprox.core.trajectory import Point, Trajectory

logger = logging.getLogger(__name__)

PAIR_SEPARATOR = " ↔ "

_METHODS = ("pairwise", "kdtree")


@dataclass(frozen=True)
class CloseApproachEvent:
    """Two objects closer than the threshold at one timestep.

    Attributes:
        primary_name: Name of the earlier trajectory in input order.
        secondary_name: Name of the later trajectory in input order.
        distance_km: Separation in km.
        time_step: Array position at which the approach occurs.
    """

    primary_name: str
    secondary_name: str
    distance_km: float
    time_step: int

    @property
    def pair_label(self) -> str:
        return f"{self.primary_name}{PAIR_SEPARATOR}{self.secondary_name}"

    @property
    def distance_display(self) -> str:
        """Distance rounded to 0.1 km for reporting."""
        return f"{self.distance_km:.1f}"


@dataclass
class DetectionResult:
    """Outcome of a close-approach scan.

    Attributes:
        closest_distance_km: Smallest separation seen over all pairs and
            steps, or ``None`` when nothing could be compared.
        events: Sub-threshold approaches in scan order (pair, then step).
    """

    closest_distance_km: float | None = None
    events: list[CloseApproachEvent] = field(default_factory=list)

    @property
    def has_minimum(self) -> bool:
        return self.closest_distance_km is not None

    @property
    def is_alert(self) -> bool:
        return bool(self.events)


def distance_km(a: Point, b: Point) -> float:
    """Euclidean distance between two points in km."""
    return math.sqrt((a.x - b.x) ** 2 + (a.y - b.y) ** 2 + (a.z - b.z) ** 2)


def _check_unique_names(trajectories: Sequence[Trajectory]) -> None:
    seen: set[str] = set()
    for traj in trajectories:
        if traj.name in seen:
            logger.error("Duplicate trajectory name: %r", traj.name)
            raise ValueError(f"Duplicate trajectory name: {traj.name!r}")
        seen.add(traj.name)


def _detect_pairwise(
    trajectories: Sequence[Trajectory], threshold_km: float
) -> DetectionResult:
    closest = math.inf
    events: list[CloseApproachEvent] = []

    for i, a in enumerate(trajectories):
        for b in trajectories[i + 1:]:
            steps = min(len(a.points), len(b.points))
            for t in range(steps):
                d = distance_km(a.points[t], b.points[t])
                closest = min(closest, d)
                if d < threshold_km:
                    events.append(CloseApproachEvent(a.name, b.name, d, t))

    return DetectionResult(
        closest_distance_km=closest if math.isfinite(closest) else None,
        events=events,
    )


def _detect_kdtree(
    trajectories: Sequence[Trajectory], threshold_km: float
) -> DetectionResult:
    if len(trajectories) < 2:
        return DetectionResult()

    positions = [traj.positions for traj in trajectories]
    lengths = np.array([len(p) for p in positions])
    max_steps = int(np.sort(lengths)[-2])  # steps shared by at least one pair

    closest = math.inf
    # (i, j, t, distance) per sub-threshold hit
    hits: list[tuple[int, int, int, float]] = []

    for t in range(max_steps):
        idx_map = np.where(lengths > t)[0]
        pos_t: NDArray[np.float64] = np.array([positions[k][t] for k in idx_map])

        tree = cKDTree(pos_t)
        dists, _ = tree.query(pos_t, k=2)
        closest = min(closest, float(dists[:, 1].min()))

        for a, b in tree.query_pairs(threshold_km):
            d = distance_km(trajectories[idx_map[a]].points[t], trajectories[idx_map[b]].points[t])
            if d < threshold_km:
                i, j = sorted((int(idx_map[a]), int(idx_map[b])))
                hits.append((i, j, t, d))

    hits.sort(key=lambda h: (h[0], h[1], h[2]))
    events = [
        CloseApproachEvent(trajectories[i].name, trajectories[j].name, d, t)
        for i, j, t, d in hits
    ]
    return DetectionResult(
        closest_distance_km=closest if math.isfinite(closest) else None,
        events=events,
    )


def detect_close_approaches(
    trajectories: Sequence[Trajectory],
    threshold_km: float,
    method: str = "pairwise",
) -> DetectionResult:
    """Scan all trajectory pairs for sub-threshold approaches.

    For every pair ``i < j`` in input order and every shared array position
    ``t``, the separation is measured. The global minimum is tracked and an
    event is recorded whenever the separation is strictly below
    ``threshold_km``.

    Args:
        trajectories: Trajectories with unique names.
        threshold_km: Alert distance in km, must be positive.
        method: ``"pairwise"`` or ``"kdtree"``.

    Returns:
        DetectionResult with the global minimum (``None`` if fewer than two
        comparable trajectories) and events ordered by pair, then step.

    Raises:
        ValueError: On a non-positive threshold, unknown method or
            duplicate trajectory names.
    """
    if not threshold_km > 0:
        logger.error("Invalid threshold: %r", threshold_km)
        raise ValueError(f"threshold_km must be positive, got {threshold_km!r}")
    if method not in _METHODS:
        logger.error("Unknown detection method: %r", method)
        raise ValueError(f"Unknown detection method {method!r}, expected one of {_METHODS}")
    _check_unique_names(trajectories)

    if method == "kdtree":
        result = _detect_kdtree(trajectories, threshold_km)
    else:
        result = _detect_pairwise(trajectories, threshold_km)

    logger.debug(
        "detect_close_approaches[%s]: %d objects, %d events, closest=%s km",
        method, len(trajectories), len(result.events), result.closest_distance_km,
    )
    return result


def resolve_event(
    trajectories: Sequence[Trajectory],
    event: CloseApproachEvent,
) -> tuple[Point, Point] | None:
    """Look up the two points involved in ``event``.

    Args:
        trajectories: The trajectory set the event was detected in.
        event: A detected close approach.

    Returns:
        Tuple of (primary point, secondary point), or ``None`` when either
        name is unknown or has no point at ``event.time_step``.
    """
    by_name = {traj.name: traj for traj in trajectories}
    primary = by_name.get(event.primary_name)
    secondary = by_name.get(event.secondary_name)
    if primary is None or secondary is None:
        return None
    t = event.time_step
    if not (0 <= t < len(primary.points) and 0 <= t < len(secondary.points)):
        return None
    return primary.points[t], secondary.points[t]
