"""End-to-end monitoring run: source → extrapolate → detect → score."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from orbprox.config import DataMode, MonitorConfig
from orbprox.core.extrapolation import extrapolate
from orbprox.core.risk import ThreatAssessment, assess_threat
from orbprox.core.screening import DetectionResult, detect_close_approaches
from orbprox.core.synthetic import generate_synthetic
from orbprox.core.tle import parse_tle
from orbprox.core.trajectory import Trajectory

logger = logging.getLogger(__name__)


@dataclass
class MonitorReport:
    """Everything a presentation layer needs from one run.

    Attributes:
        config: The configuration the run used.
        trajectories: Trajectories after extrapolation.
        detection: Close-approach scan result.
        threat: Derived threat assessment.
    """

    config: MonitorConfig
    trajectories: list[Trajectory]
    detection: DetectionResult
    threat: ThreatAssessment

    @property
    def sufficient_data(self) -> bool:
        """False when fewer than two objects could be compared."""
        return self.detection.has_minimum


def load_trajectories(config: MonitorConfig) -> list[Trajectory]:
    """Produce the initial trajectory set from the configured source."""
    if config.mode is DataMode.TLE:
        return parse_tle(config.tle_text)
    return generate_synthetic(config.object_count, config.seed)


def run_monitor(config: MonitorConfig | None = None, method: str = "pairwise") -> MonitorReport:
    """Run one deterministic monitoring pass.

    Args:
        config: Run parameters. Defaults to ``MonitorConfig()``.
        method: Detection strategy passed to ``detect_close_approaches``.

    Returns:
        A MonitorReport. Fewer than two objects is not an error: the report
        has no closest distance, no events and status ``INSUFFICIENT DATA``.
    """
    if config is None:
        config = MonitorConfig()

    trajectories = [
        extrapolate(traj, config.future_steps)
        for traj in load_trajectories(config)
        if traj.points
    ]
    detection = detect_close_approaches(trajectories, config.threshold_km, method=method)
    threat = assess_threat(detection, config.threshold_km)

    if detection.has_minimum:
        logger.info(
            "run_monitor: %d objects, %d events, closest %.1f km, threat %d%% (%s)",
            len(trajectories), len(detection.events), detection.closest_distance_km,
            threat.score, threat.status,
        )
    else:
        logger.info("run_monitor: %d object(s), insufficient data", len(trajectories))

    return MonitorReport(
        config=config,
        trajectories=trajectories,
        detection=detection,
        threat=threat,
    )
