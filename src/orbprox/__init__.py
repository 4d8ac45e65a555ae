"""
orbprox — Orbital proximity monitoring for Python.

Generates or ingests satellite trajectories, extrapolates them a short
horizon ahead, and flags close approaches between every pair of objects.
Each run is a deterministic batch computation.
"""

from __future__ import annotations

__version__ = "0.1.0.dev0"

from orbprox.core.rng import Mulberry32
from orbprox.core.trajectory import Point, Trajectory
from orbprox.core.synthetic import generate_synthetic
from orbprox.core.tle import TLEElements, parse_tle, parse_tle_elements
from orbprox.core.extrapolation import LinearFit, extrapolate, extrapolate_points, fit_line
from orbprox.core.screening import (
    CloseApproachEvent,
    DetectionResult,
    detect_close_approaches,
    resolve_event,
)
from orbprox.core.risk import ThreatAssessment, assess_threat, compute_threat_score
from orbprox.config import DataMode, MonitorConfig
from orbprox.pipeline import MonitorReport, run_monitor

__all__ = [
    "__version__",
    "Mulberry32",
    "Point",
    "Trajectory",
    "generate_synthetic",
    "TLEElements",
    "parse_tle",
    "parse_tle_elements",
    "LinearFit",
    "fit_line",
    "extrapolate",
    "extrapolate_points",
    "CloseApproachEvent",
    "DetectionResult",
    "detect_close_approaches",
    "resolve_event",
    "ThreatAssessment",
    "assess_threat",
    "compute_threat_score",
    "DataMode",
    "MonitorConfig",
    "MonitorReport",
    "run_monitor",
]
