from __future__ import annotations

"""Default parameters and model constants for proximity monitoring.

Distances in km, angles in radians unless otherwise noted.
"""

import math

# --- Time ---
SECONDS_PER_DAY: float = 86400.0
"""Seconds in one solar day."""

# --- Run defaults ---
DEFAULT_OBJECT_COUNT: int = 4
"""Number of synthetic objects when the requested count is invalid."""

DEFAULT_SEED: int = 42
"""Synthetic generator seed when the requested seed is invalid."""

PRNG_DEFAULT_SEED: int = 1
"""Seed used by the PRNG itself when called without a usable seed."""

DEFAULT_THRESHOLD_KM: float = 350.0
"""Close-approach distance threshold in km."""

TRAJECTORY_STEPS: int = 45
"""Points emitted per object by both trajectory sources."""

DEFAULT_FUTURE_STEPS: int = 18
"""Extrapolation horizon in timesteps."""

# --- Synthetic orbit ranges ---
SYNTHETIC_RADIUS_MIN_KM: float = 6650.0
SYNTHETIC_RADIUS_SPAN_KM: float = 850.0
SYNTHETIC_SPEED_MIN_RAD: float = 0.035
SYNTHETIC_SPEED_SPAN_RAD: float = 0.03
SYNTHETIC_INCLINATION_SPAN_RAD: float = 0.35

# --- TLE heuristics ---
TLE_BASE_RADIUS_KM: float = 6771.0
"""Base orbital radius for the coarse LEO altitude heuristic."""

TLE_LOW_MOTION_OFFSET_KM: float = 800.0
"""Radius offset for mean motion below ``TLE_MOTION_SPLIT``."""

TLE_HIGH_MOTION_OFFSET_KM: float = 450.0
"""Radius offset for mean motion at or above ``TLE_MOTION_SPLIT``."""

TLE_MOTION_SPLIT_REV_DAY: float = 15.0
TLE_DEFAULT_MEAN_MOTION_REV_DAY: float = 15.0
TLE_DEFAULT_INCLINATION_DEG: float = 0.0
TLE_DEFAULT_MEAN_ANOMALY_DEG: float = 0.0

# --- Threat scoring ---
THREAT_GAIN: float = 1.3
"""Amplification applied to the threshold intrusion ratio."""

TWO_PI: float = 2.0 * math.pi
