"""Run configuration for the proximity monitor.

Loosely typed inputs (form fields, environment variables) are resolved to
documented defaults once, here, so the pipeline can assume well-formed
values.
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping

from orbprox.utils.constants import (
    DEFAULT_FUTURE_STEPS,
    DEFAULT_OBJECT_COUNT,
    DEFAULT_SEED,
    DEFAULT_THRESHOLD_KM,
)

logger = logging.getLogger(__name__)


class DataMode(Enum):
    """Trajectory source selection."""

    SYNTHETIC = "synthetic"
    TLE = "tle"


def _as_int(value: Any, default: int, name: str, minimum: int | None = None) -> int:
    if value is None or value == "":
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r, using default %d", name, value, default)
        return default
    if not math.isfinite(number) or number != int(number):
        logger.warning("Invalid %s %r, using default %d", name, value, default)
        return default
    if minimum is not None and number < minimum:
        logger.warning("Invalid %s %r, using default %d", name, value, default)
        return default
    return int(number)


def _as_float(value: Any, default: float, name: str) -> float:
    if value is None or value == "":
        return default
    try:
        number = float(value)
    except (TypeError, ValueError):
        logger.warning("Invalid %s %r, using default %s", name, value, default)
        return default
    if not math.isfinite(number):
        logger.warning("Invalid %s %r, using default %s", name, value, default)
        return default
    return number


def _as_mode(value: Any) -> DataMode:
    if isinstance(value, DataMode):
        return value
    try:
        return DataMode(str(value).strip().lower())
    except ValueError:
        if value is not None:
            logger.warning("Unknown data mode %r, using %s", value, DataMode.SYNTHETIC.value)
        return DataMode.SYNTHETIC


@dataclass(frozen=True)
class MonitorConfig:
    """Validated parameters for one monitoring run.

    Attributes:
        mode: Trajectory source.
        object_count: Synthetic objects to generate (synthetic mode).
        seed: Synthetic generator seed (synthetic mode).
        tle_text: Raw TLE text (TLE mode).
        threshold_km: Close-approach alert distance in km.
        future_steps: Extrapolation horizon in timesteps.

    Raises:
        ValueError: On a non-positive threshold, negative count or negative
            horizon.

    Example::

        config = MonitorConfig.from_raw(mode="synthetic", object_count="6", seed="7")
        report = run_monitor(config)
    """

    mode: DataMode = DataMode.SYNTHETIC
    object_count: int = DEFAULT_OBJECT_COUNT
    seed: int = DEFAULT_SEED
    tle_text: str = ""
    threshold_km: float = DEFAULT_THRESHOLD_KM
    future_steps: int = DEFAULT_FUTURE_STEPS

    def __post_init__(self) -> None:
        if not isinstance(self.mode, DataMode):
            try:
                object.__setattr__(self, "mode", DataMode(self.mode))
            except ValueError:
                logger.error("Invalid data mode: %r", self.mode)
                raise
        if not (math.isfinite(self.threshold_km) and self.threshold_km > 0):
            logger.error("Invalid threshold: %r", self.threshold_km)
            raise ValueError(f"threshold_km must be positive, got {self.threshold_km!r}")
        if self.object_count < 0:
            logger.error("Invalid object count: %r", self.object_count)
            raise ValueError(f"object_count must be non-negative, got {self.object_count!r}")
        if self.future_steps < 0:
            logger.error("Invalid extrapolation horizon: %r", self.future_steps)
            raise ValueError(f"future_steps must be non-negative, got {self.future_steps!r}")

    @classmethod
    def from_raw(
        cls,
        mode: Any = None,
        object_count: Any = None,
        seed: Any = None,
        tle_text: Any = None,
        threshold_km: Any = None,
        future_steps: Any = None,
    ) -> MonitorConfig:
        """Build a config from loosely typed values.

        Missing or unparseable values take their defaults: 4 objects,
        seed 42, 350 km threshold, 18 future steps, synthetic mode. A
        negative object count also takes the default. Any other value that
        parses but is out of range (e.g. a negative threshold) still raises.
        """
        return cls(
            mode=_as_mode(mode),
            object_count=_as_int(object_count, DEFAULT_OBJECT_COUNT, "object count", minimum=0),
            seed=_as_int(seed, DEFAULT_SEED, "seed"),
            tle_text="" if tle_text is None else str(tle_text),
            threshold_km=_as_float(threshold_km, DEFAULT_THRESHOLD_KM, "threshold"),
            future_steps=_as_int(future_steps, DEFAULT_FUTURE_STEPS, "future steps"),
        )

    @classmethod
    def from_env(
        cls,
        prefix: str = "ORBPROX_",
        environ: Mapping[str, str] | None = None,
    ) -> MonitorConfig:
        """Build a config from ``{prefix}MODE``, ``{prefix}OBJECT_COUNT``,
        ``{prefix}SEED``, ``{prefix}TLE_FILE``, ``{prefix}THRESHOLD_KM`` and
        ``{prefix}FUTURE_STEPS``.
        """
        env = os.environ if environ is None else environ
        tle_text = None
        tle_file = env.get(f"{prefix}TLE_FILE")
        if tle_file:
            with open(tle_file, encoding="utf-8") as fh:
                tle_text = fh.read()
        return cls.from_raw(
            mode=env.get(f"{prefix}MODE"),
            object_count=env.get(f"{prefix}OBJECT_COUNT"),
            seed=env.get(f"{prefix}SEED"),
            tle_text=tle_text,
            threshold_km=env.get(f"{prefix}THRESHOLD_KM"),
            future_steps=env.get(f"{prefix}FUTURE_STEPS"),
        )
