from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from orbprox.core.screening import DetectionResult
from orbprox.utils.constants import THREAT_GAIN

logger = logging.getLogger(__name__)

STATUS_ALERT = "RED ALERT"
STATUS_SAFE = "SAFE"
STATUS_INSUFFICIENT = "INSUFFICIENT DATA"


@dataclass
class ThreatAssessment:
    score: int                          # 0-100
    category: str                       # CRITICAL/HIGH/MEDIUM/LOW/NEGLIGIBLE
    status: str                         # RED ALERT/SAFE/INSUFFICIENT DATA
    closest_distance_km: float | None
    threshold_km: float
    event_count: int


def compute_threat_score(closest_distance_km: float | None, threshold_km: float) -> int:
    """
    Map the closest approach onto a 0-100 threat score.

    Intrusion into the threshold is amplified by 1.3, so the score is 0 at
    or beyond the threshold and saturates at 100 once the closest approach
    is within threshold * (1 - 1 / 1.3), about 23% of the threshold.

    Args:
        closest_distance_km: Global minimum separation, or None if no pair
            could be compared
        threshold_km: Alert distance in km, must be positive

    Returns:
        Integer score in [0, 100]
    """
    if closest_distance_km is None:
        return 0
    if not threshold_km > 0:
        logger.error("Invalid threshold: %r", threshold_km)
        raise ValueError(f"threshold_km must be positive, got {threshold_km!r}")

    ratio = max(0.0, (threshold_km - closest_distance_km) / threshold_km)
    boosted = min(1.0, ratio * THREAT_GAIN)
    # Round half up; builtin round() rounds half to even
    return int(math.floor(boosted * 100 + 0.5))


def assess_threat(detection: DetectionResult, threshold_km: float) -> ThreatAssessment:
    """
    Summarise a detection result as a threat assessment.

    Args:
        detection: Output of detect_close_approaches
        threshold_km: The threshold the detection was run with

    Returns:
        ThreatAssessment with score, category and alert status
    """
    score = compute_threat_score(detection.closest_distance_km, threshold_km)

    if not detection.has_minimum:
        status = STATUS_INSUFFICIENT
    elif detection.is_alert:
        status = STATUS_ALERT
    else:
        status = STATUS_SAFE

    logger.debug("Threat assessment: score=%d, status=%s, events=%d", score, status, len(detection.events))
    return ThreatAssessment(
        score=score,
        category=_categorize_score(score),
        status=status,
        closest_distance_km=detection.closest_distance_km,
        threshold_km=threshold_km,
        event_count=len(detection.events),
    )


def _categorize_score(score: float) -> str:
    """Categorize threat score into severity levels."""
    if score >= 80:
        return "CRITICAL"
    elif score >= 60:
        return "HIGH"
    elif score >= 40:
        return "MEDIUM"
    elif score >= 20:
        return "LOW"
    else:
        return "NEGLIGIBLE"
