"""Integration test: source → extrapolate → detect → score end-to-end."""
from __future__ import annotations

import math

import pytest

from orbprox import DataMode, MonitorConfig, run_monitor
from orbprox.core.risk import STATUS_INSUFFICIENT

# Hardcoded real TLEs (no network calls)
CATALOG_TEXT = """\
ISS (ZARYA)
1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993
2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596
CSS (TIANHE)
1 48274U 21035A   24045.50261574  .00021540  00000-0  25163-3 0  9993
2 48274  41.4681 279.1498 0005372 149.8847 345.3740 15.62096269157018
HST
1 20580U 90037B   24045.55478014  .00001456  00000-0  73052-4 0  9994
2 20580  28.4701  41.0696 0002622 348.3544 140.2428 15.09435694872912
NOAA 18
1 28654U 05018A   24045.52083333  .00000149  00000-0  10834-3 0  9994
2 28654  98.9710 100.7890 0014048 313.6230  46.3750 14.12905012970123
"""


def test_huge_threshold_flags_two_objects():
    """Two synthetic objects always overlap a 100 000 km threshold."""
    report = run_monitor(MonitorConfig(object_count=2, seed=1, threshold_km=100000.0))
    assert report.sufficient_data
    assert len(report.detection.events) >= 1
    closest = report.detection.closest_distance_km
    assert math.isfinite(closest) and closest >= 0
    assert report.threat.status == "RED ALERT"


def test_single_object_is_insufficient():
    report = run_monitor(MonitorConfig(object_count=1, seed=42))
    assert len(report.trajectories) == 1
    assert not report.sufficient_data
    assert report.detection.closest_distance_km is None
    assert report.detection.events == []
    assert report.threat.score == 0
    assert report.threat.status == STATUS_INSUFFICIENT


def test_malformed_tle_is_insufficient():
    report = run_monitor(MonitorConfig(mode=DataMode.TLE, tle_text="just\ntwo lines"))
    assert report.trajectories == []
    assert not report.sufficient_data
    assert report.threat.status == STATUS_INSUFFICIENT


def test_trajectories_are_extrapolated():
    report = run_monitor(MonitorConfig(object_count=4, seed=42))
    assert len(report.trajectories) == 4
    for traj in report.trajectories:
        assert len(traj) == 63
        assert [p.t for p in traj.points] == list(range(63))


def test_deterministic_runs():
    config = MonitorConfig(object_count=5, seed=7, threshold_km=2000.0)
    first = run_monitor(config)
    second = run_monitor(config)
    assert first.trajectories == second.trajectories
    assert first.detection == second.detection
    assert first.threat == second.threat


def test_tle_catalog_run():
    report = run_monitor(MonitorConfig(mode=DataMode.TLE, tle_text=CATALOG_TEXT, threshold_km=1000.0))
    assert [t.name for t in report.trajectories] == ["ISS (ZARYA)", "CSS (TIANHE)", "HST", "NOAA 18"]
    assert all(len(t) == 63 for t in report.trajectories)
    assert report.sufficient_data
    assert 0 <= report.threat.score <= 100
    for event in report.detection.events:
        assert event.distance_km < 1000.0


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_kdtree_method_agrees(seed: int):
    config = MonitorConfig(object_count=8, seed=seed, threshold_km=1500.0)
    brute = run_monitor(config)
    tree = run_monitor(config, method="kdtree")
    assert tree.detection.events == brute.detection.events
    assert tree.threat.score == brute.threat.score


def test_default_config():
    report = run_monitor()
    assert report.config == MonitorConfig()
    assert len(report.trajectories) == 4


def test_version_matches_package_metadata():
    import orbprox

    assert orbprox.__version__ == "0.1.0.dev0"
