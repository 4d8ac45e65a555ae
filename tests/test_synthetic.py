"""Tests for the synthetic trajectory generator."""
from __future__ import annotations

import numpy as np
import pytest

from orbprox.core.synthetic import generate_synthetic, tilted_circular_points
from orbprox.core.trajectory import Trajectory


class TestGenerateSynthetic:
    def test_reproducible(self) -> None:
        assert generate_synthetic(count=5, seed=7) == generate_synthetic(count=5, seed=7)

    def test_seed_changes_output(self) -> None:
        assert generate_synthetic(count=3, seed=1) != generate_synthetic(count=3, seed=2)

    def test_names_sequential(self) -> None:
        trajectories = generate_synthetic(count=4, seed=42)
        assert [t.name for t in trajectories] == ["SIM-1", "SIM-2", "SIM-3", "SIM-4"]

    def test_point_count_and_timesteps(self) -> None:
        for traj in generate_synthetic(count=3, seed=42):
            assert len(traj) == 45
            assert [p.t for p in traj.points] == list(range(45))
            assert traj.timesteps.tolist() == list(range(45))

    def test_radius_in_range_and_constant(self) -> None:
        for traj in generate_synthetic(count=10, seed=99):
            radii = np.linalg.norm(traj.positions, axis=1)
            assert np.all(radii >= 6650.0 - 1e-6)
            assert np.all(radii < 7500.0)
            assert np.ptp(radii) < 1e-6

    def test_inclination_bounded(self) -> None:
        # |z| / r = |sin(a) sin(i)| <= sin(0.175)
        for traj in generate_synthetic(count=10, seed=5):
            pos = traj.positions
            radii = np.linalg.norm(pos, axis=1)
            assert np.all(np.abs(pos[:, 2]) / radii <= np.sin(0.175) + 1e-9)

    def test_zero_count_empty(self) -> None:
        assert generate_synthetic(count=0, seed=42) == []

    def test_negative_count_raises(self) -> None:
        with pytest.raises(ValueError, match="non-negative"):
            generate_synthetic(count=-1)

    def test_prefix_stable_when_count_grows(self) -> None:
        small = generate_synthetic(count=2, seed=13)
        large = generate_synthetic(count=4, seed=13)
        assert large[:2] == small

    def test_returns_trajectories(self) -> None:
        assert all(isinstance(t, Trajectory) for t in generate_synthetic(count=2))


def test_tilted_circular_points_zero_inclination():
    angles = np.array([0.0, np.pi / 2, np.pi])
    x, y, z = tilted_circular_points(7000.0, 0.0, angles)
    np.testing.assert_allclose(x, [7000.0, 0.0, -7000.0], atol=1e-9)
    np.testing.assert_allclose(y, [0.0, 7000.0, 0.0], atol=1e-9)
    np.testing.assert_allclose(z, [0.0, 0.0, 0.0], atol=1e-9)


def test_tilted_circular_points_polar():
    x, y, z = tilted_circular_points(7000.0, np.pi / 2, np.array([np.pi / 2]))
    assert y[0] == pytest.approx(0.0, abs=1e-9)
    assert z[0] == pytest.approx(7000.0)
