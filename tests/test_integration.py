"""
Integration tests for the full scenario workflow.

Tests the run_scenarios function which drives one engine per acceleration
value to termination and analyzes each run.
"""

import numpy as np
import pytest

from motion_simulation import run_scenarios


class TestIntegration:
    """Test suite for integration tests"""

    def test_run_scenarios_returns_results(self) -> None:
        """Test that run_scenarios returns results for all accelerations"""
        accelerations = [-2.0, 0.0, 2.0]
        results = run_scenarios(accelerations)

        assert len(results) == len(accelerations)

        for a in accelerations:
            assert a in results

    def test_results_contain_required_keys(self) -> None:
        """Test that results contain all required data"""
        results = run_scenarios([2.0])

        for a, data in results.items():
            assert "params" in data
            assert "state" in data
            assert "trajectory" in data
            assert "analysis" in data
            assert "engine" in data

    def test_linear_runs_last_ten_seconds(self) -> None:
        """Test that every linear scenario stops at the time bound"""
        results = run_scenarios([-5.0, 0.0, 5.0], frame_interval_ms=100.0)

        for data in results.values():
            assert not data["state"].running
            assert data["state"].elapsed_time == pytest.approx(10.0)

    def test_higher_acceleration_goes_further(self) -> None:
        """Test that displacement grows with acceleration"""
        results = run_scenarios([0.0, 2.0, 5.0])

        displacements = [results[a]["analysis"]["displacement"] for a in (0.0, 2.0, 5.0)]

        assert displacements == sorted(displacements)
        assert displacements[0] == pytest.approx(100.0)

    def test_trajectory_matches_history(self) -> None:
        """Test that the vectorized trajectory agrees with the sampled history"""
        results = run_scenarios([3.0], x0=-10.0, v0=5.0)
        data = results[3.0]

        sampled = np.array([s.position for s in data["state"].history])
        np.testing.assert_allclose(data["trajectory"]["position"], sampled, atol=1e-9)

    def test_circuit_scenarios(self) -> None:
        """Test that circuit runs end once three laps are covered"""
        results = run_scenarios([0.0, 2.0], closed_track=True)

        assert results[0.0]["state"].elapsed_time == pytest.approx(120.0)
        assert results[2.0]["state"].elapsed_time == pytest.approx(30.0)
        for data in results.values():
            assert data["state"].raw_position >= 1200.0
            assert data["analysis"]["laps_completed"] == 3
            assert len(data["state"].history) == 50
