"""
Unit tests for termination policies.
"""

import math

import pytest

from motion.errors import InvalidParameterError
from motion.params import SimulationParameters
from motion.termination import TerminationKind, TerminationPolicy


class TestTerminationPolicy:
    """Test suite for TerminationPolicy"""

    def test_default_is_time_bounded(self) -> None:
        """Test that the default policy stops after 10 seconds"""
        policy = TerminationPolicy()

        assert policy.kind is TerminationKind.TIME_BOUNDED
        assert policy.max_duration == 10.0

    def test_time_bounded_threshold(self) -> None:
        """Test that a time-bounded run ends once elapsed time reaches the limit"""
        policy = TerminationPolicy.time_bounded(10.0)
        params = SimulationParameters()

        assert not policy.is_finished(params, 9.99, 0.0)
        assert policy.is_finished(params, 10.0, 0.0)
        assert policy.is_finished(params, 10.5, 0.0)

    @pytest.mark.parametrize("duration", [0.0, -1.0, math.nan, math.inf])
    def test_invalid_duration(self, duration: float) -> None:
        """Test that the time bound must be positive and finite"""
        with pytest.raises(InvalidParameterError):
            TerminationPolicy.time_bounded(duration)

    def test_distance_bounded_threshold(self) -> None:
        """Test that a distance-bounded run ends at track_length × laps"""
        policy = TerminationPolicy.distance_bounded()
        params = SimulationParameters(track_length=400.0, laps=3)

        assert policy.target_distance(params) == 1200.0
        assert not policy.is_finished(params, 1000.0, 1199.9)
        assert policy.is_finished(params, 1000.0, 1200.0)

    def test_distance_bound_uses_raw_position_including_x0(self) -> None:
        """Test that x0 is not subtracted from the raw position"""
        policy = TerminationPolicy.distance_bounded()
        params = SimulationParameters(x0=100.0, track_length=400.0, laps=3)

        # 1100 m travelled from x0=100 reaches the raw threshold of 1200
        assert policy.is_finished(params, 0.0, 1200.0)

    def test_distance_bounded_requires_track(self) -> None:
        """Test that distance-bounded runs need a track length and laps"""
        policy = TerminationPolicy.distance_bounded()

        with pytest.raises(InvalidParameterError):
            policy.validate(SimulationParameters())
        with pytest.raises(InvalidParameterError):
            policy.validate(SimulationParameters(track_length=400.0))

    def test_time_bounded_accepts_any_track(self) -> None:
        """Test that time-bounded runs work with or without a track"""
        policy = TerminationPolicy.time_bounded()

        policy.validate(SimulationParameters())
        policy.validate(SimulationParameters(track_length=400.0, laps=2))
