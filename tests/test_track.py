"""
Unit tests for the track projection used by renderers.
"""

import math

import pytest

from motion.errors import InvalidParameterError
from motion.track import project_to_track, track_angle


class TestTrackProjection:
    """Test suite for angle mapping and projection"""

    def test_angle_of_quarter_lap(self) -> None:
        """Test that a quarter of the loop maps to π/2"""
        assert track_angle(100.0, 400.0) == pytest.approx(math.pi / 2)

    def test_angle_of_negative_position(self) -> None:
        """Test that negative positions wrap before mapping"""
        assert track_angle(-100.0, 400.0) == pytest.approx(3 * math.pi / 2)

    def test_start_is_rightmost_point(self) -> None:
        """Test that position 0 maps to angle 0 on the ellipse"""
        x, y = project_to_track(0.0, 400.0, 300.0, 150.0, 250.0, 100.0)

        assert x == pytest.approx(550.0)
        assert y == pytest.approx(150.0)

    def test_half_lap_on_ellipse(self) -> None:
        """Test that half a lap maps to the leftmost point"""
        x, y = project_to_track(500.0, 1000.0, 300.0, 150.0, 250.0, 100.0)

        assert x == pytest.approx(50.0)
        assert y == pytest.approx(150.0, abs=1e-9)

    def test_circle_quarter_lap(self) -> None:
        """Test projection on a circular track"""
        x, y = project_to_track(100.0, 400.0, 200.0, 200.0, 150.0, 150.0)

        assert x == pytest.approx(200.0, abs=1e-9)
        assert y == pytest.approx(350.0)

    def test_zero_track_length_rejected(self) -> None:
        """Test that a zero track length raises instead of producing NaN"""
        with pytest.raises(InvalidParameterError):
            track_angle(10.0, 0.0)
