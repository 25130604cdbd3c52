"""
Track geometry for rendering positions on a loop
"""

import math
from typing import Tuple

from motion.errors import InvalidParameterError
from motion.kinematics import wrap_position


def track_angle(position: float, track_length: float) -> float:
    """
    Angle of a position along the loop (rad)

    angle = (position / track_length) * 2π, with the position wrapped first
    so negative positions land on the loop too.
    """
    if not track_length > 0:
        raise InvalidParameterError(f"track_length must be positive, got {track_length!r}")
    return wrap_position(position, track_length) / track_length * 2 * math.pi


def project_to_track(
    position: float,
    track_length: float,
    center_x: float,
    center_y: float,
    radius_x: float,
    radius_y: float,
) -> Tuple[float, float]:
    """
    Map a track position to a point on an ellipse

    Args:
        position: Position along the track (m)
        track_length: Loop length (m)
        center_x: Ellipse center x (drawing units)
        center_y: Ellipse center y (drawing units)
        radius_x: Horizontal radius (drawing units)
        radius_y: Vertical radius, equal to radius_x for a circle

    Returns:
        Tuple of (x, y) in drawing units
    """
    angle = track_angle(position, track_length)
    return (
        center_x + radius_x * math.cos(angle),
        center_y + radius_y * math.sin(angle),
    )
