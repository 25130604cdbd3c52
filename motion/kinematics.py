"""
Closed-form equations of uniformly accelerated motion
"""

from typing import Dict, Optional

import numpy as np

from motion.params import SimulationParameters


def raw_position(params: SimulationParameters, t: float) -> float:
    """
    Unwrapped displacement at time t

    x(t) = x0 + v0*t + a*t²/2
    """
    return params.x0 + params.v0 * t + 0.5 * params.a * t * t


def velocity(params: SimulationParameters, t: float) -> float:
    """v(t) = v0 + a*t"""
    return params.v0 + params.a * t


def wrap_position(position: float, track_length: Optional[float]) -> float:
    """
    Map a raw position onto [0, track_length)

    Uses a true modulo, so -50 on a 400 m loop is 350, not -50.
    Returns the position unchanged on an open track.
    """
    if track_length is None:
        return position
    wrapped = position % track_length
    # -1e-18 % 400 rounds up to exactly 400.0
    if wrapped >= track_length:
        wrapped = 0.0
    return wrapped


def trajectory(params: SimulationParameters, times: np.ndarray) -> Dict[str, np.ndarray]:
    """
    Evaluate the motion at many instants at once

    Args:
        params: Kinematic parameters
        times: Array of elapsed times (s)

    Returns:
        Dictionary with "time", "raw_position", "position" (wrapped on a
        closed track) and "velocity" arrays
    """
    t = np.asarray(times, dtype=float)
    raw = params.x0 + params.v0 * t + 0.5 * params.a * t**2
    vel = params.v0 + params.a * t
    if params.track_length is not None:
        wrapped = np.mod(raw, params.track_length)
        wrapped = np.where(wrapped >= params.track_length, 0.0, wrapped)
    else:
        wrapped = raw.copy()
    return {"time": t, "raw_position": raw, "position": wrapped, "velocity": vel}


def _fmt(value: float) -> str:
    return f"{value:g}"


def format_equation(params: SimulationParameters) -> str:
    """Position equation with the current values substituted, e.g. X = 0 + 10t + (2t²)/2"""
    return f"X = {_fmt(params.x0)} + {_fmt(params.v0)}t + ({_fmt(params.a)}t²)/2"
