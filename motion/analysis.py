"""
Run summary calculations
"""

import math
from typing import Any, Dict, Optional

import numpy as np
from scipy.integrate import quad

from motion.kinematics import velocity
from motion.params import SimulationParameters
from motion.state import SimulationState


def turnaround_time(params: SimulationParameters, duration: float) -> Optional[float]:
    """
    Instant the velocity changes sign within (0, duration), if it does

    Coming to rest exactly at the end of the interval is not a turnaround.

    Args:
        params: Kinematic parameters
        duration: End of the interval considered (s)
    """
    if params.a == 0:
        return None
    t_star = -params.v0 / params.a
    if 0 < t_star < duration:
        return t_star
    return None


def distance_travelled(params: SimulationParameters, duration: float) -> float:
    """
    Path length over [0, duration], counting motion in both directions

    Integrates |v(t)| rather than taking the displacement, so an object that
    brakes and comes back still accumulates distance.
    """
    if duration <= 0:
        return 0.0
    t_star = turnaround_time(params, duration)
    # quad needs the kink in |v| flagged
    points = [t_star] if t_star is not None else None
    result, _ = quad(lambda t: abs(velocity(params, t)), 0.0, duration, points=points)
    return float(result)


def finish_time(params: SimulationParameters, target: float) -> Optional[float]:
    """
    Earliest time the raw position reaches target

    Solves x0 + v0*t + a*t²/2 = target for the smallest non-negative root.

    Returns:
        Time in seconds, 0.0 if the object starts at or past target,
        None if it never gets there
    """
    if params.x0 >= target:
        return 0.0
    roots = np.roots([0.5 * params.a, params.v0, params.x0 - target])
    candidates = [float(r.real) for r in roots if abs(r.imag) < 1e-12 and r.real >= 0]
    if not candidates:
        return None
    return min(candidates)


def analyze_run(state: SimulationState, params: SimulationParameters) -> Dict[str, Any]:
    """
    Summarize a run

    Args:
        state: Snapshot returned by the engine (usually the final one)
        params: Parameters the run used

    Returns:
        Dictionary with analysis results
    """
    duration = state.elapsed_time
    history = state.history

    if history:
        velocities = np.array([s.velocity for s in history])
        peak_sampled_speed = float(np.max(np.abs(velocities)))
    else:
        peak_sampled_speed = 0.0

    # |v| is linear in t on either side of a turnaround, so the peak is at an end
    peak_speed = max(abs(params.v0), abs(velocity(params, duration)))

    t_turn = turnaround_time(params, duration)

    if params.track_length is not None:
        laps_completed = max(0, int(math.floor(state.raw_position / params.track_length)))
        target = params.track_length * params.laps if params.laps is not None else None
    else:
        laps_completed = 0
        target = None

    return {
        "final_time": duration,
        "final_position": state.position,
        "final_raw_position": state.raw_position,
        "final_velocity": state.velocity,
        "displacement": state.raw_position - params.x0,
        "distance_travelled": distance_travelled(params, duration),
        "peak_speed": peak_speed,
        "peak_sampled_speed": peak_sampled_speed,
        "turnaround_time": t_turn,
        "reversed": t_turn is not None,
        "laps_completed": laps_completed,
        "predicted_finish_time": finish_time(params, target) if target is not None else None,
        "samples": len(history),
    }
