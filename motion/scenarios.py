"""
Batch runs comparing several accelerations
"""

import logging
from typing import Any, Dict, Iterable

from motion.analysis import analyze_run
from motion.kinematics import trajectory
from motion.params import SimulationParameters
from motion.presets import (
    CLOSED_TRACK_LAPS,
    CLOSED_TRACK_LENGTH,
    closed_track_engine,
    open_track_engine,
)

logger = logging.getLogger(__name__)


def run_scenarios(
    accelerations: Iterable[float],
    x0: float = 0.0,
    v0: float = 10.0,
    closed_track: bool = False,
    laps: int = CLOSED_TRACK_LAPS,
    frame_interval_ms: float = 50.0,
    max_ticks: int = 100_000,
) -> Dict[float, Dict[str, Any]]:
    """
    Run one simulation per acceleration value

    Args:
        accelerations: Accelerations to compare (m/s²)
        x0: Shared initial position (m)
        v0: Shared initial velocity (m/s)
        closed_track: Use the circuit variant instead of the linear one
        laps: Laps per run on the circuit
        frame_interval_ms: Spacing of the synthetic ticks (ms)
        max_ticks: Tick limit per run

    Returns:
        Dictionary with results for each acceleration
    """
    results: Dict[float, Dict[str, Any]] = {}

    for a in accelerations:
        if closed_track:
            params = SimulationParameters(
                x0=x0, v0=v0, a=a, track_length=CLOSED_TRACK_LENGTH, laps=laps
            )
            engine = closed_track_engine(params)
        else:
            params = SimulationParameters(x0=x0, v0=v0, a=a)
            engine = open_track_engine(params)

        state = engine.run(frame_interval_ms=frame_interval_ms, max_ticks=max_ticks)
        analysis = analyze_run(state, params)
        times = [s.time for s in state.history]
        logger.info(
            "a=%g m/s²: finished at t=%.2fs, distance %.2f m",
            a,
            state.elapsed_time,
            analysis["distance_travelled"],
        )

        results[a] = {
            "params": params,
            "state": state,
            "trajectory": trajectory(params, times),
            "analysis": analysis,
            "engine": engine,
        }

    return results
