"""
Engine factories for the two track variants
"""

from typing import Optional

from motion.engine import KinematicEngine
from motion.params import CLOSED_TRACK_BOUNDS, OPEN_TRACK_BOUNDS, SimulationParameters
from motion.termination import TerminationPolicy

OPEN_TRACK_MAX_DURATION = 10.0  # s
OPEN_TRACK_RENDER_LENGTH = 1000.0  # m, loop used only to draw the marker
CLOSED_TRACK_LENGTH = 400.0  # m
CLOSED_TRACK_LAPS = 3
CLOSED_TRACK_HISTORY = 50  # samples shown on the charts


def open_track_engine(
    params: Optional[SimulationParameters] = None,
    max_duration: float = OPEN_TRACK_MAX_DURATION,
) -> KinematicEngine:
    """
    Linear motion that runs for a fixed time

    Positions are not wrapped and every sample of the run is kept.
    """
    return KinematicEngine(
        params=params if params is not None else SimulationParameters(),
        policy=TerminationPolicy.time_bounded(max_duration),
        max_history=None,
        bounds=OPEN_TRACK_BOUNDS,
        render_length=OPEN_TRACK_RENDER_LENGTH,
    )


def closed_track_engine(
    params: Optional[SimulationParameters] = None,
    track_length: float = CLOSED_TRACK_LENGTH,
    laps: int = CLOSED_TRACK_LAPS,
    max_history: int = CLOSED_TRACK_HISTORY,
) -> KinematicEngine:
    """
    Circuit motion that runs for a number of laps

    Positions wrap modulo the track length and only the latest samples are kept.
    Explicit track_length/laps in params take precedence over the keyword defaults.
    """
    if params is None:
        params = SimulationParameters(track_length=track_length, laps=laps)
    elif params.track_length is None or params.laps is None:
        params = SimulationParameters(
            x0=params.x0,
            v0=params.v0,
            a=params.a,
            track_length=params.track_length if params.track_length is not None else track_length,
            laps=params.laps if params.laps is not None else laps,
        )
    return KinematicEngine(
        params=params,
        policy=TerminationPolicy.distance_bounded(),
        max_history=max_history,
        bounds=CLOSED_TRACK_BOUNDS,
    )
