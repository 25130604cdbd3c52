"""
Uniformly Accelerated Rectilinear Motion Simulator

This package drives a kinematic engine that samples constant-acceleration
motion on a linear or closed track, for display as a moving marker and
position/velocity charts.
"""

from motion.analysis import analyze_run, finish_time
from motion.engine import KinematicEngine
from motion.errors import InvalidParameterError, InvalidStateError, MotionError
from motion.params import ParameterBounds, SimulationParameters
from motion.presets import closed_track_engine, open_track_engine
from motion.scenarios import run_scenarios
from motion.state import Sample, SimulationState
from motion.termination import TerminationKind, TerminationPolicy

__all__ = [
    "KinematicEngine",
    "SimulationParameters",
    "ParameterBounds",
    "SimulationState",
    "Sample",
    "TerminationPolicy",
    "TerminationKind",
    "MotionError",
    "InvalidParameterError",
    "InvalidStateError",
    "open_track_engine",
    "closed_track_engine",
    "analyze_run",
    "finish_time",
    "run_scenarios",
]
