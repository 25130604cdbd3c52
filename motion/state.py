"""
Simulation state representation
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class Sample:
    """One point of the time series fed to the charts"""

    time: float  # Elapsed simulated time (s)
    position: float  # Position, wrapped on a closed track (m)
    velocity: float  # Velocity (m/s)


@dataclass(frozen=True)
class SimulationState:
    """Snapshot of the engine after a tick"""

    elapsed_time: float  # Simulated seconds since start (s)
    position: float  # Current position, wrapped on a closed track (m)
    velocity: float  # Current velocity (m/s)
    running: bool
    history: Tuple[Sample, ...] = field(default_factory=tuple)
    clock_anchor: Optional[float] = None  # Host timestamp of the first tick (ms)
    raw_position: float = 0.0  # Unwrapped displacement (m)
    track_length: Optional[float] = None  # Loop length the position was wrapped with (m)
