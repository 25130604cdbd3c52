"""
Run termination policies
"""

import math
from dataclasses import dataclass
from enum import Enum

from motion.errors import InvalidParameterError
from motion.params import SimulationParameters


class TerminationKind(str, Enum):
    TIME_BOUNDED = "time"
    DISTANCE_BOUNDED = "distance"


@dataclass(frozen=True)
class TerminationPolicy:
    """Decides when a run stops on its own"""

    kind: TerminationKind = TerminationKind.TIME_BOUNDED
    max_duration: float = 10.0  # s, time-bounded runs only

    def __post_init__(self) -> None:
        if self.kind is TerminationKind.TIME_BOUNDED:
            if not math.isfinite(self.max_duration) or self.max_duration <= 0:
                raise InvalidParameterError(
                    f"max_duration must be positive and finite, got {self.max_duration!r}"
                )

    @classmethod
    def time_bounded(cls, max_duration: float = 10.0) -> "TerminationPolicy":
        return cls(TerminationKind.TIME_BOUNDED, max_duration)

    @classmethod
    def distance_bounded(cls) -> "TerminationPolicy":
        return cls(TerminationKind.DISTANCE_BOUNDED)

    def validate(self, params: SimulationParameters) -> None:
        """
        Check that params carry what this policy needs

        Raises:
            InvalidParameterError: If a distance-bounded run lacks track_length or laps
        """
        if self.kind is TerminationKind.DISTANCE_BOUNDED:
            if params.track_length is None or params.laps is None:
                raise InvalidParameterError(
                    "distance-bounded termination requires track_length and laps"
                )

    def target_distance(self, params: SimulationParameters) -> float:
        """Raw position at which a distance-bounded run ends"""
        self.validate(params)
        return params.track_length * params.laps

    def is_finished(
        self, params: SimulationParameters, elapsed_time: float, raw_position: float
    ) -> bool:
        """
        Evaluate the termination condition for one tick

        Args:
            params: Parameters of the run
            elapsed_time: Simulated time of the tick (s)
            raw_position: Unwrapped displacement at that time (m)
        """
        if self.kind is TerminationKind.TIME_BOUNDED:
            return elapsed_time >= self.max_duration
        # Compared against the raw position including x0, as the circuit demo does
        return raw_position >= self.target_distance(params)
