"""
Simulation parameters and their numeric domains
"""

import math
from dataclasses import dataclass, fields
from typing import Optional, Tuple

from motion.errors import InvalidParameterError


def _require_finite(name: str, value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidParameterError(f"{name} must be finite, got {value!r}")


@dataclass(frozen=True)
class SimulationParameters:
    """Kinematic parameters of one run"""

    x0: float = 0.0  # Initial position (m)
    v0: float = 10.0  # Initial velocity (m/s)
    a: float = 2.0  # Constant acceleration (m/s²)
    track_length: Optional[float] = None  # Closed loop length (m), None for open track
    laps: Optional[int] = None  # Loop traversals before termination (closed track only)

    def __post_init__(self) -> None:
        """Reject values no run could use, whatever the variant"""
        for name in ("x0", "v0", "a"):
            _require_finite(name, getattr(self, name))

        if self.track_length is not None:
            _require_finite("track_length", self.track_length)
            # Zero would turn the wrap into a division by zero
            if self.track_length <= 0:
                raise InvalidParameterError(
                    f"track_length must be positive, got {self.track_length!r}"
                )

        if self.laps is not None:
            if isinstance(self.laps, bool) or not isinstance(self.laps, int):
                raise InvalidParameterError(f"laps must be an integer, got {self.laps!r}")
            if self.laps < 1:
                raise InvalidParameterError(f"laps must be at least 1, got {self.laps!r}")

    @property
    def closed_track(self) -> bool:
        """Whether positions wrap onto a loop"""
        return self.track_length is not None

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))


@dataclass(frozen=True)
class ParameterBounds:
    """Inclusive domains accepted for each parameter"""

    x0: Tuple[float, float] = (-50.0, 100.0)  # m
    v0: Tuple[float, float] = (-20.0, 50.0)  # m/s
    a: Tuple[float, float] = (-10.0, 10.0)  # m/s²
    laps: Tuple[int, int] = (1, 10)

    def check(self, params: SimulationParameters) -> None:
        """
        Validate parameters against these domains

        Args:
            params: Parameters to validate

        Raises:
            InvalidParameterError: If a field lies outside its domain
        """
        for name in ("x0", "v0", "a", "laps"):
            value = getattr(params, name)
            if value is None:
                continue
            low, high = getattr(self, name)
            if not low <= value <= high:
                raise InvalidParameterError(
                    f"{name}={value!r} is outside the allowed range [{low}, {high}]"
                )


# Slider ranges of the linear demo
OPEN_TRACK_BOUNDS = ParameterBounds(x0=(-50.0, 50.0), v0=(-20.0, 20.0), a=(-10.0, 10.0))

# Slider ranges of the circuit demo
CLOSED_TRACK_BOUNDS = ParameterBounds(
    x0=(0.0, 100.0), v0=(0.0, 50.0), a=(-10.0, 10.0), laps=(1, 10)
)
