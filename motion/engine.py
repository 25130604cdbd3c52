"""
Kinematic engine driven by host timestamps
"""

import dataclasses
import logging
import math
import threading
from typing import Any, Optional, Tuple

from motion.errors import InvalidParameterError, InvalidStateError
from motion.history import SampleHistory
from motion.kinematics import raw_position, velocity, wrap_position
from motion.params import ParameterBounds, SimulationParameters
from motion.state import Sample, SimulationState
from motion.termination import TerminationPolicy
from motion.track import project_to_track

logger = logging.getLogger(__name__)


class KinematicEngine:
    """
    Advances a simulated clock and samples uniformly accelerated motion

    The engine schedules nothing itself. A host calls start(), then tick()
    once per frame with a monotonically increasing timestamp in milliseconds,
    until the returned state reports running == False.

    Public operations hold a per-engine lock, so a stop() or reset() issued
    from another thread never interleaves with a tick in progress.
    """

    def __init__(
        self,
        params: Optional[SimulationParameters] = None,
        policy: Optional[TerminationPolicy] = None,
        max_history: Optional[int] = None,
        bounds: Optional[ParameterBounds] = None,
        render_length: float = 1000.0,
    ) -> None:
        """
        Initialize engine

        Args:
            params: Kinematic parameters, defaults to x0=0, v0=10, a=2 on an open track
            policy: Termination policy, defaults to a 10 s time bound
            max_history: Samples kept per run, None keeps all of them
            bounds: Accepted parameter domains
            render_length: Loop length (m) used to draw open-track runs

        Raises:
            InvalidParameterError: If the configuration is inconsistent
        """
        self._params = params if params is not None else SimulationParameters()
        self._policy = policy if policy is not None else TerminationPolicy.time_bounded()
        self._bounds = bounds if bounds is not None else ParameterBounds()

        if not (math.isfinite(render_length) and render_length > 0):
            raise InvalidParameterError(
                f"render_length must be positive and finite, got {render_length!r}"
            )
        self.render_length = render_length

        self._bounds.check(self._params)
        self._policy.validate(self._params)

        self._operation_lock = threading.RLock()
        self._history = SampleHistory(max_history)
        self._running = False
        self._clock_anchor: Optional[float] = None
        self._last_timestamp: Optional[float] = None
        self._elapsed_time = 0.0
        self._raw_position = self._params.x0
        self._position = wrap_position(self._params.x0, self._params.track_length)
        self._velocity = self._params.v0
        self._track_length = self._params.track_length

    @property
    def params(self) -> SimulationParameters:
        return self._params

    @property
    def policy(self) -> TerminationPolicy:
        return self._policy

    @property
    def bounds(self) -> ParameterBounds:
        return self._bounds

    @property
    def max_history(self) -> Optional[int]:
        return self._history.max_length

    @property
    def running(self) -> bool:
        return self._running

    @property
    def state(self) -> SimulationState:
        """Snapshot of the current state; safe to keep across ticks"""
        with self._operation_lock:
            return SimulationState(
                elapsed_time=self._elapsed_time,
                position=self._position,
                velocity=self._velocity,
                running=self._running,
                history=self._history.snapshot(),
                clock_anchor=self._clock_anchor,
                raw_position=self._raw_position,
                track_length=self._track_length,
            )

    def set_parameters(self, **changes: Any) -> None:
        """
        Replace some parameters while stopped

        Args:
            **changes: Any of x0, v0, a, track_length, laps

        Raises:
            InvalidStateError: If a run is in progress
            InvalidParameterError: If a value is unknown, non-finite or out of domain
        """
        with self._operation_lock:
            if self._running:
                logger.warning("Rejected parameter change %s while running", changes)
                raise InvalidStateError(
                    "parameters cannot change while the simulation is running"
                )

            unknown = sorted(set(changes) - set(SimulationParameters.field_names()))
            if unknown:
                raise InvalidParameterError(f"unknown parameter(s): {', '.join(unknown)}")

            candidate = dataclasses.replace(self._params, **changes)
            self._bounds.check(candidate)
            self._policy.validate(candidate)
            self._params = candidate
            logger.debug("Parameters set to %s", candidate)

    def start(self) -> None:
        """Begin a run; the clock anchors on the next tick"""
        with self._operation_lock:
            if self._running:
                return
            self._history.clear()
            self._clock_anchor = None
            self._last_timestamp = None
            self._set_kinematics(0.0)
            self._running = True
            logger.info(
                "Simulation started: x0=%g v0=%g a=%g (%s-bounded)",
                self._params.x0,
                self._params.v0,
                self._params.a,
                self._policy.kind.value,
            )

    def stop(self) -> None:
        """Halt the run; safe to call when already stopped"""
        with self._operation_lock:
            if self._running:
                logger.info("Simulation stopped at t=%.2fs", self._elapsed_time)
            self._halt()

    def reset(self) -> None:
        """Stop and return to the initial conditions"""
        with self._operation_lock:
            self.stop()
            self._history.clear()
            self._set_kinematics(0.0)

    def tick(self, host_timestamp: float) -> SimulationState:
        """
        Advance the simulation to a host timestamp

        Args:
            host_timestamp: Wall-clock time of the frame (ms)

        Returns:
            Snapshot after the update; unchanged if the engine is not running

        Raises:
            InvalidParameterError: If the timestamp is non-finite or goes backwards
        """
        with self._operation_lock:
            if not self._running:
                logger.debug("Ignoring tick at %s: not running", host_timestamp)
                return self.state

            if not math.isfinite(host_timestamp):
                raise InvalidParameterError(f"timestamp must be finite, got {host_timestamp!r}")

            if self._clock_anchor is None:
                anchor = float(host_timestamp)
                elapsed = 0.0
            else:
                if host_timestamp < self._last_timestamp:
                    raise InvalidParameterError(
                        f"timestamp {host_timestamp!r} precedes previous {self._last_timestamp!r}"
                    )
                anchor = self._clock_anchor
                elapsed = (host_timestamp - anchor) / 1000.0

            params = self._params
            raw = raw_position(params, elapsed)
            vel = velocity(params, elapsed)
            pos = wrap_position(raw, params.track_length)
            finished = self._policy.is_finished(params, elapsed, raw)

            # Everything is computed; commit in one go
            self._clock_anchor = anchor
            self._last_timestamp = float(host_timestamp)
            self._elapsed_time = elapsed
            self._raw_position = raw
            self._position = pos
            self._velocity = vel
            self._track_length = params.track_length

            last = self._history.last
            if last is None or elapsed > last.time:
                self._history.append(Sample(elapsed, pos, vel))

            logger.debug("t=%.3fs x=%.3f v=%.3f", elapsed, pos, vel)

            if finished:
                logger.info(
                    "Simulation finished at t=%.2fs (raw position %.2f m)", elapsed, raw
                )
                self._halt()
            return self.state

    def run(
        self,
        frame_interval_ms: float = 1000.0 / 60.0,
        start_timestamp_ms: float = 0.0,
        max_ticks: int = 100_000,
    ) -> SimulationState:
        """
        Run to termination with evenly spaced synthetic timestamps

        Args:
            frame_interval_ms: Spacing between ticks (ms)
            start_timestamp_ms: Timestamp of the first tick (ms)
            max_ticks: Give up after this many ticks

        Returns:
            Final snapshot
        """
        if not (math.isfinite(frame_interval_ms) and frame_interval_ms > 0):
            raise InvalidParameterError(
                f"frame_interval_ms must be positive, got {frame_interval_ms!r}"
            )
        with self._operation_lock:
            self.stop()
            self.start()
            for i in range(max_ticks):
                state = self.tick(start_timestamp_ms + i * frame_interval_ms)
                if not state.running:
                    return state
            logger.warning("Run did not terminate within %d ticks; stopping", max_ticks)
            self.stop()
            return self.state

    def project_to_track(
        self,
        state: SimulationState,
        center_x: float,
        center_y: float,
        radius_x: float,
        radius_y: float,
    ) -> Tuple[float, float]:
        """
        Drawing coordinates of a state's position on the oval track

        Uses the track length the snapshot was computed with, so an old
        snapshot still lands where it did after the track is resized.
        Open-track runs are drawn on a loop of render_length metres.
        """
        length = state.track_length
        if length is None:
            length = self.render_length
        return project_to_track(state.position, length, center_x, center_y, radius_x, radius_y)

    def _halt(self) -> None:
        self._running = False
        self._clock_anchor = None
        self._last_timestamp = None

    def _set_kinematics(self, elapsed: float) -> None:
        params = self._params
        self._elapsed_time = elapsed
        self._raw_position = raw_position(params, elapsed)
        self._position = wrap_position(self._raw_position, params.track_length)
        self._velocity = velocity(params, elapsed)
        self._track_length = params.track_length
