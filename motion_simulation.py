"""
Uniformly Accelerated Rectilinear Motion Simulation

Convenience entry point: re-exports the engine API and, when run as a
script, compares a few accelerations on both track variants.
"""

import logging

from motion import (
    InvalidParameterError,
    InvalidStateError,
    KinematicEngine,
    ParameterBounds,
    Sample,
    SimulationParameters,
    SimulationState,
    TerminationKind,
    TerminationPolicy,
    analyze_run,
    closed_track_engine,
    finish_time,
    open_track_engine,
    run_scenarios,
)

__all__ = [
    "InvalidParameterError",
    "InvalidStateError",
    "KinematicEngine",
    "ParameterBounds",
    "Sample",
    "SimulationParameters",
    "SimulationState",
    "TerminationKind",
    "TerminationPolicy",
    "analyze_run",
    "closed_track_engine",
    "finish_time",
    "open_track_engine",
    "run_scenarios",
]


def _print_results(title: str, results: dict) -> None:
    print(title)
    print("-" * 80)
    for a, data in results.items():
        analysis = data["analysis"]
        print(f"\nAcceleration: {a} m/s²")
        print(f"  Duration: {analysis['final_time']:.2f} s")
        print(f"  Final position: {analysis['final_position']:.2f} m")
        print(f"  Final velocity: {analysis['final_velocity']:.2f} m/s")
        print(f"  Displacement: {analysis['displacement']:.2f} m")
        print(f"  Distance travelled: {analysis['distance_travelled']:.2f} m")
        print(f"  Peak speed: {analysis['peak_speed']:.2f} m/s")
        if analysis["reversed"]:
            print(f"  Reversed at: {analysis['turnaround_time']:.2f} s")
        if analysis["predicted_finish_time"] is not None:
            print(f"  Laps completed: {analysis['laps_completed']}")
            print(f"  Predicted finish: {analysis['predicted_finish_time']:.2f} s")
    print()


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    accelerations = [-4.0, 0.0, 2.0, 5.0]
    _print_results("Linear track (10 s):", run_scenarios(accelerations))
    _print_results(
        "Circuit (400 m, 3 laps):",
        run_scenarios([0.0, 2.0, 5.0], closed_track=True),
    )
