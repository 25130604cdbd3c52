"""
Test suite for the Uniformly Accelerated Motion Simulator.

This package contains unit tests organized by component:
- test_params.py: Tests for SimulationParameters and ParameterBounds
- test_kinematics.py: Tests for the closed-form equations and wrapping
- test_history.py: Tests for the bounded sample buffer
- test_termination.py: Tests for time- and distance-bounded policies
- test_track.py: Tests for the track projection
- test_engine.py: Tests for the KinematicEngine lifecycle and ticks
- test_analysis.py: Tests for run summaries
- test_integration.py: Integration tests for scenario runs
- test_app.py: Tests for the dashboard figure helpers
"""
