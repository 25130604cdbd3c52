"""
Unit tests for the bounded sample history.
"""

import pytest

from motion.errors import InvalidParameterError
from motion.history import SampleHistory
from motion.state import Sample


class TestSampleHistory:
    """Test suite for SampleHistory"""

    def test_unbounded_history_keeps_everything(self) -> None:
        """Test that a history without a maximum keeps every sample"""
        history = SampleHistory()
        for i in range(500):
            history.append(Sample(float(i), 0.0, 0.0))

        assert len(history) == 500
        assert history.max_length is None

    def test_bounded_history_evicts_oldest(self) -> None:
        """Test FIFO eviction past the maximum length"""
        history = SampleHistory(max_length=3)
        for i in range(5):
            history.append(Sample(float(i), 0.0, 0.0))

        assert [s.time for s in history] == [2.0, 3.0, 4.0]

    def test_last_sample(self) -> None:
        """Test access to the most recent sample"""
        history = SampleHistory()

        assert history.last is None

        history.append(Sample(1.0, 2.0, 3.0))

        assert history.last == Sample(1.0, 2.0, 3.0)

    def test_clear(self) -> None:
        """Test that clear empties the buffer"""
        history = SampleHistory(max_length=10)
        history.append(Sample(0.0, 0.0, 0.0))
        history.clear()

        assert len(history) == 0
        assert history.snapshot() == ()

    def test_snapshot_is_detached(self) -> None:
        """Test that later appends do not change an earlier snapshot"""
        history = SampleHistory()
        history.append(Sample(0.0, 0.0, 0.0))
        snapshot = history.snapshot()
        history.append(Sample(1.0, 0.0, 0.0))

        assert len(snapshot) == 1
        assert isinstance(snapshot, tuple)

    @pytest.mark.parametrize("max_length", [0, -5, 2.5, True])
    def test_invalid_max_length(self, max_length: object) -> None:
        """Test that the maximum length must be a positive integer"""
        with pytest.raises(InvalidParameterError):
            SampleHistory(max_length=max_length)
