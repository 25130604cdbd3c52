"""
Bounded sample history
"""

from collections import deque
from typing import Deque, Iterator, Optional, Tuple

from motion.errors import InvalidParameterError
from motion.state import Sample


class SampleHistory:
    """FIFO buffer of the most recent samples of a run"""

    def __init__(self, max_length: Optional[int] = None) -> None:
        """
        Initialize history buffer

        Args:
            max_length: Number of samples kept, None keeps every sample of the run
        """
        if max_length is not None:
            if isinstance(max_length, bool) or not isinstance(max_length, int) or max_length < 1:
                raise InvalidParameterError(
                    f"max_history must be a positive integer, got {max_length!r}"
                )
        self.max_length = max_length
        self._samples: Deque[Sample] = deque(maxlen=max_length)

    def append(self, sample: Sample) -> None:
        # deque drops the oldest entry once maxlen is reached
        self._samples.append(sample)

    def clear(self) -> None:
        self._samples.clear()

    @property
    def last(self) -> Optional[Sample]:
        return self._samples[-1] if self._samples else None

    def snapshot(self) -> Tuple[Sample, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self._samples)
