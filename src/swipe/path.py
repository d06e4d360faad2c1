"""
Swipe path recording.
Accumulates touch samples for one gesture and answers validity queries.
"""
from dataclasses import dataclass
from typing import List

import numpy as np


@dataclass(frozen=True)
class SwipeSample:
    """One recorded touch point. Timestamp is monotonic milliseconds."""
    x: float
    y: float
    timestamp: int


@dataclass(frozen=True)
class GestureSnapshot:
    """Diagnostic summary of a gesture, used for tuning rather than decoding."""
    sample_count: int = 0
    total_path_length: float = 0.0
    visit_count: int = 0
    duration_ms: int = 0


class SwipePath:
    """
    Ordered, append-only list of samples for the active gesture.

    There are no failure states: every point is accepted, and an
    unusable gesture is reported by is_valid() rather than raised.
    """

    def __init__(self):
        self._samples: List[SwipeSample] = []

    def __len__(self) -> int:
        return len(self._samples)

    def __iter__(self):
        return iter(self._samples)

    @property
    def samples(self) -> List[SwipeSample]:
        return list(self._samples)

    def start(self, x: float, y: float, timestamp: int):
        """Drop any previous samples and record the first one."""
        self._samples.clear()
        self.add(x, y, timestamp)

    def add(self, x: float, y: float, timestamp: int):
        self._samples.append(SwipeSample(float(x), float(y), int(timestamp)))

    def clear(self):
        self._samples.clear()

    def length(self) -> float:
        """Cumulative Euclidean length of the polyline through all samples."""
        if len(self._samples) < 2:
            return 0.0
        points = np.array([(s.x, s.y) for s in self._samples], dtype=float)
        deltas = np.diff(points, axis=0)
        return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())

    def duration_ms(self) -> int:
        if len(self._samples) < 2:
            return 0
        return self._samples[-1].timestamp - self._samples[0].timestamp

    def is_valid(self, min_distance: float) -> bool:
        """A swipe needs at least 3 samples and min_distance of travel."""
        if len(self._samples) < 3:
            return False
        return self.length() >= min_distance
