"""
Gesture decoder for swipe typing.
Records a swipe, resolves it to key visits and builds the typed word.
"""
import logging
import time
from enum import Enum, auto
from typing import Callable, Iterable, List, Mapping, Optional

from prediction.ranker import rank_suggestions

from .config import SwipeConfig
from .path import GestureSnapshot, SwipePath
from .reducer import KeyVisit, reduce_path
from .resolver import Rect
from .word_builder import build_word

logger = logging.getLogger(__name__)


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class SwipeState(Enum):
    IDLE = auto()
    RECORDING = auto()


class SwipeEngine:
    """
    Decodes one gesture at a time into a word.

    Pipeline per gesture:
    1. Record samples (start_swipe / add_point).
    2. Resolve each sample to its nearest letter key.
    3. Reduce hits to debounced key visits.
    4. Build the word from confident visits, optionally rank dictionary words.

    Geometry and dictionary are passed on every call and never kept, so the
    caller may change them between gestures. Not thread-safe: feed it from
    the thread that delivers touch events.
    """

    def __init__(self, config: Optional[SwipeConfig] = None,
                 clock: Optional[Callable[[], int]] = None):
        """
        Args:
            config: Tunables; defaults to SwipeConfig()
            clock: Returns the current time in milliseconds. Defaults to a
                   monotonic clock.
        """
        self._config = config or SwipeConfig()
        self._clock = clock or _monotonic_ms
        self._path = SwipePath()

    @property
    def config(self) -> SwipeConfig:
        return self._config

    @property
    def state(self) -> SwipeState:
        return SwipeState.RECORDING if len(self._path) else SwipeState.IDLE

    @property
    def path(self) -> SwipePath:
        return self._path

    def start_swipe(self, x: float, y: float, timestamp: Optional[int] = None):
        """Start a new gesture, discarding any unfinished one."""
        if self._path:
            logger.debug("Restarting swipe, discarding %d sample(s)", len(self._path))
        self._path.start(x, y, self._now(timestamp))

    def add_point(self, x: float, y: float, timestamp: Optional[int] = None):
        """Append a point to the current swipe path."""
        self._path.add(x, y, self._now(timestamp))

    def cancel_swipe(self):
        """Abort the gesture without decoding it."""
        self._reset()

    def is_valid_swipe(self) -> bool:
        return self._path.is_valid(self._config.min_swipe_distance)

    def end_swipe(self, geometry: Mapping[str, Rect]) -> Optional[str]:
        """
        Decode the gesture and return to idle.

        Args:
            geometry: Key id -> rectangle for the visible layout

        Returns:
            The decoded word, or None if the swipe was too short or no
            key was hit confidently. Gesture state is cleared either way.
        """
        try:
            if not self.is_valid_swipe():
                logger.debug("Swipe rejected: %d sample(s), length %.1f",
                             len(self._path), self._path.length())
                return None

            visits = reduce_path(self._path, geometry, self._config)
            word = build_word(visits, self._config.confidence_threshold)
            logger.debug("Decoded %s from %d visit(s)", word, len(visits))
            return word
        finally:
            self._reset()

    def preview_visits(self, geometry: Mapping[str, Rect]) -> List[KeyVisit]:
        """Visits the current path would produce, without committing them."""
        return reduce_path(self._path, geometry, self._config)

    def suggest(self, geometry: Mapping[str, Rect],
                dictionary: Optional[Iterable[str]] = None,
                limit: Optional[int] = None) -> List[str]:
        """
        Rank words for the gesture so far without ending it.

        Args:
            geometry: Key id -> rectangle for the visible layout
            dictionary: Known words in preference order, or None
            limit: Max suggestions (defaults to config.suggestion_limit)

        Returns:
            Ranked dictionary words, [word] without a dictionary, or []
            when the swipe is invalid or decodes to nothing.
        """
        if not self.is_valid_swipe():
            return []

        word = build_word(self.preview_visits(geometry), self._config.confidence_threshold)
        return rank_suggestions(
            word,
            dictionary,
            limit=limit if limit is not None else self._config.suggestion_limit,
            prefix_length=self._config.prefix_length,
        )

    def analyze_gesture(self, geometry: Optional[Mapping[str, Rect]] = None) -> GestureSnapshot:
        """
        Summarize the current gesture for debugging.

        Visits are only resolved against a geometry map, so visit_count is
        what decoding would produce right now when one is given, and 0
        without one.
        """
        visits = self.preview_visits(geometry) if geometry is not None else []
        return GestureSnapshot(
            sample_count=len(self._path),
            total_path_length=self._path.length(),
            visit_count=len(visits),
            duration_ms=self._path.duration_ms(),
        )

    def _now(self, timestamp: Optional[int]) -> int:
        return self._clock() if timestamp is None else int(timestamp)

    def _reset(self):
        self._path.clear()
