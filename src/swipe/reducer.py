"""
Hit sequence reduction.
Compresses per-sample key hits into debounced, deduplicated key visits.
"""
import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Mapping, Optional

from .config import SwipeConfig
from .path import SwipeSample
from .resolver import Rect, resolve_hit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyVisit:
    """A deduplicated visit to one key during the current gesture."""
    key: str
    confidence: float
    timestamp: int


def reduce_path(samples: Iterable[SwipeSample],
                geometry: Mapping[str, Rect],
                config: SwipeConfig,
                visits: Optional[List[KeyVisit]] = None) -> List[KeyVisit]:
    """
    Turn a swipe path into its visit sequence.

    Samples must arrive in temporal order: merging and debounce both
    depend on which visit came last, not on global state.

    Args:
        samples: Recorded samples of the gesture, oldest first
        geometry: Key id -> rectangle for the visible layout
        config: Hit radius and debounce interval
        visits: Optional starting visits. The list is copied, not mutated.

    Returns:
        New list of KeyVisits.
    """
    result = list(visits) if visits else []
    last_visit_time = result[-1].timestamp if result else None

    for sample in samples:
        hit = resolve_hit(sample, geometry, config.hit_radius)
        if hit is None:
            continue

        last = result[-1] if result else None
        if last is None or last.key != hit.key:
            # Debounce: a new key too soon after the previous visit is dropped
            if (last_visit_time is not None
                    and sample.timestamp - last_visit_time < config.min_key_interval_ms):
                logger.debug("Debounced hit on %r at t=%d", hit.key, sample.timestamp)
                continue
            result.append(KeyVisit(hit.key, hit.confidence, sample.timestamp))
            last_visit_time = sample.timestamp
        elif hit.confidence > last.confidence:
            # Same key again: keep the best confidence, keep the original timestamp
            result[-1] = replace(last, confidence=hit.confidence)

    return result
