"""
Key hit resolution.
Maps a single touch sample onto the nearest letter key of the visible layout.
"""
import math
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from .path import SwipeSample


@dataclass(frozen=True)
class Rect:
    """Axis-aligned key rectangle in the same coordinate space as the samples."""
    left: float
    top: float
    right: float
    bottom: float

    @property
    def center_x(self) -> float:
        return (self.left + self.right) / 2.0

    @property
    def center_y(self) -> float:
        return (self.top + self.bottom) / 2.0

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @classmethod
    def from_bounds(cls, bounds) -> "Rect":
        """Build from a (left, top, right, bottom) sequence."""
        left, top, right, bottom = bounds
        return cls(float(left), float(top), float(right), float(bottom))


@dataclass(frozen=True)
class KeyHit:
    """Nearest key for one sample."""
    key: str
    distance: float
    confidence: float


def is_swipe_key(key: str) -> bool:
    """Only single alphabetic characters take part in swipe decoding."""
    return len(key) == 1 and key.isalpha()


def hit_confidence(distance: float, hit_radius: float) -> float:
    """1.0 at the key center, falling linearly to 0.0 at hit_radius."""
    ratio = max(0.0, min(1.0, distance / hit_radius))
    return 1.0 - ratio


def find_nearest_key(x: float, y: float,
                     geometry: Mapping[str, Rect],
                     hit_radius: float) -> Optional[Tuple[str, float]]:
    """
    Find the eligible key whose center is closest to (x, y).

    Only a strictly smaller distance replaces the current best, so on an
    exact tie the key met first in the mapping's iteration order wins.

    Returns:
        (key, distance) or None if nothing lies within hit_radius.
    """
    nearest_key = None
    nearest_dist = float('inf')

    for key, rect in geometry.items():
        if not is_swipe_key(key):
            continue

        dist = math.hypot(x - rect.center_x, y - rect.center_y)
        if dist < nearest_dist and dist <= hit_radius:
            nearest_key = key
            nearest_dist = dist

    if nearest_key is None:
        return None
    return nearest_key, nearest_dist


def resolve_hit(sample: SwipeSample,
                geometry: Mapping[str, Rect],
                hit_radius: float) -> Optional[KeyHit]:
    """Resolve one sample to a KeyHit, or None when no key is in range."""
    nearest = find_nearest_key(sample.x, sample.y, geometry, hit_radius)
    if nearest is None:
        return None
    key, dist = nearest
    return KeyHit(key, dist, hit_confidence(dist, hit_radius))
