"""
Recorded swipe traces.
Loads YAML sample lists and replays them through a SwipeEngine.
"""
from pathlib import Path
from typing import List, Mapping, Optional

import yaml

from .engine import SwipeEngine
from .path import SwipeSample
from .resolver import Rect


def parse_trace(data) -> List[SwipeSample]:
    """
    Parse trace data into samples.

    Accepts a list of {x, y, t} mappings, or a mapping with a 'samples'
    list. A missing t is filled with the sample index times 10 ms.
    """
    if isinstance(data, dict):
        data = data.get('samples') or []

    samples = []
    for idx, item in enumerate(data or []):
        if not isinstance(item, dict):
            raise ValueError(f"Trace sample {idx} is not a mapping: {item!r}")
        if 'x' not in item or 'y' not in item:
            raise ValueError(f"Trace sample {idx} is missing x/y: {item!r}")
        t = item.get('t', idx * 10)
        try:
            sample = SwipeSample(float(item['x']), float(item['y']), int(t))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Trace sample {idx} has a non-numeric field: {item!r}") from e
        samples.append(sample)
    return samples


def load_trace(path: Path) -> List[SwipeSample]:
    with open(path, 'r') as f:
        return parse_trace(yaml.safe_load(f))


def replay(engine: SwipeEngine, samples: List[SwipeSample]):
    """Feed recorded samples into the engine with their own timestamps."""
    for idx, sample in enumerate(samples):
        if idx == 0:
            engine.start_swipe(sample.x, sample.y, timestamp=sample.timestamp)
        else:
            engine.add_point(sample.x, sample.y, timestamp=sample.timestamp)


def decode_trace(engine: SwipeEngine, samples: List[SwipeSample],
                 geometry: Mapping[str, Rect]) -> Optional[str]:
    replay(engine, samples)
    return engine.end_swipe(geometry)
