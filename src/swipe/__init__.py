"""
SwipeType Decoder Module

Turns swipe paths over a keyboard into words.
"""
from .config import Config, SwipeConfig, load_config
from .path import SwipePath, SwipeSample, GestureSnapshot
from .resolver import Rect, KeyHit, find_nearest_key, resolve_hit
from .reducer import KeyVisit, reduce_path
from .word_builder import build_word
from .engine import SwipeEngine, SwipeState
from .trace import parse_trace, load_trace, replay, decode_trace

__all__ = [
    'Config',
    'SwipeConfig',
    'load_config',
    'SwipePath',
    'SwipeSample',
    'GestureSnapshot',
    'Rect',
    'KeyHit',
    'find_nearest_key',
    'resolve_hit',
    'KeyVisit',
    'reduce_path',
    'build_word',
    'SwipeEngine',
    'SwipeState',
    'parse_trace',
    'load_trace',
    'replay',
    'decode_trace',
]
