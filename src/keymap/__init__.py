"""
SwipeType Keymap Module

Keyboard layouts and the key geometry handed to the decoder.
"""
from .layouts import get_layout, get_key_positions, get_key_rects, QWERTY, SYMBOLS

__all__ = [
    'get_layout',
    'get_key_positions',
    'get_key_rects',
    'QWERTY',
    'SYMBOLS',
]
