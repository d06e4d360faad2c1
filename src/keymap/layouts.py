"""
Keyboard layout definitions.
Builds key geometry maps for the decoder from row-based layouts.
"""
from typing import List, Dict, Tuple

from swipe.resolver import Rect


# Key layout as rows of keys.
# Each key is a string (letter) or (label, width_multiplier, is_special)
# for functional keys.

QWERTY = [
    ['Q', 'W', 'E', 'R', 'T', 'Y', 'U', 'I', 'O', 'P'],
    ['A', 'S', 'D', 'F', 'G', 'H', 'J', 'K', 'L'],
    [('SHIFT', 1.5, True), 'Z', 'X', 'C', 'V', 'B', 'N', 'M', ('BACKSPACE', 1.5, True)],
    [('?123', 1.5, True), ',', ('SPACE', 4.0, False), '.', ('ENTER', 1.5, True)],
]

SYMBOLS = [
    ['1', '2', '3', '4', '5', '6', '7', '8', '9', '0'],
    ['@', '#', '$', '_', '&', '-', '+', '(', ')', '/'],
    [('SHIFT', 1.5, True), '*', '\"', '\'', ':', ';', '!', '?', ('BACKSPACE', 1.5, True)],
    [('ABC', 1.5, True), ',', ('SPACE', 4.0, False), '.', ('ENTER', 1.5, True)],
]

LAYOUTS: Dict[str, List[List[object]]] = {
    'qwerty': QWERTY,
    'symbols': SYMBOLS,
}


def get_layout(name: str) -> List[List[object]]:
    """Get keyboard layout by name."""
    return LAYOUTS.get(name.lower(), QWERTY)


def _key_label(key) -> str:
    return key[0] if isinstance(key, tuple) else key


def _key_width(key) -> float:
    return key[1] if isinstance(key, tuple) else 1.0


def _iter_key_spans(layout: List[List[object]]):
    """
    Yield (label, row_idx, x0, x1) in layout units, rows centered.
    x is measured in units of the widest row.
    """
    row_widths = [sum(_key_width(key) for key in row) for row in layout]
    max_row_w = max(row_widths)

    for row_idx, row in enumerate(layout):
        # X offset for centering shorter rows
        current_x = (max_row_w - row_widths[row_idx]) / 2.0
        for key in row:
            width = _key_width(key)
            yield _key_label(key), row_idx, current_x, current_x + width
            current_x += width


def get_key_positions(layout: List[List[object]]) -> Dict[str, Tuple[float, float]]:
    """
    Get normalized (0-1) center positions for each key.
    Accounts for width multipliers.
    """
    num_rows = len(layout)
    max_row_w = max(sum(_key_width(key) for key in row) for row in layout)

    positions = {}
    for label, row_idx, x0, x1 in _iter_key_spans(layout):
        center_x = (x0 + x1) / 2.0 / max_row_w
        center_y = (row_idx + 0.5) / num_rows
        positions[label.upper()] = (center_x, center_y)
    return positions


def get_key_rects(layout: List[List[object]], width: float, height: float) -> Dict[str, Rect]:
    """
    Get key rectangles for a keyboard of the given size.

    Letter keys are keyed in lower case; other labels are kept as-is, so
    the decoder skips them as non-letter keys.
    """
    num_rows = len(layout)
    max_row_w = max(sum(_key_width(key) for key in row) for row in layout)
    unit_w = width / max_row_w
    row_h = height / num_rows

    rects = {}
    for label, row_idx, x0, x1 in _iter_key_spans(layout):
        key = label.lower() if len(label) == 1 else label
        rects[key] = Rect(x0 * unit_w, row_idx * row_h, x1 * unit_w, (row_idx + 1) * row_h)
    return rects
