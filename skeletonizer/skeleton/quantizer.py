"""
Size Quantizer - Maps pixel dimensions to placeholder size classes.

The tables below are the whole output vocabulary for box sizes. Each is
an ascending list of (inclusive upper bound, class) pairs followed by a
catch-all class, so every non-negative size maps to exactly one class
and larger sizes never map to a smaller class.
"""

from bisect import bisect_left
from typing import Sequence, Tuple


SizeTable = Tuple[Tuple[float, str], ...]


HEIGHT_CLASSES: SizeTable = (
    (20, "h-4"),
    (32, "h-6"),
    (40, "h-8"),
    (48, "h-10"),
    (64, "h-12"),
    (96, "h-16"),
    (128, "h-24"),
)
HEIGHT_OVERFLOW = "h-32"

WIDTH_CLASSES: SizeTable = (
    (32, "w-8"),
    (48, "w-12"),
    (64, "w-16"),
    (96, "w-24"),
    (128, "w-32"),
    (192, "w-48"),
    (256, "w-64"),
    (384, "w-96"),
)
WIDTH_OVERFLOW = "w-full"


def quantize(value: float, table: SizeTable, overflow: str) -> str:
    """
    Find the class for `value` in `table`.

    Args:
        value: Size in pixels
        table: Ascending (upper_bound, class) pairs, bounds inclusive
        overflow: Class for values above the last bound

    Returns:
        Size class label
    """
    bounds = [bound for bound, _ in table]
    index = bisect_left(bounds, value)
    if index >= len(table):
        return overflow
    return table[index][1]


def height_class(height: float) -> str:
    """Height class, e.g. 36 -> "h-8"."""
    return quantize(height, HEIGHT_CLASSES, HEIGHT_OVERFLOW)


def width_class(width: float) -> str:
    """Width class, e.g. 200 -> "w-64"."""
    return quantize(width, WIDTH_CLASSES, WIDTH_OVERFLOW)


def vocabulary(table: SizeTable, overflow: str) -> Sequence[str]:
    """All labels of a table in rank order."""
    return [label for _, label in table] + [overflow]


HEIGHT_VOCABULARY = tuple(vocabulary(HEIGHT_CLASSES, HEIGHT_OVERFLOW))
WIDTH_VOCABULARY = tuple(vocabulary(WIDTH_CLASSES, WIDTH_OVERFLOW))


def height_rank(label: str) -> int:
    """Position of a height class in its table (0 = smallest)."""
    return HEIGHT_VOCABULARY.index(label)


def width_rank(label: str) -> int:
    """Position of a width class in its table (0 = smallest)."""
    return WIDTH_VOCABULARY.index(label)
