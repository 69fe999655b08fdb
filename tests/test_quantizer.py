"""
Tests for size quantization.

Bucket bounds are inclusive; anything past the last bound takes the
overflow class.
"""

import pytest

from skeletonizer.skeleton.quantizer import (
    HEIGHT_VOCABULARY,
    WIDTH_VOCABULARY,
    height_class,
    height_rank,
    width_class,
    width_rank,
)


class TestHeightClass:
    """Tests for height_class."""

    @pytest.mark.parametrize(
        "height,expected",
        [
            (0, "h-4"),
            (20, "h-4"),
            (20.01, "h-6"),
            (32, "h-6"),
            (36, "h-8"),
            (40, "h-8"),
            (48, "h-10"),
            (64, "h-12"),
            (65, "h-16"),
            (96, "h-16"),
            (128, "h-24"),
            (129, "h-32"),
            (10000, "h-32"),
        ],
    )
    def test_buckets(self, height, expected):
        assert height_class(height) == expected


class TestWidthClass:
    """Tests for width_class."""

    @pytest.mark.parametrize(
        "width,expected",
        [
            (0, "w-8"),
            (32, "w-8"),
            (33, "w-12"),
            (48, "w-12"),
            (64, "w-16"),
            (96, "w-24"),
            (120, "w-32"),
            (128, "w-32"),
            (192, "w-48"),
            (200, "w-64"),
            (256, "w-64"),
            (384, "w-96"),
            (384.5, "w-full"),
            (768, "w-full"),
        ],
    )
    def test_buckets(self, width, expected):
        assert width_class(width) == expected


class TestMonotonicity:
    """Larger sizes never map to smaller classes."""

    def test_height_is_monotonic(self):
        ranks = [height_rank(height_class(h / 2)) for h in range(0, 400)]
        assert ranks == sorted(ranks)

    def test_width_is_monotonic(self):
        ranks = [width_rank(width_class(w / 2)) for w in range(0, 1000)]
        assert ranks == sorted(ranks)

    def test_vocabulary_is_closed(self):
        """Every output is a known label."""
        assert {height_class(h) for h in range(0, 300)} <= set(HEIGHT_VOCABULARY)
        assert {width_class(w) for w in range(0, 600)} <= set(WIDTH_VOCABULARY)
        assert len(HEIGHT_VOCABULARY) == 8
        assert len(WIDTH_VOCABULARY) == 9
