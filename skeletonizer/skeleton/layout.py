"""
Skeleton Layout - The single plan both output back ends render.

`plan_layout` is the only place rows are grouped and sizes quantized
for output. The code emitter and the preview renderer both take a
SkeletonLayout and only decide how to draw it, so they cannot disagree
about structure.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from .contracts import ElementInfo
from .quantizer import height_class, width_class
from .rows import DEFAULT_ROW_TOLERANCE_PX, group_rows


SHAPE_MODIFIERS = {
    "circle": "rounded-full",
    "avatar": "rounded-full",
    "button": "rounded-md",
}


def shape_modifier(element_type: str) -> Optional[str]:
    """Shape class for an element type, or None for a plain box."""
    return SHAPE_MODIFIERS.get(element_type)


@dataclass(frozen=True)
class SkeletonBox:
    """One placeholder box."""

    height_class: str
    width_class: str
    modifier: Optional[str] = None
    source: Optional[ElementInfo] = field(default=None, compare=False)

    @classmethod
    def for_element(cls, element: ElementInfo) -> "SkeletonBox":
        return cls(
            height_class=height_class(element.height),
            width_class=width_class(element.width),
            modifier=shape_modifier(element.type),
            source=element,
        )

    @property
    def classes(self) -> List[str]:
        """Box classes in emission order: modifier, height, width."""
        parts = [self.height_class, self.width_class]
        if self.modifier:
            parts.insert(0, self.modifier)
        return parts

    @property
    def class_string(self) -> str:
        return " ".join(self.classes)

    def signature(self) -> Tuple[Optional[str], str, str]:
        """(modifier, height class, width class) for comparisons."""
        return (self.modifier, self.height_class, self.width_class)


@dataclass(frozen=True)
class SkeletonRow:
    """Boxes on one visual line, left to right."""

    boxes: Tuple[SkeletonBox, ...]
    anchor_y: float = 0.0

    @property
    def is_multi(self) -> bool:
        """Rows with more than one box are drawn as a horizontal flow."""
        return len(self.boxes) > 1


@dataclass(frozen=True)
class SkeletonLayout:
    """Ordered rows of placeholder boxes."""

    rows: Tuple[SkeletonRow, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def box_count(self) -> int:
        return sum(len(row.boxes) for row in self.rows)

    def signatures(self) -> List[List[Tuple[Optional[str], str, str]]]:
        """Per-row box signatures, used to compare renderings."""
        return [[box.signature() for box in row.boxes] for row in self.rows]


def plan_layout(
    elements: Iterable[ElementInfo],
    tolerance: float = DEFAULT_ROW_TOLERANCE_PX,
) -> SkeletonLayout:
    """
    Build the presentation plan for a set of leaves.

    Args:
        elements: Leaves from the classifier (any order)
        tolerance: Row grouping tolerance in pixels

    Returns:
        SkeletonLayout with rows top to bottom, boxes left to right
    """
    rows = group_rows(elements, tolerance=tolerance)
    return SkeletonLayout(
        rows=tuple(
            SkeletonRow(
                boxes=tuple(SkeletonBox.for_element(el) for el in row),
                anchor_y=row.anchor.y,
            )
            for row in rows
        )
    )
