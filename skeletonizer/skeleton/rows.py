"""
Row Reconstructor - Groups leaves into visual rows.

Rows are detected from absolute top edges: an element joins the first
existing row whose anchor (first-inserted element) sits within the
tolerance, otherwise it anchors a new row. This approximates "same
visual line" and will merge or split rows for unusual baselines.
"""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from .contracts import ElementInfo


DEFAULT_ROW_TOLERANCE_PX = 10.0


@dataclass
class Row:
    """
    Elements judged to share one visual line.

    `anchor` is the first element inserted and never changes; it stays
    a member of `elements` but may not be first once the row is sorted.
    """

    anchor: ElementInfo
    elements: List[ElementInfo] = field(default_factory=list)

    def accepts(self, element: ElementInfo, tolerance: float) -> bool:
        """Check whether `element` is vertically close enough to the anchor."""
        return abs(self.anchor.y - element.y) < tolerance

    def __iter__(self) -> Iterator[ElementInfo]:
        return iter(self.elements)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> ElementInfo:
        return self.elements[index]


def _within_row_key(el: ElementInfo):
    # Ties on x fall back to the remaining geometry so output does not
    # depend on input order.
    return (el.x, el.y, el.width, el.height, el.type)


def group_rows(
    elements: Iterable[ElementInfo],
    tolerance: float = DEFAULT_ROW_TOLERANCE_PX,
) -> List[Row]:
    """
    Group elements into rows and order them for presentation.

    Args:
        elements: Leaves in document order
        tolerance: Max vertical distance (exclusive) from a row's anchor

    Returns:
        Rows sorted by anchor y; elements in each row sorted by x
    """
    rows: List[Row] = []

    for element in elements:
        for row in rows:
            if row.accepts(element, tolerance):
                row.elements.append(element)
                break
        else:
            rows.append(Row(anchor=element, elements=[element]))

    rows.sort(key=lambda row: row.anchor.y)
    for row in rows:
        row.elements.sort(key=_within_row_key)

    return rows
