"""
Skeleton Code Emitter - Prints a SkeletonLayout as a TSX component.

The output is a `LoadingSkeleton` component built only from
`<Skeleton className="..." />` boxes. Single-box rows are emitted bare;
multi-box rows are wrapped in a horizontal flex container.

Usage:
    from skeletonizer.skeleton.emitter import generate_skeleton_code

    code = generate_skeleton_code(result.elements)
"""

from typing import Iterable

from .contracts import ElementInfo
from .layout import SkeletonBox, SkeletonLayout, SkeletonRow, plan_layout
from .rows import DEFAULT_ROW_TOLERANCE_PX


SKELETON_IMPORT = 'import { Skeleton } from "~/components/ui/skeleton";'

ROW_WRAPPER_CLASSES = "flex items-center gap-4"
CONTAINER_CLASSES = "flex flex-col gap-4 p-4"

NO_ELEMENTS_MESSAGE = "No elements detected"

EMPTY_COMPONENT = f"""{SKELETON_IMPORT}

export default function LoadingSkeleton() {{
  return (
    <div className="p-4">
      <p className="text-muted-foreground">{NO_ELEMENTS_MESSAGE}</p>
    </div>
  );
}}"""

COMPONENT_TEMPLATE = """{skeleton_import}

export default function LoadingSkeleton() {{
  return (
    <div className="{container}">
{body}
    </div>
  );
}}"""

ROW_INDENT = " " * 6
BOX_INDENT = " " * 8


class SkeletonCodeEmitter:
    """Renders a SkeletonLayout as component source text."""

    def emit(self, layout: SkeletonLayout) -> str:
        """
        Render the component source.

        Args:
            layout: Planned rows of boxes

        Returns:
            TSX source; the fixed "No elements detected" component when
            the layout is empty
        """
        if layout.is_empty:
            return EMPTY_COMPONENT

        body = "\n".join(self._emit_row(row) for row in layout.rows)
        return COMPONENT_TEMPLATE.format(
            skeleton_import=SKELETON_IMPORT,
            container=CONTAINER_CLASSES,
            body=body,
        )

    def _emit_row(self, row: SkeletonRow) -> str:
        if not row.is_multi:
            return ROW_INDENT + self.emit_box(row.boxes[0])

        lines = [f'{ROW_INDENT}<div className="{ROW_WRAPPER_CLASSES}">']
        lines.extend(BOX_INDENT + self.emit_box(box) for box in row.boxes)
        lines.append(f"{ROW_INDENT}</div>")
        return "\n".join(lines)

    @staticmethod
    def emit_box(box: SkeletonBox) -> str:
        """Single `<Skeleton />` element."""
        return f'<Skeleton className="{box.class_string}" />'


def generate_skeleton_code(
    elements: Iterable[ElementInfo],
    tolerance: float = DEFAULT_ROW_TOLERANCE_PX,
) -> str:
    """Plan and emit in one call."""
    return SkeletonCodeEmitter().emit(plan_layout(elements, tolerance=tolerance))
