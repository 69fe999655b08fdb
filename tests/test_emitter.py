"""
Tests for component code emission.
"""

from skeletonizer.skeleton.emitter import (
    EMPTY_COMPONENT,
    SKELETON_IMPORT,
    SkeletonCodeEmitter,
    generate_skeleton_code,
)
from skeletonizer.skeleton.layout import SkeletonBox, plan_layout

from conftest import make_element


class TestEmptyComponent:
    """Nothing detected still produces a valid component."""

    def test_exact_text(self):
        expected = (
            'import { Skeleton } from "~/components/ui/skeleton";\n'
            "\n"
            "export default function LoadingSkeleton() {\n"
            "  return (\n"
            '    <div className="p-4">\n'
            '      <p className="text-muted-foreground">No elements detected</p>\n'
            "    </div>\n"
            "  );\n"
            "}"
        )
        assert EMPTY_COMPONENT == expected
        assert generate_skeleton_code([]) == expected


class TestSkeletonCodeEmitter:
    """Tests for SkeletonCodeEmitter."""

    def test_single_button(self):
        code = generate_skeleton_code([make_element("button", 16, 16, 200, 36)])

        assert code == (
            f"{SKELETON_IMPORT}\n"
            "\n"
            "export default function LoadingSkeleton() {\n"
            "  return (\n"
            '    <div className="flex flex-col gap-4 p-4">\n'
            '      <Skeleton className="rounded-md h-8 w-64" />\n'
            "    </div>\n"
            "  );\n"
            "}"
        )

    def test_profile_card(self):
        code = generate_skeleton_code([
            make_element("circle", 16, 16, 64, 64),
            make_element("h2", 96, 18, 120, 28),
            make_element("p", 16, 48, 400, 24),
        ])

        assert code == (
            f"{SKELETON_IMPORT}\n"
            "\n"
            "export default function LoadingSkeleton() {\n"
            "  return (\n"
            '    <div className="flex flex-col gap-4 p-4">\n'
            '      <div className="flex items-center gap-4">\n'
            '        <Skeleton className="rounded-full h-12 w-16" />\n'
            '        <Skeleton className="h-6 w-32" />\n'
            "      </div>\n"
            '      <Skeleton className="h-6 w-full" />\n'
            "    </div>\n"
            "  );\n"
            "}"
        )

    def test_rows_follow_presentation_order(self):
        """Document order does not leak into the output."""
        code = generate_skeleton_code([
            make_element("p", 16, 200, 400, 24),
            make_element("h1", 16, 16, 300, 40),
        ])

        assert code.index("h-8 w-96") < code.index("h-6 w-full")

    def test_tolerance_changes_grouping(self):
        elements = [make_element("p", 16, 0, 100, 20), make_element("p", 200, 14, 100, 20)]

        assert "items-center" not in generate_skeleton_code(elements)
        assert "items-center" in generate_skeleton_code(elements, tolerance=20)

    def test_only_skeleton_elements(self):
        """No markup from the input is carried over."""
        layout = plan_layout([make_element("a", 0, 0, 80, 20)])
        code = SkeletonCodeEmitter().emit(layout)

        assert "<a" not in code
        assert code.count("<Skeleton ") == 1

    def test_emit_box(self):
        box = SkeletonBox(height_class="h-4", width_class="w-8", modifier="rounded-full")
        assert SkeletonCodeEmitter.emit_box(box) == '<Skeleton className="rounded-full h-4 w-8" />'
