"""
Skeleton - Markup to loading-skeleton pipeline.

Pipeline:
1. SnapshotSandbox: render markup, read back settled geometry
2. LeafClassifier: pick content leaves and their shapes
3. quantizer: map pixel sizes to size classes
4. group_rows: rebuild visual rows from positions
5. SkeletonCodeEmitter / PreviewRenderer: draw one SkeletonLayout

Usage:
    from skeletonizer.skeleton import (
        SkeletonAnalyzer,
        plan_layout,
        SkeletonCodeEmitter,
        PreviewRenderer,
    )

    result = await SkeletonAnalyzer().analyze(html)
    layout = plan_layout(result.elements)
    code = SkeletonCodeEmitter().emit(layout)
    preview = PreviewRenderer().render(layout)
"""

from .analyzer import SkeletonAnalyzer, analyze_html
from .classifier import LeafClassifier, classify_leaves
from .contracts import AnalysisResult, ElementInfo
from .emitter import SkeletonCodeEmitter, generate_skeleton_code
from .errors import AcquisitionError, SkeletonError, TraversalError
from .layout import (
    SkeletonBox,
    SkeletonLayout,
    SkeletonRow,
    plan_layout,
    shape_modifier,
)
from .preview import PreviewRenderer, render_preview
from .quantizer import height_class, width_class
from .rows import Row, group_rows
from .sandbox import LayoutNode, LayoutSnapshot, SnapshotSandbox


__all__ = [
    # Analysis
    "SkeletonAnalyzer",
    "analyze_html",
    "AnalysisResult",
    "ElementInfo",
    # Acquisition
    "SnapshotSandbox",
    "LayoutNode",
    "LayoutSnapshot",
    # Classification
    "LeafClassifier",
    "classify_leaves",
    # Geometry
    "height_class",
    "width_class",
    "Row",
    "group_rows",
    # Output
    "SkeletonBox",
    "SkeletonRow",
    "SkeletonLayout",
    "plan_layout",
    "shape_modifier",
    "SkeletonCodeEmitter",
    "generate_skeleton_code",
    "PreviewRenderer",
    "render_preview",
    # Errors
    "SkeletonError",
    "AcquisitionError",
    "TraversalError",
]
