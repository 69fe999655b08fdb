"""
Sandbox - Layout snapshot acquisition.

Usage:
    from skeletonizer.skeleton.sandbox import SnapshotSandbox

    sandbox = SnapshotSandbox(viewport_width=800, viewport_height=600)
    snapshot = await sandbox.capture(html)
    print(snapshot.element_count)
"""

from .contracts import (
    BoundingRect,
    LayoutNode,
    LayoutSnapshot,
    parse_css_length,
)
from .document import build_render_document
from .sandbox import SnapshotSandbox


__all__ = [
    "SnapshotSandbox",
    "BoundingRect",
    "LayoutNode",
    "LayoutSnapshot",
    "parse_css_length",
    "build_render_document",
]
