"""
Leaf Classifier - Finds placeholder-worthy elements in a layout snapshot.

An element is a leaf when it is one of the structural leaf tags (image,
button, text input, textarea, link) or when it has no element children
and at least one direct, non-blank text node. Text reachable only
through a child element does not count: such an element is a container
and its children are classified instead.

Usage:
    from skeletonizer.skeleton.classifier import LeafClassifier

    classifier = LeafClassifier()
    elements = classifier.classify(snapshot)
"""

import logging
from typing import FrozenSet, List

from .contracts import ElementInfo
from .sandbox.contracts import LayoutNode, LayoutSnapshot


logger = logging.getLogger("skeletonizer.skeleton.classifier")


# Subtrees that are never visited
SKIPPED_TAGS: FrozenSet[str] = frozenset({"script", "style", "head"})

# Tags that are always leaves, whatever their content
LEAF_TAGS: FrozenSet[str] = frozenset({"img", "button", "input", "textarea", "a"})

# Both dimensions must be strictly larger than this to count as visible
MIN_VISIBLE_SIZE_PX = 5.0

SHAPE_CIRCLE = "circle"
SHAPE_AVATAR = "avatar"


class LeafClassifier:
    """
    Walks a LayoutSnapshot depth-first and records content leaves.

    Output is in document order, which is not presentation order; see
    skeleton.rows for that.
    """

    def __init__(self, min_size: float = MIN_VISIBLE_SIZE_PX):
        """
        Args:
            min_size: Visibility threshold in pixels (exclusive)
        """
        self.min_size = min_size

    def classify(self, snapshot: LayoutSnapshot) -> List[ElementInfo]:
        """
        Find every leaf under <body>.

        Args:
            snapshot: Settled layout to inspect

        Returns:
            ElementInfo per leaf, in document order
        """
        elements: List[ElementInfo] = []
        for child in snapshot.body.children:
            self._visit(child, elements)
        logger.debug(f"Classified {len(elements)} leaves")
        return elements

    def _visit(self, node: LayoutNode, out: List[ElementInfo]) -> None:
        if node.tag in SKIPPED_TAGS:
            return

        if node.rect.exceeds(self.min_size) and self.is_leaf(node):
            out.append(
                ElementInfo(
                    type=self.shape_of(node),
                    x=node.rect.x,
                    y=node.rect.y,
                    width=node.rect.width,
                    height=node.rect.height,
                    class_name=node.class_name,
                )
            )

        # Invisible wrappers can still hold visible content
        for child in node.children:
            self._visit(child, out)

    @staticmethod
    def is_leaf(node: LayoutNode) -> bool:
        """Check whether `node` represents atomic visible content."""
        if node.tag in LEAF_TAGS:
            return True
        return not node.has_element_children and node.has_direct_text

    @staticmethod
    def shape_of(node: LayoutNode) -> str:
        """
        Pick the shape category for a leaf.

        Priority:
        1. Corner radius >= half the smaller side -> "circle"
        2. <img> -> "avatar"
        3. Lowercase tag name
        """
        radius = node.corner_radius
        if radius is not None and radius >= node.rect.min_side / 2:
            return SHAPE_CIRCLE
        if node.tag == "img":
            return SHAPE_AVATAR
        return node.tag


def classify_leaves(
    snapshot: LayoutSnapshot, min_size: float = MIN_VISIBLE_SIZE_PX
) -> List[ElementInfo]:
    """Convenience wrapper around LeafClassifier.classify."""
    return LeafClassifier(min_size=min_size).classify(snapshot)
