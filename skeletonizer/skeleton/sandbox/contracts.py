"""
Snapshot Contracts - Immutable layout snapshot read back from the browser.

The sandbox serializes the rendered <body> tree once, after layout has
settled, and the classifier works on this value only. Nothing downstream
touches a live page.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple

from ..errors import TraversalError


_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_css_length(value: Optional[str]) -> Optional[float]:
    """
    Parse the leading number of a computed CSS value.

    "9999px" -> 9999.0, "50%" -> 50.0, "12px 4px" -> 12.0,
    "" or "none" -> None.
    """
    if not value:
        return None
    match = _LEADING_NUMBER.match(value)
    if not match:
        return None
    return float(match.group(1))


@dataclass(frozen=True)
class BoundingRect:
    """Element bounding rectangle from getBoundingClientRect()."""

    x: float
    y: float
    width: float
    height: float

    def exceeds(self, min_size: float) -> bool:
        """Check both dimensions are strictly larger than `min_size`."""
        return self.width > min_size and self.height > min_size

    @property
    def min_side(self) -> float:
        """Smaller of width and height."""
        return min(self.width, self.height)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary."""
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BoundingRect":
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )


@dataclass(frozen=True)
class LayoutNode:
    """
    One rendered element with resolved geometry and style.

    `text_nodes` holds the raw content of the element's direct text-node
    children only; text nested inside child elements lives on those
    children.
    """

    tag: str
    """Lowercase tag name."""

    rect: BoundingRect
    """Resolved bounding box."""

    border_radius: str = ""
    """Computed border-radius, as the browser reports it."""

    class_name: str = ""
    """Class attribute, verbatim."""

    text_nodes: Tuple[str, ...] = ()
    """Direct text-node children, in order."""

    children: Tuple["LayoutNode", ...] = ()
    """Child elements, in document order."""

    @property
    def corner_radius(self) -> Optional[float]:
        """Leading numeric value of the computed border radius."""
        return parse_css_length(self.border_radius)

    @property
    def has_element_children(self) -> bool:
        return len(self.children) > 0

    @property
    def has_direct_text(self) -> bool:
        """True when a direct text node has non-whitespace content."""
        return any(text.strip() for text in self.text_nodes)

    def iter_tree(self) -> Iterator["LayoutNode"]:
        """Yield this node and every descendant, depth-first."""
        yield self
        for child in self.children:
            yield from child.iter_tree()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutNode":
        """Build a node tree from the in-page serializer's output."""
        return cls(
            tag=str(data["tag"]).lower(),
            rect=BoundingRect.from_dict(data["rect"]),
            border_radius=data.get("border_radius") or "",
            class_name=data.get("class_name") or "",
            text_nodes=tuple(str(t) for t in data.get("text_nodes") or ()),
            children=tuple(cls.from_dict(c) for c in data.get("children") or ()),
        )

    def __repr__(self) -> str:
        return f"LayoutNode(<{self.tag}> {len(self.children)} children)"


@dataclass(frozen=True)
class LayoutSnapshot:
    """
    Settled layout of a rendered document.

    `body` is the root; the classifier starts from its children.
    """

    body: LayoutNode
    viewport_width: int = 800
    viewport_height: int = 600
    render_time_ms: float = field(default=0.0, compare=False)

    @property
    def element_count(self) -> int:
        """Number of elements under <body>, excluding body itself."""
        return sum(1 for _ in self.body.iter_tree()) - 1

    @classmethod
    def from_dict(
        cls,
        data: Dict[str, Any],
        viewport_width: int = 800,
        viewport_height: int = 600,
        render_time_ms: float = 0.0,
    ) -> "LayoutSnapshot":
        """
        Parse a serialized body tree.

        Raises:
            TraversalError: If the tree is missing required fields
        """
        try:
            body = LayoutNode.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise TraversalError(f"Malformed layout snapshot: {e}") from e
        return cls(
            body=body,
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            render_time_ms=render_time_ms,
        )
