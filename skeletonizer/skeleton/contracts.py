"""
Skeleton Contracts - Data structures shared across the pipeline.

These structures carry information from acquisition to output:
1. ElementInfo: One detected content leaf with its geometry
2. AnalysisResult: Outcome of analyzing one markup fragment
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


UNKNOWN_ERROR = "Unknown error occurred"


@dataclass(frozen=True)
class ElementInfo:
    """
    A visible content leaf detected in the rendered markup.

    Created once per acquisition and never modified afterwards.
    """

    type: str
    """Shape category: "circle", "avatar", or the lowercase tag name."""

    x: float
    """Left edge in viewport pixels."""

    y: float
    """Top edge in viewport pixels."""

    width: float
    """Bounding box width in pixels."""

    height: float
    """Bounding box height in pixels."""

    class_name: str = ""
    """Class attribute of the source element (diagnostic only)."""

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the external result keys."""
        return {
            "type": self.type,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "className": self.class_name,
        }

    def __repr__(self) -> str:
        return (
            f"ElementInfo({self.type} @ {self.x:.0f},{self.y:.0f} "
            f"{self.width:.0f}x{self.height:.0f})"
        )


@dataclass
class AnalysisResult:
    """
    Result of analyzing a markup fragment.

    Either `elements` is populated and `error` is None, or `elements`
    is empty and `error` explains why. An empty element list with no
    error is a valid outcome (nothing placeholder-worthy was found).
    """

    elements: List[ElementInfo] = field(default_factory=list)
    """Detected leaves in document order."""

    html: str = ""
    """The markup that was analyzed, verbatim."""

    error: Optional[str] = None
    """Failure description, or None on success."""

    @classmethod
    def failure(cls, html: str, error: Optional[str]) -> "AnalysisResult":
        """Build a failed result; an empty message falls back to a generic one."""
        return cls(elements=[], html=html, error=error or UNKNOWN_ERROR)

    @property
    def ok(self) -> bool:
        """True when analysis completed without error."""
        return self.error is None

    @property
    def is_empty(self) -> bool:
        """True for a successful analysis that found no leaves."""
        return self.ok and not self.elements

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the external result shape; `error` only when set."""
        data: Dict[str, Any] = {
            "elements": [el.to_dict() for el in self.elements],
            "html": self.html,
        }
        if self.error is not None:
            data["error"] = self.error
        return data

    def describe(self) -> str:
        """Generate human-readable summary."""
        if not self.ok:
            return f"AnalysisResult: FAILED ({self.error})"
        return f"AnalysisResult: {len(self.elements)} element(s)"
