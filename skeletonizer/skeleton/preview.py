"""
Preview Renderer - Draws a SkeletonLayout as live placeholder boxes.

Where the code emitter prints component source, this renderer builds a
standalone HTML page (via BeautifulSoup) that shows the skeleton
directly. Every box is a <div data-skeleton-box> carrying the same size
and shape classes the emitter would print, plus pulse styling.

Usage:
    from skeletonizer.skeleton.preview import PreviewRenderer

    html = PreviewRenderer().render(plan_layout(elements))
"""

import logging
from typing import Iterable, List

from bs4 import BeautifulSoup, Tag

from .contracts import ElementInfo
from .emitter import CONTAINER_CLASSES, NO_ELEMENTS_MESSAGE, ROW_WRAPPER_CLASSES
from .layout import SkeletonBox, SkeletonLayout, plan_layout
from .rows import DEFAULT_ROW_TOLERANCE_PX


logger = logging.getLogger("skeletonizer.skeleton.preview")


BOX_BASE_CLASSES: List[str] = ["animate-pulse", "bg-gray-200"]

BOX_ATTR = "data-skeleton-box"
ROW_ATTR = "data-skeleton-row"
CONTAINER_ID = "skeleton-preview"

PREVIEW_SHELL = """<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>Skeleton Preview</title>
<script src="{tailwind_url}"></script>
</head>
<body class="bg-white">
</body>
</html>
"""


class PreviewRenderer:
    """
    Builds preview markup from a SkeletonLayout.

    Features:
    - Full document with the styling runtime, or a bare fragment
    - Same row wrapping rule as the code emitter
    - Explicit notice for an empty layout
    """

    def __init__(self, tailwind_url: str = "https://cdn.tailwindcss.com"):
        self.tailwind_url = tailwind_url

    def render(self, layout: SkeletonLayout, full_document: bool = True) -> str:
        """
        Render the preview.

        Args:
            layout: Planned rows of boxes
            full_document: Wrap in an HTML page that loads the styling runtime

        Returns:
            HTML string
        """
        if full_document:
            soup = BeautifulSoup(
                PREVIEW_SHELL.format(tailwind_url=self.tailwind_url), "html.parser"
            )
            soup.body.append(self._build_container(soup, layout))
        else:
            soup = BeautifulSoup("", "html.parser")
            soup.append(self._build_container(soup, layout))

        logger.debug(f"Rendered preview with {layout.box_count} boxes")
        return str(soup)

    def _build_container(self, soup: BeautifulSoup, layout: SkeletonLayout) -> Tag:
        if layout.is_empty:
            container = soup.new_tag("div", attrs={"id": CONTAINER_ID, "class": "p-4"})
            notice = soup.new_tag("p", attrs={"class": "text-gray-500"})
            notice.string = NO_ELEMENTS_MESSAGE
            container.append(notice)
            return container

        container = soup.new_tag(
            "div", attrs={"id": CONTAINER_ID, "class": CONTAINER_CLASSES}
        )
        for row in layout.rows:
            attrs = {ROW_ATTR: ""}
            if row.is_multi:
                attrs["class"] = ROW_WRAPPER_CLASSES
            row_tag = soup.new_tag("div", attrs=attrs)
            for box in row.boxes:
                row_tag.append(self._build_box(soup, box))
            container.append(row_tag)
        return container

    @staticmethod
    def _build_box(soup: BeautifulSoup, box: SkeletonBox) -> Tag:
        classes = BOX_BASE_CLASSES + box.classes
        return soup.new_tag("div", attrs={"class": " ".join(classes), BOX_ATTR: ""})


def render_preview(
    elements: Iterable[ElementInfo],
    tolerance: float = DEFAULT_ROW_TOLERANCE_PX,
    full_document: bool = True,
) -> str:
    """Plan and render a preview in one call."""
    return PreviewRenderer().render(
        plan_layout(elements, tolerance=tolerance), full_document=full_document
    )
