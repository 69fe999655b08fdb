"""
Tests for the layout snapshot contracts.

Covers:
- CSS length parsing for border radii
- BoundingRect visibility and sizing helpers
- LayoutNode text/children predicates
- LayoutSnapshot parsing of serializer output
"""

import pytest

from skeletonizer.skeleton.errors import TraversalError
from skeletonizer.skeleton.sandbox.contracts import (
    BoundingRect,
    LayoutNode,
    LayoutSnapshot,
    parse_css_length,
)
from skeletonizer.skeleton.sandbox.document import build_render_document

from conftest import make_node


# ============================================================================
# CSS LENGTH PARSING
# ============================================================================


class TestParseCssLength:
    """Tests for parse_css_length."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            ("9999px", 9999.0),
            ("50%", 50.0),
            ("12px 4px", 12.0),
            ("0px", 0.0),
            ("6.5px", 6.5),
            (".5rem", 0.5),
        ],
    )
    def test_leading_number(self, value, expected):
        """Should read the first number in the value."""
        assert parse_css_length(value) == expected

    @pytest.mark.parametrize("value", ["", None, "none", "auto", "px"])
    def test_unparseable_is_none(self, value):
        """Empty or non-numeric values have no radius."""
        assert parse_css_length(value) is None


# ============================================================================
# BOUNDING RECT
# ============================================================================


class TestBoundingRect:
    """Tests for BoundingRect dataclass."""

    def test_exceeds_strictly(self):
        """Both sides must be strictly above the threshold."""
        assert BoundingRect(0, 0, 6, 6).exceeds(5) is True
        assert BoundingRect(0, 0, 5, 100).exceeds(5) is False
        assert BoundingRect(0, 0, 100, 5).exceeds(5) is False

    def test_min_side(self):
        """Should return the smaller dimension."""
        assert BoundingRect(0, 0, 200, 36).min_side == 36

    def test_from_dict(self):
        """Should coerce values to floats."""
        rect = BoundingRect.from_dict({"x": 1, "y": "2", "width": 3, "height": 4})
        assert rect == BoundingRect(1.0, 2.0, 3.0, 4.0)
        assert rect.to_dict() == {"x": 1.0, "y": 2.0, "width": 3.0, "height": 4.0}


# ============================================================================
# LAYOUT NODE
# ============================================================================


class TestLayoutNode:
    """Tests for LayoutNode predicates."""

    def test_whitespace_only_text_is_not_direct_text(self):
        """Whitespace text nodes do not count as content."""
        node = make_node("p", text=["  ", "\n\t"])
        assert node.has_direct_text is False

    def test_any_non_blank_text_node_counts(self):
        node = make_node("span", text=["\n", " Hello "])
        assert node.has_direct_text is True

    def test_corner_radius(self):
        assert make_node("img", radius="9999px").corner_radius == 9999.0
        assert make_node("div", radius="").corner_radius is None

    def test_iter_tree_depth_first(self):
        """Should yield the node then descendants in document order."""
        inner = make_node("span")
        tree = make_node("div", children=[make_node("p", children=[inner]), make_node("a")])
        assert [n.tag for n in tree.iter_tree()] == ["div", "p", "span", "a"]

    def test_from_dict_nested(self):
        """Should parse the in-page serializer's shape."""
        node = LayoutNode.from_dict(
            {
                "tag": "DIV",
                "rect": {"x": 0, "y": 0, "width": 10, "height": 10},
                "border_radius": None,
                "class_name": None,
                "text_nodes": ["hi"],
                "children": [
                    {"tag": "img", "rect": {"x": 1, "y": 1, "width": 8, "height": 8}},
                ],
            }
        )

        assert node.tag == "div"
        assert node.border_radius == ""
        assert node.class_name == ""
        assert node.text_nodes == ("hi",)
        assert node.children[0].tag == "img"
        assert node.children[0].children == ()


# ============================================================================
# LAYOUT SNAPSHOT
# ============================================================================


class TestLayoutSnapshot:
    """Tests for LayoutSnapshot parsing."""

    def test_element_count_excludes_body(self):
        body = make_node("body", children=[make_node("div", children=[make_node("p")])])
        assert LayoutSnapshot(body=body).element_count == 2

    def test_from_dict_keeps_viewport(self):
        snapshot = LayoutSnapshot.from_dict(
            {"tag": "body", "rect": {"x": 0, "y": 0, "width": 800, "height": 600}},
            viewport_width=1024,
            viewport_height=768,
        )
        assert snapshot.body.tag == "body"
        assert snapshot.viewport_width == 1024
        assert snapshot.viewport_height == 768

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"tag": "body"},
            {"tag": "body", "rect": {"x": 0, "y": 0, "width": "wide", "height": 1}},
            {"tag": "body", "rect": None},
        ],
    )
    def test_malformed_raises_traversal_error(self, data):
        """Missing or bad fields should raise TraversalError."""
        with pytest.raises(TraversalError, match="Malformed layout snapshot"):
            LayoutSnapshot.from_dict(data)


# ============================================================================
# RENDER DOCUMENT
# ============================================================================


class TestRenderDocument:
    """Tests for build_render_document."""

    def test_fragment_inserted_verbatim(self):
        """Malformed markup is not repaired before rendering."""
        fragment = "<div><p>unclosed"
        document = build_render_document(fragment)
        assert fragment in document

    def test_styling_runtime_and_padding(self):
        document = build_render_document(
            "<p>x</p>", tailwind_url="https://example.test/tw.js", body_padding_px=24
        )
        assert '<script src="https://example.test/tw.js"></script>' in document
        assert "padding: 24px" in document
        assert "margin: 0" in document
