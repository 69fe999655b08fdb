"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Layout snapshot builders (no browser needed)
- A fake snapshot source for analyzer/service tests
- Test client (FastAPI TestClient) with the service overridden
"""

from typing import Generator, Optional, Sequence

import pytest
from fastapi.testclient import TestClient

from skeletonizer.main import app
from skeletonizer.monitoring.metrics import AnalysisMetrics
from skeletonizer.routers.skeleton import get_skeleton_service
from skeletonizer.services.skeleton_service import SkeletonService
from skeletonizer.skeleton.analyzer import SkeletonAnalyzer
from skeletonizer.skeleton.contracts import ElementInfo
from skeletonizer.skeleton.sandbox.contracts import (
    BoundingRect,
    LayoutNode,
    LayoutSnapshot,
)


# ---------------------------------------------------------------------------
# SNAPSHOT BUILDERS
# ---------------------------------------------------------------------------

def make_node(
    tag: str,
    x: float = 0,
    y: float = 0,
    width: float = 100,
    height: float = 20,
    radius: str = "0px",
    text: Sequence[str] = (),
    children: Sequence[LayoutNode] = (),
    class_name: str = "",
) -> LayoutNode:
    """Helper to create a LayoutNode for tests."""
    return LayoutNode(
        tag=tag,
        rect=BoundingRect(x=x, y=y, width=width, height=height),
        border_radius=radius,
        class_name=class_name,
        text_nodes=tuple(text),
        children=tuple(children),
    )


def make_snapshot(*children: LayoutNode) -> LayoutSnapshot:
    """Helper to wrap nodes in a <body> snapshot."""
    body = make_node("body", 0, 0, 800, 600, children=children)
    return LayoutSnapshot(body=body)


def make_element(
    type: str = "p",
    x: float = 0,
    y: float = 0,
    width: float = 100,
    height: float = 20,
) -> ElementInfo:
    """Helper to create an ElementInfo for tests."""
    return ElementInfo(type=type, x=x, y=y, width=width, height=height)


def profile_card_snapshot() -> LayoutSnapshot:
    """
    Avatar beside a heading, paragraph below.

    img 64x64 fully rounded at y=16, h2 at y=18, p at y=48.
    """
    avatar = make_node("img", 16, 16, 64, 64, radius="9999px", class_name="w-16 h-16 rounded-full")
    heading = make_node("h2", 96, 18, 120, 28, text=["John Doe"])
    paragraph = make_node("p", 16, 48, 400, 24, text=["Software Engineer"])
    wrapper = make_node("div", 16, 16, 400, 64, children=[avatar, heading])
    return make_snapshot(wrapper, paragraph)


# ---------------------------------------------------------------------------
# FAKE SNAPSHOT SOURCE
# ---------------------------------------------------------------------------

class FakeSandbox:
    """Snapshot source returning a fixed snapshot or raising."""

    def __init__(
        self,
        snapshot: Optional[LayoutSnapshot] = None,
        error: Optional[Exception] = None,
    ):
        self.snapshot = snapshot or make_snapshot()
        self.error = error
        self.calls = []

    async def capture(self, html: str) -> LayoutSnapshot:
        self.calls.append(html)
        if self.error is not None:
            raise self.error
        return self.snapshot


@pytest.fixture
def fake_sandbox() -> FakeSandbox:
    return FakeSandbox(snapshot=profile_card_snapshot())


@pytest.fixture
def service(fake_sandbox: FakeSandbox) -> SkeletonService:
    """Service wired to the fake sandbox and private metrics."""
    return SkeletonService(
        analyzer=SkeletonAnalyzer(sandbox=fake_sandbox),
        metrics=AnalysisMetrics(),
    )


@pytest.fixture
def client(service: SkeletonService) -> Generator[TestClient, None, None]:
    """
    Create a test client with the fake-backed service.

    Overrides the get_skeleton_service dependency so no browser starts.
    """
    app.dependency_overrides[get_skeleton_service] = lambda: service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
