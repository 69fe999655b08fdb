"""
End-to-end runs through a real headless Chromium.

Skipped when the browser cannot be launched (run `playwright install
chromium` first). Inline styles are used so geometry does not depend
on the styling runtime being reachable.
"""

import pytest

from skeletonizer.skeleton.analyzer import SkeletonAnalyzer
from skeletonizer.skeleton.emitter import EMPTY_COMPONENT, generate_skeleton_code
from skeletonizer.skeleton.sandbox import SnapshotSandbox


pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
def analyzer():
    return SkeletonAnalyzer(sandbox=SnapshotSandbox(load_timeout_ms=2000, settle_delay_ms=100))


async def _analyze(analyzer, html):
    result = await analyzer.analyze(html)
    if result.error and result.error.startswith(("Cannot create render surface", "Render surface failed")):
        pytest.skip(f"Chromium unavailable: {result.error}")
    return result


async def test_single_button(analyzer):
    result = await _analyze(
        analyzer,
        '<button style="display:block;width:200px;height:36px;border-radius:6px">Save</button>',
    )

    assert result.error is None
    assert [el.type for el in result.elements] == ["button"]
    assert result.elements[0].width == 200
    assert result.elements[0].height == 36
    assert '<Skeleton className="rounded-md h-8 w-64" />' in generate_skeleton_code(result.elements)


async def test_avatar_row(analyzer):
    html = """
    <div style="display:flex;align-items:flex-start;gap:16px">
      <img style="display:block;width:64px;height:64px;border-radius:9999px">
      <h2 style="margin:0;height:28px;width:120px">John Doe</h2>
    </div>
    <p style="margin:0;height:24px;width:400px">Software Engineer</p>
    """

    result = await _analyze(analyzer, html)

    assert [el.type for el in result.elements] == ["circle", "h2", "p"]
    code = generate_skeleton_code(result.elements)
    assert '<div className="flex items-center gap-4">' in code
    assert code.index("rounded-full h-12 w-16") < code.index("h-6 w-32")


async def test_no_leaves(analyzer):
    result = await _analyze(analyzer, "<div><div></div></div>")

    assert result.error is None
    assert result.elements == []
    assert generate_skeleton_code(result.elements) == EMPTY_COMPONENT


async def test_direct_text_rule(analyzer):
    """Text reachable only through a child makes the child the leaf."""
    result = await _analyze(analyzer, "<div><span>Hi</span></div>")

    assert [el.type for el in result.elements] == ["span"]
