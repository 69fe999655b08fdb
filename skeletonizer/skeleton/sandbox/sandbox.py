"""
Sandbox - Layout snapshot acquisition with Playwright.

Renders a markup fragment in an isolated headless Chromium page, waits
for layout and styling to settle, and reads the resolved geometry back
as an immutable LayoutSnapshot.

Two waits are needed before geometry is trustworthy:
- the page "load" event, bounded by `load_timeout_ms` because some
  documents never fire it (a hung external script, for instance)
- a fixed settle delay so the styling runtime can apply classes

Read too early, elements report 0x0 or unstyled sizes.
"""

import logging
import time
from typing import Any, Dict, Optional, TYPE_CHECKING

from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from ..errors import AcquisitionError, SkeletonError, TraversalError
from .contracts import LayoutSnapshot
from .document import build_render_document

if TYPE_CHECKING:
    from playwright.async_api import Browser, Playwright

logger = logging.getLogger("skeletonizer.skeleton.sandbox")


# Serializes <body> in one pass. SVG elements expose className as an
# SVGAnimatedString, hence the baseVal fallback.
SERIALIZE_BODY_JS = """
() => {
    const body = document.body;
    if (!body) return null;

    const serialize = (el) => {
        const rect = el.getBoundingClientRect();
        const style = window.getComputedStyle(el);

        const textNodes = [];
        for (const node of el.childNodes) {
            if (node.nodeType === Node.TEXT_NODE) {
                textNodes.push(node.textContent || '');
            }
        }

        let className = '';
        if (typeof el.className === 'string') {
            className = el.className;
        } else if (el.className && typeof el.className.baseVal === 'string') {
            className = el.className.baseVal;
        }

        return {
            tag: el.tagName.toLowerCase(),
            rect: {
                x: rect.left,
                y: rect.top,
                width: rect.width,
                height: rect.height,
            },
            border_radius: style ? (style.borderRadius || '') : '',
            class_name: className,
            text_nodes: textNodes,
            children: Array.from(el.children).map(serialize),
        };
    };

    return serialize(body);
}
"""


class SnapshotSandbox:
    """
    Offscreen render surface for layout acquisition.

    Each capture launches its own browser, so runs never share state,
    and the browser is closed on every exit path.

    Usage:
        sandbox = SnapshotSandbox(settle_delay_ms=300)
        snapshot = await sandbox.capture("<p class='text-xl'>Hi</p>")
        for node in snapshot.body.iter_tree():
            print(node.tag, node.rect)
    """

    def __init__(
        self,
        viewport_width: int = 800,
        viewport_height: int = 600,
        load_timeout_ms: int = 5000,
        settle_delay_ms: int = 300,
        launch_timeout_ms: int = 30000,
        tailwind_url: str = "https://cdn.tailwindcss.com",
        body_padding_px: int = 16,
    ):
        """
        Initialize the sandbox.

        Args:
            viewport_width: Render surface width
            viewport_height: Render surface height
            load_timeout_ms: Upper bound on waiting for the load event
            settle_delay_ms: Wait after load for styles to apply
            launch_timeout_ms: Upper bound on browser start
            tailwind_url: Styling runtime injected into the document
            body_padding_px: Padding applied to <body>
        """
        self.viewport = {"width": viewport_width, "height": viewport_height}
        self.load_timeout_ms = load_timeout_ms
        self.settle_delay_ms = settle_delay_ms
        self.launch_timeout_ms = launch_timeout_ms
        self.tailwind_url = tailwind_url
        self.body_padding_px = body_padding_px

    @classmethod
    def from_settings(cls, settings: Any) -> "SnapshotSandbox":
        """Build a sandbox from a Settings object."""
        return cls(
            viewport_width=settings.VIEWPORT_WIDTH,
            viewport_height=settings.VIEWPORT_HEIGHT,
            load_timeout_ms=settings.LOAD_TIMEOUT_MS,
            settle_delay_ms=settings.SETTLE_DELAY_MS,
            launch_timeout_ms=settings.BROWSER_LAUNCH_TIMEOUT_MS,
            tailwind_url=settings.TAILWIND_CDN_URL,
            body_padding_px=settings.BODY_PADDING_PX,
        )

    async def capture(self, html: str) -> LayoutSnapshot:
        """
        Render `html` and return its settled layout.

        Args:
            html: Markup fragment to lay out

        Returns:
            LayoutSnapshot rooted at <body>

        Raises:
            AcquisitionError: Browser could not start or the document
                could not be reached
            TraversalError: The page could not be serialized
        """
        start_time = time.time()
        document = build_render_document(
            html,
            tailwind_url=self.tailwind_url,
            body_padding_px=self.body_padding_px,
        )

        try:
            async with async_playwright() as p:
                browser = await self._launch(p)
                try:
                    raw = await self._render_and_serialize(browser, document)
                finally:
                    await self._close_browser(browser)
        except SkeletonError:
            raise
        except Exception as e:
            logger.error(f"Render surface failed: {e}")
            raise AcquisitionError(f"Render surface failed: {e}") from e

        render_time_ms = (time.time() - start_time) * 1000
        snapshot = LayoutSnapshot.from_dict(
            raw,
            viewport_width=self.viewport["width"],
            viewport_height=self.viewport["height"],
            render_time_ms=render_time_ms,
        )
        logger.info(
            f"Captured {snapshot.element_count} elements in {render_time_ms:.0f}ms"
        )
        return snapshot

    async def _launch(self, p: "Playwright") -> "Browser":
        try:
            return await p.chromium.launch(
                headless=True, timeout=self.launch_timeout_ms
            )
        except Exception as e:
            logger.error(f"Browser launch failed: {e}")
            raise AcquisitionError(f"Cannot create render surface: {e}") from e

    async def _render_and_serialize(
        self, browser: "Browser", document: str
    ) -> Dict[str, Any]:
        """Load the document, wait for it to settle, serialize <body>."""
        context = await browser.new_context(viewport=self.viewport)
        page = await context.new_page()

        page.on("pageerror", lambda err: logger.debug(f"Page error during render: {err}"))

        try:
            await page.set_content(
                document, wait_until="load", timeout=self.load_timeout_ms
            )
        except PlaywrightTimeoutError:
            logger.warning(
                f"Load event not fired within {self.load_timeout_ms}ms, continuing"
            )

        await page.wait_for_timeout(self.settle_delay_ms)

        try:
            raw: Optional[Dict[str, Any]] = await page.evaluate(SERIALIZE_BODY_JS)
        except Exception as e:
            raise TraversalError(f"Layout traversal failed: {e}") from e

        if raw is None:
            raise AcquisitionError("Cannot access render surface document")
        return raw

    async def _close_browser(self, browser: "Browser") -> None:
        try:
            await browser.close()
        except Exception as e:
            logger.warning(f"Error closing browser: {e}")
