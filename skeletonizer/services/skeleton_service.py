"""
Skeleton Service - Runs the full pipeline for API and CLI callers.

The service:
1. Rejects blank input before a browser is launched
2. Runs one analysis at a time (later requests wait their turn)
3. Plans the layout once and renders both the code and the preview
4. Logs and records metrics for every run

Usage:
======
    from skeletonizer.services.skeleton_service import skeleton_service

    report = await skeleton_service.generate(html)
    if report.error:
        print(report.error)
    else:
        print(report.code)
"""

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional
from uuid import uuid4

from skeletonizer.core.config import settings
from skeletonizer.monitoring.logger import SkeletonLogger, skeleton_logger
from skeletonizer.monitoring.metrics import AnalysisMetrics, analysis_metrics
from skeletonizer.skeleton.analyzer import SkeletonAnalyzer
from skeletonizer.skeleton.contracts import AnalysisResult, ElementInfo
from skeletonizer.skeleton.emitter import SkeletonCodeEmitter
from skeletonizer.skeleton.layout import plan_layout
from skeletonizer.skeleton.preview import PreviewRenderer
from skeletonizer.skeleton.sandbox import SnapshotSandbox


logger = logging.getLogger("skeletonizer.services.skeleton")


EMPTY_INPUT_ERROR = "Please enter some HTML to analyze"

SAMPLE_HTML = """<div class="max-w-sm mx-auto bg-white rounded-lg shadow-md p-6">
  <div class="flex items-center space-x-4">
    <img src="https://via.placeholder.com/64" alt="Avatar" class="w-16 h-16 rounded-full" />
    <div>
      <h2 class="text-xl font-bold text-gray-900">John Doe</h2>
      <p class="text-gray-600">Software Engineer</p>
    </div>
  </div>
  <p class="mt-4 text-gray-700">
    Lorem ipsum dolor sit amet, consectetur adipiscing elit. Sed do eiusmod tempor incididunt ut labore et dolore magna aliqua.
  </p>
  <button class="mt-4 w-full bg-blue-500 text-white py-2 px-4 rounded-md hover:bg-blue-600">
    View Profile
  </button>
</div>"""


# ---------------------------------------------------------------------------
# REPORT
# ---------------------------------------------------------------------------

@dataclass
class SkeletonSummary:
    """Counts shown alongside a generated skeleton."""

    element_count: int = 0
    types: List[str] = field(default_factory=list)
    """Distinct element types in order of first detection."""

    @classmethod
    def from_elements(cls, elements: List[ElementInfo]) -> "SkeletonSummary":
        types: List[str] = []
        for el in elements:
            if el.type not in types:
                types.append(el.type)
        return cls(element_count=len(elements), types=types)

    def describe(self) -> str:
        plural = "" if self.element_count == 1 else "s"
        return (
            f"Detected {self.element_count} element{plural} • "
            f"Types: {', '.join(self.types)}"
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "element_count": self.element_count,
            "types": list(self.types),
            "description": self.describe(),
        }


@dataclass
class SkeletonReport:
    """
    Everything a caller shows for one run.

    `code` and `preview_html` are empty when the analysis failed.
    """

    result: AnalysisResult
    code: str = ""
    preview_html: str = ""
    summary: SkeletonSummary = field(default_factory=SkeletonSummary)
    request_id: str = ""
    latency_ms: float = 0.0

    @property
    def error(self) -> Optional[str]:
        return self.result.error

    @property
    def elements(self) -> List[ElementInfo]:
        return self.result.elements

    def to_dict(self) -> Dict[str, Any]:
        data = self.result.to_dict()
        data.update(
            {
                "code": self.code,
                "preview_html": self.preview_html,
                "summary": self.summary.to_dict(),
            }
        )
        return data


# ---------------------------------------------------------------------------
# SKELETON SERVICE
# ---------------------------------------------------------------------------

class SkeletonService:
    """
    Composes analyzer, layout planner and both renderers.

    A single lock serializes runs, so each analysis starts only after
    the previous one's result has been recorded.
    """

    def __init__(
        self,
        analyzer: Optional[SkeletonAnalyzer] = None,
        row_tolerance: Optional[float] = None,
        emitter: Optional[SkeletonCodeEmitter] = None,
        preview_renderer: Optional[PreviewRenderer] = None,
        metrics: Optional[AnalysisMetrics] = None,
        structured_logger: Optional[SkeletonLogger] = None,
    ):
        self._analyzer = analyzer or SkeletonAnalyzer(
            sandbox=SnapshotSandbox.from_settings(settings)
        )
        self.row_tolerance = (
            row_tolerance if row_tolerance is not None else settings.ROW_TOLERANCE_PX
        )
        self._emitter = emitter or SkeletonCodeEmitter()
        self._preview = preview_renderer or PreviewRenderer(
            tailwind_url=settings.TAILWIND_CDN_URL
        )
        self._metrics = metrics or analysis_metrics
        self._log = structured_logger or skeleton_logger
        self._lock = asyncio.Lock()

    @property
    def metrics(self) -> AnalysisMetrics:
        return self._metrics

    async def generate(self, html: str) -> SkeletonReport:
        """
        Analyze markup and render its skeleton.

        Args:
            html: Markup fragment

        Returns:
            SkeletonReport; never raises for bad or unrenderable input
        """
        request_id = uuid4().hex[:12]

        if not html or not html.strip():
            logger.info(f"[{request_id}] Rejected blank input")
            return SkeletonReport(
                result=AnalysisResult.failure(html or "", EMPTY_INPUT_ERROR),
                request_id=request_id,
            )

        async with self._lock:
            self._log.log_request(request_id, html)
            start_time = time.time()

            result = await self._analyzer.analyze(html)
            report = self.render(result)

            report.request_id = request_id
            report.latency_ms = (time.time() - start_time) * 1000

            self._log.log_result(request_id, result, report.latency_ms)
            self._metrics.record_run(
                request_id,
                success=result.ok,
                types=[el.type for el in result.elements],
                latency_ms=report.latency_ms,
                error=result.error,
            )

        return report

    def render(self, result: AnalysisResult) -> SkeletonReport:
        """
        Build code and preview for an existing analysis result.

        A failed result produces an empty report carrying its error.
        """
        if not result.ok:
            return SkeletonReport(result=result)

        layout = plan_layout(result.elements, tolerance=self.row_tolerance)
        return SkeletonReport(
            result=result,
            code=self._emitter.emit(layout),
            preview_html=self._preview.render(layout),
            summary=SkeletonSummary.from_elements(result.elements),
        )


# ---------------------------------------------------------------------------
# SINGLETON INSTANCE
# ---------------------------------------------------------------------------

skeleton_service = SkeletonService()
