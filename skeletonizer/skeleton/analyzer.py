"""
Skeleton Analyzer - Acquisition plus classification behind one boundary.

`analyze` never raises. Every failure, whether the browser could not
start, the document could not be reached, or the snapshot could not be
classified, comes back as an AnalysisResult with `error` set and no
elements.

Usage:
    from skeletonizer.skeleton.analyzer import SkeletonAnalyzer

    analyzer = SkeletonAnalyzer()
    result = await analyzer.analyze(html)
    if result.error:
        print(result.error)
"""

import logging
from typing import Optional, Protocol

from .classifier import LeafClassifier
from .contracts import AnalysisResult
from .errors import AcquisitionError, TraversalError
from .sandbox.contracts import LayoutSnapshot
from .sandbox.sandbox import SnapshotSandbox


logger = logging.getLogger("skeletonizer.skeleton.analyzer")


class SnapshotSource(Protocol):
    """Anything that can turn markup into a settled layout snapshot."""

    async def capture(self, html: str) -> LayoutSnapshot:
        ...


class SkeletonAnalyzer:
    """
    Runs one analysis pass: render, snapshot, classify.

    Each call is a fresh acquisition; nothing is cached between runs.
    """

    def __init__(
        self,
        sandbox: Optional[SnapshotSource] = None,
        classifier: Optional[LeafClassifier] = None,
    ):
        """
        Args:
            sandbox: Snapshot source (defaults to a Playwright sandbox)
            classifier: Leaf classifier (defaults to LeafClassifier())
        """
        self._sandbox = sandbox or SnapshotSandbox()
        self._classifier = classifier or LeafClassifier()

    async def analyze(self, html: str) -> AnalysisResult:
        """
        Analyze a markup fragment.

        Args:
            html: Untrusted markup

        Returns:
            AnalysisResult; `error` is set on any failure
        """
        try:
            snapshot = await self._sandbox.capture(html)
        except AcquisitionError as e:
            logger.error(f"Acquisition failed: {e}")
            return AnalysisResult.failure(html, str(e))
        except TraversalError as e:
            logger.error(f"Snapshot unreadable: {e}")
            return AnalysisResult.failure(html, str(e))
        except Exception as e:
            logger.error(f"Unexpected acquisition error: {e}", exc_info=True)
            return AnalysisResult.failure(html, str(e))

        try:
            elements = self._classifier.classify(snapshot)
        except Exception as e:
            error = TraversalError(f"Classification failed: {e}")
            logger.error(str(error), exc_info=True)
            return AnalysisResult.failure(html, str(error))

        result = AnalysisResult(elements=elements, html=html)
        logger.info(result.describe())
        return result


async def analyze_html(html: str) -> AnalysisResult:
    """
    Convenience function for a one-off analysis with default settings.

    Args:
        html: Markup fragment

    Returns:
        AnalysisResult
    """
    return await SkeletonAnalyzer().analyze(html)
