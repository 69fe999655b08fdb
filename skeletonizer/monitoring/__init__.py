"""
Monitoring Module - Logging and metrics for analysis runs.

Usage:
======
    from skeletonizer.monitoring import skeleton_logger, analysis_metrics

    skeleton_logger.log_request(request_id, html)
    analysis_metrics.record_run(request_id, True, ["p", "button"], 512.0)
    stats = analysis_metrics.get_stats()
"""

from skeletonizer.monitoring.logger import SkeletonLogger, skeleton_logger
from skeletonizer.monitoring.metrics import AnalysisMetrics, analysis_metrics

__all__ = [
    "SkeletonLogger",
    "skeleton_logger",
    "AnalysisMetrics",
    "analysis_metrics",
]
