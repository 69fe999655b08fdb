"""
Skeleton Logger - Structured logging for analysis runs.

Each entry is a JSON payload on one line, so runs can be traced and
grepped by request id:
- analysis_request: markup size going in
- analysis_result: element count, types, latency, error
"""

import json
import logging
import sys
from datetime import datetime, timezone

from skeletonizer.core.config import settings
from skeletonizer.skeleton.contracts import AnalysisResult

# Configure the package logger
logger = logging.getLogger("skeletonizer")
logger.setLevel(logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL.upper())

# Create console handler if not exists
if not logger.handlers:
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter(
        '[%(asctime)s] %(levelname)s [%(name)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


class SkeletonLogger:
    """
    Structured logger for analysis runs.

    Usage:
        log = SkeletonLogger()
        log.log_request(request_id="abc123", html=html)
        log.log_result(request_id="abc123", result=result, latency_ms=812.4)
    """

    def __init__(self):
        self._logger = logging.getLogger("skeletonizer.monitoring")

    def log_request(
        self,
        request_id: str,
        html: str,
    ) -> None:
        """
        Log an incoming analysis request.

        Args:
            request_id: Unique request identifier
            html: Markup being analyzed (only its size is logged)
        """
        log_data = {
            "event": "analysis_request",
            "request_id": request_id,
            "html_length": len(html),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        self._logger.info(f"Analysis Request: {json.dumps(log_data)}")

    def log_result(
        self,
        request_id: str,
        result: AnalysisResult,
        latency_ms: float,
    ) -> None:
        """
        Log the outcome of an analysis.

        Args:
            request_id: Request identifier (for correlation)
            result: Analysis outcome
            latency_ms: Wall time of the run
        """
        log_data = {
            "event": "analysis_result",
            "request_id": request_id,
            "success": result.ok,
            "element_count": len(result.elements),
            "types": sorted({el.type for el in result.elements}),
            "latency_ms": round(latency_ms, 2),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        if result.error:
            log_data["error"] = result.error

        level = logging.INFO if result.ok else logging.WARNING
        self._logger.log(level, f"Analysis Result: {json.dumps(log_data)}")


skeleton_logger = SkeletonLogger()
