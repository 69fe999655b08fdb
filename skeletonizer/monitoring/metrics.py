"""
Analysis Metrics - In-memory usage tracking for skeleton generation.

Tracks per-run outcomes (success, failure, empty), latency and what
kinds of elements are being detected. Kept in memory only; restart
clears it.
"""

from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Optional


@dataclass
class RunMetrics:
    """Metrics for a single analysis run."""
    request_id: str
    success: bool
    element_count: int
    latency_ms: float
    types: Dict[str, int] = field(default_factory=dict)
    error: Optional[str] = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass
class AggregatedMetrics:
    """Aggregated metrics since startup."""
    total_runs: int = 0
    successful_runs: int = 0
    failed_runs: int = 0
    empty_runs: int = 0
    total_elements: int = 0
    total_latency_ms: float = 0.0
    elements_by_type: Dict[str, int] = field(default_factory=dict)

    @property
    def avg_latency_ms(self) -> float:
        """Average latency per run."""
        if self.total_runs == 0:
            return 0.0
        return self.total_latency_ms / self.total_runs

    @property
    def success_rate(self) -> float:
        """Success rate as a percentage."""
        if self.total_runs == 0:
            return 0.0
        return (self.successful_runs / self.total_runs) * 100

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            "total_runs": self.total_runs,
            "successful_runs": self.successful_runs,
            "failed_runs": self.failed_runs,
            "empty_runs": self.empty_runs,
            "success_rate": f"{self.success_rate:.1f}%",
            "total_elements": self.total_elements,
            "avg_latency_ms": round(self.avg_latency_ms, 2),
            "elements_by_type": dict(self.elements_by_type),
        }


class AnalysisMetrics:
    """
    Tracks and aggregates analysis run metrics.

    Usage:
        metrics = AnalysisMetrics()
        metrics.record_run("abc123", success=True, types=["p", "img"], latency_ms=640.0)
        print(metrics.get_stats().to_dict())
    """

    def __init__(self, max_history: int = 1000):
        """
        Args:
            max_history: Maximum number of runs kept in memory
        """
        self._history: List[RunMetrics] = []
        self._max_history = max_history
        self._lock = Lock()
        self._aggregated = AggregatedMetrics()

    def record_run(
        self,
        request_id: str,
        success: bool,
        types: List[str],
        latency_ms: float,
        error: Optional[str] = None,
    ) -> RunMetrics:
        """
        Record a completed run.

        Args:
            request_id: Unique request identifier
            success: Whether the run finished without error
            types: Element type of every detected leaf
            latency_ms: Wall time of the run
            error: Error message for failed runs

        Returns:
            The recorded metrics
        """
        run = RunMetrics(
            request_id=request_id,
            success=success,
            element_count=len(types),
            latency_ms=latency_ms,
            types=dict(Counter(types)),
            error=error,
        )

        with self._lock:
            self._history.append(run)
            if len(self._history) > self._max_history:
                self._history = self._history[-self._max_history:]
            self._update_aggregated(run)

        return run

    def _update_aggregated(self, run: RunMetrics) -> None:
        agg = self._aggregated
        agg.total_runs += 1
        if run.success:
            agg.successful_runs += 1
            if run.element_count == 0:
                agg.empty_runs += 1
        else:
            agg.failed_runs += 1

        agg.total_elements += run.element_count
        agg.total_latency_ms += run.latency_ms
        for element_type, count in run.types.items():
            agg.elements_by_type[element_type] = (
                agg.elements_by_type.get(element_type, 0) + count
            )

    def get_stats(self) -> AggregatedMetrics:
        """Get a copy of the aggregated metrics."""
        with self._lock:
            agg = self._aggregated
            return AggregatedMetrics(
                total_runs=agg.total_runs,
                successful_runs=agg.successful_runs,
                failed_runs=agg.failed_runs,
                empty_runs=agg.empty_runs,
                total_elements=agg.total_elements,
                total_latency_ms=agg.total_latency_ms,
                elements_by_type=dict(agg.elements_by_type),
            )

    def get_recent(self, limit: int = 10) -> List[RunMetrics]:
        """Most recent runs, newest last."""
        with self._lock:
            return list(self._history[-limit:])

    def reset(self) -> None:
        """Clear all metrics."""
        with self._lock:
            self._history.clear()
            self._aggregated = AggregatedMetrics()


analysis_metrics = AnalysisMetrics()
