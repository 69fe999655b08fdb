"""
Pydantic schemas for the skeleton API.

These schemas define the REST contract. Used in skeletonizer/routers/skeleton.py
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from skeletonizer.core.config import settings


# ============== ANALYZE ==============

class AnalyzeRequest(BaseModel):
    """Request to turn markup into a skeleton."""
    html: str = Field(
        ...,
        max_length=settings.MAX_HTML_LENGTH,
        description="Markup fragment to analyze",
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "html": '<button class="w-48 h-9 rounded">Save</button>'
            }
        }
    )


class ElementInfoResponse(BaseModel):
    """A detected content leaf."""
    type: str
    x: float
    y: float
    width: float
    height: float
    class_name: str = Field("", alias="className")

    model_config = ConfigDict(populate_by_name=True)


class SummaryResponse(BaseModel):
    """Detected element counts."""
    element_count: int
    types: List[str]
    description: str


class AnalyzeResponse(BaseModel):
    """Result of an analysis plus its rendered outputs."""
    elements: List[ElementInfoResponse]
    html: str
    error: Optional[str] = None
    code: str = ""
    preview_html: str = ""
    summary: SummaryResponse


# ============== SAMPLE / STATS ==============

class SampleResponse(BaseModel):
    """Sample markup for trying the generator."""
    html: str


class StatsResponse(BaseModel):
    """Aggregated run metrics."""
    total_runs: int
    successful_runs: int
    failed_runs: int
    empty_runs: int
    success_rate: str
    total_elements: int
    avg_latency_ms: float
    elements_by_type: Dict[str, int]
