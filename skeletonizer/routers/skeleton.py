"""
Skeleton Router - HTTP endpoints for skeleton generation.

Endpoints:
==========
- POST /skeleton/analyze → detected elements, generated code, preview
- POST /skeleton/preview → preview page as text/html
- GET  /skeleton/sample  → sample markup
- GET  /skeleton/stats   → aggregated run metrics

Analysis failures are reported in the response body (`error`), not as
HTTP errors: the request itself was valid, the markup just could not be
rendered.
"""

import html
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from skeletonizer.schemas.skeleton import (
    AnalyzeRequest,
    AnalyzeResponse,
    SampleResponse,
    StatsResponse,
)
from skeletonizer.services.skeleton_service import (
    SAMPLE_HTML,
    SkeletonService,
    skeleton_service,
)


logger = logging.getLogger("skeletonizer.routers.skeleton")


# ---------------------------------------------------------------------------
# ROUTER SETUP
# ---------------------------------------------------------------------------
router = APIRouter(prefix="/skeleton", tags=["skeleton"])


def get_skeleton_service() -> SkeletonService:
    """Dependency returning the shared service (overridable in tests)."""
    return skeleton_service


# ---------------------------------------------------------------------------
# ENDPOINTS
# ---------------------------------------------------------------------------

@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_markup(
    request: AnalyzeRequest,
    service: SkeletonService = Depends(get_skeleton_service),
):
    """
    Analyze markup and return its skeleton.

    Returns the detected elements (with `className`), the generated
    component code, a standalone preview page and a summary.
    """
    report = await service.generate(request.html)
    if report.error:
        logger.info(f"Analysis returned error: {report.error}")
    return report.to_dict()


@router.post("/preview", response_class=HTMLResponse)
async def preview_markup(
    request: AnalyzeRequest,
    service: SkeletonService = Depends(get_skeleton_service),
):
    """
    Render the skeleton preview page for markup.

    On analysis failure a minimal page showing the error is returned.
    """
    report = await service.generate(request.html)
    if report.error:
        return HTMLResponse(
            content=f"<!DOCTYPE html><html><body><p>Error: {html.escape(report.error)}</p></body></html>",
            status_code=200,
        )
    return HTMLResponse(content=report.preview_html)


@router.get("/sample", response_model=SampleResponse)
def get_sample():
    """Sample profile-card markup."""
    return {"html": SAMPLE_HTML}


@router.get("/stats", response_model=StatsResponse)
def get_stats(service: SkeletonService = Depends(get_skeleton_service)):
    """Aggregated metrics since startup."""
    return service.metrics.get_stats().to_dict()
