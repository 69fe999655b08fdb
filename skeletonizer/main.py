"""
Main application entry point - FastAPI app instance and configuration.
Run with: uvicorn skeletonizer.main:app --reload
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from skeletonizer.core.config import settings
from skeletonizer.routers import skeleton

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The generator is called from browser-based editors on other origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# skeleton.router: /skeleton/analyze, /skeleton/preview, /skeleton/sample, /skeleton/stats
app.include_router(skeleton.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Simple health check endpoint.

    Does NOT launch a browser; a passing check only means the API is up.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
