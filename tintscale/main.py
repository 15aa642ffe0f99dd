"""
Tintscale service entry point.
"""
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware

from tintscale import __version__
from tintscale.api.colors import router as colors_router
from tintscale.config import config
from tintscale.schemas import HealthResponse
from tintscale.utils.logging import get_logger
from tintscale.utils.metrics import get_metrics

get_logger()

app = FastAPI(
    title="Tintscale",
    description="Color scales, text contrast and image palette extraction",
    version=__version__
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins() or ["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(colors_router)


@app.get("/healthz", response_model=HealthResponse)
def health_check():
    """Service health check."""
    return HealthResponse(ok=True, version=__version__, service="tintscale")


@app.get("/")
def root():
    """Root endpoint"""
    return {
        "message": "Tintscale API",
        "version": __version__,
        "docs": "/docs"
    }


@app.get("/metrics")
def metrics():
    """Get in-process request metrics."""
    if not config.METRICS_ENABLED:
        raise HTTPException(status_code=404, detail="Metrics disabled")
    return get_metrics().get_summary()
