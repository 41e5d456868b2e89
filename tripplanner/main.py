"""
FastAPI application entry point.

Assembles the FastAPI app with the planning gateway router.
"""

import logging
import os
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripplanner.gateway.planner_api import router as trip_planner_router
from tripplanner.shared.logging.config import setup_logging


# ============================================================================
# Logging configuration (single source of truth for the service)
# ============================================================================
LOG_FORMAT = (
    "%(asctime)s | %(levelname)-8s | %(name)-35s | %(message)s"
)

logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    datefmt="%Y-%m-%d %H:%M:%S",
    handlers=[logging.StreamHandler(sys.stdout)],
    force=True,  # Override any prior basicConfig calls
)

# Quiet noisy third-party loggers
logging.getLogger("httpcore").setLevel(logging.WARNING)
logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("openai").setLevel(logging.WARNING)

# JSON lines for the package loggers when running behind a log collector
if os.environ.get("TRIP_PLANNER_JSON_LOGS"):
    setup_logging(log_file=os.environ.get("TRIP_PLANNER_LOG_FILE"))


app = FastAPI(
    title="West Airlines Trip Planner",
    description="AI-powered destination suggestions for West Airlines travelers",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trip_planner_router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "West Airlines Trip Planner",
        "version": "0.1.0",
        "endpoints": {
            "trip_planner": "/api/trip-planner",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Global health check endpoint."""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
